"""
Contact listing endpoint.
"""
import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from bridge.adapter import PodioAdapter
from bridge.models import BridgeConfig
from contacts.models import Contact
from errors import InvalidCredentialError, UpstreamAuthError, UpstreamContactFetchError
from podio_oauth.credentials import mask_api_key
from .dependencies import get_adapter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/contacts", response_model=List[Contact])
async def get_contacts(
    x_provider_key: Optional[str] = Header(default=None),
    x_provider_url: Optional[str] = Header(default=None),
    adapter: PodioAdapter = Depends(get_adapter),
):
    """Normalized Podio contacts for the credential pair in X-Provider-Key"""
    request_id = str(uuid.uuid4())[:8]

    if not x_provider_key:
        raise HTTPException(status_code=401, detail="Missing X-Provider-Key header")

    logger.info(f"[{request_id}] Fetching contacts for key {mask_api_key(x_provider_key)}")
    config = BridgeConfig(api_key=x_provider_key, api_url=x_provider_url or "")

    try:
        contacts = await adapter.get_contacts(config)
    except InvalidCredentialError as e:
        logger.warning(f"[{request_id}] {e}")
        raise HTTPException(status_code=401, detail=str(e))
    except (UpstreamAuthError, UpstreamContactFetchError) as e:
        logger.error(f"[{request_id}] Cannot fetch contacts: {e}")
        raise HTTPException(status_code=401, detail="Cannot fetch contacts from Podio")

    logger.info(f"[{request_id}] Returning {len(contacts)} contact(s)")
    return contacts
