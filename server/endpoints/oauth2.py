"""
OAuth2 redirect and callback endpoints.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from bridge.adapter import PodioAdapter
from bridge.models import OAuth2CallbackResult, OAuth2RedirectResult
from errors import MissingAuthorizationCodeError, UpstreamAuthError
from .dependencies import get_adapter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth2")


@router.get("/redirect", response_model=OAuth2RedirectResult)
async def oauth2_redirect(adapter: PodioAdapter = Depends(get_adapter)):
    """Podio authorization URL"""
    return OAuth2RedirectResult(redirect_url=await adapter.get_oauth2_redirect_url())


@router.get("/callback", response_model=OAuth2CallbackResult)
async def oauth2_callback(request: Request, adapter: PodioAdapter = Depends(get_adapter)):
    """Exchange the authorization code for a bridge API key"""
    try:
        return await adapter.handle_oauth2_callback(request.query_params)
    except MissingAuthorizationCodeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UpstreamAuthError as e:
        logger.error(f"OAuth2 callback failed: {e}")
        raise HTTPException(status_code=502, detail="Podio token exchange failed")
