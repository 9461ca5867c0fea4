"""Podio contact listing"""

import logging
from typing import Any, List

from pydantic import ValidationError

from errors import MalformedResponseError, TransportError, UpstreamContactFetchError
from transport.base import HttpTransport
from .converter import convert_contacts
from .models import Contact, ContactMappingOptions, PodioContact

logger = logging.getLogger(__name__)

CONTACT_URL = "https://api.podio.com/contact"


def parse_contact_records(payload: Any) -> List[PodioContact]:
    """Validate the raw GET /contact body

    Raises:
        MalformedResponseError: If the body is not a JSON array
        ValidationError: If an entry is not a usable contact record
    """
    if not isinstance(payload, list):
        raise MalformedResponseError(f"Expected a JSON array, got {type(payload).__name__}")
    return [PodioContact.model_validate(entry) for entry in payload]


async def list_contacts(
    access_token: str,
    transport: HttpTransport,
    options: ContactMappingOptions = ContactMappingOptions()
) -> List[Contact]:
    """Fetch the contact list with a bearer token and normalize it

    Args:
        access_token: Podio access token
        transport: HTTP transport used for the request
        options: Mapping variant

    Returns:
        Normalized contacts in the order Podio returned them; empty for a non-array body

    Raises:
        UpstreamContactFetchError: If the request fails or a record cannot be read
    """
    try:
        payload = await transport.get_json(
            CONTACT_URL,
            headers={"Authorization": f"Bearer {access_token}"}
        )
    except TransportError as e:
        logger.warning(f"Contact fetch failed: {e}")
        raise UpstreamContactFetchError(f"Contact fetch failed: {e}") from e

    try:
        records = parse_contact_records(payload)
    except MalformedResponseError as e:
        logger.warning(f"Ignoring malformed contact response: {e}")
        return []
    except ValidationError as e:
        logger.warning(f"Contact response contains an invalid record: {e.error_count()} error(s)")
        raise UpstreamContactFetchError("Contact response contains an invalid record") from e

    contacts = convert_contacts(records, options)
    logger.info(f"Fetched {len(records)} Podio contact(s), returning {len(contacts)}")
    return contacts
