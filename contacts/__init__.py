"""Podio contact fetching and normalization"""

from .client import CONTACT_URL, list_contacts, parse_contact_records
from .converter import convert_contact, convert_contacts, has_value
from .models import Contact, ContactMappingOptions, PhoneNumber, PhoneNumberLabel, PodioContact
from .retry import RetryState, get_contacts_with_retry, next_state

__all__ = [
    "CONTACT_URL",
    "Contact",
    "ContactMappingOptions",
    "PhoneNumber",
    "PhoneNumberLabel",
    "PodioContact",
    "RetryState",
    "convert_contact",
    "convert_contacts",
    "get_contacts_with_retry",
    "has_value",
    "list_contacts",
    "next_state",
    "parse_contact_records",
]
