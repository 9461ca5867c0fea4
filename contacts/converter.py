"""Podio contact to bridge contact conversion"""

from typing import List, Optional

from .models import Contact, ContactMappingOptions, PhoneNumber, PhoneNumberLabel, PodioContact


def has_value(field: Optional[List[str]]) -> bool:
    """True for a present, non-empty list"""
    return isinstance(field, list) and len(field) > 0


def convert_contact(contact: PodioContact, options: ContactMappingOptions = ContactMappingOptions()) -> Contact:
    """Map one Podio record to the bridge contact shape

    Numbers are passed through as-is: no validation, deduplication or formatting.
    """
    label = PhoneNumberLabel.WORK if options.label_phone_numbers else None
    return Contact(
        id=str(contact.profile_id),
        name=contact.name,
        email=contact.mail[0] if has_value(contact.mail) else None,
        # Podio's company and avatar fields are not part of the fetched record
        organization=None,
        contact_url=contact.link,
        avatar_url=None,
        phone_numbers=[
            PhoneNumber(label=label, phone_number=phone_number)
            for phone_number in contact.phone or []
        ],
    )


def convert_contacts(
    records: List[PodioContact],
    options: ContactMappingOptions = ContactMappingOptions()
) -> List[Contact]:
    """Convert records in provider order, applying the phone filter if enabled"""
    if options.drop_without_phone:
        records = [record for record in records if has_value(record.phone)]
    return [convert_contact(record, options) for record in records]
