"""
Pydantic models for Podio contact records and bridge contacts.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PhoneNumberLabel(str, Enum):
    """Phone number labels understood by the bridge"""
    WORK = "WORK"
    HOME = "HOME"
    MOBILE = "MOBILE"


class PodioContact(BaseModel):
    """Contact record as returned by GET /contact"""
    model_config = ConfigDict(extra="ignore")

    profile_id: int
    name: Optional[str] = None
    mail: Optional[List[str]] = None
    phone: Optional[List[str]] = None
    link: Optional[str] = None


class BridgeModel(BaseModel):
    """Bridge-facing model, serialized with camelCase keys"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PhoneNumber(BridgeModel):
    """Labeled phone number"""
    label: Optional[PhoneNumberLabel] = None
    phone_number: str


class Contact(BridgeModel):
    """Normalized contact handed to the bridge"""
    id: str
    name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None
    contact_url: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_numbers: List[PhoneNumber]


@dataclass(frozen=True)
class ContactMappingOptions:
    """Deployment-specific mapping variant

    Attributes:
        drop_without_phone: Skip records with no phone number
        label_phone_numbers: Label numbers WORK instead of leaving the label empty
    """
    drop_without_phone: bool = True
    label_phone_numbers: bool = True
