"""
Pydantic models for Sherlock Domains request and response bodies
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ICANN registrant fields, in the order they are reported when missing
CONTACT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "address",
    "city",
    "state",
    "postal_code",
    "country",
)


class Contact(BaseModel):
    """ICANN contact record required to register a domain"""

    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    email: str = Field(description="Email address")
    address: str = Field(description="Street address")
    city: str = Field(description="City")
    state: str = Field(description="Two-letter state code for US/Canada or province name")
    postal_code: str = Field(description="Postal code")
    country: str = Field(description="Two-letter country code")


class Offer(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[str, int]


class PurchaseOffers(BaseModel):
    """
    Offer set returned by the purchase endpoint. Unknown fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    payment_request_url: str
    payment_context_token: str
    offers: List[Offer] = Field(default_factory=list)

    def first_offer_id(self) -> Optional[Union[str, int]]:
        """
        Id of the first offer in the list.

        The API gives no ranking between offers, so the first one is taken as-is.
        """
        if not self.offers:
            return None
        return self.offers[0].id


def contact_to_dict(contact: Any) -> Optional[Dict[str, Any]]:
    """Return a plain dict for a Contact model or mapping (None passes through)"""
    if contact is None:
        return None
    if isinstance(contact, BaseModel):
        return contact.model_dump()
    return dict(contact)
