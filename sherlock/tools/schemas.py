"""
Pydantic input models for the agent tools.

Default values are read from the same tables the client uses, so a tool
called with partial input sends exactly what the client method would.
"""

from typing import List

from pydantic import BaseModel, Field

from sherlock.api.models import Contact
from sherlock.utils.config import CREATE_RECORD_DEFAULTS, UPDATE_RECORD_DEFAULTS


class NoInput(BaseModel):
    pass


class ClaimAccountInput(BaseModel):
    email: str = Field(description="Email address that receives the verification link")


class SearchDomainsInput(BaseModel):
    query: str = Field(description="The domain name to search for")


class DomainIdInput(BaseModel):
    domain_id: str = Field(description="The domain ID")


class UpdateNameserversInput(BaseModel):
    domain_id: str = Field(description="The domain ID")
    nameservers: List[str] = Field(description="Nameserver hostnames")


class CreateDnsRecordInput(BaseModel):
    domain_id: str = Field(description="The domain ID")
    type: str = Field(default=CREATE_RECORD_DEFAULTS.type, description="Record type")
    name: str = Field(default=CREATE_RECORD_DEFAULTS.name, description="Record name")
    value: str = Field(default=CREATE_RECORD_DEFAULTS.value, description="Record value")
    ttl: int = Field(default=CREATE_RECORD_DEFAULTS.ttl, description="Time to live")


class UpdateDnsRecordInput(BaseModel):
    domain_id: str = Field(description="The domain ID")
    record_id: str = Field(description="The record ID")
    type: str = Field(default=UPDATE_RECORD_DEFAULTS.type, description="Record type")
    name: str = Field(default=UPDATE_RECORD_DEFAULTS.name, description="Record name")
    value: str = Field(default=UPDATE_RECORD_DEFAULTS.value, description="Record value")
    ttl: int = Field(default=UPDATE_RECORD_DEFAULTS.ttl, description="Time to live")


class DeleteDnsRecordInput(BaseModel):
    domain_id: str = Field(description="The domain ID")
    record_id: str = Field(description="The record ID")


# Contact fields are the tool input as-is
SetContactInformationInput = Contact


class PurchaseOffersInput(BaseModel):
    domain: str = Field(description="Domain name to purchase")
    search_id: str = Field(description="Search ID from a previous search request")


class PurchaseX402Input(BaseModel):
    domain: str = Field(description="Domain name to purchase")
    search_id: str = Field(description="Search ID from a previous search request")
    payment_signature: str = Field(description="Signed X402 payment proof")


class PurchaseDomainInput(BaseModel):
    search_id: str = Field(description="Search ID from a previous search request")
    domain: str = Field(description="Domain name to purchase")
    payment_method: str = Field(
        default="credit_card",
        description="Payment method to use {'credit_card', 'lightning'}"
    )
