"""
Tool registry mapping operation names to schema-validated client calls.

Framework-neutral: each Tool carries a pydantic input model; formats.py turns
the registry into whatever tool format a model provider expects.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Type

from pydantic import BaseModel

from sherlock.tools import schemas
from sherlock.utils.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class Tool:
    """A named operation with a description, an input model and a handler."""
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Callable[[Any], Any]

    def json_schema(self) -> Dict[str, Any]:
        """JSON Schema of the tool input"""
        return self.input_model.model_json_schema()

    def execute(self, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Validate ``arguments`` against the input model and run the handler.

        Raises:
            pydantic.ValidationError: If the arguments do not match the model
        """
        if isinstance(arguments, self.input_model):
            params = arguments
        else:
            params = self.input_model.model_validate(dict(arguments or {}))
        logger.debug(f"Executing tool {self.name}")
        return self.handler(params)

    __call__ = execute


class ToolRegistry(Mapping[str, Tool]):
    """Ordered, read-only mapping of tool name to Tool"""

    def __init__(self):
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> Tool:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        return tool

    def __getitem__(self, name: str) -> Tool:
        return self._tools[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def execute(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> Any:
        """Run the tool registered as ``name``"""
        if name not in self._tools:
            raise KeyError(f"Unknown tool: {name}")
        return self._tools[name].execute(arguments)


def build_tools(client) -> ToolRegistry:
    """
    Build the tool registry for a SherlockClient.

    Every remote operation is exposed except get_payment_details, which is
    only reached through purchase_domain.

    Args:
        client: SherlockClient instance the tools call into

    Returns:
        ToolRegistry
    """
    registry = ToolRegistry()

    def add(name: str, description: str, input_model: Type[BaseModel], handler: Callable[[Any], Any]):
        registry.register(Tool(name, description, input_model, handler))

    add(
        "me",
        "Makes an authenticated request to verify the current authentication status and retrieve basic user details",
        schemas.NoInput,
        lambda p: client.me(),
    )
    add(
        "set_contact_information",
        "Set the contact information that will be used for domain purchases and ICANN registration",
        schemas.SetContactInformationInput,
        lambda p: client.set_contact_information(p),
    )
    add(
        "get_contact_information",
        "Get the contact information for the Sherlock user",
        schemas.NoInput,
        lambda p: client.get_contact_information(),
    )
    add(
        "search_domains",
        "Search for domain names. Returns prices in USD cents.",
        schemas.SearchDomainsInput,
        lambda p: client.search(p.query),
    )
    add(
        "get_purchase_offers",
        "Request purchase offers for a domain using the stored contact. Returns the payment request URL, "
        "payment context token and available offers.",
        schemas.PurchaseOffersInput,
        lambda p: client.get_purchase_offers(p.domain, p.search_id),
    )
    add(
        "purchase_domain",
        "Purchase a domain. This method won't charge your account, it will return the payment information "
        "needed to complete the purchase",
        schemas.PurchaseDomainInput,
        lambda p: client.purchase_domain(p.search_id, p.domain, p.payment_method),
    )
    add(
        "list_domains",
        "List domains owned by the authenticated user",
        schemas.NoInput,
        lambda p: client.list_domains(),
    )
    add(
        "get_dns_records",
        "Get DNS records for a domain",
        schemas.DomainIdInput,
        lambda p: client.list_dns_records(p.domain_id),
    )
    add(
        "create_dns_record",
        "Create a new DNS record",
        schemas.CreateDnsRecordInput,
        lambda p: client.create_dns_record(
            p.domain_id, record_type=p.type, name=p.name, value=p.value, ttl=p.ttl
        ),
    )
    add(
        "update_dns_record",
        "Update an existing DNS record",
        schemas.UpdateDnsRecordInput,
        lambda p: client.update_dns_record(
            p.domain_id, p.record_id, record_type=p.type, name=p.name, value=p.value, ttl=p.ttl
        ),
    )
    add(
        "delete_dns_record",
        "Delete a DNS record",
        schemas.DeleteDnsRecordInput,
        lambda p: client.delete_dns_record(p.domain_id, p.record_id),
    )
    add(
        "claim_account",
        "Claim an account by sending an email link for authentication",
        schemas.ClaimAccountInput,
        lambda p: client.claim_account(p.email),
    )
    add(
        "update_nameservers",
        "Update the nameservers for a domain",
        schemas.UpdateNameserversInput,
        lambda p: client.update_nameservers(p.domain_id, p.nameservers),
    )
    add(
        "get_x402_purchase_offers",
        "Get X402 purchase offers for a domain. Returns payment requirements with a 402 status.",
        schemas.PurchaseOffersInput,
        lambda p: client.get_x402_purchase_offers(p.domain, p.search_id),
    )
    add(
        "purchase_x402",
        "Complete an X402 domain purchase with a payment signature",
        schemas.PurchaseX402Input,
        lambda p: client.purchase_x402(p.domain, p.search_id, p.payment_signature),
    )

    return registry
