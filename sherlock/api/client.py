"""
Sherlock Domains API Client
Handles all interactions with the Sherlock Domains registrar API
"""

from typing import Any, Dict, List, Mapping, Optional, Union

import requests
from pydantic import ValidationError as PydanticValidationError

from sherlock.api.exceptions import (
    AuthenticationError,
    InvalidResponseError,
    NetworkError,
    NotAuthenticatedError,
    NotFoundError,
    PaymentRequiredError,
    RateLimitError,
    RemoteRejectionError,
    ServerError,
)
from sherlock.api.models import Contact, PurchaseOffers, contact_to_dict
from sherlock.utils.config import (
    CREATE_RECORD_DEFAULTS,
    UPDATE_RECORD_DEFAULTS,
    Settings,
)
from sherlock.utils.logger import get_logger
from sherlock.utils.validators import require_complete_contact


logger = get_logger(__name__)

ContactLike = Union[Contact, Mapping[str, Any]]

_STATUS_ERRORS = {
    401: AuthenticationError,
    402: PaymentRequiredError,
    403: AuthenticationError,
    404: NotFoundError,
    429: RateLimitError,
}


class SherlockClient:
    """
    Sherlock Domains API client.

    Search is public. Every other endpoint needs the bearer token passed
    to the constructor; calls made without one fail before any request
    is sent. The client never retries.

    When no config is given, Settings() reads SHERLOCK_* environment variables
    and ./.env, so SHERLOCK_API_URL decides which host receives the token.
    """

    def __init__(self, access_token: Optional[str] = None, config: Optional[Settings] = None):
        """
        Initialize Sherlock API client.

        Args:
            access_token: Optional bearer token
            config: Optional Settings object. A default Settings() is built if None
        """
        self.config = config or Settings()
        self.base_url = self.config.base_url
        self._access_token = access_token
        self.contact: Optional[ContactLike] = None

        logger.debug(
            f"Sherlock client initialized - Base URL: {self.base_url} "
            f"- Authenticated: {self.is_authenticated}"
        )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "SherlockClient":
        """Build a client whose token comes from Settings.access_token"""
        config = config or Settings()
        return cls(access_token=config.access_token, config=config)

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._access_token)

    # ==================== Request plumbing ====================

    def _require_auth(self):
        if not self._access_token:
            raise NotAuthenticatedError()

    def _auth_headers(self) -> Dict[str, str]:
        self._require_auth()
        return {"Authorization": f"Bearer {self._access_token}"}

    def _make_request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict] = None,
        json_data: Optional[Any] = None
    ) -> requests.Response:
        """
        Send an HTTP request.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            url: Absolute URL
            headers: Request headers
            params: Query parameters
            json_data: JSON body

        Returns:
            The raw response

        Raises:
            NetworkError: If the request could not be completed
        """
        headers = dict(headers or {})
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")
        if params:
            logger.debug(f"Params: {params}")

        try:
            return requests.request(
                method=method,
                url=url,
                headers=headers,
                params=params,
                json=json_data,
                timeout=self.config.request_timeout
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Request timed out: {str(e)}") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {str(e)}") from e

    def _decode(self, response: requests.Response) -> Any:
        """
        Decode a response body as JSON whatever its status.

        An empty body decodes to {}. A non-JSON body becomes {"message": text}
        on a failed status and raises InvalidResponseError on a successful one.
        """
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            if response.ok:
                raise InvalidResponseError(
                    "Response body is not valid JSON",
                    status_code=response.status_code,
                    response_data={"message": response.text}
                )
            return {"message": response.text}

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Decode a response and raise if it represents a failure.

        A failure is a non-2xx status, or a 2xx body carrying an ``error`` field.

        Returns:
            The decoded body, unmodified

        Raises:
            RemoteRejectionError (or a status-specific subclass)
        """
        data = self._decode(response)
        embedded_error = isinstance(data, dict) and bool(data.get("error"))

        if response.ok and not embedded_error:
            return data

        error_data = data if isinstance(data, dict) else {"data": data}
        message = (
            error_data.get("error")
            or error_data.get("message")
            or error_data.get("detail")
            or response.reason
            or "Request failed"
        )
        if not isinstance(message, str):
            message = str(message)

        status = response.status_code
        if status in _STATUS_ERRORS:
            error_class = _STATUS_ERRORS[status]
        elif 500 <= status < 600:
            error_class = ServerError
        else:
            error_class = RemoteRejectionError

        logger.debug(f"Request rejected with HTTP {status}: {message}")
        raise error_class(message, status_code=status, response_data=error_data)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _resolve_contact(self, contact: Optional[ContactLike]) -> Dict[str, Any]:
        """Explicit contact wins over the cached one; the result must be complete"""
        return require_complete_contact(contact if contact is not None else self.contact)

    def _purchase_body(self, domain: str, search_id: str, contact: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "domain": domain,
            "contact_information": contact,
            "search_id": search_id,
        }

    # ==================== Account ====================

    def me(self) -> Dict[str, Any]:
        """
        Get the authenticated user's profile.

        Returns:
            User details dictionary
        """
        headers = self._auth_headers()
        response = self._make_request("GET", self._url("/auth/me"), headers=headers)
        return self._handle_response(response)

    def claim_account(self, email: str) -> Dict[str, Any]:
        """
        Send an email verification link that ties this account to ``email``.

        Args:
            email: Address that receives the link

        Returns:
            API confirmation payload
        """
        headers = self._auth_headers()
        logger.info("Requesting account claim email link")
        response = self._make_request(
            "POST", self._url("/auth/email-link"), headers=headers, json_data={"email": email}
        )
        return self._handle_response(response)

    # ==================== Domains ====================

    def search(self, query: str) -> Dict[str, Any]:
        """
        Search for domain names. Does not require authentication.

        Args:
            query: Domain name or keywords

        Returns:
            Search results, including a search id and prices in USD cents
        """
        logger.info(f"Searching domains for: {query}")
        response = self._make_request(
            "GET", self._url("/domains/search"), params={"query": query}
        )
        return self._handle_response(response)

    def list_domains(self) -> Any:
        """Get domains owned by the authenticated user"""
        headers = self._auth_headers()
        response = self._make_request("GET", self._url("/domains/domains"), headers=headers)
        return self._handle_response(response)

    def update_nameservers(self, domain_id: str, nameservers: List[str]) -> Dict[str, Any]:
        """
        Replace the nameserver set of a domain.

        Args:
            domain_id: Domain id as returned by list_domains()
            nameservers: Nameserver hostnames

        Returns:
            Updated nameserver payload
        """
        headers = self._auth_headers()
        logger.info(f"Updating nameservers for domain {domain_id}: {nameservers}")
        response = self._make_request(
            "PATCH",
            self._url(f"/domains/{domain_id}/nameservers"),
            headers=headers,
            json_data={"nameservers": list(nameservers)}
        )
        return self._handle_response(response)

    # ==================== DNS ====================

    def list_dns_records(self, domain_id: str) -> Dict[str, Any]:
        """Get DNS records for a domain"""
        headers = self._auth_headers()
        response = self._make_request(
            "GET", self._url(f"/domains/{domain_id}/dns/records"), headers=headers
        )
        return self._handle_response(response)

    def create_dns_record(
        self,
        domain_id: str,
        *,
        record_type: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        ttl: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Create a DNS record. Fields left as None take CREATE_RECORD_DEFAULTS.

        Args:
            domain_id: Domain id
            record_type: Record type (A, AAAA, CNAME, MX, TXT, ...)
            name: Record name
            value: Record value
            ttl: Time to live in seconds

        Returns:
            Created record payload
        """
        headers = self._auth_headers()
        record = CREATE_RECORD_DEFAULTS.apply(record_type, name, value, ttl)
        logger.info(f"Creating {record['type']} record '{record['name']}' on domain {domain_id}")
        response = self._make_request(
            "POST",
            self._url(f"/domains/{domain_id}/dns/records"),
            headers=headers,
            json_data={"records": [record]}
        )
        return self._handle_response(response)

    def update_dns_record(
        self,
        domain_id: str,
        record_id: str,
        *,
        record_type: Optional[str] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        ttl: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Replace the fields of one DNS record. Fields left as None take
        UPDATE_RECORD_DEFAULTS.
        """
        headers = self._auth_headers()
        record = {"id": record_id, **UPDATE_RECORD_DEFAULTS.apply(record_type, name, value, ttl)}
        logger.info(f"Updating record {record_id} on domain {domain_id}")
        response = self._make_request(
            "PATCH",
            self._url(f"/domains/{domain_id}/dns/records"),
            headers=headers,
            json_data={"records": [record]}
        )
        return self._handle_response(response)

    def delete_dns_record(self, domain_id: str, record_id: str) -> Dict[str, Any]:
        """Delete a DNS record"""
        headers = self._auth_headers()
        logger.info(f"Deleting record {record_id} on domain {domain_id}")
        response = self._make_request(
            "DELETE",
            self._url(f"/domains/{domain_id}/dns/records/{record_id}"),
            headers=headers
        )
        return self._handle_response(response)

    # ==================== Contact information ====================

    def get_contact_information(self) -> Dict[str, Any]:
        """Get the ICANN contact record stored for the user"""
        headers = self._auth_headers()
        response = self._make_request(
            "GET", self._url("/users/contact-information"), headers=headers
        )
        return self._handle_response(response)

    def set_contact_information(self, contact: ContactLike) -> Dict[str, Any]:
        """
        Store the ICANN contact record used for purchases.

        Args:
            contact: Contact model or mapping

        Returns:
            Stored contact payload
        """
        headers = self._auth_headers()
        logger.info("Updating stored contact information")
        response = self._make_request(
            "POST",
            self._url("/users/contact-information"),
            headers=headers,
            json_data=contact_to_dict(contact)
        )
        return self._handle_response(response)

    def set_contact(self, contact: Optional[ContactLike]):
        """
        Cache a contact on the client for purchase calls.

        A contact passed directly to a purchase method always takes precedence.
        """
        self.contact = contact

    # ==================== Purchases ====================

    def get_purchase_offers(
        self,
        domain: str,
        search_id: str,
        contact: Optional[ContactLike] = None
    ) -> Dict[str, Any]:
        """
        Request purchase offers for a domain.

        Args:
            domain: Domain to purchase
            search_id: Search id from a previous search()
            contact: Contact override; falls back to the cached contact

        Returns:
            Offer payload with payment_request_url, payment_context_token and offers

        Raises:
            NotAuthenticatedError: If no token is set
            IncompleteContactError: If the resolved contact is incomplete
        """
        headers = self._auth_headers()
        contact_info = self._resolve_contact(contact)

        logger.info(f"Requesting purchase offers for: {domain}")
        response = self._make_request(
            "POST",
            self._url("/domains/purchase"),
            headers=headers,
            json_data=self._purchase_body(domain, search_id, contact_info)
        )
        return self._handle_response(response)

    def get_x402_purchase_offers(
        self,
        domain: str,
        search_id: str,
        contact: Optional[ContactLike] = None
    ) -> Dict[str, Any]:
        """
        Request X402 payment requirements for a domain.

        The endpoint answers with payment instructions rather than a result, so
        the decoded body is returned with ``status`` set to 402 and no error is
        raised for it.
        """
        headers = self._auth_headers()
        contact_info = self._resolve_contact(contact)

        logger.info(f"Requesting X402 purchase offers for: {domain}")
        response = self._make_request(
            "POST",
            self._url("/domains/purchase-x402"),
            headers=headers,
            json_data=self._purchase_body(domain, search_id, contact_info)
        )
        data = self._decode(response)
        if not isinstance(data, dict):
            data = {"data": data}
        # Body status is overwritten, unlike a spread that lets the body win
        return {**data, "status": 402}

    def purchase_x402(
        self,
        domain: str,
        search_id: str,
        payment_signature: str,
        contact: Optional[ContactLike] = None
    ) -> Dict[str, Any]:
        """
        Complete an X402 purchase by presenting a payment signature.

        Args:
            domain: Domain to purchase
            search_id: Search id from a previous search()
            payment_signature: Signed payment proof, sent as PAYMENT-SIGNATURE
            contact: Contact override; falls back to the cached contact

        Returns:
            Purchase result payload
        """
        headers = self._auth_headers()
        contact_info = self._resolve_contact(contact)
        headers["PAYMENT-SIGNATURE"] = payment_signature

        logger.info(f"Submitting X402 purchase for: {domain}")
        response = self._make_request(
            "POST",
            self._url("/domains/purchase-x402"),
            headers=headers,
            json_data=self._purchase_body(domain, search_id, contact_info)
        )
        return self._handle_response(response)

    def purchase_domain(
        self,
        search_id: str,
        domain: str,
        payment_method: str = "credit_card"
    ) -> Dict[str, Any]:
        """
        Complete domain purchase workflow.

        Steps: fetch the stored contact, check it is complete, request offers,
        then submit payment details for the first offer. Nothing is charged;
        the result holds the payment information needed to finish the purchase.

        Args:
            search_id: Search id from a previous search()
            domain: Domain to purchase
            payment_method: Payment method: 'credit_card' or 'lightning'

        Returns:
            Payment endpoint payload
        """
        self._require_auth()
        logger.info(f"Starting purchase workflow for: {domain} ({payment_method})")

        logger.info("Step 1: Fetching contact information...")
        contact_data = self.get_contact_information()
        if not isinstance(contact_data, Mapping):
            raise InvalidResponseError(
                "Stored contact information is not a JSON object",
                response_data={"data": contact_data}
            )
        contact = require_complete_contact(contact_data)

        logger.info("Step 2: Requesting purchase offers...")
        offers_data = self.get_purchase_offers(domain, search_id, contact)
        try:
            offers = PurchaseOffers.model_validate(offers_data)
        except PydanticValidationError as e:
            raise InvalidResponseError(
                f"Unexpected purchase offer payload: {str(e)}",
                response_data=offers_data if isinstance(offers_data, dict) else {}
            ) from e

        offer_id = offers.first_offer_id()
        if offer_id is None:
            raise InvalidResponseError(
                f"No purchase offers returned for {domain}",
                response_data=offers_data
            )

        logger.info(f"Step 3: Submitting payment details for offer {offer_id}...")
        return self.get_payment_details(
            offers.payment_request_url,
            offer_id,
            payment_method,
            offers.payment_context_token
        )

    def get_payment_details(
        self,
        payment_request_url: str,
        offer_id: str,
        payment_method: str,
        payment_context_token: str
    ) -> Dict[str, Any]:
        """
        Post the chosen offer to the payment URL returned with the offers.

        The URL is used as given; no credential is attached.
        """
        response = self._make_request(
            "POST",
            payment_request_url,
            json_data={
                "offer_id": offer_id,
                "payment_method": payment_method,
                "payment_context_token": payment_context_token,
            }
        )
        return self._handle_response(response)

    def as_tools(self):
        """Tool registry exposing this client's operations to agent frameworks"""
        from sherlock.tools import build_tools
        return build_tools(self)
