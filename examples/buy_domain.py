"""
Sherlock Domains Client - Purchase Walkthrough
==============================================

Searches for a domain, stores contact information, and requests payment
details for the first offer. Nothing is charged: the final step returns the
checkout information needed to pay.

Prerequisites:
1. Set SHERLOCK_ACCESS_TOKEN in your environment or .env file
"""

import sys

from sherlock.api import SherlockClient, Contact, APIError, IncompleteContactError
from sherlock.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


CONTACT = Contact(
    first_name="Jane",
    last_name="Doe",
    email="jane@example.com",
    address="123 Main St",
    city="Austin",
    state="TX",
    postal_code="78701",
    country="US",
)


def main(query: str):
    configure_logging("INFO")
    client = SherlockClient.from_settings()

    results = client.search(query)
    available = results.get("available", [])
    if not available:
        logger.warning(f"No available domains for '{query}'")
        return

    domain = available[0]["name"]
    logger.info(f"Buying {domain} (${available[0].get('price', 0) / 100:.2f})")

    try:
        client.set_contact_information(CONTACT)
        payment = client.purchase_domain(results["id"], domain)
    except IncompleteContactError as e:
        logger.error(f"Contact incomplete: {', '.join(e.missing_fields)}")
        sys.exit(1)
    except APIError as e:
        logger.error(f"Purchase failed: {e}")
        sys.exit(1)

    print(payment)


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "example.com")
