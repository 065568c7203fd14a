"""
Input validation utilities for contact information
"""

from typing import Any, Dict, List, Mapping, Optional, Union

from sherlock.api.exceptions import IncompleteContactError
from sherlock.api.models import CONTACT_FIELDS, Contact, contact_to_dict


class ContactValidator:
    """Validator for ICANN contact records"""

    REQUIRED_FIELDS = CONTACT_FIELDS

    @classmethod
    def missing_fields(cls, contact: Mapping[str, Any]) -> List[str]:
        """
        List required fields that are absent, None, or blank after stripping.

        Args:
            contact: Contact mapping

        Returns:
            Missing field names in declared order
        """
        missing = []
        for field in cls.REQUIRED_FIELDS:
            value = contact.get(field)
            if value is None or str(value).strip() == "":
                missing.append(field)
        return missing

    @classmethod
    def validate(cls, contact: Optional[Union[Contact, Mapping[str, Any]]]) -> Dict[str, Any]:
        """
        Check that every required contact field is filled in.

        Args:
            contact: Contact model, mapping, or None

        Returns:
            The contact as a plain dict

        Raises:
            IncompleteContactError: If the contact is missing or incomplete
        """
        if contact is None:
            raise IncompleteContactError(
                "Contact information is required",
                missing_fields=list(cls.REQUIRED_FIELDS)
            )

        contact_dict = contact_to_dict(contact)
        missing = cls.missing_fields(contact_dict)

        if missing:
            verb = "is" if len(missing) == 1 else "are"
            raise IncompleteContactError(
                f"Incomplete contact information: {', '.join(missing)} {verb} "
                "required and cannot be empty",
                missing_fields=missing
            )

        return contact_dict


def require_complete_contact(
    contact: Optional[Union[Contact, Mapping[str, Any]]]
) -> Dict[str, Any]:
    """Convenience function for contact validation"""
    return ContactValidator.validate(contact)
