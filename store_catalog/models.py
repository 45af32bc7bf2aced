"""
Design (models.py)
- Purpose: Define the Store record and its derived predicates.
- Inputs: Field values (str) and zero or more phone strings.
- Outputs: Dataclass instances; JSON-ready dicts.
- Side effects: None.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .config import (
    PHONES_SEPARATOR,
    ROUND_THE_CLOCK,
    SHORT_PHONE_MAX_LEN,
    UKRAINIAN_MOBILE_PREFIX,
)


def _text_field(data: Dict[str, Any], key: str) -> str:
    value = data.get(key.lower())
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class Store:
    """
    Design (Store)
    - Purpose: One catalog entry describing a retail outlet.
    - Fields:
        name: used for delete-by-name and name sort; not unique.
        address: free text; first space-delimited token is the "city" for sorting.
        phones: insertion-ordered phone strings (may be empty).
        specialization: free text.
        working_hours: free text; "24/7" (any case) means round-the-clock.
    """
    name: str = ""
    address: str = ""
    phones: List[str] = field(default_factory=list)
    specialization: str = ""
    working_hours: str = ""

    def add_phone(self, phone: str) -> None:
        self.phones.append(phone)

    def works_everyday_without_break(self) -> bool:
        return self.working_hours.lower() == ROUND_THE_CLOCK.lower()

    def has_short_phone_number(self) -> bool:
        return any(len(phone) < SHORT_PHONE_MAX_LEN for phone in self.phones)

    def has_ukrainian_mobile_number(self) -> bool:
        return any(phone.startswith(UKRAINIAN_MOBILE_PREFIX) for phone in self.phones)

    def __str__(self) -> str:
        return (
            f"Store(Name='{self.name}', Address='{self.address}', "
            f"Phones={PHONES_SEPARATOR.join(self.phones)}, "
            f"Specialization='{self.specialization}', WorkingHours='{self.working_hours}')"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the persisted key names and order."""
        return {
            "name": self.name,
            "address": self.address,
            "phones": list(self.phones),
            "specialization": self.specialization,
            "workingHours": self.working_hours,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Store":
        """
        Build a Store from a persisted JSON object.
        Keys match case-insensitively ("WorkingHours" and "workingHours" alike).
        Missing or null fields fall back to defaults; wrong JSON types raise ValueError.
        """
        data = {str(key).lower(): value for key, value in data.items()}
        phones = data.get("phones")
        if phones is None:
            phones = []
        if not isinstance(phones, list) or not all(isinstance(p, str) for p in phones):
            raise ValueError("field 'phones' must be an array of strings")
        return cls(
            name=_text_field(data, "name"),
            address=_text_field(data, "address"),
            phones=list(phones),
            specialization=_text_field(data, "specialization"),
            working_hours=_text_field(data, "workingHours"),
        )
