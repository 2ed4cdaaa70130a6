"""
Property Commands

Inputs of the property and owner use cases. Patches use ``None`` for
"leave unchanged": a field is only written when it carries a value.
"""

from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import List

MIN_YEAR_EXCLUSIVE = 1900


# ===== Property commands =====

@dataclass
class CreatePropertyCommand:
    """Command to register a new property for an existing owner"""
    name: str
    address: str
    price: Decimal
    code_internal: str
    year: int
    owner_id: int

    def errors(self) -> List[str]:
        errors = []
        if not (self.name or "").strip():
            errors.append("Name cannot be empty")
        if not (self.address or "").strip():
            errors.append("Address cannot be empty")
        if self.price is None or self.price <= 0:
            errors.append("Price must be positive")
        if not (self.code_internal or "").strip():
            errors.append("Internal code cannot be empty")
        if self.year is None or self.year <= MIN_YEAR_EXCLUSIVE:
            errors.append(f"Year must be greater than {MIN_YEAR_EXCLUSIVE}")
        if self.owner_id is None or self.owner_id <= 0:
            errors.append("Owner id must be greater than 0")
        return errors


@dataclass
class PropertyPatch:
    """Partial update of a property"""
    name: str | None = None
    address: str | None = None
    price: Decimal | None = None
    code_internal: str | None = None
    year: int | None = None

    def errors(self) -> List[str]:
        if self.year is not None and self.year <= MIN_YEAR_EXCLUSIVE:
            return [f"Year must be greater than {MIN_YEAR_EXCLUSIVE}"]
        return []

    def changes(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}


# ===== Owner commands =====

@dataclass
class CreateOwnerCommand:
    """Command to register an owner"""
    name: str
    address: str
    birthday: date
    photo: str | None = None


@dataclass
class OwnerPatch:
    """Partial update of an owner"""
    name: str | None = None
    address: str | None = None
    birthday: date | None = None
    photo: str | None = None

    def changes(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}
