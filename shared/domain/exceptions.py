"""
Domain Errors

Every failure surfaced by the domain and application layers is one of
these kinds. The presentation layer maps them to transport responses:
- ValidationError: malformed or out-of-range input (400)
- NotFoundError: referenced entity does not exist (404)
- ConflictError: operation clashes with existing state (409)
"""

from typing import Iterable


class DomainError(Exception):
    """Base class for all domain errors"""


class ValidationError(DomainError):
    """
    Input violates one or more rules

    Carries every violated rule, not only the first one, so the caller
    can fix all problems in a single round trip.
    """

    separator = "; "

    def __init__(self, errors: str | Iterable[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__(self.separator.join(self.errors))

    @classmethod
    def raise_if_any(cls, errors: Iterable[str]):
        """Raise a single error aggregating ``errors`` if there are any"""
        errors = list(errors)
        if errors:
            raise cls(errors)


class NotFoundError(DomainError):
    """Referenced entity does not exist"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ConflictError(DomainError):
    """Operation violates an invariant of the existing state"""


class DuplicateCodeError(ConflictError):
    """Internal property code is already used by another property"""

    def __init__(self, code_internal: str):
        self.code_internal = code_internal
        super().__init__(f"Property with internal code '{code_internal}' already exists")
