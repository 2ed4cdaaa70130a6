"""
Repository Ports

Persistence capabilities the property service depends on. Writes are made
inside a unit of work (see shared.application.uow), which owns commit and
rollback; repositories never commit on their own.
"""

from abc import ABC, abstractmethod
from typing import List

from shared.domain.value_objects import PagedResult

from apps.properties.domain.entities import Owner, Property, PropertyImage, PropertyTrace
from apps.properties.domain.query import PropertyFilter


class AbstractPropertyRepository(ABC):

    @abstractmethod
    def get_by_id(self, property_id: int) -> Property | None:
        """Load the aggregate with its images and traces"""

    @abstractmethod
    def add(self, property_obj: Property) -> Property:
        """
        Insert a new property and assign its id

        Raises DuplicateCodeError when the internal code is taken.
        """

    @abstractmethod
    def update(self, property_obj: Property) -> None:
        """Persist scalar fields. Raises DuplicateCodeError like add()."""

    @abstractmethod
    def add_image(self, image: PropertyImage) -> PropertyImage:
        pass

    @abstractmethod
    def update_image(self, image: PropertyImage) -> None:
        pass

    @abstractmethod
    def add_trace(self, trace: PropertyTrace) -> PropertyTrace:
        pass

    @abstractmethod
    def list_paged(self, filter_: PropertyFilter) -> PagedResult[Property]:
        """Filtered page ordered by id, total counted over the whole match"""

    @abstractmethod
    def get_details(self, property_id: int) -> Property | None:
        """Load the aggregate with owner, images and traces"""

    @abstractmethod
    def get_by_owner_id(self, owner_id: int) -> List[Property]:
        pass


class AbstractOwnerRepository(ABC):

    @abstractmethod
    def get_by_id(self, owner_id: int) -> Owner | None:
        pass

    @abstractmethod
    def add(self, owner: Owner) -> Owner:
        pass

    @abstractmethod
    def update(self, owner: Owner) -> None:
        pass
