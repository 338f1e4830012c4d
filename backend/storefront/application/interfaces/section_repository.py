"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.entities import Section


class SectionRepository(ABC):
    """Port for section persistence — implemented in the infrastructure layer.

    Implementations raise ``StoreUnavailableError`` when the store cannot be
    reached. ``update`` and ``delete`` on an unknown id are no-ops.
    """

    @abstractmethod
    async def create(self, section: Section) -> Section:
        """Persist a new section; id, timestamps and version=1 are assigned here."""
        ...

    @abstractmethod
    async def get_by_id(self, section_id: str) -> Section | None:
        """Retrieve a single section by its ID."""
        ...

    @abstractmethod
    async def list_by_page(self, page_key: str) -> list[Section]:
        """Active sections of a page in ascending order_index."""
        ...

    @abstractmethod
    async def list_all(
        self, *, page_key: str | None = None, include_inactive: bool = True
    ) -> list[Section]:
        """Sections for authoring views, optionally scoped to one page."""
        ...

    @abstractmethod
    async def update(self, section_id: str, changes: dict[str, Any]) -> None:
        """Merge the given fields, bump version and refresh updated_at."""
        ...

    @abstractmethod
    async def delete(self, section_id: str) -> None:
        """Delete a section by ID."""
        ...
