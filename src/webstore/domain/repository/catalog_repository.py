"""Abstract repository for the catalog lookup tables."""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.model.catalog import CatalogEntry, CatalogKind


class CatalogRepository(ABC):

    @abstractmethod
    def get_or_create(self, kind: CatalogKind, name: str) -> CatalogEntry:
        """Return the entry with this name (case-insensitive), creating it if absent."""

    @abstractmethod
    def list_all(self, kind: CatalogKind) -> list[CatalogEntry]:
        """Return every entry of one kind."""
