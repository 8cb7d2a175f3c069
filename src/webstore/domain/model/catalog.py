"""Catalog lookup entries: the five small tables products point at."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from webstore.domain.exceptions import ValidationError


class CatalogKind(Enum):
    CATEGORY = "category"
    BRAND = "brand"
    GENDER = "gender"
    COLOR = "color"
    SIZE = "size"


@dataclass(frozen=True)
class CatalogEntry:
    """A named lookup value (e.g. the "Shoes" category or the "XL" size)."""

    id: int | None
    name: str

    @staticmethod
    def named(name: str) -> CatalogEntry:
        if not name or not name.strip():
            raise ValidationError("Catalog name is required")
        return CatalogEntry(id=None, name=name.strip())

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.strip().lower()
