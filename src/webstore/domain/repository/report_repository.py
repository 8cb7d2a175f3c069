"""Abstract repository for Report snapshots (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstore.domain.model.report import Report


class ReportRepository(ABC):

    @abstractmethod
    def add(self, report: Report) -> None:
        """Append a snapshot, assigning its ID."""

    @abstractmethod
    def list_all(self) -> list[Report]:
        """Return every snapshot, oldest first."""
