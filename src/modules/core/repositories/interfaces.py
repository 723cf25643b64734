"""Generic document repository interface (Dependency Inversion Principle).

Provides ``IDocumentRepository``, the base abstract class that
collection-specific repositories extend.  Service-layer code depends on
this abstraction, never on the document-store client directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

Document = Dict[str, Any]


class IDocumentRepository(ABC):
    """Base contract for a single document collection.

    Documents are plain field maps addressed by a store-generated string id.
    """

    @abstractmethod
    def add(self, data: Document) -> str:
        """Insert a new document and return its generated id."""

    @abstractmethod
    def list(self) -> List[Tuple[str, Document]]:
        """Return every ``(id, fields)`` pair in the collection."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Document]:
        """Return the document fields, or ``None`` if it does not exist."""

    @abstractmethod
    def update(self, id: str, data: Document) -> None:
        """Merge ``data`` into an existing document."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove a document.  Deleting a missing id is not an error."""

    @abstractmethod
    def ping(self) -> bool:
        """Round-trip to the store, used by the health check."""
