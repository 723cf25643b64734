"""In-process implementation of the Product repository.

Mirrors the Firestore semantics the service relies on: ids are generated
on insert, updates merge fields (dotted keys are nested field paths) and
fail on a missing document, deletes of a missing id are silent.  Selected
with ``DOCUMENT_STORE_BACKEND=memory`` and used as the store fake
throughout the test suite.
"""

from __future__ import annotations

import copy
import secrets
import string
import threading
from typing import Dict, List, Optional, Tuple

from modules.products.dtos import ProductDocument
from modules.products.exceptions import DocumentStoreError
from modules.products.repositories.interfaces import IProductRepository

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 20


def generate_document_id() -> str:
    """Random 20-character id in the same alphabet Firestore auto-ids use."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def _set_field(document: ProductDocument, path: str, value: object) -> None:
    """Assign ``value`` at a dotted field path, creating nested maps.

    ``{"a.b": 1}`` sets ``b`` inside the map ``a``, as Firestore updates do.
    """
    *parents, leaf = path.split(".")
    for name in parents:
        child = document.get(name)
        if not isinstance(child, dict):
            child = document[name] = {}
        document = child
    document[leaf] = value


class InMemoryProductRepository(IProductRepository):
    """Dict-backed Product repository."""

    def __init__(self, collection_name: str = "products") -> None:
        self.collection_name = collection_name
        self._documents: Dict[str, ProductDocument] = {}
        self._lock = threading.Lock()

    def add(self, data: ProductDocument) -> str:
        with self._lock:
            id = generate_document_id()
            while id in self._documents:
                id = generate_document_id()
            self._documents[id] = copy.deepcopy(dict(data))
        return id

    def list(self) -> List[Tuple[str, ProductDocument]]:
        with self._lock:
            return [(id, copy.deepcopy(doc)) for id, doc in self._documents.items()]

    def get_by_id(self, id: str) -> Optional[ProductDocument]:
        with self._lock:
            doc = self._documents.get(id)
            return copy.deepcopy(doc) if doc is not None else None

    def update(self, id: str, data: ProductDocument) -> None:
        with self._lock:
            if id not in self._documents:
                raise DocumentStoreError(f"No document to update: {self.collection_name}/{id}")
            document = self._documents[id]
            for path, value in data.items():
                _set_field(document, path, copy.deepcopy(value))

    def delete(self, id: str) -> None:
        with self._lock:
            self._documents.pop(id, None)

    def ping(self) -> bool:
        return True
