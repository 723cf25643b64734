"""Firestore implementation of the Product repository.

Satisfies ``IProductRepository`` with one Firestore call per method.
Every client-side or server-side failure is re-raised as
``DocumentStoreError`` so the Service Layer only ever sees domain
exceptions.  Missing documents follow the Null Object pattern on reads
(``get_by_id`` returns ``None``) and on deletes (no-op), while updating a
missing document is a store failure.  Reads turn ``GeoPoint`` and
``DocumentReference`` values written by other clients into plain JSON.
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import structlog
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore
from google.cloud.firestore import DocumentReference, GeoPoint

from modules.products.dtos import ProductDocument
from modules.products.exceptions import DocumentStoreError
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_STORE_ERRORS = (GoogleAPIError, GoogleAuthError, ValueError, TypeError)
# Client construction raises OSError when no project can be determined.
_CLIENT_ERRORS = (*_STORE_ERRORS, OSError)


def _to_plain(value: Any) -> Any:
    """Replace Firestore-only value types with JSON-friendly equivalents."""
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    if isinstance(value, GeoPoint):
        return {"latitude": value.latitude, "longitude": value.longitude}
    if isinstance(value, DocumentReference):
        return value.path
    return value


class FirestoreProductRepository(IProductRepository):
    """Concrete Product repository backed by a Firestore collection."""

    def __init__(
        self,
        client: Any = None,
        collection_name: str = "products",
        project: Optional[str] = None,
        database: str = "(default)",
    ) -> None:
        if client is None:
            try:
                client = firestore.Client(project=project, database=database)
            except _CLIENT_ERRORS as exc:
                raise DocumentStoreError(str(exc)) from exc
        self.collection_name = collection_name
        self._collection = client.collection(collection_name)

    def add(self, data: ProductDocument) -> str:
        try:
            _, ref = self._collection.add(data)
        except _STORE_ERRORS as exc:
            logger.warning("firestore.add_failed", error=str(exc))
            raise DocumentStoreError(str(exc)) from exc
        return ref.id

    def list(self) -> List[Tuple[str, ProductDocument]]:
        try:
            return [
                (snap.id, _to_plain(snap.to_dict() or {}))
                for snap in self._collection.stream()
            ]
        except _STORE_ERRORS as exc:
            logger.warning("firestore.stream_failed", error=str(exc))
            raise DocumentStoreError(str(exc)) from exc

    def get_by_id(self, id: str) -> Optional[ProductDocument]:
        """Fetch a single document.

        Returns ``None`` when the snapshot does not exist.
        """
        try:
            snapshot = self._collection.document(id).get()
        except _STORE_ERRORS as exc:
            logger.warning("firestore.get_failed", product_id=id, error=str(exc))
            raise DocumentStoreError(str(exc)) from exc
        if not snapshot.exists:
            return None
        return _to_plain(snapshot.to_dict())

    def update(self, id: str, data: ProductDocument) -> None:
        """Merge ``data`` into the document.

        Firestore answers ``NotFound`` for a missing document, which is
        surfaced like any other store failure.
        """
        try:
            self._collection.document(id).update(data)
        except _STORE_ERRORS as exc:
            logger.warning("firestore.update_failed", product_id=id, error=str(exc))
            raise DocumentStoreError(str(exc)) from exc

    def delete(self, id: str) -> None:
        try:
            self._collection.document(id).delete()
        except _STORE_ERRORS as exc:
            logger.warning("firestore.delete_failed", product_id=id, error=str(exc))
            raise DocumentStoreError(str(exc)) from exc

    def ping(self) -> bool:
        try:
            list(self._collection.limit(1).stream())
        except _STORE_ERRORS as exc:
            raise DocumentStoreError(str(exc)) from exc
        return True
