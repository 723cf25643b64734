"""Product domain exceptions.

Raised by the Service Layer and the repositories.  The API layer (Views)
catches ``ProductServiceError`` and reports every subclass the same way:
HTTP 400 with the exception message as a plain-text body.
"""

from __future__ import annotations


class ProductServiceError(Exception):
    """Base class for every failure the product views report to clients."""


class InvalidProductInput(ProductServiceError):
    """The id or the payload is missing.  Raised before any store call."""


class DocumentStoreError(ProductServiceError):
    """The document store rejected or failed the call.

    Wraps network, permission, not-found-on-update and serialization
    failures of the underlying client, keeping the original message.
    """
