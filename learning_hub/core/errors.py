"""Errors raised by the video catalog.

Upload and delete surface the first failing step as one of these, with the
backing-store exception chained as ``__cause__``.  A degraded catalog load is
not an error: it is logged and the external feed is returned on its own.
"""


class CatalogError(Exception):
    """Base class for catalog failures shown to the user."""


class Unauthenticated(CatalogError):
    """No actor could be resolved for an upload."""

    def __init__(self, message: str = "Auth session not found"):
        super().__init__(message)


class UploadFailed(CatalogError):
    """The object store rejected a write."""


class PersistFailed(CatalogError):
    """The metadata store rejected an insert, select or delete."""


class RemoveFailed(CatalogError):
    """The object store did not remove an object whose row is already gone."""
