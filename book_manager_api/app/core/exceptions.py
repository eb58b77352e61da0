"""Exceptions raised by the persistence layer."""


class StorageUnavailableError(RuntimeError):
    """The backing database could not be reached or failed mid-operation.

    Endpoint handlers do not catch this; it surfaces as HTTP 500.
    """
