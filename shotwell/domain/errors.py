# shotwell/domain/errors.py
from __future__ import annotations


class ShotwellError(Exception):
    """Base class for errors raised by the shotwell access layer."""


class StorageUnavailableError(ShotwellError):
    """The database file is missing or cannot be read."""


class UnknownItemTypeError(ShotwellError, ValueError):
    """An item type other than PHOTO or VIDEO was requested."""


class InvalidRatingError(ShotwellError, ValueError):
    """A rating that is not an integer between 0 and 5 was given."""


class ObjectIdError(ShotwellError, ValueError):
    """A numeric key cannot be encoded as an object id."""
