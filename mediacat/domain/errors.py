# mediacat/domain/errors.py
from __future__ import annotations


class MediacatError(Exception):
    """Base class for errors raised by the mediacat domain."""


class InvalidArgument(MediacatError, ValueError):
    """A caller passed a malformed id, popularity, country code or container."""


class ParseError(MediacatError, ValueError):
    """Catalogue metadata could not be turned into domain objects."""
