"""Error kinds raised below the command surface."""

from __future__ import annotations


class SenseiError(Exception):
    """Base class for every failure the command surface flattens to a message."""


class StorageError(SenseiError):
    """Schema, I/O or query failure in the persistence layer."""


class NetworkError(SenseiError):
    """The chat server could not be reached or answered with an error status."""


class DecodeError(SenseiError):
    """The chat server answered with a body that does not match the chat schema."""
