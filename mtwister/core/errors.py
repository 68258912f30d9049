"""Exception types raised by mtwister.

Every error here is a caller contract violation: it depends only on the
arguments passed, never on generator state, and is raised immediately.
"""

from __future__ import annotations


class MTwisterError(Exception):
    """Base exception for mtwister; catch this for any package-raised error."""


class InvalidArgumentError(MTwisterError, ValueError):
    """An argument is absent, empty or of the wrong kind."""


class InvalidRangeError(MTwisterError, ValueError):
    """A bound is negative or a (min, max) pair is malformed."""


__all__ = ["MTwisterError", "InvalidArgumentError", "InvalidRangeError"]
