# -*- coding: utf-8 -*-
"""Exception classes for the stakeout engine.

Tolerance non-compliance and missing targets are normal states and are
never reported through exceptions.
"""


class StakeoutError(Exception):
    """Base class for all errors raised by stakeout_lib."""


class InvalidParameterError(StakeoutError, ValueError):
    """Raised when a numeric parameter is outside its valid range."""

    def __init__(self, name: str, value: object, requirement: str = "> 0"):
        self.name = name
        self.value = value
        super().__init__(f"`{name}` must be {requirement}, got {value!r}")


class UnsupportedEntityError(StakeoutError, TypeError):
    """Raised when a geometry operation receives an unknown entity type."""

    def __init__(self, entity: object):
        self.entity = entity
        super().__init__(f"Unsupported entity type: {type(entity).__name__}")


class TransformError(StakeoutError):
    """Raised when a coordinate transformer cannot be built."""
