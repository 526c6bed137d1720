# fringe_lab/core/errors.py
from __future__ import annotations


class FrontierError(Exception):
    """Base class for frontier model errors."""


class EmptyStoreError(FrontierError):
    """Raised when a query or removal is made on a frontier with no entries."""

    def __init__(self, operation: str = "operation"):
        self.operation = operation
        super().__init__(f"{operation} is undefined on an empty frontier")


class UnknownStrategyError(FrontierError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"unknown search strategy: {value!r}")
