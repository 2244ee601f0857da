"""
Design (errors.py)
- Purpose: Exception types shared by the store backends and the controller.
- Taxonomy:
    StoreOperationFailed: any list/insert/delete failure reported by a store.
    InvalidInput: local validation failure (empty name or color).
    ControllerBusy: an operation was attempted while another is in flight.
- Thread-safety: N/A (plain exception classes).
"""

from typing import Optional


class ShopColorError(Exception):
    """Base class for all application errors."""


class StoreOperationFailed(ShopColorError):
    """
    Design (StoreOperationFailed)
    - Fields:
        message: short error text from the store (may be None).
        details: longer detail text from the store (may be None).
        operation: "list", "insert" or "delete" when known.
    """

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None, operation: Optional[str] = None):
        self.message = message
        self.details = details
        self.operation = operation
        super().__init__(self.__str__())

    def __str__(self) -> str:
        message = self.message or "No message"
        details = self.details or "No details"
        return f"{message} ({details})"


class InvalidInput(ShopColorError):
    """Raised when name or color is empty after trimming."""


class ControllerBusy(ShopColorError):
    """Raised when a store operation is already in flight."""
