"""
errors/results.py - Operation result type

Container and ship operations return an OperationResult instead of raising,
so callers can branch on success without unwinding the stack.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .taxonomy import CargoShipError


@dataclass
class OperationResult:
    """Result of a container or ship operation."""

    success: bool = True
    message: str = ""
    data: Any = None
    error: Optional[CargoShipError] = None

    @classmethod
    def ok(cls, message: str = "", data: Any = None) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: CargoShipError, data: Any = None) -> "OperationResult":
        return cls(success=False, message=error.message, data=data, error=error)

    @property
    def failed(self) -> bool:
        return not self.success

    def raise_for_error(self) -> "OperationResult":
        """Raise the carried error if the operation failed, else return self."""
        if self.error is not None:
            raise self.error
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "error": self.error.to_dict() if self.error else None,
        }

    def __bool__(self) -> bool:
        return self.success
