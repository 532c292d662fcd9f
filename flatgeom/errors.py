from __future__ import annotations


class PreconditionError(ValueError):
    """Raised when a caller passes geometry that violates an operation's precondition."""


class UnsupportedGeometryError(TypeError):
    """Raised when an operation receives an operand kind it does not handle."""

    def __init__(self, operation: str, operand: object) -> None:
        self.operation = operation
        self.operand_type = type(operand).__name__
        super().__init__(f"{operation}: unsupported geometry type {self.operand_type}")
