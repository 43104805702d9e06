"""
Exceptions raised by the catalog package.
Storage-level errors (sqlalchemy.exc.*) are not wrapped and reach the caller as-is.
"""
from typing import Optional, Dict, Any, List

import pydantic
from fastapi import status


class CatalogError(Exception):
    """
    Base exception for the catalog package.

    Attributes:
        message: Human readable error message
        code: Machine readable error code
        status_code: HTTP status an outer API layer should answer with
        details: Extra error details
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code or "INTERNAL_ERROR"
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detail": self.message,
            "code": self.code,
            "status_code": self.status_code,
            **self.details
        }


class ValidationError(CatalogError):
    """Insert payload does not satisfy the table's field contract."""

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        code: str = "VALIDATION_ERROR"
    ):
        self.errors = errors or []
        super().__init__(
            message, code, status.HTTP_422_UNPROCESSABLE_ENTITY, {"errors": self.errors}
        )

    @property
    def fields(self) -> List[str]:
        return [error["field"] for error in self.errors]

    @classmethod
    def from_pydantic(cls, entity: str, exc: pydantic.ValidationError) -> "ValidationError":
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        fields = ", ".join(error["field"] for error in errors)
        return cls(f"Invalid {entity} payload: {fields}", errors)


class NotFoundError(CatalogError):
    """Row not found."""

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        code: str = "NOT_FOUND"
    ):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} not found"

        details = {"resource": resource, "resource_id": resource_id}
        super().__init__(message, code, status.HTTP_404_NOT_FOUND, details)
