"""
Operation response and operation status models.

Every Service Management response carries the request id of the call that
produced it. Commands use that id to fetch the operation status, whose id
and status are stamped onto every context they emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

from azsm.models.base import DictModel

__all__ = [
    "ComputeOperationStatusResponse",
    "OperationResponse",
    "OperationStatus",
    "OperationStatusError",
    "OperationStatusResponse",
    "StorageOperationStatusResponse",
]


class OperationStatus(str, Enum):
    """Status of an asynchronous Service Management operation."""

    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class OperationResponse(DictModel):
    """Base of every Service Management response."""

    request_id: str | None = None
    status_code: HTTPStatus | None = None


@dataclass
class OperationStatusError(DictModel):
    code: str | None = None
    message: str | None = None


@dataclass
class OperationStatusResponse(OperationResponse):
    """Result of a Get Operation Status call."""

    id: str | None = None
    status: OperationStatus | None = None
    http_status_code: HTTPStatus | None = None
    error: OperationStatusError | None = None


@dataclass
class ComputeOperationStatusResponse(OperationStatusResponse):
    """Operation status returned by compute (hosted service/VM) calls."""


@dataclass
class StorageOperationStatusResponse(OperationStatusResponse):
    """Operation status returned by storage account calls."""
