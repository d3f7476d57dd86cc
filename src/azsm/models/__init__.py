"""
Azsm Data Models

Dataclass DTOs for Service Management responses, the legacy and current
VM configuration schemas, and the contexts emitted by commands.

Philosophy:
- Zero dependencies on other azsm packages
- Plain dataclasses, every field optional
- Legacy model in persistent_vm, current model in compute
"""

from .base import DictModel
from .operations import (
    ComputeOperationStatusResponse,
    OperationResponse,
    OperationStatus,
    OperationStatusResponse,
    StorageOperationStatusResponse,
)

__all__ = [
    "ComputeOperationStatusResponse",
    "DictModel",
    "OperationResponse",
    "OperationStatus",
    "OperationStatusResponse",
    "StorageOperationStatusResponse",
]
