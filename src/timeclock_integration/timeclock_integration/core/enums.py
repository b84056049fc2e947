from __future__ import annotations

from enum import Enum


class EmployeeImportStatus(str, Enum):
    """Outcome of importing one employee within a range."""

    IMPORTED = "IMPORTED"
    DOMAIN_FAULT = "DOMAIN_FAULT"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CANCELLED = "CANCELLED"
