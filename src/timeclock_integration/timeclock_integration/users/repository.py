from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeDirectory(Protocol):
    """Repository interface for employees eligible for time clock import."""

    def list_eligible(self) -> Sequence[Employee]:
        """Active users with a non-empty CPF."""

        raise NotImplementedError
