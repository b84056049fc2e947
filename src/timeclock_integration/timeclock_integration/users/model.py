from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Local user that can be matched in the time clock service.

    ``cpf`` is the person's tax ID, which the service uses to identify employees.
    """

    user_id: int
    full_name: str
    cpf: str
