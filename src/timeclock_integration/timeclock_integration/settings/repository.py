from __future__ import annotations

from typing import Optional, Protocol


class ConfigRepository(Protocol):
    """Key-value access to integration settings stored by the application."""

    def get(self, name: str) -> Optional[str]:
        raise NotImplementedError
