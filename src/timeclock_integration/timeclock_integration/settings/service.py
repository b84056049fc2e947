from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import blank_to_none, require_non_empty
from ..core import constants
from ..timeclock.model import OrganizationIdentifiers
from .repository import ConfigRepository


@dataclass(frozen=True)
class PrimepontoSettings:
    """Integration settings read from the configs table."""

    login: str
    password: str
    context: str
    organizations: OrganizationIdentifiers
    allowed_after_date: Optional[str] = None


def load_primeponto_settings(config: ConfigRepository) -> PrimepontoSettings:
    """Read and check the Primeponto settings.

    Raises ConfigurationError when credentials, gateway context or the primary
    CNPJ are missing. The allowed-after date is returned raw; it is validated
    when an import runs.
    """
    login = require_non_empty(
        config.get(constants.CONFIG_LOGIN),
        "Primeponto login is not configured",
    )
    password = require_non_empty(
        config.get(constants.CONFIG_PASSWORD),
        "Primeponto password is not configured",
    )
    context = require_non_empty(
        config.get(constants.CONFIG_CONTEXT),
        "Primeponto gateway context is not configured",
    )
    primary = require_non_empty(
        config.get(constants.CONFIG_CNPJ_PRIMARY),
        "Primeponto CNPJ is not configured",
    )

    return PrimepontoSettings(
        login=login,
        password=password,
        context=context,
        organizations=OrganizationIdentifiers(
            primary=primary,
            secondary=blank_to_none(config.get(constants.CONFIG_CNPJ_SECONDARY)),
        ),
        allowed_after_date=blank_to_none(config.get(constants.CONFIG_ALLOWED_AFTER_DATE)),
    )
