"""
Property translation between the custom-resource models and the Azure SQL API.

Translates the local ServerProperties / DatabaseProperties containers and the
DBEdition / FailoverPolicy enumerations into the provider structures defined in
``azsql_translator.provider.schema``.

None of these functions can fail. An edition or failover policy the tables do
not know resolves to DEFAULT_EDITION / DEFAULT_FAILOVER_POLICY. Callers that
want unknown values rejected use ``azsql_translator.validation`` before
translating.

Example:
    >>> translate_edition(DBEdition.HYPERSCALE)
    <ProviderDatabaseEdition.HYPERSCALE: 'Hyperscale'>
    >>> translate_edition(99)
    <ProviderDatabaseEdition.FREE: 'Free'>
"""

import logging
from typing import Any, Dict, Optional

from ..models.custom_resources import (
    DatabaseProperties,
    DBEdition,
    FailoverPolicy,
    ServerProperties,
)
from ..provider.schema import (
    ProviderDatabaseEdition,
    ProviderDatabaseProperties,
    ProviderFailoverPolicy,
    ProviderServerProperties,
)

logger = logging.getLogger(__name__)

DEFAULT_EDITION = ProviderDatabaseEdition.FREE
DEFAULT_FAILOVER_POLICY = ProviderFailoverPolicy.AUTOMATIC

# Keyed by member, not ordinal: reordering DBEdition must not change the mapping.
EDITION_TABLE: Dict[DBEdition, ProviderDatabaseEdition] = {
    DBEdition.BASIC: ProviderDatabaseEdition.BASIC,
    DBEdition.BUSINESS: ProviderDatabaseEdition.BUSINESS,
    DBEdition.BUSINESS_CRITICAL: ProviderDatabaseEdition.BUSINESS_CRITICAL,
    DBEdition.DATA_WAREHOUSE: ProviderDatabaseEdition.DATA_WAREHOUSE,
    DBEdition.FREE: ProviderDatabaseEdition.FREE,
    DBEdition.GENERAL_PURPOSE: ProviderDatabaseEdition.GENERAL_PURPOSE,
    DBEdition.HYPERSCALE: ProviderDatabaseEdition.HYPERSCALE,
    DBEdition.PREMIUM: ProviderDatabaseEdition.PREMIUM,
    DBEdition.PREMIUM_RS: ProviderDatabaseEdition.PREMIUM_RS,
    DBEdition.STANDARD: ProviderDatabaseEdition.STANDARD,
    DBEdition.STRETCH: ProviderDatabaseEdition.STRETCH,
    DBEdition.SYSTEM: ProviderDatabaseEdition.SYSTEM,
    DBEdition.SYSTEM2: ProviderDatabaseEdition.SYSTEM2,
    DBEdition.WEB: ProviderDatabaseEdition.WEB,
}

FAILOVER_POLICY_TABLE: Dict[FailoverPolicy, ProviderFailoverPolicy] = {
    FailoverPolicy.AUTOMATIC: ProviderFailoverPolicy.AUTOMATIC,
    FailoverPolicy.MANUAL: ProviderFailoverPolicy.MANUAL,
}


def _normalize_name(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


_EDITIONS_BY_NAME: Dict[str, DBEdition] = {
    _normalize_name(member.name): member for member in DBEdition
}


def resolve_edition(value: Any) -> Optional[DBEdition]:
    """
    Resolve a custom-resource edition value to a DBEdition member.

    Accepts a DBEdition, its ordinal, or its name in either enum or API
    spelling ("GENERAL_PURPOSE", "GeneralPurpose"). Returns None for anything
    else.
    """
    if isinstance(value, DBEdition):
        return value
    # bool is an int subclass; True must not read as Business
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return DBEdition(value)
        except ValueError:
            return None
    if isinstance(value, str):
        return _EDITIONS_BY_NAME.get(_normalize_name(value.strip()))
    return None


def resolve_failover_policy(value: Any) -> Optional[FailoverPolicy]:
    """Resolve a custom-resource failover policy value, or None if unknown."""
    if isinstance(value, FailoverPolicy):
        return value
    try:
        return FailoverPolicy(value)
    except (TypeError, ValueError):
        return None


def translate_edition(edition: Any) -> ProviderDatabaseEdition:
    """Translate a custom-resource edition to the API constant (default Free)."""
    member = resolve_edition(edition)
    if member is None or member not in EDITION_TABLE:
        logger.debug(
            f"Unknown database edition {edition!r}, using {DEFAULT_EDITION.value}"
        )
        return DEFAULT_EDITION
    return EDITION_TABLE[member]


def translate_failover_policy(policy: Any) -> ProviderFailoverPolicy:
    """Translate a failover policy to the API constant (default Automatic)."""
    member = resolve_failover_policy(policy)
    if member is None or member not in FAILOVER_POLICY_TABLE:
        logger.debug(
            f"Unknown failover policy {policy!r}, using {DEFAULT_FAILOVER_POLICY.value}"
        )
        return DEFAULT_FAILOVER_POLICY
    return FAILOVER_POLICY_TABLE[member]


def translate_server_properties(
    properties: ServerProperties,
) -> ProviderServerProperties:
    """Copy the administrator login and password onto the API structure as-is."""
    return ProviderServerProperties(
        administrator_login=properties.administrator_login,
        administrator_login_password=properties.administrator_login_password,
    )


def translate_database_properties(
    properties: DatabaseProperties,
) -> ProviderDatabaseProperties:
    """
    Translate database properties to the API structure.

    Only the edition is carried. The database name is the resource name in the
    API call, not part of the properties body.
    """
    return ProviderDatabaseProperties(edition=translate_edition(properties.edition))
