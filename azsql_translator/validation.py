"""
Strict validation for custom-resource properties.

The translator resolves unknown editions and failover policies to defaults.
When a caller wants those values rejected instead, it validates here first.
Nothing in ``azsql_translator.translators.sql_properties`` calls this module.
"""

import logging
from typing import Any

from .exceptions import (
    InvalidPropertiesError,
    UnknownEditionError,
    UnknownFailoverPolicyError,
)
from .models.custom_resources import (
    DatabaseProperties,
    DBEdition,
    FailoverGroupProperties,
    FailoverPolicy,
)
from .translators.sql_properties import resolve_edition, resolve_failover_policy

logger = logging.getLogger(__name__)


def validate_edition(edition: Any) -> DBEdition:
    """Return the DBEdition for ``edition`` or raise UnknownEditionError."""
    member = resolve_edition(edition)
    if member is None:
        raise UnknownEditionError(f"Unknown database edition: {edition!r}", edition=edition)
    return member


def validate_failover_policy(policy: Any) -> FailoverPolicy:
    """Return the FailoverPolicy for ``policy`` or raise UnknownFailoverPolicyError."""
    member = resolve_failover_policy(policy)
    if member is None:
        raise UnknownFailoverPolicyError(
            f"Unknown failover policy: {policy!r}", policy=policy
        )
    return member


def validate_database_properties(properties: DatabaseProperties) -> None:
    if not properties.database_name:
        raise InvalidPropertiesError(
            "Database name is required", field_name="database_name"
        )
    validate_edition(properties.edition)


def validate_failover_group_properties(properties: FailoverGroupProperties) -> None:
    validate_failover_policy(properties.failover_policy)

    if not properties.secondary_server:
        raise InvalidPropertiesError(
            "Secondary server is required", field_name="secondary_server"
        )
    if not properties.secondary_server_resource_group:
        raise InvalidPropertiesError(
            "Secondary server resource group is required",
            field_name="secondary_server_resource_group",
        )
    if (
        isinstance(properties.failover_grace_period, bool)
        or not isinstance(properties.failover_grace_period, int)
        or properties.failover_grace_period < 0
    ):
        raise InvalidPropertiesError(
            f"Failover grace period must be a non-negative number of minutes, "
            f"got {properties.failover_grace_period!r}",
            field_name="failover_grace_period",
        )

    logger.debug(
        f"Validated failover group properties for {properties.secondary_server}"
    )


def validate_primary_server(resource_group: str, server: str) -> None:
    """Require the primary server location used to build partner and database IDs."""
    if not resource_group:
        raise InvalidPropertiesError(
            "Primary server resource group is required", field_name="resourcegroup"
        )
    if not server:
        raise InvalidPropertiesError("Primary server is required", field_name="server")
