"""Translation of Azure SQL custom resources to Azure SQL API properties."""

from .models import (
    DatabaseProperties,
    DBEdition,
    FailoverGroupProperties,
    FailoverPolicy,
    ServerProperties,
)
from .translators import (
    translate_database_properties,
    translate_edition,
    translate_failover_group_properties,
    translate_failover_policy,
    translate_server_properties,
)

__version__ = "0.1.0"

__all__ = [
    "DBEdition",
    "DatabaseProperties",
    "FailoverGroupProperties",
    "FailoverPolicy",
    "ServerProperties",
    "translate_database_properties",
    "translate_edition",
    "translate_failover_group_properties",
    "translate_failover_policy",
    "translate_server_properties",
]
