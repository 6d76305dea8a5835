"""
Local custom-resource types for Azure SQL servers, databases and failover groups.

These mirror the spec blocks of the AzureSqlServer, AzureSqlDatabase and
AzureSqlFailoverGroup custom resources. They are plain value containers: no
validation happens here, so a DatabaseProperties may carry an edition that is
not a DBEdition member at all. Resolving such values is the translator's job.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class DBEdition(IntEnum):
    """Database edition as stored on the custom resource (ordinal wire form)."""

    BASIC = 0
    BUSINESS = 1
    BUSINESS_CRITICAL = 2
    DATA_WAREHOUSE = 3
    FREE = 4
    GENERAL_PURPOSE = 5
    HYPERSCALE = 6
    PREMIUM = 7
    PREMIUM_RS = 8
    STANDARD = 9
    STRETCH = 10
    SYSTEM = 11
    SYSTEM2 = 12
    WEB = 13


class FailoverPolicy(str, Enum):
    """Read-write endpoint failover policy as stored on the custom resource."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


@dataclass(frozen=True)
class ServerProperties:
    """Values needed for adding or updating a SQL server."""

    administrator_login: Optional[str] = None
    """Administrator username. Cannot be changed once the server exists."""

    administrator_login_password: Optional[str] = None
    """Administrator password (required by Azure for server creation)."""


@dataclass(frozen=True)
class DatabaseProperties:
    """Values needed for adding or updating a SQL database."""

    database_name: str = ""

    edition: Any = DBEdition.FREE
    """
    Normally a DBEdition member or its ordinal. Anything else is accepted and
    resolved to the default edition during translation.
    """


@dataclass(frozen=True)
class FailoverGroupProperties:
    """Values needed for adding or updating a SQL failover group."""

    failover_policy: Any = FailoverPolicy.AUTOMATIC
    failover_grace_period: int = 0
    """Read/write grace period in minutes."""

    secondary_server: str = ""
    """Secondary server to fail over to (should be in a different region)."""

    secondary_server_resource_group: str = ""

    database_list: List[str] = field(default_factory=list)
    """Databases to add to the group, in caller order."""


@dataclass(frozen=True)
class CustomResource:
    """A single custom-resource document as read from a manifest."""

    kind: str
    name: str
    spec: Dict[str, Any] = field(default_factory=dict)
    api_version: str = ""
    namespace: Optional[str] = None
