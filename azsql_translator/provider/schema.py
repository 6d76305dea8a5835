"""
Provider-side structures for the Azure SQL management API.

These shapes are dictated by the Microsoft.Sql resource provider, not by this
package. They are kept as small value types with ``to_dict()`` returning the
ARM JSON field names, so callers can hand them either to the SDK adapter
(``azsql_translator.provider.azure_sdk``) or straight to a REST/ARM payload.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

SQL_PROVIDER_NAMESPACE = "Microsoft.Sql"


class ProviderDatabaseEdition(str, Enum):
    """Database edition constants accepted by the API."""

    WEB = "Web"
    BUSINESS = "Business"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    PREMIUM_RS = "PremiumRS"
    FREE = "Free"
    STRETCH = "Stretch"
    DATA_WAREHOUSE = "DataWarehouse"
    SYSTEM = "System"
    SYSTEM2 = "System2"
    GENERAL_PURPOSE = "GeneralPurpose"
    BUSINESS_CRITICAL = "BusinessCritical"
    HYPERSCALE = "Hyperscale"


class ProviderFailoverPolicy(str, Enum):
    """Read-write endpoint failover policy constants accepted by the API."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


@dataclass(frozen=True)
class ProviderServerProperties:
    administrator_login: Optional[str] = None
    administrator_login_password: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "administratorLogin": self.administrator_login,
            "administratorLoginPassword": self.administrator_login_password,
        }


@dataclass(frozen=True)
class ProviderDatabaseProperties:
    edition: ProviderDatabaseEdition = ProviderDatabaseEdition.FREE

    def to_dict(self) -> Dict[str, Any]:
        return {"edition": self.edition.value}


@dataclass(frozen=True)
class ProviderReadWriteEndpoint:
    failover_policy: ProviderFailoverPolicy = ProviderFailoverPolicy.AUTOMATIC
    failover_with_data_loss_grace_period_minutes: Optional[int] = None
    """Only meaningful (and only accepted by the API) for Automatic failover."""

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"failoverPolicy": self.failover_policy.value}
        if self.failover_with_data_loss_grace_period_minutes is not None:
            result["failoverWithDataLossGracePeriodMinutes"] = (
                self.failover_with_data_loss_grace_period_minutes
            )
        return result


@dataclass(frozen=True)
class ProviderPartnerInfo:
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass(frozen=True)
class ProviderFailoverGroupProperties:
    read_write_endpoint: ProviderReadWriteEndpoint
    partner_servers: List[ProviderPartnerInfo] = field(default_factory=list)
    databases: List[str] = field(default_factory=list)
    """Database resource IDs, in group membership order."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "readWriteEndpoint": self.read_write_endpoint.to_dict(),
            "partnerServers": [p.to_dict() for p in self.partner_servers],
            "databases": list(self.databases),
        }


def sql_server_id(subscription_id: str, resource_group: str, server: str) -> str:
    """Build the resource ID of a SQL server."""
    return (
        f"/subscriptions/{subscription_id}/resourceGroups/{resource_group}"
        f"/providers/{SQL_PROVIDER_NAMESPACE}/servers/{server}"
    )


def sql_database_id(
    subscription_id: str, resource_group: str, server: str, database: str
) -> str:
    """Build the resource ID of a database (child resource of its server)."""
    return f"{sql_server_id(subscription_id, resource_group, server)}/databases/{database}"
