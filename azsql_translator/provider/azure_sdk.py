"""
Adapter from provider structures to ``azure-mgmt-sql`` model objects.

This is the only module that imports the Azure SDK. Everything upstream works
with the structures in ``azsql_translator.provider.schema``, so tests and
callers that do not talk to Azure never need the SDK models.
"""

import logging
from typing import Dict, Optional

from azure.mgmt.sql.models import (
    Database,
    FailoverGroup,
    FailoverGroupReadWriteEndpoint,
    PartnerInfo,
    ReadWriteEndpointFailoverPolicy,
    Server,
    Sku,
)

from ..exceptions import InvalidPropertiesError
from .schema import (
    ProviderDatabaseEdition,
    ProviderDatabaseProperties,
    ProviderFailoverGroupProperties,
    ProviderFailoverPolicy,
    ProviderServerProperties,
)

logger = logging.getLogger(__name__)

_SDK_FAILOVER_POLICIES = {
    ProviderFailoverPolicy.AUTOMATIC: ReadWriteEndpointFailoverPolicy.AUTOMATIC,
    ProviderFailoverPolicy.MANUAL: ReadWriteEndpointFailoverPolicy.MANUAL,
}

_TIER_NAMED_SKUS = {
    ProviderDatabaseEdition.BASIC,
    ProviderDatabaseEdition.STANDARD,
    ProviderDatabaseEdition.PREMIUM,
    ProviderDatabaseEdition.FREE,
}


def to_sdk_server(
    properties: ProviderServerProperties,
    location: str,
    tags: Optional[Dict[str, str]] = None,
) -> Server:
    return Server(
        location=location,
        tags=tags,
        administrator_login=properties.administrator_login,
        administrator_login_password=properties.administrator_login_password,
    )


def to_sdk_database(
    properties: ProviderDatabaseProperties,
    location: str,
    sku_name: Optional[str] = None,
    tags: Optional[Dict[str, str]] = None,
) -> Database:
    """
    Build a Database model.

    Current API versions express the edition as the SKU tier. The SKU name is
    the service objective (e.g. ``S0`` or ``GP_Gen5_2``) and comes from the
    caller. Only the DTU tiers whose tier name is also a valid SKU name
    (Basic, Standard, Premium, Free) default it to the edition.

    Raises:
        InvalidPropertiesError: If ``sku_name`` is omitted for any other tier
    """
    edition = properties.edition
    if sku_name is None:
        if edition not in _TIER_NAMED_SKUS:
            raise InvalidPropertiesError(
                f"A SKU name is required for the {edition.value} tier",
                field_name="sku_name",
                recovery_suggestion="Pass a service objective such as GP_Gen5_2",
            )
        sku_name = edition.value
    logger.debug(f"Database SKU {sku_name} in tier {edition.value}")
    return Database(
        location=location,
        tags=tags,
        sku=Sku(name=sku_name, tier=edition.value),
    )


def to_sdk_failover_group(
    properties: ProviderFailoverGroupProperties,
    tags: Optional[Dict[str, str]] = None,
) -> FailoverGroup:
    endpoint = properties.read_write_endpoint
    return FailoverGroup(
        tags=tags,
        read_write_endpoint=FailoverGroupReadWriteEndpoint(
            failover_policy=_SDK_FAILOVER_POLICIES[endpoint.failover_policy],
            failover_with_data_loss_grace_period_minutes=(
                endpoint.failover_with_data_loss_grace_period_minutes
            ),
        ),
        partner_servers=[PartnerInfo(id=p.id) for p in properties.partner_servers],
        databases=list(properties.databases),
    )
