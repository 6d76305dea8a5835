"""
Failover group translation.

Builds the API failover group body from FailoverGroupProperties. The secondary
server becomes the single partner server and every database name becomes the
resource ID of that database on the primary server, in list order.
"""

import logging

from ..models.custom_resources import FailoverGroupProperties
from ..provider.schema import (
    ProviderFailoverGroupProperties,
    ProviderFailoverPolicy,
    ProviderPartnerInfo,
    ProviderReadWriteEndpoint,
    sql_database_id,
    sql_server_id,
)
from .sql_properties import translate_failover_policy

logger = logging.getLogger(__name__)


def translate_failover_group_properties(
    properties: FailoverGroupProperties,
    subscription_id: str,
    resource_group: str,
    server: str,
) -> ProviderFailoverGroupProperties:
    """
    Translate failover group properties for a group hosted on ``server``.

    Args:
        properties: Local failover group properties
        subscription_id: Subscription holding both servers
        resource_group: Resource group of the primary server
        server: Name of the primary server

    Returns:
        ProviderFailoverGroupProperties. The grace period is only set for
        Automatic failover; the API rejects it for Manual.
    """
    policy = translate_failover_policy(properties.failover_policy)
    grace_period = (
        properties.failover_grace_period
        if policy is ProviderFailoverPolicy.AUTOMATIC
        else None
    )

    partner = ProviderPartnerInfo(
        id=sql_server_id(
            subscription_id,
            properties.secondary_server_resource_group,
            properties.secondary_server,
        )
    )
    databases = [
        sql_database_id(subscription_id, resource_group, server, name)
        for name in properties.database_list
    ]

    logger.debug(
        f"Failover group on {server}: policy={policy.value}, "
        f"partner={properties.secondary_server}, databases={len(databases)}"
    )

    return ProviderFailoverGroupProperties(
        read_write_endpoint=ProviderReadWriteEndpoint(
            failover_policy=policy,
            failover_with_data_loss_grace_period_minutes=grace_period,
        ),
        partner_servers=[partner],
        databases=databases,
    )
