"""Provider (Azure SQL API) side of the translation."""

from .schema import (
    ProviderDatabaseEdition,
    ProviderDatabaseProperties,
    ProviderFailoverGroupProperties,
    ProviderFailoverPolicy,
    ProviderPartnerInfo,
    ProviderReadWriteEndpoint,
    ProviderServerProperties,
    sql_database_id,
    sql_server_id,
)

__all__ = [
    "ProviderDatabaseEdition",
    "ProviderDatabaseProperties",
    "ProviderFailoverGroupProperties",
    "ProviderFailoverPolicy",
    "ProviderPartnerInfo",
    "ProviderReadWriteEndpoint",
    "ProviderServerProperties",
    "sql_database_id",
    "sql_server_id",
]
