"""Translators from Azure SQL custom resources to provider structures."""

from .sql_properties import (
    DEFAULT_EDITION,
    DEFAULT_FAILOVER_POLICY,
    EDITION_TABLE,
    FAILOVER_POLICY_TABLE,
    resolve_edition,
    resolve_failover_policy,
    translate_database_properties,
    translate_edition,
    translate_failover_policy,
    translate_server_properties,
)
from .failover_group import (
    translate_failover_group_properties,
)
from .base_translator import (
    BaseTranslator,
    TranslatedResource,
    TranslationContext,
    TranslationResult,
)
from .registry import (
    TranslatorRegistry,
    register_translator,
)
from .kind_translators import (
    SqlDatabaseTranslator,
    SqlFailoverGroupTranslator,
    SqlServerTranslator,
)
from .coordinator import (
    TranslationCoordinator,
)

__all__ = [
    "DEFAULT_EDITION",
    "DEFAULT_FAILOVER_POLICY",
    "EDITION_TABLE",
    "FAILOVER_POLICY_TABLE",
    "BaseTranslator",
    "SqlDatabaseTranslator",
    "SqlFailoverGroupTranslator",
    "SqlServerTranslator",
    "TranslatedResource",
    "TranslationContext",
    "TranslationCoordinator",
    "TranslationResult",
    "TranslatorRegistry",
    "register_translator",
    "resolve_edition",
    "resolve_failover_policy",
    "translate_database_properties",
    "translate_edition",
    "translate_failover_group_properties",
    "translate_failover_policy",
    "translate_server_properties",
]
