"""
Translators for the Azure SQL custom-resource kinds.

Each translator reads the resource spec into the local property container,
optionally validates it (strict mode) and hands it to the property
translation functions.
"""

import logging

from .. import validation
from ..exceptions import ConfigError
from ..manifest import (
    KIND_SQL_DATABASE,
    KIND_SQL_FAILOVER_GROUP,
    KIND_SQL_SERVER,
    to_database_properties,
    to_failover_group_properties,
    to_server_properties,
)
from ..models.custom_resources import CustomResource
from .base_translator import BaseTranslator, TranslatedResource
from .failover_group import translate_failover_group_properties
from .registry import register_translator
from .sql_properties import (
    resolve_edition,
    resolve_failover_policy,
    translate_database_properties,
    translate_server_properties,
)

logger = logging.getLogger(__name__)


@register_translator
class SqlServerTranslator(BaseTranslator):
    """Translates AzureSqlServer resources to server properties."""

    supported_kinds = [KIND_SQL_SERVER]

    def translate(self, resource: CustomResource) -> TranslatedResource:
        properties = to_server_properties(resource.spec)
        translated = translate_server_properties(properties)

        warnings = []
        has_login = properties.administrator_login is not None
        has_password = properties.administrator_login_password is not None
        if has_login != has_password:
            warnings.append(
                "Only one of administratorLogin / administratorLoginPassword is set"
            )

        # The password is never recorded in results
        self._add_result(
            "spec.administratorLogin",
            properties.administrator_login,
            translated.administrator_login,
            warnings,
            resource,
        )

        return TranslatedResource(resource.kind, resource.name, translated)


@register_translator
class SqlDatabaseTranslator(BaseTranslator):
    """Translates AzureSqlDatabase resources to database properties."""

    supported_kinds = [KIND_SQL_DATABASE]

    def translate(self, resource: CustomResource) -> TranslatedResource:
        properties = to_database_properties(resource.spec, default_name=resource.name)
        if self.context.strict_mode:
            validation.validate_database_properties(properties)

        translated = translate_database_properties(properties)

        warnings = []
        if resolve_edition(properties.edition) is None:
            warnings.append(
                f"Unknown edition {properties.edition!r} defaulted to "
                f"{translated.edition.value}"
            )
            logger.warning(f"{resource.kind}/{resource.name}: {warnings[-1]}")

        self._add_result(
            "spec.edition",
            properties.edition,
            translated.edition.value,
            warnings,
            resource,
        )

        return TranslatedResource(resource.kind, resource.name, translated)


@register_translator
class SqlFailoverGroupTranslator(BaseTranslator):
    """Translates AzureSqlFailoverGroup resources to failover group properties."""

    supported_kinds = [KIND_SQL_FAILOVER_GROUP]

    def translate(self, resource: CustomResource) -> TranslatedResource:
        if not self.context.subscription_id:
            raise ConfigError(
                f"A subscription ID is required to translate {resource.kind} "
                f"'{resource.name}'",
                recovery_suggestion="Pass --subscription-id or set AZSQL_SUBSCRIPTION_ID",
            )

        properties = to_failover_group_properties(resource.spec)
        resource_group = resource.spec.get("resourcegroup", "")
        server = resource.spec.get("server", "")
        if self.context.strict_mode:
            validation.validate_primary_server(resource_group, server)
            validation.validate_failover_group_properties(properties)

        translated = translate_failover_group_properties(
            properties,
            subscription_id=self.context.subscription_id,
            resource_group=resource_group,
            server=server,
        )

        policy = translated.read_write_endpoint.failover_policy
        warnings = []
        if resolve_failover_policy(properties.failover_policy) is None:
            warnings.append(
                f"Unknown failover policy {properties.failover_policy!r} "
                f"defaulted to {policy.value}"
            )
            logger.warning(f"{resource.kind}/{resource.name}: {warnings[-1]}")

        self._add_result(
            "spec.failoverpolicy",
            properties.failover_policy,
            policy.value,
            warnings,
            resource,
        )
        self._add_result(
            "spec.databaselist",
            properties.database_list,
            translated.databases,
            resource=resource,
        )

        return TranslatedResource(resource.kind, resource.name, translated)
