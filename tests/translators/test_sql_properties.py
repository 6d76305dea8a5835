"""
Unit tests for the property translation functions.

Covers:
- The full edition table and the Free fallback
- Failover policy translation and the Automatic fallback
- Server properties pass-through
- Database properties translation
"""

import pytest

from azsql_translator.models import (
    DatabaseProperties,
    DBEdition,
    FailoverPolicy,
    ServerProperties,
)
from azsql_translator.provider import (
    ProviderDatabaseEdition,
    ProviderDatabaseProperties,
    ProviderFailoverPolicy,
    ProviderServerProperties,
)
from azsql_translator.translators import (
    DEFAULT_EDITION,
    DEFAULT_FAILOVER_POLICY,
    EDITION_TABLE,
    resolve_edition,
    translate_database_properties,
    translate_edition,
    translate_failover_policy,
    translate_server_properties,
)

EXPECTED_EDITIONS = [
    (0, ProviderDatabaseEdition.BASIC),
    (1, ProviderDatabaseEdition.BUSINESS),
    (2, ProviderDatabaseEdition.BUSINESS_CRITICAL),
    (3, ProviderDatabaseEdition.DATA_WAREHOUSE),
    (4, ProviderDatabaseEdition.FREE),
    (5, ProviderDatabaseEdition.GENERAL_PURPOSE),
    (6, ProviderDatabaseEdition.HYPERSCALE),
    (7, ProviderDatabaseEdition.PREMIUM),
    (8, ProviderDatabaseEdition.PREMIUM_RS),
    (9, ProviderDatabaseEdition.STANDARD),
    (10, ProviderDatabaseEdition.STRETCH),
    (11, ProviderDatabaseEdition.SYSTEM),
    (12, ProviderDatabaseEdition.SYSTEM2),
    (13, ProviderDatabaseEdition.WEB),
]


class TestTranslateEdition:
    """Test cases for translate_edition."""

    @pytest.mark.parametrize("ordinal,expected", EXPECTED_EDITIONS)
    def test_known_ordinals(self, ordinal, expected):
        assert translate_edition(ordinal) is expected

    @pytest.mark.parametrize("ordinal,expected", EXPECTED_EDITIONS)
    def test_enum_members(self, ordinal, expected):
        assert translate_edition(DBEdition(ordinal)) is expected

    def test_table_covers_every_edition(self):
        assert set(EDITION_TABLE) == set(DBEdition)
        assert len(set(EDITION_TABLE.values())) == len(DBEdition)

    @pytest.mark.parametrize("ordinal", [-1, 14, 1000])
    def test_out_of_range_ordinals_default_to_free(self, ordinal):
        assert translate_edition(ordinal) is ProviderDatabaseEdition.FREE

    @pytest.mark.parametrize("value", [None, "Enterprise", 3.5, [], True])
    def test_other_values_default_to_free(self, value):
        assert translate_edition(value) is DEFAULT_EDITION
        assert DEFAULT_EDITION is ProviderDatabaseEdition.FREE

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("GeneralPurpose", ProviderDatabaseEdition.GENERAL_PURPOSE),
            ("GENERAL_PURPOSE", ProviderDatabaseEdition.GENERAL_PURPOSE),
            ("premiumrs", ProviderDatabaseEdition.PREMIUM_RS),
            ("System2", ProviderDatabaseEdition.SYSTEM2),
            (" Hyperscale ", ProviderDatabaseEdition.HYPERSCALE),
        ],
    )
    def test_edition_names(self, name, expected):
        assert translate_edition(name) is expected

    def test_bool_is_not_an_ordinal(self):
        assert resolve_edition(True) is None
        assert resolve_edition(1) is DBEdition.BUSINESS

    def test_repeated_calls_are_identical(self):
        results = {translate_edition(DBEdition.PREMIUM) for _ in range(5)}
        assert results == {ProviderDatabaseEdition.PREMIUM}


class TestTranslateFailoverPolicy:
    """Test cases for translate_failover_policy."""

    def test_automatic(self):
        assert (
            translate_failover_policy(FailoverPolicy.AUTOMATIC)
            is ProviderFailoverPolicy.AUTOMATIC
        )

    def test_manual(self):
        assert (
            translate_failover_policy(FailoverPolicy.MANUAL)
            is ProviderFailoverPolicy.MANUAL
        )

    def test_plain_strings(self):
        assert translate_failover_policy("Manual") is ProviderFailoverPolicy.MANUAL
        assert translate_failover_policy("Automatic") is ProviderFailoverPolicy.AUTOMATIC

    @pytest.mark.parametrize("value", ["", "manual", "Sometimes", None, 0, ["Manual"]])
    def test_unknown_values_default_to_automatic(self, value):
        assert translate_failover_policy(value) is DEFAULT_FAILOVER_POLICY
        assert DEFAULT_FAILOVER_POLICY is ProviderFailoverPolicy.AUTOMATIC


class TestTranslateServerProperties:
    """Test cases for translate_server_properties."""

    @pytest.mark.parametrize(
        "login,password",
        [
            ("sqladmin", "P@ssw0rd!"),
            ("sqladmin", None),
            (None, "P@ssw0rd!"),
            (None, None),
            ("", ""),
        ],
    )
    def test_fields_pass_through_unchanged(self, login, password):
        properties = ServerProperties(
            administrator_login=login, administrator_login_password=password
        )

        result = translate_server_properties(properties)

        assert isinstance(result, ProviderServerProperties)
        assert result.administrator_login == login
        assert result.administrator_login_password == password

    def test_defaults_are_absent(self):
        result = translate_server_properties(ServerProperties())
        assert result == ProviderServerProperties(None, None)
        assert result.to_dict() == {
            "administratorLogin": None,
            "administratorLoginPassword": None,
        }

    def test_input_is_not_modified(self):
        properties = ServerProperties("sqladmin", "secret")
        translate_server_properties(properties)
        assert properties == ServerProperties("sqladmin", "secret")


class TestTranslateDatabaseProperties:
    """Test cases for translate_database_properties."""

    @pytest.mark.parametrize("name", ["db1", "", "orders-prod"])
    def test_general_purpose_regardless_of_name(self, name):
        result = translate_database_properties(
            DatabaseProperties(database_name=name, edition=5)
        )
        assert result == ProviderDatabaseProperties(
            edition=ProviderDatabaseEdition.GENERAL_PURPOSE
        )

    def test_unknown_edition_defaults_to_free(self):
        result = translate_database_properties(
            DatabaseProperties(database_name="db1", edition=42)
        )
        assert result.edition is ProviderDatabaseEdition.FREE
        assert result.to_dict() == {"edition": "Free"}

    def test_default_container(self):
        result = translate_database_properties(DatabaseProperties())
        assert result.edition is ProviderDatabaseEdition.FREE

    def test_repeated_calls_are_identical(self):
        properties = DatabaseProperties(database_name="db1", edition=DBEdition.HYPERSCALE)
        assert translate_database_properties(properties) == translate_database_properties(
            properties
        )
