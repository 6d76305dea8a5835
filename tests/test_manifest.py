"""
Unit tests for custom-resource manifest loading.

Tests:
- Multi-document YAML parsing
- Error handling for malformed documents
- Conversion of spec blocks to property containers
"""

import pytest

from azsql_translator.exceptions import ManifestError
from azsql_translator.manifest import (
    load_manifest_file,
    load_manifests,
    to_database_properties,
    to_failover_group_properties,
    to_server_properties,
)
from azsql_translator.models import DBEdition, FailoverPolicy


class TestLoadManifests:
    """Test cases for load_manifests and load_manifest_file."""

    def test_load_fixture_file(self, manifest_path):
        resources = load_manifest_file(manifest_path)

        assert [r.kind for r in resources] == [
            "AzureSqlServer",
            "AzureSqlDatabase",
            "AzureSqlDatabase",
            "AzureSqlFailoverGroup",
            "AzureSqlFirewallRule",
        ]
        server = resources[0]
        assert server.name == "sqlserver-east"
        assert server.namespace == "data"
        assert server.api_version == "azure.microsoft.com/v1alpha1"
        assert server.spec["resourcegroup"] == "rg-east"

    def test_empty_documents_are_skipped(self):
        text = "---\nkind: AzureSqlServer\nmetadata:\n  name: s1\n---\n---\n"
        resources = load_manifests(text)

        assert len(resources) == 1
        assert resources[0].spec == {}

    def test_empty_text(self):
        assert load_manifests("") == []

    def test_invalid_yaml(self):
        with pytest.raises(ManifestError, match="Invalid YAML"):
            load_manifests("kind: [unclosed", source="broken.yaml")

    def test_document_must_be_mapping(self):
        with pytest.raises(ManifestError) as exc_info:
            load_manifests("- just\n- a list\n")

        assert exc_info.value.context["document_index"] == 0
        assert exc_info.value.error_code == "MANIFEST_ERROR"

    def test_document_without_kind(self):
        with pytest.raises(ManifestError, match="no 'kind'"):
            load_manifests("metadata:\n  name: x\n")

    def test_spec_must_be_mapping(self):
        with pytest.raises(ManifestError, match="'spec' must be a mapping"):
            load_manifests("kind: AzureSqlServer\nspec: [1, 2]\n")

    @pytest.mark.parametrize(
        "value", ["orders", "5", "[orders, 5]", "{name: orders}"]
    )
    def test_malformed_database_list_rejected(self, value):
        text = (
            "kind: AzureSqlServer\n"
            "metadata:\n  name: s1\n"
            "---\n"
            "kind: AzureSqlFailoverGroup\n"
            "metadata:\n  name: fog1\n"
            f"spec:\n  server: s1\n  databaselist: {value}\n"
        )

        with pytest.raises(ManifestError, match="databaselist") as exc_info:
            load_manifests(text, source="fog.yaml")

        assert exc_info.value.context == {"source": "fog.yaml", "document_index": 1}

    def test_database_list_only_checked_for_failover_groups(self):
        resources = load_manifests(
            "kind: AzureSqlServer\nspec:\n  databaselist: orders\n"
        )

        assert resources[0].spec["databaselist"] == "orders"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError, match="Cannot read manifest file"):
            load_manifest_file(tmp_path / "missing.yaml")


class TestSpecConversion:
    """Test cases for the spec -> properties helpers."""

    def test_server_properties(self):
        properties = to_server_properties(
            {"administratorLogin": "sqladmin", "administratorLoginPassword": "pw"}
        )

        assert properties.administrator_login == "sqladmin"
        assert properties.administrator_login_password == "pw"

    def test_server_properties_absent(self):
        properties = to_server_properties({})

        assert properties.administrator_login is None
        assert properties.administrator_login_password is None

    def test_database_name_prefers_db_name(self):
        properties = to_database_properties(
            {"dbName": "orders-db", "edition": 7}, default_name="orders"
        )

        assert properties.database_name == "orders-db"
        assert properties.edition == 7

    def test_database_name_falls_back_to_resource_name(self):
        properties = to_database_properties({}, default_name="orders")

        assert properties.database_name == "orders"
        assert properties.edition is DBEdition.FREE

    def test_unknown_edition_is_kept_as_is(self):
        assert to_database_properties({"edition": "Mystery"}).edition == "Mystery"

    def test_failover_group_properties(self):
        properties = to_failover_group_properties(
            {
                "failoverpolicy": "Manual",
                "failovergraceperiod": 15,
                "secondaryserver": "s2",
                "secondaryserverresourcegroup": "rg2",
                "databaselist": ["a", "b"],
            }
        )

        assert properties.failover_policy == "Manual"
        assert properties.failover_grace_period == 15
        assert properties.secondary_server == "s2"
        assert properties.secondary_server_resource_group == "rg2"
        assert properties.database_list == ["a", "b"]

    def test_failover_group_defaults(self):
        properties = to_failover_group_properties({})

        assert properties.failover_policy is FailoverPolicy.AUTOMATIC
        assert properties.failover_grace_period == 0
        assert properties.database_list == []

    def test_null_database_list_is_empty(self):
        assert to_failover_group_properties({"databaselist": None}).database_list == []

    @pytest.mark.parametrize("value", ["orders", 5, ["orders", 5]])
    def test_malformed_database_list_raises(self, value):
        with pytest.raises(ManifestError, match="must be a list of database names"):
            to_failover_group_properties({"databaselist": value})
