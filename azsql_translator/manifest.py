"""
Custom-resource manifest loading.

Reads AzureSqlServer, AzureSqlDatabase and AzureSqlFailoverGroup documents from
YAML and turns their ``spec`` blocks into the local property containers. Spec
keys use the JSON names of the custom resource definitions (``resourcegroup``,
``failoverpolicy``, ``databaselist`` ...).

Enum values are copied as found. Whether an edition or failover policy is
known is decided later, by the translator (default) or by strict validation.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .exceptions import ManifestError
from .models.custom_resources import (
    CustomResource,
    DatabaseProperties,
    DBEdition,
    FailoverGroupProperties,
    FailoverPolicy,
    ServerProperties,
)

logger = logging.getLogger(__name__)

KIND_SQL_SERVER = "AzureSqlServer"
KIND_SQL_DATABASE = "AzureSqlDatabase"
KIND_SQL_FAILOVER_GROUP = "AzureSqlFailoverGroup"


def load_manifests(text: str, source: Optional[str] = None) -> List[CustomResource]:
    """
    Parse every YAML document in ``text`` into a CustomResource.

    Empty documents (e.g. a trailing ``---``) are skipped.

    Raises:
        ManifestError: If the YAML is malformed, a document is not a mapping,
            a document has no ``kind``, or a failover group ``databaselist``
            is not a list of names
    """
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as e:
        raise ManifestError(
            f"Invalid YAML in manifest: {e}", source=source, cause=e
        ) from e

    resources: List[CustomResource] = []
    for index, document in enumerate(documents):
        if document is None:
            continue
        resources.append(_parse_document(document, index, source))

    logger.info(f"Loaded {len(resources)} custom resources from {source or 'text'}")
    return resources


def load_manifest_file(path: Union[str, Path]) -> List[CustomResource]:
    """Read and parse a manifest file."""
    manifest_path = Path(path)
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(
            f"Cannot read manifest file: {e}", source=str(manifest_path), cause=e
        ) from e
    return load_manifests(text, source=str(manifest_path))


def _parse_document(
    document: Any, index: int, source: Optional[str]
) -> CustomResource:
    if not isinstance(document, dict):
        raise ManifestError(
            f"Manifest document must be a mapping, got {type(document).__name__}",
            source=source,
            document_index=index,
        )

    kind = document.get("kind")
    if not kind or not isinstance(kind, str):
        raise ManifestError(
            "Manifest document has no 'kind'", source=source, document_index=index
        )

    metadata = document.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise ManifestError(
            "Manifest 'metadata' must be a mapping",
            source=source,
            document_index=index,
        )

    spec = document.get("spec") or {}
    if not isinstance(spec, dict):
        raise ManifestError(
            "Manifest 'spec' must be a mapping", source=source, document_index=index
        )
    if kind == KIND_SQL_FAILOVER_GROUP:
        _database_list(spec, source=source, document_index=index)

    return CustomResource(
        kind=kind,
        name=str(metadata.get("name", "")),
        spec=dict(spec),
        api_version=str(document.get("apiVersion", "")),
        namespace=metadata.get("namespace"),
    )


def to_server_properties(spec: Dict[str, Any]) -> ServerProperties:
    return ServerProperties(
        administrator_login=spec.get("administratorLogin"),
        administrator_login_password=spec.get("administratorLoginPassword"),
    )


def to_database_properties(
    spec: Dict[str, Any], default_name: str = ""
) -> DatabaseProperties:
    """Build DatabaseProperties; ``dbName`` falls back to the resource name."""
    return DatabaseProperties(
        database_name=spec.get("dbName") or default_name,
        edition=spec.get("edition", DBEdition.FREE),
    )


def to_failover_group_properties(spec: Dict[str, Any]) -> FailoverGroupProperties:
    return FailoverGroupProperties(
        failover_policy=spec.get("failoverpolicy", FailoverPolicy.AUTOMATIC),
        failover_grace_period=spec.get("failovergraceperiod", 0),
        secondary_server=spec.get("secondaryserver", ""),
        secondary_server_resource_group=spec.get("secondaryserverresourcegroup", ""),
        database_list=_database_list(spec),
    )


def _database_list(
    spec: Dict[str, Any],
    source: Optional[str] = None,
    document_index: Optional[int] = None,
) -> List[str]:
    """
    Return ``databaselist`` as a list of names; absent or null means empty.

    Raises:
        ManifestError: If the value is not a list of strings
    """
    value = spec.get("databaselist")
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(name, str) for name in value):
        raise ManifestError(
            f"'databaselist' must be a list of database names, got {value!r}",
            source=source,
            document_index=document_index,
        )
    return list(value)
