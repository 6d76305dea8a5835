"""Local (custom-resource side) models."""

from .custom_resources import (
    CustomResource,
    DatabaseProperties,
    DBEdition,
    FailoverGroupProperties,
    FailoverPolicy,
    ServerProperties,
)

__all__ = [
    "CustomResource",
    "DBEdition",
    "DatabaseProperties",
    "FailoverGroupProperties",
    "FailoverPolicy",
    "ServerProperties",
]
