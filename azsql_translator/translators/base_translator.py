"""
Base translator class for custom-resource translation.

Each custom-resource kind (AzureSqlServer, AzureSqlDatabase,
AzureSqlFailoverGroup) has a translator that turns the resource's spec into
the provider structure for that kind. Translators register themselves with
``@register_translator`` and are driven by the TranslationCoordinator.

Usage:
    from azsql_translator.translators import BaseTranslator, register_translator

    @register_translator
    class MyTranslator(BaseTranslator):
        supported_kinds = ["AzureSqlSomething"]

        def translate(self, resource):
            return TranslatedResource(resource.kind, resource.name, ...)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.custom_resources import CustomResource

logger = logging.getLogger(__name__)


@dataclass
class TranslationContext:
    """Context passed to translators during initialization."""

    subscription_id: Optional[str] = None
    """Subscription used to build resource IDs (failover groups)"""

    strict_mode: bool = False
    """If True, unknown enum values raise. If False, they default with a warning."""


@dataclass
class TranslationResult:
    """Result of translating a single property of a resource."""

    property_path: str
    """Path to the property that was translated (e.g., 'spec.edition')"""

    original_value: Any
    translated_value: Any

    was_modified: bool
    """Whether the value was actually changed"""

    warnings: List[str] = field(default_factory=list)

    resource_kind: str = ""
    resource_name: str = ""


@dataclass
class TranslatedResource:
    """A custom resource together with its provider-side properties."""

    kind: str
    name: str
    properties: Any
    """Provider structure with a ``to_dict()`` method"""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "name": self.name,
            "properties": self.properties.to_dict(),
        }


class BaseTranslator(ABC):
    """
    Abstract base class for all custom-resource translators.

    Each translator:

    1. Declares which kinds it handles (supported_kinds)
    2. Determines if a resource is one of them (can_translate)
    3. Performs the translation (translate)
    4. Tracks results for reporting (get_translation_results)
    """

    supported_kinds: List[str] = []

    def __init__(self, context: TranslationContext):
        """
        Initialize translator with context.

        Args:
            context: Translation context shared by all translators
        """
        self.context = context
        self._results: List[TranslationResult] = []

    def can_translate(self, resource: CustomResource) -> bool:
        return resource.kind in self.supported_kinds

    @abstractmethod
    def translate(self, resource: CustomResource) -> TranslatedResource:
        """
        Translate a custom resource to its provider structure.

        Note:
            - Must not modify ``resource``
            - Track results using _add_result()
        """
        pass

    def get_translation_results(self) -> List[TranslationResult]:
        return self._results.copy()

    def get_report(self) -> Dict[str, Any]:
        """
        Generate a report of this translator's activity.

        Returns:
            Dictionary with translator statistics
        """
        return {
            "translator": self.__class__.__name__,
            "properties_processed": len(self._results),
            "translations_performed": sum(1 for r in self._results if r.was_modified),
            "warnings": sum(len(r.warnings) for r in self._results),
            "results": [
                {
                    "property": r.property_path,
                    "resource_kind": r.resource_kind,
                    "resource_name": r.resource_name,
                    "original": str(r.original_value)[:100],
                    "translated": str(r.translated_value)[:100],
                    "warnings": r.warnings,
                }
                for r in self._results
                if r.warnings
            ][:10],  # Limit to 10 samples
        }

    def _add_result(
        self,
        property_path: str,
        original: Any,
        translated: Any,
        warnings: Optional[List[str]] = None,
        resource: Optional[CustomResource] = None,
    ) -> None:
        result = TranslationResult(
            property_path=property_path,
            original_value=original,
            translated_value=translated,
            was_modified=(original != translated),
            warnings=warnings or [],
            resource_kind=resource.kind if resource else "",
            resource_name=resource.name if resource else "",
        )
        self._results.append(result)
