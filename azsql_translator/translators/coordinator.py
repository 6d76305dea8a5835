"""
Coordinator for translating a set of custom resources.

The TranslationCoordinator:
1. Instantiates all registered translators with a shared context
2. Applies the translator registered for each resource kind
3. Collects results and statistics
4. Formats a report

Usage:
    from azsql_translator.translators import TranslationContext, TranslationCoordinator

    coordinator = TranslationCoordinator(TranslationContext(subscription_id=sub))
    translated = coordinator.translate_resources(resources)
    print(coordinator.format_translation_report())
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import AzureSqlTranslatorError
from ..models.custom_resources import CustomResource
from .base_translator import BaseTranslator, TranslatedResource, TranslationContext
from .registry import TranslatorRegistry

logger = logging.getLogger(__name__)


class TranslationCoordinator:
    """
    Applies registered translators to custom resources in a single pass.

    Resources of unknown kinds are skipped with a warning. Translation
    errors are logged and counted; in strict mode they propagate instead.
    """

    def __init__(self, context: TranslationContext):
        self.context = context
        self.translators: List[BaseTranslator] = TranslatorRegistry.create_translators(
            context
        )
        self._resources_processed = 0
        self._resources_translated = 0
        self._resources_skipped = 0
        self._total_errors = 0
        self._errors: List[Dict[str, Any]] = []

        if not self.translators:
            logger.warning("No translators available, translation will be skipped")
        else:
            logger.debug(
                f"Registered translators: "
                f"{', '.join(TranslatorRegistry.get_registered_translators())}"
            )

    def _find_translator(self, resource: CustomResource) -> Optional[BaseTranslator]:
        """Return the instance of the class registered for the resource kind."""
        translator_class = TranslatorRegistry.get_translator(resource.kind)
        if translator_class is None:
            return None
        for translator in self.translators:
            if type(translator) is translator_class and translator.can_translate(
                resource
            ):
                return translator
        return None

    def translate_resource(
        self, resource: CustomResource
    ) -> Optional[TranslatedResource]:
        """
        Translate a single resource.

        Returns:
            TranslatedResource, or None when the resource was skipped or failed
            outside strict mode

        Raises:
            AzureSqlTranslatorError: In strict mode, when translation fails
        """
        self._resources_processed += 1

        translator = self._find_translator(resource)
        if translator is None:
            self._resources_skipped += 1
            supported = ", ".join(sorted(TranslatorRegistry.get_supported_kinds()))
            logger.warning(
                f"No translator for kind '{resource.kind}', skipping "
                f"'{resource.name}' (supported: {supported})"
            )
            return None

        try:
            translated = translator.translate(resource)
        except AzureSqlTranslatorError as e:
            self._total_errors += 1
            self._errors.append(
                {"kind": resource.kind, "name": resource.name, **e.to_dict()}
            )
            if self.context.strict_mode:
                raise
            logger.error(f"Failed to translate {resource.kind}/{resource.name}: {e}")
            return None

        self._resources_translated += 1
        logger.debug(
            f"Translated {resource.kind}/{resource.name} with "
            f"{translator.__class__.__name__}"
        )
        return translated

    def translate_resources(
        self, resources: List[CustomResource]
    ) -> List[TranslatedResource]:
        """Translate resources in order, dropping skipped and failed ones."""
        logger.info(f"Translating {len(resources)} custom resources")

        translated = []
        for resource in resources:
            result = self.translate_resource(resource)
            if result is not None:
                translated.append(result)

        logger.info(
            f"Translation complete: {self._resources_translated} translated, "
            f"{self._resources_skipped} skipped, {self._total_errors} errors"
        )
        return translated

    def get_translation_statistics(self) -> Dict[str, Any]:
        total_warnings = sum(
            len(r.warnings)
            for translator in self.translators
            for r in translator.get_translation_results()
        )
        return {
            "resources_processed": self._resources_processed,
            "resources_translated": self._resources_translated,
            "resources_skipped": self._resources_skipped,
            "errors": self._total_errors,
            "warnings": total_warnings,
            "translators": [t.get_report() for t in self.translators],
            "error_details": list(self._errors),
        }

    def format_translation_report(self) -> str:
        stats = self.get_translation_statistics()
        lines = [
            "Translation Report",
            "==================",
            f"Resources processed:  {stats['resources_processed']}",
            f"Resources translated: {stats['resources_translated']}",
            f"Resources skipped:    {stats['resources_skipped']}",
            f"Errors:               {stats['errors']}",
            f"Warnings:             {stats['warnings']}",
        ]

        for report in stats["translators"]:
            if not report["results"]:
                continue
            lines.append("")
            lines.append(f"{report['translator']}:")
            for result in report["results"]:
                for warning in result["warnings"]:
                    lines.append(
                        f"  - {result['resource_kind']}/{result['resource_name']}: {warning}"
                    )

        for error in stats["error_details"]:
            lines.append(f"ERROR {error['kind']}/{error['name']}: {error['message']}")

        return "\n".join(lines)
