"""
Translator registry for custom-resource kinds.

- Decorator-based registration (@register_translator)
- One registry per process
- Thread-safe operations

Usage:
    @register_translator
    class MyTranslator(BaseTranslator):
        ...

    # Later, in the coordinator:
    translators = TranslatorRegistry.create_translators(context)
"""

import logging
import threading
from typing import TYPE_CHECKING, List, Optional, Set, Type

if TYPE_CHECKING:
    from .base_translator import BaseTranslator, TranslationContext

logger = logging.getLogger(__name__)


class TranslatorRegistry:
    """
    Registry for custom-resource translators.

    Translators register themselves via the @register_translator decorator,
    so the registry has no knowledge of specific translator classes.
    """

    _lock = threading.RLock()
    _translators: List[Type["BaseTranslator"]] = []

    @classmethod
    def register(cls, translator_class: Type["BaseTranslator"]) -> None:
        """
        Register a translator class. Duplicate registrations are ignored.

        Raises:
            TypeError: If translator_class is not a class or lacks the
                translator interface
        """
        with cls._lock:
            if not isinstance(translator_class, type):
                raise TypeError(
                    f"Expected a class, got {type(translator_class).__name__}"
                )

            # Duck-typed so test doubles need not inherit BaseTranslator
            required = ["supported_kinds", "can_translate", "translate"]
            missing = [name for name in required if not hasattr(translator_class, name)]
            if missing:
                raise TypeError(
                    f"Translator class {translator_class.__name__} missing required "
                    f"attributes: {', '.join(missing)}"
                )

            if translator_class in cls._translators:
                logger.debug(
                    f"Translator {translator_class.__name__} already registered, skipping"
                )
                return

            cls._translators.append(translator_class)
            logger.debug(f"Registered translator: {translator_class.__name__}")

    @classmethod
    def get_translator(cls, kind: str) -> Optional[Type["BaseTranslator"]]:
        """
        Get the translator class for a custom-resource kind.

        If several translators declare the same kind, the first registered wins.
        """
        with cls._lock:
            for translator_class in cls._translators:
                if kind in translator_class.supported_kinds:
                    return translator_class
            return None

    @classmethod
    def get_all_translators(cls) -> List[Type["BaseTranslator"]]:
        with cls._lock:
            return cls._translators.copy()

    @classmethod
    def create_translators(
        cls, context: "TranslationContext"
    ) -> List["BaseTranslator"]:
        """
        Create instances of all registered translators.

        Translators failing to instantiate are logged and skipped.
        """
        translators = []

        with cls._lock:
            for translator_class in cls.get_all_translators():
                try:
                    translators.append(translator_class(context))
                except Exception as e:
                    logger.error(
                        f"Failed to instantiate translator {translator_class.__name__}: {e}",
                        exc_info=True,
                    )

        if not translators:
            logger.warning("No translators were successfully instantiated")
        else:
            logger.debug(
                f"Created {len(translators)} translator instances: "
                f"{[t.__class__.__name__ for t in translators]}"
            )

        return translators

    @classmethod
    def get_supported_kinds(cls) -> Set[str]:
        supported: Set[str] = set()
        with cls._lock:
            for translator_class in cls._translators:
                supported.update(translator_class.supported_kinds)
        return supported

    @classmethod
    def get_registered_translators(cls) -> List[str]:
        with cls._lock:
            return [t.__name__ for t in cls._translators]

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered translators.

        Warning:
            Only for tests. Translators register at import time and stay
            registered for the lifetime of the process.
        """
        with cls._lock:
            cls._translators.clear()
            logger.debug("Cleared translator registry")


def register_translator(
    translator_class: Type["BaseTranslator"],
) -> Type["BaseTranslator"]:
    """
    Decorator to register a translator class.

    Returns:
        The translator class (unmodified)

    Raises:
        TypeError: If translator_class is invalid
    """
    TranslatorRegistry.register(translator_class)
    return translator_class
