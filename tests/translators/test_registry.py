"""
Unit tests for TranslatorRegistry.

Tests the decorator-based registration system, thread-safety,
and translator lookup by custom-resource kind.
"""

import threading

import pytest

from azsql_translator.models import CustomResource
from azsql_translator.translators import TranslationContext
from azsql_translator.translators.registry import (
    TranslatorRegistry,
    register_translator,
)


class MockTranslator:
    """Mock translator that implements required interface."""

    supported_kinds = ["AzureSqlServer"]

    def __init__(self, context):
        self.context = context

    def can_translate(self, resource: CustomResource) -> bool:
        return resource.kind in self.supported_kinds

    def translate(self, resource: CustomResource):
        return resource


class AnotherMockTranslator(MockTranslator):
    supported_kinds = ["AzureSqlAction"]


class BrokenTranslator(MockTranslator):
    """Translator that fails during instantiation."""

    supported_kinds = ["Broken"]

    def __init__(self, context):
        raise RuntimeError("Intentional failure for testing")


class InvalidTranslator:
    """Translator missing required methods."""

    def __init__(self, context):
        self.context = context


@pytest.fixture(autouse=True)
def clean_registry():
    """Empty the registry for each test and restore the built-in translators."""
    registered = TranslatorRegistry.get_all_translators()
    TranslatorRegistry.clear()
    yield
    TranslatorRegistry.clear()
    for translator_class in registered:
        TranslatorRegistry.register(translator_class)


class TestTranslatorRegistry:
    """Test suite for TranslatorRegistry."""

    def test_register_translator_decorator(self):
        @register_translator
        class TestTranslator(MockTranslator):
            pass

        assert len(TranslatorRegistry.get_all_translators()) == 1
        assert "TestTranslator" in TranslatorRegistry.get_registered_translators()

    def test_decorator_returns_class_unchanged(self):
        assert register_translator(MockTranslator) is MockTranslator

    def test_register_duplicate_translator_ignored(self):
        register_translator(MockTranslator)
        register_translator(MockTranslator)

        assert len(TranslatorRegistry.get_all_translators()) == 1

    def test_register_non_class_raises(self):
        with pytest.raises(TypeError, match="Expected a class"):
            TranslatorRegistry.register("not a class")

    def test_register_invalid_translator_raises(self):
        with pytest.raises(TypeError, match="missing required attributes"):
            TranslatorRegistry.register(InvalidTranslator)

    def test_get_translator_by_kind(self):
        register_translator(MockTranslator)
        register_translator(AnotherMockTranslator)

        assert TranslatorRegistry.get_translator("AzureSqlServer") is MockTranslator
        assert TranslatorRegistry.get_translator("AzureSqlAction") is AnotherMockTranslator
        assert TranslatorRegistry.get_translator("AzureSqlUnknown") is None

    def test_first_registered_wins(self):
        class ShadowTranslator(MockTranslator):
            pass

        register_translator(MockTranslator)
        register_translator(ShadowTranslator)

        assert TranslatorRegistry.get_translator("AzureSqlServer") is MockTranslator

    def test_create_translators_skips_broken(self):
        register_translator(MockTranslator)
        register_translator(BrokenTranslator)

        translators = TranslatorRegistry.create_translators(TranslationContext())

        assert len(translators) == 1
        assert isinstance(translators[0], MockTranslator)

    def test_create_translators_empty(self):
        assert TranslatorRegistry.create_translators(TranslationContext()) == []

    def test_supported_kinds(self):
        register_translator(MockTranslator)
        register_translator(AnotherMockTranslator)

        assert TranslatorRegistry.get_supported_kinds() == {
            "AzureSqlServer",
            "AzureSqlAction",
        }

    def test_thread_safe_registration(self):
        classes = [type(f"Translator{i}", (MockTranslator,), {}) for i in range(20)]
        threads = [
            threading.Thread(target=TranslatorRegistry.register, args=(cls,))
            for cls in classes
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(TranslatorRegistry.get_all_translators()) == 20
