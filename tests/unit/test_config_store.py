import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from seoai.config_store import ConfigStore, resolve_provider
from seoai.exceptions import ProviderConfigError


class TestConfigStore(unittest.TestCase):

    def setUp(self):
        self.temp_dir_context = tempfile.TemporaryDirectory()
        self.config_dir = Path(self.temp_dir_context.name) / "seo-ai"
        self.store = ConfigStore(self.config_dir)

    def tearDown(self):
        self.temp_dir_context.cleanup()

    def test_get_missing_key_returns_empty_string(self):
        self.assertEqual(self.store.get("openai"), "")
        self.assertFalse(self.store.path.exists())

    def test_set_then_get_round_trip(self):
        self.store.set("openai", "key1")
        self.assertEqual(self.store.get("openai"), "key1")
        # A fresh instance reads the same file
        self.assertEqual(ConfigStore(self.config_dir).get("openai"), "key1")

    def test_delete_then_get_returns_default(self):
        self.store.set("openai", "key1")
        self.store.delete("openai")
        self.assertEqual(self.store.get("openai"), "")

    def test_set_llm_provider_makes_it_active(self):
        self.store.set("openai", "key1")
        self.store.set("mistral", "key2")
        self.assertEqual(self.store.get_active_provider(), "mistral")
        self.store.set("openai", "key3")
        self.assertEqual(self.store.get_active_provider(), "openai")

    def test_set_image_provider_keeps_active_llm(self):
        self.store.set("groq", "key1")
        self.store.set("replicate", "r8_token")
        self.assertEqual(self.store.get_active_provider(), "groq")
        self.assertEqual(self.store.get("replicate"), "r8_token")

    def test_delete_active_provider_clears_active(self):
        self.store.set("openai", "key1")
        self.store.set("mistral", "key2")
        self.store.delete("mistral")
        self.assertIsNone(self.store.get_active_provider())
        self.assertEqual(self.store.get("openai"), "key1")

    def test_set_active_provider(self):
        self.store.set("openai", "key1")
        self.store.set("groq", "key2")
        self.store.set_active_provider("openai")
        self.assertEqual(self.store.get_active_provider(), "openai")

    def test_set_active_provider_without_key_raises(self):
        with self.assertRaises(ProviderConfigError):
            self.store.set_active_provider("openai")

    def test_set_active_provider_rejects_image_provider(self):
        self.store.set("replicate", "r8_token")
        with self.assertRaises(ProviderConfigError):
            self.store.set_active_provider("replicate")

    def test_set_invalid_provider_raises(self):
        with self.assertRaises(ProviderConfigError):
            self.store.set("anthropic", "key")

    def test_clear(self):
        self.store.set("openai", "key1")
        self.store.clear()
        self.assertEqual(self.store.as_dict(), {"active_provider": None, "keys": {}})

    def test_file_layout(self):
        self.store.set("openai", "key1")
        data = json.loads(self.store.path.read_text(encoding="utf-8"))
        self.assertEqual(data, {"active_provider": "openai", "keys": {"openai": "key1"}})

    def test_unreadable_file_is_treated_as_empty(self):
        self.config_dir.mkdir(parents=True)
        self.store.path.write_text("{not json", encoding="utf-8")
        self.assertEqual(self.store.get("openai"), "")
        self.assertIsNone(self.store.get_active_provider())

    def test_non_object_file_is_treated_as_empty(self):
        self.config_dir.mkdir(parents=True)
        for content in ('["openai"]', '"sk-test"', '{"keys": ["openai"]}'):
            self.store.path.write_text(content, encoding="utf-8")
            self.assertEqual(self.store.get("openai"), "")
            self.assertIsNone(self.store.get_active_provider())

        self.store.set("groq", "g-test")
        self.assertEqual(self.store.get("groq"), "g-test")

    def test_config_dir_from_environment(self):
        with patch.dict(os.environ, {"SEO_AI_CONFIG_DIR": str(self.config_dir)}):
            store = ConfigStore()
        self.assertEqual(store.path, self.config_dir / "config.json")


class TestResolveProvider(unittest.TestCase):

    def test_environment_style_names(self):
        self.assertEqual(resolve_provider("OPENAI_API_KEY"), "openai")
        self.assertEqual(resolve_provider("MISTRAL_API_KEY"), "mistral")
        self.assertEqual(resolve_provider("GROQ_API_KEY"), "groq")
        self.assertEqual(resolve_provider("REPLICATE_API_TOKEN"), "replicate")

    def test_bare_provider_names(self):
        self.assertEqual(resolve_provider("openai"), "openai")
        self.assertEqual(resolve_provider("Mistral"), "mistral")

    def test_unknown_name_raises(self):
        with self.assertRaises(ProviderConfigError):
            resolve_provider("ANTHROPIC_API_KEY")


if __name__ == "__main__":
    unittest.main()
