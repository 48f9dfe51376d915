import io
import json
import logging
import os
import shutil
import tempfile
import unittest
from argparse import Namespace
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from seoai.config_store import ConfigStore
from seoai.main import main, run_config

# Suppress logging during tests for cleaner output
logging.disable(logging.CRITICAL)


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.project_dir = Path(tempfile.mkdtemp())
        self.config_dir = Path(tempfile.mkdtemp())
        self.original_cwd = os.getcwd()
        os.chdir(self.project_dir)

        env_patcher = patch.dict(os.environ, {"SEO_AI_CONFIG_DIR": str(self.config_dir)})
        env_patcher.start()
        self.addCleanup(env_patcher.stop)
        os.environ.pop("SEO_AI_MOCK", None)

        # The working directory is a plain folder, never a git checkout
        repo_patcher = patch("seoai.overview.ProjectOverviewBuilder.is_git_repository", return_value=False)
        repo_patcher.start()
        self.addCleanup(repo_patcher.stop)

    def tearDown(self):
        os.chdir(self.original_cwd)
        shutil.rmtree(self.project_dir)
        shutil.rmtree(self.config_dir)

    def run_main(self, argv):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            result = main(argv)
        return result, buffer.getvalue()


class TestConfigCommand(MainTestCase):

    def test_set_then_get(self):
        self.assertEqual(self.run_main(["config", "set", "GROQ_API_KEY=g-test"])[0], 0)
        store = ConfigStore(self.config_dir)
        self.assertEqual(store.get("groq"), "g-test")
        self.assertEqual(store.get_active_provider(), "groq")

        _, output = self.run_main(["config", "get", "GROQ_API_KEY"])
        self.assertIn("groq key: g-test", output)

    def test_delete_and_clear(self):
        store = ConfigStore(self.config_dir)
        store.set("openai", "sk-test")
        store.set("replicate", "r8-test")

        self.run_main(["config", "delete", "openai"])
        self.assertEqual(store.get("openai"), "")
        self.assertIsNone(store.get_active_provider())

        self.run_main(["config", "clear"])
        self.assertEqual(store.as_dict(), {"active_provider": None, "keys": {}})

    def test_use_provider(self):
        store = ConfigStore(self.config_dir)
        store.set("openai", "sk-test")
        store.set("mistral", "m-test")
        self.run_main(["config", "use", "openai"])
        self.assertEqual(store.get_active_provider(), "openai")

    def test_invalid_provider_is_reported(self):
        store = ConfigStore(self.config_dir)
        with self.assertLogs("seoai", level="ERROR") as logs:
            logging.disable(logging.NOTSET)
            try:
                run_config(Namespace(mode="set", value="ANTHROPIC_API_KEY=x"), store, logging.getLogger("seoai"))
            finally:
                logging.disable(logging.CRITICAL)
        self.assertIn("Invalid provider", logs.output[0])
        self.assertFalse(store.path.exists())

    def test_invalid_arguments_exit_cleanly(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(["config", "set", "OPENAI_API_KEY="])
        self.assertEqual(ctx.exception.code, 0)


class TestGenerateCommand(MainTestCase):

    DESCRIPTION = "A web app that tracks rocket launches."

    def test_html_output_with_mock(self):
        result, output = self.run_main(
            ["generate", "core", "publisher", "bogus", "--mock", "--description", self.DESCRIPTION]
        )
        self.assertEqual(result, 0)
        self.assertIn("<title>Mock Project</title>", output)
        self.assertIn('<meta name="publisher" content="seo AI" />', output)

    def test_metadata_mode_in_next_project(self):
        (self.project_dir / "next.config.js").write_text("module.exports = {}")
        _, output = self.run_main(
            ["generate", "applicationName", "referrer", "--mock", "--description", self.DESCRIPTION]
        )
        self.assertEqual(json.loads(output), {"applicationName": "wonderful-app", "referrer": "origin"})

    def test_metadata_written_to_typescript_file(self):
        self.run_main(
            [
                "generate",
                "core",
                "viewport",
                "--metadata",
                "--mock",
                "--output",
                "app/layout-meta.ts",
                "--description",
                self.DESCRIPTION,
            ]
        )
        content = (self.project_dir / "app" / "layout-meta.ts").read_text(encoding="utf-8")
        self.assertIn("import type { Metadata, Viewport } from 'next'", content)
        self.assertIn("export const metadata: Metadata =", content)
        self.assertIn('"siteName": "Mock Project"', content)
        self.assertIn('"url": "/seo/banner/og.png"', content)
        self.assertIn("export const viewport: Viewport =", content)

    def test_icons_with_mock(self):
        _, output = self.run_main(
            ["generate", "icons", "--metadata", "--mock", "--description", self.DESCRIPTION]
        )
        self.assertEqual(
            json.loads(output),
            {"icons": {"icon": "/seo/icons/favicon.ico", "apple": "/seo/icons/apple-icon.png"}},
        )
        icons_dir = self.project_dir / "public" / "seo" / "icons"
        self.assertTrue((icons_dir / "favicon.ico").is_file())
        self.assertTrue((icons_dir / "apple-icon.png").is_file())

    def test_mock_from_environment(self):
        os.environ["SEO_AI_MOCK"] = "1"
        _, output = self.run_main(["generate", "generator", "--description", self.DESCRIPTION])
        self.assertIn('<meta name="generator" content="AI" />', output)

    @patch("seoai.main.Prompt.ask")
    def test_interactive_tags_and_description(self, mock_ask):
        mock_ask.side_effect = ["2,publisher,bogus", "short", self.DESCRIPTION]
        _, output = self.run_main(["generate", "--html", "--mock"])

        self.assertIn('<link rel="icon" href="/seo/icons/favicon.ico" />', output)
        self.assertIn('<meta name="publisher" content="seo AI" />', output)
        self.assertEqual(mock_ask.call_count, 3)

    def test_without_provider_exits_cleanly(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(["generate", "core", "--description", self.DESCRIPTION])
        self.assertEqual(ctx.exception.code, 0)

    def test_configured_provider_is_used(self):
        ConfigStore(self.config_dir).set("mistral", "m-test")
        with patch("seoai.main.LLMService") as mock_service:
            mock_service.return_value.is_mock = False
            self.run_main(["generate", "publisher", "--description", self.DESCRIPTION])
        mock_service.assert_called_once_with(provider="mistral", api_key="m-test")

    def test_unexpected_error_exits_with_failure(self):
        with patch("seoai.main.run_generate", side_effect=RuntimeError("boom")):
            with self.assertRaises(SystemExit) as ctx:
                self.run_main(["generate", "core", "--mock", "--description", self.DESCRIPTION])
        self.assertEqual(ctx.exception.code, 1)

    def test_keyboard_interrupt_exits_cleanly(self):
        with patch("seoai.main.run_generate", side_effect=KeyboardInterrupt):
            with self.assertRaises(SystemExit) as ctx:
                self.run_main(["generate", "core", "--mock", "--description", self.DESCRIPTION])
        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
