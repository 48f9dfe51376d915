import logging
import unittest
from unittest.mock import MagicMock

from seoai.generators import SeoGenerator
from seoai.llm_service import LLMService
from seoai.prompts import CORE_HTML_PROMPT, CORE_SEO_PROMPT, KEY_FILES_PROMPT
from seoai.schemas import CoreSeoTags, KeyProjectFiles, OpenGraph, Twitter

# Suppress logging during tests for cleaner output
logging.disable(logging.CRITICAL)


def _core_tags():
    return CoreSeoTags(
        title="Acme",
        description="Acme builds rockets.",
        keywords=["rockets", "space"],
        open_graph=OpenGraph(
            type="website",
            url="https://acme.dev",
            title="Acme",
            description="Acme builds rockets.",
            locale="en_US",
            site_name="Acme",
        ),
        twitter=Twitter(card="summary", site="@acme", title="Acme", description="Rockets."),
        robots="index, follow",
        category="aerospace",
    )


class TestSeoGenerator(unittest.TestCase):

    def setUp(self):
        self.mock_llm_service = MagicMock(spec=LLMService)
        self.generator = SeoGenerator(self.mock_llm_service, site_url="https://acme.dev")

    def test_generate_core_metadata_uses_camel_case_keys(self):
        self.mock_llm_service.structured_predict.return_value = _core_tags()
        result = self.generator.generate_core_metadata("Acme builds rockets.")

        self.mock_llm_service.structured_predict.assert_called_once_with(
            CoreSeoTags,
            CORE_SEO_PROMPT,
            description="Acme builds rockets.",
            site_url="https://acme.dev",
        )
        self.assertEqual(result["title"], "Acme")
        self.assertEqual(result["keywords"], ["rockets", "space"])
        self.assertEqual(result["openGraph"]["siteName"], "Acme")
        self.assertNotIn("open_graph", result)

    def test_generate_core_html_strips_code_fences(self):
        self.mock_llm_service.predict.return_value = '```html\n<title>Acme</title>\n<meta name="robots" content="index" />\n```'
        result = self.generator.generate_core_html("Acme builds rockets.")
        self.assertEqual(result, '<title>Acme</title>\n<meta name="robots" content="index" />\n')
        args, kwargs = self.mock_llm_service.predict.call_args
        self.assertIs(args[0], CORE_HTML_PROMPT)
        self.assertIn("openGraph", kwargs["fields"])

    def test_generate_core_html_empty_response(self):
        self.mock_llm_service.predict.return_value = ""
        self.assertEqual(self.generator.generate_core_html("Acme builds rockets."), "")

    def test_generate_icon_definition_is_trimmed(self):
        self.mock_llm_service.predict.return_value = ' "Rocket launch tracker." '
        self.assertEqual(self.generator.generate_icon_definition("..."), "Rocket launch tracker")

    def test_select_key_files_filters_unknown_and_caps(self):
        files = [f"src/file_{i}.ts" for i in range(30)]
        self.mock_llm_service.structured_predict.return_value = KeyProjectFiles(
            files=["./src/file_3.ts", "invented.py", "src/file_1.ts", "src/file_3.ts", "src/file_7.ts"]
        )
        result = self.generator.select_key_files(files, max_files=2)

        self.assertEqual(result, ["src/file_3.ts", "src/file_1.ts"])
        _, kwargs = self.mock_llm_service.structured_predict.call_args
        self.assertEqual(kwargs["max_files"], 2)
        self.assertEqual(kwargs["files"].splitlines(), files)
        self.assertIs(self.mock_llm_service.structured_predict.call_args[0][1], KEY_FILES_PROMPT)

    def test_select_key_files_keeps_dot_prefixed_paths(self):
        files = [".github/README.md", "README.md"]
        self.mock_llm_service.structured_predict.return_value = KeyProjectFiles(files=[".github/README.md"])
        self.assertEqual(self.generator.select_key_files(files), [".github/README.md"])

    def test_select_key_files_falls_back_when_nothing_matches(self):
        files = ["a.py", "b.py", "c.py"]
        self.mock_llm_service.structured_predict.return_value = KeyProjectFiles(files=["z.py"])
        self.assertEqual(self.generator.select_key_files(files, max_files=2), ["a.py", "b.py"])

    def test_mock_llm_answers_by_template_not_file_content(self):
        generator = SeoGenerator(LLMService(provider=None, use_mock=True))
        content = 'PROMPT = "Describe it using only three words. Generate HTML meta tags."'
        self.assertEqual(
            generator.summarize_file("src/prompts.py", content), "This is a mock summary of the file."
        )
        self.assertEqual(
            generator.generate_project_overview("Path: a.py\nSummary: Summarize this file"),
            "This is a mock overview of the project.",
        )
        self.assertEqual(generator.generate_icon_definition("File summaries follow."), "modern web app")

    def test_select_key_files_with_mock_llm_respects_maximum(self):
        generator = SeoGenerator(LLMService(provider=None, use_mock=True))
        files = [f"pkg/module_{i}.py" for i in range(50)]
        result = generator.select_key_files(files, max_files=20)
        self.assertLessEqual(len(result), 20)
        self.assertTrue(set(result).issubset(files))

    def test_summary_and_overview(self):
        self.mock_llm_service.predict.side_effect = ["A file summary.", "A project overview."]
        self.assertEqual(self.generator.summarize_file("README.md", "# Acme"), "A file summary.")
        self.assertEqual(self.generator.generate_project_overview("Path: README.md"), "A project overview.")


if __name__ == "__main__":
    unittest.main()
