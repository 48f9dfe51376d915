"""
Main entry point for the seo-ai CLI.

This module ties together all components and provides the main execution flow
for the ``generate`` and ``config`` commands.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt

from seoai.assembler import MetadataAssembler
from seoai.cli import parse_arguments, validate_arguments
from seoai.config import (
    APP_NAME,
    MIN_DESCRIPTION_LENGTH,
    MOCK_ENV,
    NEXT_CONFIG_FILES,
)
from seoai.config_store import ConfigStore, resolve_provider
from seoai.exceptions import ProviderConfigError
from seoai.generators import SeoGenerator
from seoai.icons import IconPipeline
from seoai.image_service import MockImageClient, OpenAIImageClient, ReplicateImageClient
from seoai.llm_service import LLMService
from seoai.logging_config import setup_logging
from seoai.output_writer import OutputWriter
from seoai.overview import ProjectOverviewBuilder
from seoai.project_info import TagContext, load_project_info
from seoai.tags import TAG_LABELS, SeoTag, split_known_tags

console = Console(stderr=True)


def _cancel():
    """Exit cleanly when the user cancels a prompt."""
    console.print("Operation cancelled.")
    sys.exit(0)


def _ask(message, **kwargs):
    try:
        return Prompt.ask(message, console=console, **kwargs)
    except (KeyboardInterrupt, EOFError):
        _cancel()


def _setup_logging(verbose=False):
    """Sets up logging at the requested verbosity."""
    return setup_logging(logging.DEBUG if verbose else logging.INFO)


# ---------------------------------------------------------------------------
# config command
# ---------------------------------------------------------------------------


def run_config(args, store, logger):
    """Runs ``config get|set|delete|clear|use``."""
    try:
        if args.mode == "get":
            provider = resolve_provider(args.value)
            key = store.get(provider)
            if not key:
                logger.error(f"No key found for {provider}")
                return
            console.print(f"{provider} key: {key}", markup=False)

        elif args.mode == "set":
            key_name, _, key_value = args.value.partition("=")
            provider = resolve_provider(key_name)
            store.set(provider, key_value.strip())
            logger.info(f"{provider} key updated!")

        elif args.mode == "delete":
            provider = resolve_provider(args.value)
            store.delete(provider)
            logger.info(f"{provider} key deleted!")

        elif args.mode == "clear":
            store.clear()
            logger.info("Configuration cleared!")

        elif args.mode == "use":
            provider = resolve_provider(args.value)
            store.set_active_provider(provider)
            logger.info(f"{provider} is now the active provider")

    except ProviderConfigError as e:
        logger.error(str(e))


# ---------------------------------------------------------------------------
# generate command
# ---------------------------------------------------------------------------


def _is_metadata_mode(args, cwd):
    """Metadata mode for Next.js projects unless --html is given."""
    if args.metadata:
        return True
    if args.html:
        return False
    return any((cwd / name).exists() for name in NEXT_CONFIG_FILES)


def _use_mock(args):
    return bool(args.mock) or os.getenv(MOCK_ENV, "").lower() in ("1", "true", "yes")


def _initialize_llm_service(args, store, logger):
    """Creates the LLM service for the active provider, or exits when none is usable."""
    if _use_mock(args):
        logger.warning("Mock mode is active. No API calls will be made.")
        return LLMService(provider=None, use_mock=True)

    provider = store.get_active_provider()
    if not provider:
        logger.info("You need to configure your provider first. Run:")
        logger.info(f"{APP_NAME} config set YOUR_AI_PROVIDER=YOUR_API_KEY")
        sys.exit(0)

    try:
        return LLMService(provider=provider, api_key=store.get(provider))
    except ProviderConfigError as e:
        logger.error(str(e))
        sys.exit(0)


def _select_tags(args, logger):
    """Returns the tags from the command line, or asks for them."""
    names = list(args.tags)
    if not names:
        console.print("Which SEO items do you want to generate for your project?")
        for index, (tag, label) in enumerate(TAG_LABELS.items(), start=1):
            console.print(f"  {index:>2}. {tag.value:<16} {label}", markup=False)
        answer = _ask("Tags (names or numbers, comma separated)", default=SeoTag.CORE.value)
        options = list(TAG_LABELS)
        for item in answer.split(","):
            item = item.strip()
            if item.isdigit() and 1 <= int(item) <= len(options):
                names.append(options[int(item) - 1].value)
            elif item:
                names.append(item)

    tags, unknown = split_known_tags(names)
    for name in unknown:
        logger.warning(f"Invalid tag '{name}', skipping")
    return tags


def _ask_description():
    while True:
        description = (_ask("Enter a brief description of your project") or "").strip()
        if not description:
            console.print("Description is required!")
        elif len(description) < MIN_DESCRIPTION_LENGTH:
            console.print(f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters!")
        else:
            return description


def _collect_overview(args, generator, cwd, logger):
    """Returns the project overview from --description, the git repository, or a prompt."""
    if args.description:
        return args.description.strip()

    builder = ProjectOverviewBuilder(generator, repo_path=str(cwd), summarize=args.summarize)
    if not builder.is_git_repository():
        return _ask_description()

    with console.status("Scanning project files..."):
        overview = builder.build()
    if not overview:
        logger.warning("Your directory has no files to generate a summary for.")
        sys.exit(0)
    logger.info("Overview has been generated")
    return overview


def _initialize_image_client(args, store, provider, logger):
    """Picks the image service for the icons tag."""
    if _use_mock(args):
        return MockImageClient()

    replicate_token = store.get("replicate") or os.getenv("REPLICATE_API_TOKEN", "")
    if replicate_token:
        logger.info("Using Replicate for icon generation")
        return ReplicateImageClient(replicate_token)
    if provider == "openai":
        logger.info("Using OpenAI images for icon generation")
        return OpenAIImageClient(store.get("openai"))

    while True:
        token = (_ask("For generating icons, enter your Replicate API Key", password=True) or "").strip()
        if token:
            return ReplicateImageClient(token)
        console.print("Replicate API Key is required!")


def run_generate(args, store, logger):
    """Runs ``generate``: collect the overview, assemble the tags, output the result."""
    cwd = Path.cwd()
    is_metadata = _is_metadata_mode(args, cwd)
    logger.info(f"Output mode: {'metadata' if is_metadata else 'HTML'}")

    llm_service = _initialize_llm_service(args, store, logger)
    generator = SeoGenerator(llm_service, site_url=args.site_url)

    tags = _select_tags(args, logger)
    overview = _collect_overview(args, generator, cwd, logger)
    if not tags or not overview:
        logger.warning("You need to provide at least one SEO tag and a description")
        sys.exit(0)

    icon_pipeline = None
    if SeoTag.ICONS in tags:
        image_client = _initialize_image_client(args, store, llm_service.provider, logger)
        icon_pipeline = IconPipeline(generator, image_client, cwd)

    context = TagContext(project=load_project_info(cwd), site_url=args.site_url)
    assembler = MetadataAssembler(context, generator=generator, icon_pipeline=icon_pipeline)

    with console.status("Generating SEO data..."):
        if is_metadata:
            result = assembler.assemble_metadata(tags, overview)
        else:
            result = assembler.assemble_html(tags, overview)

    writer = OutputWriter()
    if args.output:
        target = writer.write_snippet(result, Path(args.output))
        console.print(f"SEO {'metadata' if is_metadata else 'HTML metatags'} written to {target}")
    else:
        console.print(f"Here's your SEO {'metadata' if is_metadata else 'HTML metatags'}:")
        writer.print_result(result)

    if llm_service.is_mock:
        logger.warning("Note: output was generated with mock responses.")


def handle_error(error, logger):
    """Shared handler for unexpected errors."""
    logger.error(f"An unexpected error occurred: {type(error).__name__}: {error}")
    logger.debug("Traceback:", exc_info=error)
    sys.exit(1)


def main(argv=None):
    """
    Main entry point for seo-ai.
    """
    # .env is loaded first so it can provide argument defaults such as the site URL
    load_dotenv()
    args = parse_arguments(argv)
    logger = _setup_logging(verbose=args.verbose)

    is_valid, error_message = validate_arguments(args)
    if not is_valid:
        logger.error(error_message)
        sys.exit(0)

    try:
        store = ConfigStore()
        if args.command == "config":
            run_config(args, store, logger)
        else:
            run_generate(args, store, logger)
    except KeyboardInterrupt:
        _cancel()
    except Exception as e:
        handle_error(e, logger)

    return 0


if __name__ == "__main__":
    sys.exit(main())
