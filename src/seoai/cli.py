"""
CLI Interface for seo-ai.

This module handles command-line argument parsing and validation.
"""

import argparse
import os

from seoai import __version__
from seoai.config import APP_NAME, MIN_DESCRIPTION_LENGTH, SITE_URL_ENV, DEFAULT_SITE_URL

CONFIG_MODES = ("get", "set", "delete", "clear", "use")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate SEO data for your website",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate object metadata or HTML metatags",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    generate_parser.add_argument(
        "tags",
        nargs="*",
        help="SEO tags to generate (e.g. core icons authors). Prompted for when omitted.",
    )
    mode_group = generate_parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--html",
        action="store_true",
        help="Generate HTML metatags even in a Next.js project.",
    )
    mode_group.add_argument(
        "--metadata",
        action="store_true",
        help="Generate a metadata object even without a Next.js config.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Append the generated snippet to this file instead of printing it.",
    )
    generate_parser.add_argument(
        "-d",
        "--description",
        default=None,
        help="Project description to use instead of scanning the repository.",
    )
    generate_parser.add_argument(
        "--summarize",
        action="store_true",
        help="Summarize each key file with the LLM instead of sending raw contents.",
    )
    generate_parser.add_argument(
        "--site-url",
        default=os.getenv(SITE_URL_ENV) or DEFAULT_SITE_URL,
        help="Site URL used in canonical, manifest and Open Graph URLs.",
    )
    generate_parser.add_argument(
        "--mock",
        action="store_true",
        help="Use mock LLM and image responses (no API calls).",
    )

    config_parser = subparsers.add_parser(
        "config",
        help="Manage provider API keys",
    )
    config_parser.add_argument("mode", choices=CONFIG_MODES, help="Config operation.")
    config_parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="KEY=VALUE for set (e.g. OPENAI_API_KEY=sk-...), provider name for get, delete and use.",
    )

    return parser


def parse_arguments(argv=None):
    """
    Parse command-line arguments for seo-ai.

    Args:
        argv (list, optional): Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed command-line arguments.
    """
    return build_parser().parse_args(argv)


def validate_arguments(args):
    """
    Validate the parsed command-line arguments.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        tuple: (is_valid, error_message)
    """
    if args.command == "generate":
        if args.description is not None:
            length = len(args.description.strip())
            if length == 0:
                return False, "Description is required!"
            if length < MIN_DESCRIPTION_LENGTH:
                return False, f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters!"

        if not args.site_url.startswith(("http://", "https://")):
            return False, f"Site URL must start with http:// or https://: {args.site_url}"

    elif args.command == "config":
        if args.mode in ("get", "delete", "use") and not args.value:
            return False, "No provider specified"
        if args.mode == "set":
            key_name, _, key_value = (args.value or "").partition("=")
            if not key_name.strip() or not key_value.strip():
                return False, "No key provided"

    return True, ""
