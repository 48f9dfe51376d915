"""
Entry point script for the seo-ai CLI.
"""

import sys

from seoai.main import main

if __name__ == "__main__":
    sys.exit(main())
