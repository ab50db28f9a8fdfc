"""Capture LinkedIn session cookies via patchright for company search.

Usage:
    .venv/bin/python scripts/extract_cookies.py [--output PATH]

Opens a Chromium window. Log in to LinkedIn manually, then press Enter
in the terminal. Cookies are saved as a JSON array; point
``http.cookies_path`` in the settings YAML at the file.
"""

import argparse
import json
from pathlib import Path

from patchright.sync_api import sync_playwright

DEFAULT_OUTPUT = "config/linkedin_cookies.json"


def main() -> None:
    parser = argparse.ArgumentParser(description="Save LinkedIn cookies after a manual login")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="Cookie file to write")
    args = parser.parse_args()

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=False)
        context = browser.new_context()
        page = context.new_page()
        page.goto("https://www.linkedin.com/login")

        input("\n>>> Log in to LinkedIn, then press Enter here to save cookies...")

        cookies = [c for c in context.cookies() if "linkedin.com" in c.get("domain", "")]
        output_path.write_text(json.dumps(cookies, indent=2))
        print(f"Saved {len(cookies)} cookies to {output_path}")

        browser.close()


if __name__ == "__main__":
    main()
