#!/usr/bin/env python3
"""
Home Page Builder

Builds the home page with the publication and internship lists filled in.

CONTENT SOURCES:
    content/index.md                    → page title, intro (markdown)
    content/publication/index.yaml      → ordered list of publication files
    content/publication/*.yaml          → one publication each
    content/internship/index.yaml       → ordered list of internship files
    content/internship/*.yaml           → one internship each

TEMPLATES:
    templates/index.html      - Page shell with publicationList,
                                internshipList and year elements

USAGE:
    python scripts/build_site.py                        # Build docs/index.html
    python scripts/build_site.py --check                # Report skipped lines
    python scripts/build_site.py --base-url URL         # Load lists from a deployed site
"""

import argparse
import asyncio
import sys
from pathlib import Path

import markdown
import yaml
from jinja2 import Environment, FileSystemLoader, select_autoescape

from content_loader import INDEX_FILE, FileFetcher, UrlFetcher
from page import INTERNSHIP_FOLDER, PUBLICATION_FOLDER, PageDocument, bootstrap
from simple_yaml import ParseDiagnostics, parse_simple_yaml


# ============================================================================
# CONFIGURATION
# ============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"
CONTENT_DIR = BASE_DIR / "content"
OUTPUT_DIR = BASE_DIR / "docs"
PAGE_TEMPLATE = "index.html"

# Initialize Jinja2 environment
env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(['html', 'xml'])
)

# Markdown converter
md_converter = markdown.Markdown(extensions=["fenced_code", "tables", "attr_list"])


# ============================================================================
# UTILITIES
# ============================================================================

def parse_frontmatter(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from content."""
    if content.startswith("---"):
        parts = content.split("---", 2)
        if len(parts) >= 3:
            frontmatter = yaml.safe_load(parts[1])
            body = parts[2].strip()
            return frontmatter or {}, body
    return {}, content


def read_page_source(content_dir: Path) -> tuple[dict, str]:
    """Frontmatter and rendered intro HTML from content/index.md, if any."""
    source = content_dir / "index.md"
    if not source.exists():
        print(f"  ⚠ No {source.name} found, using an empty intro")
        return {}, ""

    frontmatter, body = parse_frontmatter(source.read_text())
    md_converter.reset()
    return frontmatter, md_converter.convert(body)


# ============================================================================
# PAGE BUILDER
# ============================================================================

def build_page(content_dir: Path = CONTENT_DIR, output_file: Path = OUTPUT_DIR / "index.html",
               fetch=None) -> bool:
    """Build the home page. Returns False when the lists failed to load."""
    print("Building home page...")

    frontmatter, intro = read_page_source(content_dir)

    if fetch is None:
        fetch = FileFetcher(content_dir)

    document = PageDocument()
    loaded = asyncio.run(bootstrap(document, fetch))

    template = env.get_template(PAGE_TEMPLATE)
    html = template.render(
        content=intro,
        body_class=" ".join(document.body_classes),
        elements={
            element_id: {
                "html": element.inner_html,
                "text": element.text_content,
            }
            for element_id, element in document.elements.items()
        },
        **frontmatter
    )

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(html)
    print(f"  → {output_file}")
    return loaded


# ============================================================================
# CONTENT CHECK
# ============================================================================

def check_content(content_dir: Path = CONTENT_DIR) -> int:
    """Parse every content file and report skipped lines. Returns the problem count."""
    print("Checking content...")
    problems = 0

    def check_file(path: Path) -> dict:
        nonlocal problems
        if not path.is_file():
            print(f"  ⚠ Missing: {path.relative_to(content_dir)}")
            problems += 1
            return {}
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            print(f"  ⚠ Unreadable: {path.relative_to(content_dir)} ({e.__class__.__name__})")
            problems += 1
            return {}
        diagnostics = ParseDiagnostics()
        data = parse_simple_yaml(text, diagnostics)
        if diagnostics.skipped_lines:
            lines = ", ".join(str(n) for n in diagnostics.skipped)
            print(f"  ⚠ {path.relative_to(content_dir)}: skipped lines {lines}")
            problems += diagnostics.skipped_lines
        else:
            print(f"  ✓ {path.relative_to(content_dir)}")
        return data

    for folder in (PUBLICATION_FOLDER, INTERNSHIP_FOLDER):
        index_data = check_file(content_dir / folder / INDEX_FILE)
        files = index_data.get("items")
        if not isinstance(files, list):
            print(f"  ⚠ {folder}/{INDEX_FILE} has no items list")
            continue
        for name in files:
            check_file(content_dir / folder / name)

    print(f"\n{problems} problem(s) found")
    return problems


# ============================================================================
# MAIN
# ============================================================================

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build the home page publication and internship lists")
    parser.add_argument("--content", type=Path, default=CONTENT_DIR,
                        help="Content directory (default: content/)")
    parser.add_argument("--output", type=Path, default=OUTPUT_DIR / "index.html",
                        help="Output HTML file (default: docs/index.html)")
    parser.add_argument("--base-url",
                        help="Load lists from this URL instead of the content directory")
    parser.add_argument("--check", action="store_true",
                        help="Only parse content files and report skipped lines")
    args = parser.parse_args(argv)

    if args.check:
        return 1 if check_content(args.content) else 0

    print("=" * 60)
    print("BUILDING SITE")
    print("=" * 60 + "\n")

    fetch = UrlFetcher(args.base_url) if args.base_url else None
    loaded = build_page(args.content, args.output, fetch=fetch)

    print()
    print("=" * 60)
    print("BUILD COMPLETE" if loaded else "BUILD FINISHED WITH LOAD ERRORS")
    print("=" * 60)
    return 0 if loaded else 1


if __name__ == "__main__":
    sys.exit(main())
