"""
HTML fragments for the publication and internship lists.

Every item field goes through escape_html before it is placed in markup.
The *_html functions are pure; render_* write the result into a page
element and do nothing when the page has no such element.
"""

import re

PUBLICATION_LIST_ID = "publicationList"
INTERNSHIP_LIST_ID = "internshipList"

# Author highlighted in publication author lists
HIGHLIGHT_AUTHOR = "Minghui Guo"

EMPTY_PUBLICATIONS = '<p class="empty-message">No publication entries yet.</p>'
EMPTY_INTERNSHIPS = '<p class="empty-message">No internship entries yet.</p>'

HTML_ESCAPES = [
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
]


def escape_html(value) -> str:
    """Escape &, <, >, " and ' for use in text and attribute values."""
    if not value:
        return ""
    if isinstance(value, list):
        text = ",".join(str(v) for v in value)
    else:
        text = str(value)
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def _author_pattern(name: str):
    return re.compile(re.escape(name) + r"\*{0,2}", re.IGNORECASE)


def format_author(name, highlight: str = HIGHLIGHT_AUTHOR) -> str:
    """Escape an author name, bolding the highlighted author and its * marks."""
    safe = escape_html(name)
    if not highlight:
        return safe
    return _author_pattern(highlight).sub(lambda m: f"<b>{m.group(0)}</b>", safe)


def _link(href, label: str) -> str:
    return f'<a href="{escape_html(href)}" target="_blank" rel="noreferrer">{label}</a>'


def publication_links_html(item: dict) -> str:
    """Slash-separated code/website/paper links, or "" when there are none."""
    links = [_link(item[key], key) for key in ("code", "website", "paper") if item.get(key)]
    if not links:
        return ""
    return '<p class="pub-links">' + "<span>/</span>".join(links) + "</p>"


def _publication_html(item: dict, highlight: str) -> str:
    venue = f"<b>{escape_html(item['venue'])}</b>" if item.get("venue") else ""
    year = f" ({escape_html(item['year'])})" if item.get("year") else ""
    status = f" {escape_html(item['status'])}" if item.get("status") else ""

    authors = item.get("authors")
    if isinstance(authors, list):
        authors = ", ".join(format_author(a, highlight) for a in authors)
    else:
        authors = ""

    if item.get("cover"):
        alt = escape_html(item.get("title") or "Publication cover")
        cover = f'<img src="{escape_html(item["cover"])}" alt="{alt}" />'
        cover_class = "pub-thumb"
    else:
        cover = "Coming soon"
        cover_class = "pub-thumb pub-thumb-empty"

    return (
        '<article class="pub-item">'
        f'<div class="{cover_class}">{cover}</div>'
        '<div class="pub-content">'
        f"<h3>{escape_html(item.get('title'))}</h3>"
        f'<p class="pub-meta">{venue}{year}{status}</p>'
        + (f'<p class="pub-authors">{authors}</p>' if authors else "")
        + publication_links_html(item)
        + "</div></article>"
    )


def publication_list_html(items: list[dict], highlight: str = HIGHLIGHT_AUTHOR) -> str:
    if not items:
        return EMPTY_PUBLICATIONS
    return "".join(_publication_html(item, highlight) for item in items)


def _internship_html(item: dict) -> str:
    if item.get("logo"):
        alt = escape_html(item.get("company") or "Company logo")
        logo = f'<img src="{escape_html(item["logo"])}" alt="{alt}" />'
    else:
        logo = '<div class="intern-logo-placeholder">No logo</div>'

    meta = " · ".join(escape_html(v) for v in (item.get("time"), item.get("location")) if v)

    company = escape_html(item.get("company") or "Unnamed Company")
    if item.get("website"):
        company = _link(item["website"], company)

    return (
        '<article class="intern-item">'
        f'<div class="intern-logo">{logo}</div>'
        '<div class="intern-content">'
        f'<h3 class="intern-company">{company}</h3>'
        f'<p class="intern-role">{escape_html(item.get("role") or "")}</p>'
        f'<p class="intern-meta">{meta}</p>'
        "</div></article>"
    )


def internship_list_html(items: list[dict]) -> str:
    if not items:
        return EMPTY_INTERNSHIPS
    return "".join(_internship_html(item) for item in items)


def render_publications(document, items: list[dict], highlight: str = HIGHLIGHT_AUTHOR):
    """Write the publication list into the page, if it has a place for it."""
    root = document.get_element_by_id(PUBLICATION_LIST_ID)
    if root is None:
        return
    root.inner_html = publication_list_html(items, highlight)


def render_internships(document, items: list[dict]):
    """Write the internship list into the page, if it has a place for it."""
    root = document.get_element_by_id(INTERNSHIP_LIST_ID)
    if root is None:
        return
    root.inner_html = internship_list_html(items)
