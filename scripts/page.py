"""
Page surface and load sequence for the home page.

PageDocument stands in for the browser document: a set of elements keyed
by id that renderers write into, plus the body classes. bootstrap() runs
the load sequence against it with every collaborator passed in.
"""

import asyncio
import sys
from datetime import datetime

from content_loader import load_yaml_items
from render_lists import (
    INTERNSHIP_LIST_ID,
    PUBLICATION_LIST_ID,
    render_internships,
    render_publications,
)

PUBLICATION_FOLDER = "publication"
INTERNSHIP_FOLDER = "internship"
YEAR_ID = "year"

PAGE_ELEMENTS = (PUBLICATION_LIST_ID, INTERNSHIP_LIST_ID, YEAR_ID)

LOAD_FAILED = {
    PUBLICATION_LIST_ID: '<p class="empty-message">Failed to load publication YAML.</p>',
    INTERNSHIP_LIST_ID: '<p class="empty-message">Failed to load internship YAML.</p>',
}


class Element:
    """A writable container. inner_html is markup, text_content is plain text."""

    def __init__(self, element_id: str):
        self.id = element_id
        self.inner_html = ""
        self.text_content = ""

    def __repr__(self):
        return f"Element({self.id!r})"


class PageDocument:
    def __init__(self, element_ids=PAGE_ELEMENTS):
        self.elements = {element_id: Element(element_id) for element_id in element_ids}
        self.body_classes: list[str] = []

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.elements.get(element_id)

    def add_body_class(self, name: str):
        if name not in self.body_classes:
            self.body_classes.append(name)


def print_error(err: BaseException):
    print(f"  ⚠ Error: {err}", file=sys.stderr)


async def bootstrap(document, fetch, now=datetime.now, report_error=print_error) -> bool:
    """
    Fill the page with both lists.

    Both folders load concurrently; if either fails, both lists show the
    failure message and the error goes to report_error. Returns True when
    the lists were rendered.
    """
    document.add_body_class("loaded")

    year = document.get_element_by_id(YEAR_ID)
    if year is not None:
        year.text_content = str(now().year)

    try:
        pubs, interns = await asyncio.gather(
            load_yaml_items(PUBLICATION_FOLDER, fetch),
            load_yaml_items(INTERNSHIP_FOLDER, fetch),
        )
    except Exception as err:
        for element_id, message in LOAD_FAILED.items():
            root = document.get_element_by_id(element_id)
            if root is not None:
                root.inner_html = message
        report_error(err)
        return False

    render_publications(document, pubs)
    render_internships(document, interns)
    return True
