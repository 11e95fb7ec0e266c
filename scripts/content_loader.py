"""
Content loader: reads a folder's index.yaml and the item files it lists.

A fetch function is any coroutine taking a path like "publication/index.yaml"
and returning the file text. FileFetcher reads from a local content directory,
UrlFetcher from a deployed site. Either raises FetchError on failure.
"""

import asyncio
import urllib.request
from pathlib import Path

from simple_yaml import parse_simple_yaml

INDEX_FILE = "index.yaml"


class FetchError(Exception):
    """Raised when a content file cannot be retrieved."""

    def __init__(self, path: str):
        super().__init__(f"Failed to fetch {path}")
        self.path = path


class FileFetcher:
    """Fetch content files relative to a local directory."""

    def __init__(self, root):
        self.root = Path(root)

    def _read(self, path: str) -> str:
        try:
            return (self.root / path).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(path) from e

    async def __call__(self, path: str) -> str:
        return await asyncio.to_thread(self._read, path)


class UrlFetcher:
    """Fetch content files over HTTP, bypassing caches."""

    def __init__(self, base_url: str, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _read(self, path: str) -> str:
        url = f"{self.base_url}/{path}"
        req = urllib.request.Request(
            url,
            headers={"User-Agent": "Site-Builder", "Cache-Control": "no-store"},
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                return response.read().decode("utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(path) from e

    async def __call__(self, path: str) -> str:
        return await asyncio.to_thread(self._read, path)


async def fetch_yaml(path: str, fetch) -> dict:
    """Fetch one document and parse it."""
    return parse_simple_yaml(await fetch(path))


async def load_yaml_items(folder: str, fetch) -> list[dict]:
    """
    Load every item listed in folder/index.yaml, in index order.

    Item files are fetched concurrently. The first failure cancels the
    fetches still pending, propagates, and no partial list is returned.
    """
    index_data = await fetch_yaml(f"{folder}/{INDEX_FILE}", fetch)
    files = index_data.get("items")
    if not isinstance(files, list):
        files = []
    tasks = [asyncio.ensure_future(fetch_yaml(f"{folder}/{name}", fetch)) for name in files]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
