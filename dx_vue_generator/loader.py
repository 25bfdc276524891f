"""Metadata loading.

A metadata source is either a local JSON file or an HTTP(S) URL. The
loader reads it, builds the MetadataModel and reports every failure
as MetadataLoaderError.
"""

import json
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse

import requests

from .codegen.core.model import MetadataModel
from .logging_config import get_logger

logger = get_logger(__name__)

URL_SCHEMES = ("http", "https")


class MetadataLoaderError(Exception):
    """Raised when a metadata source cannot be read or is not a metadata document."""

    pass


def is_url(source: str | Path) -> bool:
    """True for http(s) URLs; anything else is treated as a file path."""
    return urlparse(str(source)).scheme in URL_SCHEMES


class MetadataLoader:
    """Loads widget metadata from a file path or URL."""

    def __init__(self, timeout: int = 30, session: Optional[requests.Session] = None):
        """
        Args:
            timeout: Request timeout in seconds for URL sources
            session: HTTP session to fetch with (a new one if omitted)
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def load(self, source: str | Path) -> MetadataModel:
        """
        Load and build the metadata model.

        Args:
            source: Path of a JSON file, or an http(s) URL

        Returns:
            MetadataModel

        Raises:
            MetadataLoaderError: If the source is unreadable, not JSON,
                or not a metadata document
        """
        if is_url(source):
            document = self.fetch(str(source))
        else:
            document = self.read_file(Path(source))

        model = self.build_model(document, str(source))
        logger.info(
            "Loaded %d widgets and %d custom types from %s",
            len(model.widgets),
            len(model.custom_types),
            source,
        )
        return model

    def read_file(self, path: Path) -> Any:
        if not path.is_file():
            raise MetadataLoaderError(f"Metadata file not found: {path}")

        logger.debug("Reading metadata file %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise MetadataLoaderError(f"Cannot read metadata file {path}: {e}") from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MetadataLoaderError(
                f"Metadata file {path} is not valid JSON (line {e.lineno}): {e.msg}"
            ) from e

    def fetch(self, url: str) -> Any:
        if not urlparse(url).netloc:
            raise MetadataLoaderError(f"Invalid metadata URL: {url}")

        logger.debug("Fetching metadata from %s (timeout %ss)", url, self.timeout)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise MetadataLoaderError(f"Timed out after {self.timeout}s fetching {url}") from e
        except requests.exceptions.HTTPError as e:
            raise MetadataLoaderError(
                f"Server answered {e.response.status_code} for {url}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise MetadataLoaderError(f"Cannot fetch {url}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise MetadataLoaderError(f"Response from {url} is not valid JSON") from e

    def build_model(self, document: Any, source: str) -> MetadataModel:
        if not isinstance(document, dict):
            raise MetadataLoaderError(f"Metadata must be a JSON object: {source}")

        try:
            return MetadataModel.from_dict(document)
        except KeyError as e:
            raise MetadataLoaderError(
                f"Metadata from {source} is missing required key {e}"
            ) from e
        except (TypeError, AttributeError) as e:
            raise MetadataLoaderError(f"Malformed metadata in {source}: {e}") from e


def load_metadata(source: str | Path, timeout: int = 30) -> MetadataModel:
    """Convenience function loading metadata with a default loader."""
    return MetadataLoader(timeout=timeout).load(source)
