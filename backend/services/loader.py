"""Loading of corpus files from local paths or URLs."""
import fnmatch
import json
import logging
import os
from typing import Any, Dict, Mapping, Sequence
from urllib.parse import urlparse

import httpx

from config import HTTP_TIMEOUT

logger = logging.getLogger(__name__)

CORPUS_FILE_FILTERS = ("*.json",)


class LoadError(IOError):
    """A file or URL could not be read or written."""


class RecordFormatError(ValueError):
    """Loaded content is not valid JSON."""


def _is_url(path_or_url: str) -> bool:
    parsed = urlparse(path_or_url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_bytes(path_or_url: str, timeout: float = HTTP_TIMEOUT) -> bytes:
    """
    Load a resource into memory.

    Local files are read directly. If no local file exists the path is
    treated as a URL and downloaded (blocking).

    Args:
        path_or_url: Local file path or http(s) URL
        timeout: Download timeout in seconds

    Returns:
        Raw content

    Raises:
        LoadError: If the file cannot be read or the download fails
    """
    if os.path.isfile(path_or_url):
        try:
            with open(path_or_url, "rb") as f:
                return f.read()
        except OSError as e:
            logger.error(f"Could not open {path_or_url} for reading: {str(e)}")
            raise LoadError(f"Could not open {path_or_url} for reading") from e

    if not _is_url(path_or_url):
        logger.error(f"Cannot read from non-existing file: {path_or_url}")
        raise LoadError(f"Cannot read from non-existing file: {path_or_url}")

    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(path_or_url)
    except httpx.TimeoutException as e:
        logger.error(f"Download timed out after {timeout}s: {path_or_url}")
        raise LoadError(f"Download timed out after {timeout}s: {path_or_url}") from e
    except httpx.RequestError as e:
        logger.error(f"Network error downloading {path_or_url}: {str(e)}")
        raise LoadError(f"Network error downloading {path_or_url}: {str(e)}") from e

    if response.status_code != 200:
        error_msg = f"Download of {path_or_url} failed with status {response.status_code}"
        logger.error(error_msg)
        raise LoadError(error_msg)

    logger.debug(f"Downloaded {len(response.content)} bytes from {path_or_url}")
    return response.content


def read_json(path_or_url: str) -> Dict[str, Any]:
    """
    Load and decode a JSON record.

    Args:
        path_or_url: Local file path or http(s) URL

    Returns:
        The decoded top-level object ({} if the document is not an object)

    Raises:
        LoadError: If the path is empty or the resource cannot be loaded
        RecordFormatError: If the content is not valid JSON or nests too deeply
    """
    if not path_or_url:
        logger.error("Cannot read JSON, file path is empty")
        raise LoadError("Cannot read JSON, file path is empty")

    content = load_bytes(path_or_url)

    try:
        data = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        logger.error(f"Cannot parse JSON from {path_or_url}: {str(e)}")
        raise RecordFormatError(f"Cannot parse JSON from {path_or_url}: {str(e)}") from e

    if not isinstance(data, dict):
        logger.warning(f"{path_or_url} does not contain a JSON object, using an empty record")
        return {}

    return data


def write_json(file_path: str, record: Mapping[str, Any]) -> int:
    """
    Write a record as indented JSON.

    Args:
        file_path: Destination path
        record: JSON serializable mapping

    Returns:
        Number of bytes written

    Raises:
        LoadError: If the path is empty or the file cannot be written
    """
    if not file_path:
        logger.error("Cannot write JSON, file path is empty")
        raise LoadError("Cannot write JSON, file path is empty")

    content = json.dumps(record, indent=4).encode("utf-8")

    try:
        with open(file_path, "wb") as f:
            written = f.write(content)
    except OSError as e:
        logger.error(f"Cannot open or write to {file_path}: {str(e)}")
        raise LoadError(f"Cannot open or write to {file_path}") from e

    logger.debug(f"{written} bytes written to {file_path}")
    return written


def is_valid_file(file_path: str, filters: Sequence[str] = CORPUS_FILE_FILTERS) -> bool:
    """True if file_path (symlinks resolved) exists and its name matches one of filters."""
    resolved = os.path.realpath(file_path)
    if not os.path.isfile(resolved):
        return False

    file_name = os.path.basename(resolved).lower()
    if any(fnmatch.fnmatchcase(file_name, pattern.lower()) for pattern in filters):
        return True

    logger.debug(f"{file_path} is not valid...")
    return False


def base_name(file_path: str) -> str:
    """
    File path without its suffix.

    Only the last suffix is removed, so dots inside the name are kept:
    "Best. 901 Nr. 112.json" -> "Best. 901 Nr. 112".
    """
    root, suffix = os.path.splitext(file_path)
    if not suffix:
        logger.warning(f"Cannot extract basename: {file_path} does not have a suffix")
        return file_path
    return root
