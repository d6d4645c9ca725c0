"""
Index builder: loads a SearchServer from a directory of document files.

Supported files:
  - .html / .htm: visible text extracted with BeautifulSoup
  - .json: {"content": str, "status": "ACTUAL", "ratings": [int, ...]}
    ("status" and "ratings" optional)
  - anything else: read as plain text
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from .document import DocumentStatus
from .search_server import SearchServer
from .stop_words import StopWordSet
from .tokenizer import extract_text_from_html, normalize_whitespace, read_text_file

logger = logging.getLogger(__name__)

HTML_SUFFIXES = (".html", ".htm")


def _read_document(
    filepath: Path,
    default_status: DocumentStatus,
) -> tuple[str, DocumentStatus, list[int]]:
    """
    Read document text, status and ratings from a file.
    Text is returned space-delimited (newlines and tabs collapsed).
    """
    filepath = Path(filepath)
    suffix = filepath.suffix.lower()
    if suffix == ".json":
        data = json.loads(filepath.read_text(encoding="utf-8"))
        if "content" not in data:
            raise ValueError(f"JSON file has no 'content' field: {filepath}")
        content = str(data["content"])
        if data.get("status") is not None:
            try:
                status = DocumentStatus[str(data["status"]).upper()]
            except KeyError:
                raise ValueError(f"Unknown status {data['status']!r} in {filepath}") from None
        else:
            status = default_status
        ratings = [int(r) for r in data.get("ratings", [])]
        return normalize_whitespace(content), status, ratings
    content = read_text_file(filepath)
    if suffix in HTML_SUFFIXES:
        return extract_text_from_html(content), default_status, []
    return normalize_whitespace(content), default_status, []


def build_server_from_directory(
    data_dir: Path,
    stop_words: Union[str, Iterable[str], StopWordSet] = "",
    *,
    status: DocumentStatus = DocumentStatus.ACTUAL,
) -> tuple[SearchServer, dict[int, Path]]:
    """
    Build a search server from all files in a directory (recursive).
    Files are taken in sorted path order and numbered from 0; a file that
    cannot be read or is rejected by the server is skipped without using an id.
    Returns (server, {document_id: path}).
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Document directory not found: {data_dir}")

    server = SearchServer(stop_words)
    doc_id_to_path: dict[int, Path] = {}
    next_doc_id = 0

    doc_files = sorted((p for p in data_dir.rglob("*") if p.is_file()), key=lambda p: str(p))
    for filepath in doc_files:
        try:
            text, doc_status, ratings = _read_document(filepath, status)
            server.add_document(next_doc_id, text, doc_status, ratings)
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not index %s: %s", filepath, e)
            continue
        doc_id_to_path[next_doc_id] = filepath
        next_doc_id += 1

    logger.info("Indexed %d documents from %s", len(doc_id_to_path), data_dir)
    return server, doc_id_to_path
