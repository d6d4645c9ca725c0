"""
Word splitting and validation for the search server.

Documents and queries are split on the ASCII space only. A word is valid
unless it contains a control character (code points 1-31).
Also extracts plain text from document files (HTML via BeautifulSoup) so
ingested documents reach the engine as space-delimited text.
"""

import warnings
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)


def split_into_words(text: str) -> list[str]:
    """Split text on ' ' and drop empty tokens. Other whitespace is kept inside words."""
    return [word for word in text.split(" ") if word]


def is_valid_word(word: str) -> bool:
    """Return False if word contains a control character in [1, 31]."""
    return not any("\x00" < c < " " for c in word)


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Return the distinct non-empty strings."""
    return {s for s in strings if s}


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run (newlines, tabs, ...) into a single space."""
    return " ".join(text.split())


def extract_text_from_html(html_content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(html_content, "lxml")
    # Remove script and style elements
    for element in soup(["script", "style"]):
        element.decompose()
    text = soup.get_text(separator=" ", strip=True)
    return normalize_whitespace(text)


def read_text_file(filepath: Path) -> str:
    """
    Read file content, handling common encodings.
    """
    for encoding in ("utf-8", "latin-1", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")
