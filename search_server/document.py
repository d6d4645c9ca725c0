"""
Document records returned by searches, and per-document metadata.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class DocumentStatus(Enum):
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"


@dataclass
class Document:
    """
    A ranked search result.
    - id: document identifier
    - relevance: TF-IDF score for the query that produced it
    - rating: average rating of the document
    """

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating}}}"


@dataclass(frozen=True)
class DocumentData:
    rating: int
    status: DocumentStatus


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Mean of ratings truncated toward zero; 0 for no ratings."""
    if not ratings:
        return 0
    total = sum(ratings)
    mean = abs(total) // len(ratings)
    return mean if total >= 0 else -mean
