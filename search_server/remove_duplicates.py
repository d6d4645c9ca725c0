"""
Duplicate removal: documents with the same set of words (ignoring frequency
and order) are duplicates. The first one in server order (ascending id) is
kept; later ones are removed.
"""

import logging

from .query import ExecutionPolicy
from .search_server import SearchServer

logger = logging.getLogger(__name__)


def find_duplicates(search_server: SearchServer) -> list[int]:
    """Return ids of documents whose word set appeared on an earlier document."""
    seen_word_sets: set[frozenset[str]] = set()
    duplicate_ids: list[int] = []
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in seen_word_sets:
            duplicate_ids.append(document_id)
        else:
            seen_word_sets.add(words)
    return duplicate_ids


def remove_duplicates(
    search_server: SearchServer,
    policy: ExecutionPolicy = ExecutionPolicy.SEQ,
) -> list[int]:
    """Remove duplicate documents from search_server and return their ids."""
    duplicate_ids = find_duplicates(search_server)
    for document_id in duplicate_ids:
        logger.info("Found duplicate document id %d", document_id)
        search_server.remove_document(document_id, policy)
    return duplicate_ids
