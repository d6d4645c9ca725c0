import logging

import pytest

from search_server.document import DocumentStatus
from search_server.query import ExecutionPolicy
from search_server.remove_duplicates import find_duplicates, remove_duplicates
from search_server.search_server import SearchServer


def _build_server() -> SearchServer:
    server = SearchServer("and with")
    server.add_document(1, "funny pet and nasty rat", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same words as 2
    server.add_document(3, "funny pet with curly hair", DocumentStatus.ACTUAL, [1, 2])
    # differs from 2 only by stop words
    server.add_document(4, "funny pet and curly hair", DocumentStatus.ACTUAL, [1, 2])
    # same word set as 1, other frequencies
    server.add_document(5, "funny funny pet and nasty nasty rat", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(6, "funny pet and not very nasty rat", DocumentStatus.ACTUAL, [1, 2])
    # same word set as 6, other order
    server.add_document(7, "very nasty rat and not very funny pet", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(8, "pet with rat and rat and rat", DocumentStatus.ACTUAL, [1, 2])
    server.add_document(9, "nasty rat with curly hair", DocumentStatus.ACTUAL, [1, 2])
    return server


def test_find_duplicates() -> None:
    server = _build_server()
    assert find_duplicates(server) == [3, 4, 5, 7]
    assert server.get_document_count() == 9


@pytest.mark.parametrize("policy", [ExecutionPolicy.SEQ, ExecutionPolicy.PAR])
def test_remove_duplicates(policy, caplog) -> None:
    server = _build_server()
    with caplog.at_level(logging.INFO, logger="search_server.remove_duplicates"):
        removed = remove_duplicates(server, policy)

    assert removed == [3, 4, 5, 7]
    assert server.get_document_count() == 5
    assert list(server) == [1, 2, 6, 8, 9]
    assert "Found duplicate document id 3" in caplog.text
    assert "Found duplicate document id 7" in caplog.text


def test_first_by_id_is_kept() -> None:
    server = SearchServer()
    server.add_document(10, "cat dog", DocumentStatus.ACTUAL, [])
    server.add_document(3, "dog cat cat", DocumentStatus.ACTUAL, [])
    assert remove_duplicates(server) == [10]
    assert list(server) == [3]


def test_empty_documents_are_duplicates() -> None:
    server = SearchServer("in")
    server.add_document(1, "", DocumentStatus.ACTUAL, [])
    server.add_document(2, "in in", DocumentStatus.ACTUAL, [])
    server.add_document(3, "cat", DocumentStatus.ACTUAL, [])
    assert remove_duplicates(server) == [2]


def test_no_duplicates() -> None:
    server = SearchServer()
    server.add_document(1, "cat", DocumentStatus.ACTUAL, [])
    server.add_document(2, "dog", DocumentStatus.ACTUAL, [])
    assert remove_duplicates(server) == []
    assert server.get_document_count() == 2
