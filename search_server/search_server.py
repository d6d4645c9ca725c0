"""
In-memory search server.

Owns the document store, the dual word index and the stop words. Ranks
documents for a query with TF-IDF:

    relevance(d) = sum_{w in plus-words} tf(w, d) * ln(N / df(w))

where tf is the word's share of the document's (non-stop) words, N is the
number of documents and df the number of documents containing w. Documents
containing any minus-word are excluded. Results are sorted by relevance,
near-equal relevance (within RELEVANCE_EPSILON) by rating, and truncated to
MAX_RESULT_DOCUMENT_COUNT.
"""

import logging
import math
from functools import cmp_to_key
from typing import Callable, Iterable, Iterator, Mapping, Sequence, Union

from .document import Document, DocumentData, DocumentStatus, compute_average_rating
from .errors import DocumentNotFoundError, InvalidArgumentError
from .posting import DocumentIndex
from .query import ExecutionPolicy, Query, QueryParser
from .stop_words import StopWordSet
from .tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


def make_document_predicate(
    document_predicate: Union[DocumentPredicate, DocumentStatus, None] = None,
) -> DocumentPredicate:
    """Accept None (ACTUAL only), a status, or a (id, status, rating) -> bool callable."""
    if document_predicate is None:
        document_predicate = DocumentStatus.ACTUAL
    if isinstance(document_predicate, DocumentStatus):
        status = document_predicate
        return lambda document_id, document_status, rating: document_status == status
    return document_predicate


def _compare_documents(lhs: Document, rhs: Document) -> int:
    # negative when lhs ranks first
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


class SearchServer:
    def __init__(self, stop_words: Union[str, Iterable[str], StopWordSet] = "") -> None:
        if not isinstance(stop_words, StopWordSet):
            stop_words = StopWordSet(stop_words)
        self.stop_words = stop_words
        self._parser = QueryParser(stop_words)
        self._index = DocumentIndex()
        self._documents: dict[int, DocumentData] = {}

    # -- document lifecycle ------------------------------------------------

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        if document_id < 0:
            raise InvalidArgumentError(f"Document id {document_id} is less than zero")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Document id {document_id} already exists")
        words = self._split_into_words_no_stop(document)

        self._index.add_document(document_id, words)
        self._documents[document_id] = DocumentData(compute_average_rating(ratings), status)
        logger.debug("Added document %d (%d words)", document_id, len(words))

    def remove_document(
        self,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    ) -> None:
        if document_id not in self._documents:
            raise InvalidArgumentError(f"Document id {document_id} not found")
        self._index.remove_document(document_id, policy)
        del self._documents[document_id]
        logger.debug("Removed document %d", document_id)

    def get_document_count(self) -> int:
        return len(self._documents)

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Word -> tf share for a document; empty for an unknown id."""
        return self._index.get_word_frequencies(document_id)

    def iterate_ids(self) -> list[int]:
        """Live document ids in ascending order."""
        return sorted(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self.iterate_ids())

    def __len__(self) -> int:
        return self.get_document_count()

    # -- queries -----------------------------------------------------------

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: Union[DocumentPredicate, DocumentStatus, None] = None,
        *,
        policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    ) -> list[Document]:
        """
        Return at most MAX_RESULT_DOCUMENT_COUNT documents for raw_query.
        document_predicate may be a status, a callable (id, status, rating),
        or None for ACTUAL documents.
        """
        query = self._parser.parse(raw_query, policy)
        predicate = make_document_predicate(document_predicate)
        matched = self.find_all_documents(query, predicate)
        matched.sort(key=cmp_to_key(_compare_documents))
        return matched[:MAX_RESULT_DOCUMENT_COUNT]

    def find_all_documents(self, query: Query, document_predicate: DocumentPredicate) -> list[Document]:
        """Score every document matching query and document_predicate, unsorted."""
        document_to_relevance: dict[int, float] = {}
        for word in query.plus_words:
            postings = self._index.get_postings(word)
            if not postings:
                continue
            idf = self._compute_inverse_document_freq(word)
            for document_id, tf in postings.items():
                data = self._documents[document_id]
                if document_predicate(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + tf * idf
                    )

        for word in query.minus_words:
            for document_id in self._index.get_postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self._documents[document_id].rating)
            for document_id, relevance in document_to_relevance.items()
        ]

    def match_document(
        self,
        raw_query: str,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    ) -> tuple[list[str], DocumentStatus]:
        """
        Return the query's plus-words present in the document (sorted) and the
        document's status. The word list is empty if any minus-word matches.
        """
        query = self._parser.parse(raw_query, policy)
        if document_id not in self._documents:
            raise DocumentNotFoundError(document_id)
        status = self._documents[document_id].status

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return [], status
        matched_words = sorted(
            word for word in query.plus_words if self._index.contains(word, document_id)
        )
        return matched_words, status

    # -- helpers -----------------------------------------------------------

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = [word for word in split_into_words(text) if word not in self.stop_words]
        for word in words:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Word {word!r} includes special symbols")
        return words

    def _compute_inverse_document_freq(self, word: str) -> float:
        return math.log(self.get_document_count() / len(self._index.get_postings(word)))
