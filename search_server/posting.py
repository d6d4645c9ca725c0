"""
Inverted and forward index data structures.

The inverted index maps word -> {document_id: tf share}; the forward index
maps document_id -> {word: tf share}. The forward index is always the exact
transpose of the inverted index. Both are mutated only through
DocumentIndex.add_document and DocumentIndex.remove_document.
"""

from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from .query import ExecutionPolicy


class DocumentIndex:
    """
    Word postings for every document, held in both directions.
    """

    def __init__(self) -> None:
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}

    def add_document(self, document_id: int, words: Sequence[str]) -> None:
        """Index a document's words (stop words already removed, already validated)."""
        word_freqs: dict[str, float] = {}
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                word_freqs[word] = word_freqs.get(word, 0.0) + inv_word_count
        for word, tf in word_freqs.items():
            self._word_to_document_freqs.setdefault(word, {})[document_id] = tf
        self._document_to_word_freqs[document_id] = word_freqs

    def remove_document(
        self,
        document_id: int,
        policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    ) -> None:
        """Drop a document from both directions. The caller checks it is indexed."""
        words = list(self._document_to_word_freqs[document_id])
        if policy is ExecutionPolicy.PAR:
            with ThreadPoolExecutor() as ex:
                # each word owns a distinct posting list
                list(ex.map(lambda word: self._remove_posting(word, document_id), words))
        else:
            for word in words:
                self._remove_posting(word, document_id)
        # empty posting lists are popped after the per-word pass
        for word in words:
            if not self._word_to_document_freqs[word]:
                del self._word_to_document_freqs[word]
        del self._document_to_word_freqs[document_id]

    def _remove_posting(self, word: str, document_id: int) -> None:
        del self._word_to_document_freqs[word][document_id]

    def get_postings(self, word: str) -> Mapping[int, float]:
        """Return a read-only {document_id: tf} for a word, or an empty mapping."""
        return MappingProxyType(self._word_to_document_freqs.get(word, {}))

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Return a read-only {word: tf} for a document, or an empty mapping."""
        return MappingProxyType(self._document_to_word_freqs.get(document_id, {}))

    def contains(self, word: str, document_id: int) -> bool:
        return document_id in self._word_to_document_freqs.get(word, {})

    def words(self) -> Iterator[str]:
        """Iterate over all indexed words."""
        return iter(self._word_to_document_freqs)

    def __len__(self) -> int:
        return len(self._word_to_document_freqs)

    def __contains__(self, word: str) -> bool:
        return word in self._word_to_document_freqs
