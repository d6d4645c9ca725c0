"""
Stop words: words never indexed and never matched by queries.
"""

from typing import Iterable, Iterator, Union

from nltk import download as _nltk_download
from nltk.corpus import stopwords

from .errors import InvalidArgumentError
from .tokenizer import is_valid_word, make_unique_non_empty_strings, split_into_words


class StopWordSet:
    """
    Immutable set of stop words, built from a space-delimited string or from
    an explicit collection of words. Empty strings are dropped; a word with a
    control character is rejected.
    """

    def __init__(self, stop_words: Union[str, Iterable[str]] = "") -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        words = make_unique_non_empty_strings(stop_words)
        for word in words:
            if not is_valid_word(word):
                raise InvalidArgumentError(f"Stop word {word!r} includes special symbols")
        self._words: frozenset[str] = frozenset(words)

    def __contains__(self, word: str) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"StopWordSet({sorted(self._words)!r})"


def load_nltk_stop_words(language: str = "english") -> list[str]:
    """Return nltk's stop-word list for language, downloading the corpus if needed."""
    _nltk_download("stopwords", quiet=True)
    return stopwords.words(language)
