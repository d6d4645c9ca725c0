"""
Query parsing.

A raw query is a space-delimited list of words. A word prefixed with '-' is a
minus-word: documents containing it are excluded. Stop words are dropped
silently. Usage:

    parser = QueryParser(StopWordSet("and in at"))
    query = parser.parse("cat -dog")
    # query.plus_words == {"cat"}, query.minus_words == {"dog"}
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidArgumentError
from .stop_words import StopWordSet
from .tokenizer import is_valid_word, split_into_words


class ExecutionPolicy(Enum):
    """Run per-item work sequentially or on a thread pool."""

    SEQ = "seq"
    PAR = "par"


@dataclass
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


class QueryParser:
    def __init__(self, stop_words: StopWordSet) -> None:
        self.stop_words = stop_words

    def parse_word(self, text: str) -> QueryWord:
        """Classify one query token; raise InvalidArgumentError if malformed."""
        if not text:
            raise InvalidArgumentError("Query word is empty")
        is_minus = False
        if text[0] == "-":
            is_minus = True
            text = text[1:]
        if not text:
            raise InvalidArgumentError("Query word is empty")
        if not is_valid_word(text):
            raise InvalidArgumentError(f"Query word {text!r} includes special symbols")
        if text[0] == "-":
            raise InvalidArgumentError(f"Query word {text!r} starts with minus")
        return QueryWord(text, is_minus, text in self.stop_words)

    def parse(self, text: str, policy: ExecutionPolicy = ExecutionPolicy.SEQ) -> Query:
        words = split_into_words(text)
        if policy is ExecutionPolicy.PAR:
            with ThreadPoolExecutor() as ex:
                # map() re-raises the first failing word in query order
                query_words = list(ex.map(self.parse_word, words))
        else:
            query_words = [self.parse_word(word) for word in words]

        query = Query()
        for query_word in query_words:
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query
