import pytest

from search_server import stop_words as stop_words_module
from search_server.errors import InvalidArgumentError
from search_server.stop_words import StopWordSet, load_nltk_stop_words


def test_from_string() -> None:
    stop_words = StopWordSet("and in  at and")
    assert len(stop_words) == 3
    assert "and" in stop_words
    assert "curly" not in stop_words
    assert list(stop_words) == ["and", "at", "in"]


def test_from_collection_drops_empty() -> None:
    stop_words = StopWordSet(["in", "", "the", "in"])
    assert list(stop_words) == ["in", "the"]


def test_membership_is_exact() -> None:
    stop_words = StopWordSet("and")
    assert "And" not in stop_words
    assert "-and" not in stop_words


def test_control_character_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        StopWordSet(["in", "bad\x12word"])
    with pytest.raises(ValueError):
        StopWordSet("in bad\x12word")


def test_load_nltk_stop_words(monkeypatch) -> None:
    downloads = []

    class FakeCorpus:
        def words(self, language):
            assert language == "english"
            return ["a", "the", "and"]

    monkeypatch.setattr(
        stop_words_module, "_nltk_download", lambda name, quiet: downloads.append(name)
    )
    monkeypatch.setattr(stop_words_module, "stopwords", FakeCorpus())

    words = load_nltk_stop_words()
    assert words == ["a", "the", "and"]
    assert downloads == ["stopwords"]
    assert "the" in StopWordSet(words)
