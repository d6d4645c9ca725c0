from search_server.tokenizer import (
    extract_text_from_html,
    is_valid_word,
    make_unique_non_empty_strings,
    normalize_whitespace,
    split_into_words,
)


def test_split_on_spaces_only() -> None:
    assert split_into_words("  curly   cat\ttail ") == ["curly", "cat\ttail"]


def test_split_empty_text() -> None:
    assert split_into_words("") == []
    assert split_into_words("    ") == []


def test_valid_words() -> None:
    assert is_valid_word("")
    assert is_valid_word("-")
    assert is_valid_word("cat-dog")
    assert is_valid_word("кот")
    assert is_valid_word("\x00")


def test_control_characters_are_invalid() -> None:
    assert not is_valid_word("ca\x01t")
    assert not is_valid_word("\x1f")
    assert not is_valid_word("tab\there")


def test_unique_non_empty_strings() -> None:
    assert make_unique_non_empty_strings(["a", "", "b", "a"]) == {"a", "b"}


def test_normalize_whitespace() -> None:
    assert normalize_whitespace(" curly\ncat\t\ttail \r\n") == "curly cat tail"


def test_extract_text_from_html_drops_scripts() -> None:
    html = (
        "<html><head><title>Pets</title><script>var x = 1;</script></head>"
        "<body><h1>curly cat</h1>\n<p>fancy\tcollar</p></body></html>"
    )
    text = extract_text_from_html(html)
    assert "var" not in text
    assert split_into_words(text) == ["Pets", "curly", "cat", "fancy", "collar"]
