import pytest

from fuzzypatch.apply import Diff
from fuzzypatch.parse import ParseError, Token, TokenType, parse, tokenize


@pytest.mark.parametrize(
    "text, tokens",
    [
        pytest.param("", [Token(TokenType.EOF)], id="empty input"),
        pytest.param(
            "hello world",
            [Token(TokenType.TEXT, 0, "hello world"), Token(TokenType.EOF)],
            id="single text line",
        ),
        pytest.param(
            "hello world\n",
            [Token(TokenType.TEXT, 0, "hello world\n"), Token(TokenType.EOF)],
            id="single text line with newline",
        ),
        pytest.param(
            "<<<<<<< SEARCH line:1\n",
            [
                Token(TokenType.START_SEARCH, 0, "<<<<<<< SEARCH line:1\n"),
                Token(TokenType.EOF),
            ],
            id="start search",
        ),
        pytest.param(
            "=======\n",
            [Token(TokenType.TEXT_SEPARATOR, 0, "=======\n"), Token(TokenType.EOF)],
            id="separator",
        ),
        pytest.param(
            ">>>>>>> REPLACE\n",
            [Token(TokenType.END_REPLACE, 0, ">>>>>>> REPLACE\n"), Token(TokenType.EOF)],
            id="end replace",
        ),
        pytest.param(
            "<<<<<<< SEARCH line:1\nfoo\n=======\nbar\n>>>>>>> REPLACE\n",
            [
                Token(TokenType.START_SEARCH, 0, "<<<<<<< SEARCH line:1\n"),
                Token(TokenType.TEXT, 1, "foo\n"),
                Token(TokenType.TEXT_SEPARATOR, 2, "=======\n"),
                Token(TokenType.TEXT, 3, "bar\n"),
                Token(TokenType.END_REPLACE, 4, ">>>>>>> REPLACE\n"),
                Token(TokenType.EOF),
            ],
            id="mixed lines with newlines",
        ),
        pytest.param(
            "<<<<<<< SEARCH line:1\nfoo\n=======\nbar\n>>>>>>> REPLACE",
            [
                Token(TokenType.START_SEARCH, 0, "<<<<<<< SEARCH line:1\n"),
                Token(TokenType.TEXT, 1, "foo\n"),
                Token(TokenType.TEXT_SEPARATOR, 2, "=======\n"),
                Token(TokenType.TEXT, 3, "bar\n"),
                Token(TokenType.END_REPLACE, 4, ">>>>>>> REPLACE"),
                Token(TokenType.EOF),
            ],
            id="mixed lines without trailing newline",
        ),
    ],
)
def test_tokenize(text, tokens):
    assert list(tokenize(text)) == tokens


def test_tokenize_separator_with_crlf():
    assert list(tokenize("=======\r\n")) == [
        Token(TokenType.TEXT_SEPARATOR, 0, "=======\r\n"),
        Token(TokenType.EOF),
    ]


def test_parse_error_uses_token_type_descriptions():
    with pytest.raises(ParseError) as excinfo:
        parse("=======\n")
    message = str(excinfo.value)
    assert "StartSearchType: <<<<<<< SEARCH line:n" in message
    assert "TextSeparatorType: =======" in message


def test_parse_error_describes_text_token():
    with pytest.raises(ParseError) as excinfo:
        parse("stray text\n")
    assert "TextType" in str(excinfo.value)


@pytest.mark.parametrize(
    "text, diffs",
    [
        pytest.param("", [], id="empty input"),
        pytest.param(
            "<<<<<<< SEARCH line:1\nfoo\n=======\nbar\n>>>>>>> REPLACE\n",
            [Diff(1, "foo\n", "bar\n")],
            id="single diff block",
        ),
        pytest.param(
            "<<<<<<< SEARCH line:1\nfoo\n=======\nbar\n>>>>>>> REPLACE\n\n"
            "<<<<<<< SEARCH line:3\nbaz\n=======\nqux\n>>>>>>> REPLACE\n",
            [Diff(1, "foo\n", "bar\n"), Diff(3, "baz\n", "qux\n")],
            id="multiple diff blocks",
        ),
        pytest.param(
            "<<<<<<< SEARCH line:34\nfoo\nbar\n=======\nbaz\nqux\n>>>>>>> REPLACE\n",
            [Diff(34, "foo\nbar\n", "baz\nqux\n")],
            id="multi-line search and replace",
        ),
    ],
)
def test_parse(text, diffs):
    assert parse(text) == diffs


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("<<<<< SEARCH line:1\nfoo\nbar\n>>>>>>> REPLACE\n", id="missing separator"),
        pytest.param("<<<<< SEARCH line:1\nfoo\n=======\nbar\n", id="missing end"),
        pytest.param("<<<<<<< SEARCH line:1\nfoo\n=======\nbar\n", id="unterminated block"),
        pytest.param("<<<<<<< SEARCH\nfoo\n=======\nbar\n>>>>>>> REPLACE\n", id="no line"),
        pytest.param(
            "<<<<<<< SEARCH line:x\nfoo\n=======\nbar\n>>>>>>> REPLACE\n", id="bad number"
        ),
    ],
)
def test_parse_errors(text):
    with pytest.raises(ParseError):
        parse(text)


def test_parse_error_mentions_expected_token():
    with pytest.raises(ParseError, match="expected StartSearchType"):
        parse("stray text\n")


def test_parse_empty_search_and_replace():
    assert parse("<<<<<<< SEARCH line:2\n=======\n>>>>>>> REPLACE") == [Diff(2, "", "")]