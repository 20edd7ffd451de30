"""Tests for the component tokenizer."""

from __future__ import annotations

from wbmark.modules.parser.tokens import Token, TokenKind, Tokenizer


def _kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in Tokenizer(text)]


class TestNextToken:
    """Tests for Tokenizer.next_token."""

    def test_no_tokens(self) -> None:
        """Plain markdown has no tokens."""
        assert Tokenizer("# Title\n\nJust text: nothing else.").next_token(0) is None

    def test_inline_token(self) -> None:
        """An inline tag yields its name and attribute text."""
        token = Tokenizer('See :photo{src="a.png"} here').next_token(0)

        assert token == Token(
            TokenKind.INLINE,
            start=4,
            end=23,
            name="photo",
            attrs='src="a.png"',
            raw=':photo{src="a.png"}',
        )

    def test_block_open_token_absorbs_line_break(self) -> None:
        """A block opener consumes the newline that follows it."""
        text = "::spoiler{title=x}\nbody"
        token = Tokenizer(text).next_token(0)

        assert token is not None
        assert token.kind is TokenKind.BLOCK_OPEN
        assert token.name == "spoiler"
        assert token.attrs == "title=x"
        assert token.raw == "::spoiler{title=x}"
        assert text[token.end :] == "body"

    def test_block_open_without_attributes(self) -> None:
        """Braces are optional on block openers."""
        token = Tokenizer("::info\ntext").next_token(0)

        assert token is not None
        assert token.kind is TokenKind.BLOCK_OPEN
        assert token.name == "info"
        assert token.attrs == ""

    def test_close_token_absorbs_surrounding_line_breaks(self) -> None:
        """A closer owns one newline before and one after it."""
        text = "text\n::\nmore"
        token = Tokenizer(text).next_token(0)

        assert token is not None
        assert token.kind is TokenKind.BLOCK_CLOSE
        assert token.raw == "::"
        assert text[: token.start] == "text"
        assert text[token.end :] == "more"

    def test_leftmost_match_wins(self) -> None:
        """An earlier inline beats a later block opener and vice versa."""
        assert _kinds(":a{x=1} ::b") == [TokenKind.INLINE, TokenKind.BLOCK_OPEN]
        assert _kinds("::b{} :a{x=1}") == [TokenKind.BLOCK_OPEN, TokenKind.INLINE]

    def test_block_open_beats_inline_inside_it(self) -> None:
        """The inline pattern inside ::name{} never wins."""
        assert _kinds("::photo{src=a}") == [TokenKind.BLOCK_OPEN]

    def test_quadruple_colon_is_two_closes(self) -> None:
        """:::: is two closers, never an opener."""
        tokens = list(Tokenizer("::::"))

        assert [t.kind for t in tokens] == [TokenKind.BLOCK_CLOSE, TokenKind.BLOCK_CLOSE]
        assert all(t.name == "" for t in tokens)

    def test_triple_colon_before_name(self) -> None:
        """:::name is a close followed by an inline-style colon."""
        assert _kinds(":::photo{a=1}") == [TokenKind.BLOCK_CLOSE, TokenKind.INLINE]

    def test_attributes_span_lines(self) -> None:
        """Attribute text may contain newlines."""
        token = Tokenizer(':photo{src="a.png"\n  alt="x"}').next_token(0)

        assert token is not None
        assert token.kind is TokenKind.INLINE
        assert token.attrs == 'src="a.png"\n  alt="x"'

    def test_attributes_end_at_first_brace(self) -> None:
        """The first } ends the tag, even inside quotes."""
        token = Tokenizer(':x{t="a}b"}').next_token(0)

        assert token is not None
        assert token.raw == ':x{t="a}'
        assert token.attrs == 't="a'

    def test_apostrophe_in_bare_value(self) -> None:
        """An apostrophe doesn't extend the tag past its brace."""
        text = ":photo{alt=It's}\n\nSome 'quoted' words :info{x=1}"
        tokens = list(Tokenizer(text))

        assert [t.raw for t in tokens] == [":photo{alt=It's}", ":info{x=1}"]

    def test_unbalanced_quote_in_block_opener(self) -> None:
        """A stray quote in a block opener stays inside its braces."""
        text = '::spoiler{title="Open}\nbody "text"\n::'
        tokens = list(Tokenizer(text))

        assert [t.kind for t in tokens] == [TokenKind.BLOCK_OPEN, TokenKind.BLOCK_CLOSE]
        assert tokens[0].attrs == 'title="Open'

    def test_inline_requires_braces(self) -> None:
        """A colon-word without braces is plain text."""
        assert Tokenizer("Note: time is 10:30 today").next_token(0) is None

    def test_unterminated_braces_are_text(self) -> None:
        """An inline tag with no closing brace is not a token."""
        assert Tokenizer(':photo{src="a.png" and more text').next_token(0) is None

    def test_search_starts_at_position(self) -> None:
        """Tokens before the position are ignored."""
        text = ":a{} :b{}"
        token = Tokenizer(text).next_token(1)

        assert token is not None
        assert token.name == "b"

    def test_names_allow_hyphens(self) -> None:
        """Component names may contain hyphens."""
        token = Tokenizer("::product-section{title=x}").next_token(0)

        assert token is not None
        assert token.name == "product-section"


class TestTokenizerIteration:
    """Tests for iterating a Tokenizer."""

    def test_yields_non_overlapping_tokens_in_order(self) -> None:
        """Iteration walks the document once, left to right."""
        text = "::outer{}\nhello\n::inner{}\nworld\n::\nbye\n::"
        tokens = list(Tokenizer(text))

        assert [t.kind for t in tokens] == [
            TokenKind.BLOCK_OPEN,
            TokenKind.BLOCK_OPEN,
            TokenKind.BLOCK_CLOSE,
            TokenKind.BLOCK_CLOSE,
        ]
        for previous, current in zip(tokens, tokens[1:], strict=False):
            assert previous.end <= current.start

    def test_many_tags_without_closing_brace(self) -> None:
        """Unterminated tags with many quotes are scanned without blowup."""
        text = ":x{" + ' "a" ' * 200

        assert list(Tokenizer(text)) == []
