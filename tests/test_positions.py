"""Test line and column accounting."""

from mush.lexer import tokenize
from mush.tokens import KeywordKind, LexemeKind


class TestLines:
    def test_second_line(self):
        tokens = tokenize("a\nb")
        b = tokens[2]
        assert b.kind == LexemeKind.IDENTIFIER
        assert b.position.line == 2
        assert b.position.column == 1

    def test_newline_token_on_its_own_line(self):
        tokens = tokenize("a\nb")
        newline = tokens[1]
        assert newline.kind == KeywordKind.NEWLINE
        assert newline.position.line == 1
        assert newline.position.column == 2

    def test_blank_lines(self):
        tokens = tokenize("\n\n\nx")
        assert tokens[3].position.line == 4

    def test_eof_position(self):
        tokens = tokenize("ab\ncd")
        eof = tokens[-1]
        assert eof.position.line == 2
        assert eof.position.column == 2
        assert eof.position.offset == 5


class TestColumns:
    def test_first_character_is_column_one(self):
        assert tokenize("(")[0].position.column == 1

    def test_column_counts_characters(self):
        tokens = tokenize("let  abc = 1")
        assert [t.position.column for t in tokens[:-1]] == [1, 6, 10, 12]

    def test_multibyte_characters_count_once(self):
        tokens = tokenize('"é" x')
        assert tokens[1].position.column == 5
        # é is two bytes
        assert tokens[1].position.offset == 5

    def test_column_resets_after_newline(self):
        tokens = tokenize("abc def\n  x")
        assert tokens[-2].position.line == 2
        assert tokens[-2].position.column == 3


class TestOffsets:
    def test_offset_of_first_byte(self):
        tokens = tokenize("a bc")
        assert tokens[0].position.offset == 0
        assert tokens[1].position.offset == 2

    def test_offset_after_newline(self):
        tokens = tokenize("x\ny")
        assert tokens[2].position.offset == 2
