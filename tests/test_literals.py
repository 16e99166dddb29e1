"""Test string and number literals and line comments."""

from mush.errors import UnterminatedString
from mush.lexer import tokenize
from mush.tokens import KeywordKind, LexemeKind

from tests.conftest import assert_kinds, assert_lexemes


class TestStrings:
    def test_simple_string(self):
        tokens = tokenize('"abc"')
        assert_kinds(tokens, [LexemeKind.STRING, KeywordKind.EOF])
        assert tokens[0].text == "abc"

    def test_empty_string(self, lex):
        tokens = lex('""')
        assert_kinds(tokens, [LexemeKind.STRING])
        assert tokens[0].text == ""

    def test_string_keeps_spaces_and_punctuation(self, lex):
        tokens = lex('"a b, (c)!"')
        assert_lexemes(tokens, ["a b, (c)!"])

    def test_string_keeps_multibyte_characters(self, lex):
        tokens = lex('"naïve ☃"')
        assert_lexemes(tokens, ["naïve ☃"])

    def test_string_position_is_opening_quote(self, lex):
        tokens = lex('x = "hi"')
        assert tokens[2].position.column == 5

    def test_adjacent_strings(self, lex):
        tokens = lex('"a""b"')
        assert_lexemes(tokens, ["a", "b"])


class TestUnterminatedStrings:
    def test_newline_before_closing_quote(self, scan_source):
        tokens, faults = scan_source('"abc\n')
        assert not [t for t in tokens if t.kind == LexemeKind.STRING]
        assert len(faults) == 1
        assert isinstance(faults[0], UnterminatedString)
        assert faults[0].partial_text == "abc"

    def test_crlf_before_closing_quote(self, scan_source):
        tokens, faults = scan_source('"abc\r\nx')
        assert faults[0].partial_text == "abc"
        assert faults[0].line_text == '"abc'
        assert_kinds(tokens, [KeywordKind.NEWLINE, LexemeKind.IDENTIFIER, KeywordKind.EOF])

    def test_inner_carriage_return_kept(self, scan_source):
        _, faults = scan_source('"a\rb\n')
        assert faults[0].partial_text == "a\rb"

    def test_scanning_resumes_after_newline(self, scan_source):
        tokens, faults = scan_source('"abc\nlet')
        assert_kinds(tokens, [KeywordKind.NEWLINE, KeywordKind.LET, KeywordKind.EOF])
        assert tokens[1].position.line == 2
        assert len(faults) == 1

    def test_end_of_input(self, scan_source):
        tokens, faults = scan_source('"abc')
        assert_kinds(tokens, [KeywordKind.EOF])
        assert len(faults) == 1
        assert faults[0].partial_text == "abc"

    def test_fault_points_at_opening_quote(self, scan_source):
        _, faults = scan_source('let s = "oops\n')
        fault = faults[0]
        assert fault.position.line == 1
        assert fault.position.column == 9
        assert fault.line_text == 'let s = "oops'


class TestIntegers:
    def test_integer(self):
        tokens = tokenize("123")
        assert_kinds(tokens, [LexemeKind.INTEGER, KeywordKind.EOF])
        assert tokens[0].text == "123"

    def test_all_digits(self, lex):
        assert_lexemes(lex("0 9 1234567890"), ["0", "9", "1234567890"])

    def test_terminator_is_rescanned(self, lex):
        tokens = lex("12;")
        assert_kinds(tokens, [LexemeKind.INTEGER, KeywordKind.SEMICOLON])

    def test_integer_then_identifier(self, lex):
        tokens = lex("3x")
        assert_kinds(tokens, [LexemeKind.INTEGER, LexemeKind.IDENTIFIER])


class TestFloats:
    def test_float(self):
        tokens = tokenize("123.45")
        assert_kinds(tokens, [LexemeKind.FLOAT, KeywordKind.EOF])
        assert tokens[0].text == "123.45"

    def test_float_then_operator(self, lex):
        tokens = lex("0.5+1")
        assert_kinds(tokens, [LexemeKind.FLOAT, KeywordKind.PLUS, LexemeKind.INTEGER])

    def test_trailing_dot_is_integer_then_dot(self, lex):
        tokens = lex("123.")
        assert_kinds(tokens, [LexemeKind.INTEGER, KeywordKind.DOT])
        assert tokens[0].text == "123"

    def test_dot_followed_by_identifier(self, lex):
        tokens = lex("1.x")
        assert_kinds(tokens, [LexemeKind.INTEGER, KeywordKind.DOT, LexemeKind.IDENTIFIER])

    def test_second_dot_ends_float(self, lex):
        tokens = lex("1.2.3")
        assert_kinds(tokens, [LexemeKind.FLOAT, KeywordKind.DOT, LexemeKind.INTEGER])
        assert_lexemes(tokens, ["1.2", ".", "3"])

    def test_leading_dot_is_not_float(self, lex):
        tokens = lex(".5")
        assert_kinds(tokens, [KeywordKind.DOT, LexemeKind.INTEGER])


class TestComments:
    def test_comment_yields_only_newline(self):
        tokens = tokenize("//comment\n")
        assert_kinds(tokens, [KeywordKind.NEWLINE, KeywordKind.EOF])

    def test_comment_at_end_of_input(self):
        assert_kinds(tokenize("// trailing"), [KeywordKind.EOF])

    def test_code_before_comment(self, lex):
        tokens = lex("x // note\ny")
        assert_kinds(
            tokens,
            [LexemeKind.IDENTIFIER, KeywordKind.NEWLINE, LexemeKind.IDENTIFIER],
        )
        assert tokens[2].position.line == 2

    def test_comment_hides_unknown_characters(self, scan_source):
        _, faults = scan_source("// $ @ # \"\n")
        assert faults == []
