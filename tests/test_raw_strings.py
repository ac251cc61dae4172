"""Test raw string literals and delimiter matching."""

from cppconvert.scanner import Scanner
from cppconvert.tokens import TokenType

from tests.conftest import assert_lexemes, assert_types


class TestBasicRawString:
    def test_no_delimiter(self, lex):
        tokens = lex('R"(AND)"')
        assert_types(tokens, [TokenType.RAW_STRING])

    def test_empty(self, lex):
        tokens = lex('R"()"')
        assert_types(tokens, [TokenType.RAW_STRING])

    def test_named_delimiter(self, lex):
        tokens = lex('R"tag(NULL)tag"')
        assert_types(tokens, [TokenType.RAW_STRING])

    def test_followed_by_code(self, lex):
        tokens = lex('R"(x)" OR')
        assert_types(tokens, [TokenType.RAW_STRING, TokenType.WHITESPACE, TokenType.OR])

    def test_multiline(self, lex):
        tokens = lex('R"(\nline AND\n)"x')
        assert_types(tokens, [TokenType.RAW_STRING, TokenType.IDENTIFIER])
        assert tokens[1].span.start.line == 3


class TestRawStringNoEscapeProcessing:
    def test_backslash_before_quote(self, lex):
        tokens = lex('R"(\\)" AND')
        assert_lexemes(tokens, ['R"(\\)"', " ", "AND"])

    def test_quotes_inside(self, lex):
        tokens = lex('R"(say "AND")"')
        assert_types(tokens, [TokenType.RAW_STRING])

    def test_comment_markers_inside(self, lex):
        tokens = lex('R"(/* // )" EQ')
        assert_types(tokens, [TokenType.RAW_STRING, TokenType.WHITESPACE, TokenType.EQ])


class TestDelimiterMatching:
    def test_closes_at_matching_delimiter(self, lex):
        source = 'R"tag(content)notTag"content)tag"'
        tokens = lex(source)
        assert_types(tokens, [TokenType.RAW_STRING])
        assert tokens[0].lexeme == source

    def test_unnamed_close_inside_named(self, lex):
        tokens = lex('R"x( )" AND )x" OR')
        assert_types(tokens, [TokenType.RAW_STRING, TokenType.WHITESPACE, TokenType.OR])

    def test_paren_inside_content(self, lex):
        tokens = lex('R"((a) AND (b))"')
        assert_types(tokens, [TokenType.RAW_STRING])


class TestPrefixes:
    def test_encoding_prefixes(self, lex):
        for prefix in ("LR", "uR", "UR", "u8R"):
            tokens = lex(prefix + '"(say "AND")"')
            assert_types(tokens, [TokenType.RAW_STRING])

    def test_plain_identifier_before_string(self, lex):
        tokens = lex('XR"(a)"')
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.STRING])

    def test_r_identifier_without_quote(self, lex):
        tokens = lex("R + OR")
        assert tokens[0].type == TokenType.IDENTIFIER
        assert tokens[-1].type == TokenType.OR

    def test_non_raw_prefixed_string(self, lex):
        tokens = lex('u8"AND"')
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.STRING])


class TestMalformed:
    def test_missing_open_paren(self, lex):
        tokens = lex('R"abc')
        assert_types(tokens, [TokenType.OTHER])
        assert tokens[0].lexeme == 'R"abc'

    def test_missing_open_paren_diagnostic(self):
        scanner = Scanner('R"abc')
        list(scanner)
        assert "missing its opening '('" in scanner.diagnostics[0].message

    def test_unterminated(self, lex):
        tokens = lex('R"x(AND)y"')
        assert_types(tokens, [TokenType.OTHER])
        assert tokens[0].lexeme == 'R"x(AND)y"'

    def test_unterminated_diagnostic_names_terminator(self):
        scanner = Scanner('R"x(AND')
        list(scanner)
        assert len(scanner.diagnostics) == 1
        assert ')x"' in scanner.diagnostics[0].message

    def test_quote_before_any_paren(self, lex):
        tokens = lex('R"(")')
        assert_types(tokens, [TokenType.OTHER])
