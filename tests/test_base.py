"""Test top-level scanning: words, operators, flags, numbers, comments."""

from cmdlex.tokens import StyleCategory as S

from .conftest import assert_categories, assert_texts, significant


class TestWords:
    def test_if_defined_echo(self, lex):
        tokens = significant(lex("if defined FOO echo %FOO%"))
        assert_texts(tokens, ["if", "defined", "FOO", "echo", "%FOO%"])
        assert_categories(tokens, [S.KEYWORD, S.KEYWORD, S.NONE, S.BUILTIN, S.DEFINITION])

    def test_atoms(self, lex):
        tokens = significant(lex("true false"))
        assert_categories(tokens, [S.ATOM, S.ATOM])

    def test_lookup_ignores_case(self, lex):
        tokens = significant(lex("IF Exist GOTO EQU equ"))
        assert_categories(tokens, [S.KEYWORD] * 5)

    def test_unknown_word(self, lex):
        tokens = lex("notepad")
        assert_categories(tokens, [S.NONE])
        assert tokens[0].text == "notepad"

    def test_label_is_plain(self, lex):
        tokens = lex(":loop")
        assert_texts(tokens, [":loop"])
        assert_categories(tokens, [S.NONE])

    def test_word_with_dash(self, lex):
        tokens = lex("my-tool")
        assert_texts(tokens, ["my-tool"])


class TestWhitespace:
    def test_run_is_one_token(self, lex):
        tokens = lex("  \t ")
        assert_texts(tokens, ["  \t "])
        assert_categories(tokens, [S.NONE])

    def test_empty_line(self, lex):
        assert lex("") == []


class TestComment:
    def test_double_colon(self, lex):
        tokens = lex(":: a comment")
        assert_categories(tokens, [S.COMMENT])
        assert tokens[0].start == 0
        assert tokens[0].end == len(":: a comment")

    def test_comment_after_code(self, lex):
        tokens = lex("echo hi :: trailing")
        assert tokens[-1].category == S.COMMENT
        assert tokens[-1].text == ":: trailing"

    def test_comment_swallows_quotes(self, lex):
        tokens = lex(':: "not a string')
        assert_categories(tokens, [S.COMMENT])


class TestAssignment:
    def test_set_number(self, lex):
        tokens = significant(lex("SET x=5"))
        assert_texts(tokens, ["SET", "x", "=", "5"])
        assert_categories(tokens, [S.BUILTIN, S.DEFINITION, S.OPERATOR, S.NUMBER])

    def test_dashed_target(self, lex):
        tokens = lex("my-var=1")
        assert tokens[0].text == "my-var"
        assert tokens[0].category == S.DEFINITION

    def test_keyword_as_target(self, lex):
        tokens = lex("if=1")
        assert tokens[0].category == S.DEFINITION


class TestOperators:
    def test_at_echo_off(self, lex):
        tokens = lex("@echo off")
        assert_texts(tokens, ["@", "echo", " ", "off"])
        assert_categories(tokens, [S.OPERATOR, S.BUILTIN, S.NONE, S.NONE])

    def test_plus_and_equals(self, lex):
        tokens = lex("+=")
        assert_categories(tokens, [S.OPERATOR, S.OPERATOR])


class TestAttributes:
    def test_single_dash(self, lex):
        tokens = significant(lex("robocopy -mir"))
        assert tokens[1].text == "-mir"
        assert tokens[1].category == S.ATTRIBUTE

    def test_double_dash(self, lex):
        tokens = lex("--verbose")
        assert_texts(tokens, ["--verbose"])
        assert_categories(tokens, [S.ATTRIBUTE])

    def test_bare_dash(self, lex):
        tokens = lex("-")
        assert_categories(tokens, [S.ATTRIBUTE])


class TestNumbers:
    def test_integer(self, lex):
        tokens = lex("42")
        assert_categories(tokens, [S.NUMBER])

    def test_digits_then_punctuation(self, lex):
        tokens = lex("2>nul")
        assert_texts(tokens, ["2", ">nul"])
        assert tokens[0].category == S.NUMBER

    def test_leading_dot(self, lex):
        tokens = lex(".5")
        assert_texts(tokens, [".5"])
        assert_categories(tokens, [S.NUMBER])

    def test_digits_blending_into_word(self, lex):
        tokens = lex("123abc")
        assert_texts(tokens, ["123abc"])
        assert_categories(tokens, [S.NONE])

    def test_number_before_percent(self, lex):
        tokens = lex("100%")
        assert_texts(tokens, ["100", "%"])
        assert_categories(tokens, [S.NUMBER, S.DEFINITION])
