import math

import pytest

from lexanalise.lexer import Lexer, tokenize
from lexanalise.symbol_table import SymbolTable
from lexanalise.tokens import LexicalError, ReservedWord, Sign, Token, TokenCategory

END = Token(TokenCategory.FIM_ARQ)


def sn(sign):
    return Token(TokenCategory.SN, sign)


def test_empty_text_gives_end_of_file():
    assert tokenize("") == [END]


def test_next_token_keeps_returning_end():
    lexer = Lexer("x")
    assert lexer.next_token() == Token(TokenCategory.ID, "x")
    assert lexer.next_token() == END
    assert lexer.next_token() == END


def test_identifiers_enter_symbol_table_once():
    table = SymbolTable()
    tokens = tokenize("abc = x1_y abc\n", table)
    assert tokens == [
        Token(TokenCategory.ID, "abc"),
        sn(Sign.ATRIB),
        Token(TokenCategory.ID, "x1_y"),
        Token(TokenCategory.ID, "abc"),
        Token(TokenCategory.FIM_EXPR),
        END,
    ]
    assert list(table) == ["abc", "x1_y"]


def test_default_symbol_table_is_created():
    lexer = Lexer("Foo bar")
    list(lexer)
    assert list(lexer.symbols) == ["Foo", "bar"]


def test_shared_table_across_lexers():
    table = SymbolTable()
    tokenize("a b", table)
    tokenize("b c", table)
    assert list(table) == ["a", "b", "c"]


@pytest.mark.parametrize("word", list(ReservedWord))
def test_reserved_words(word):
    table = SymbolTable()
    assert tokenize(word.name.lower(), table) == [Token(TokenCategory.PR, word), END]
    assert len(table) == 0


def test_reserved_words_are_case_sensitive():
    assert tokenize("IF")[0] == Token(TokenCategory.ID, "IF")


@pytest.mark.parametrize(
    "text, sign",
    [
        ("+", Sign.ADICAO),
        ("-", Sign.SUBTRACAO),
        ("*", Sign.MULTIPLIC),
        ("/", Sign.DIVISAO),
        ("(", Sign.ABRE_PAR),
        (")", Sign.FECHA_PAR),
        ("[", Sign.ABRE_COLCHETE),
        ("]", Sign.FECHA_COLCHETE),
        ("{", Sign.ABRE_CHAVES),
        ("}", Sign.FECHA_CHAVES),
        (",", Sign.VIRGULA),
        (";", Sign.PONTO_E_VIRGULA),
        ("=", Sign.ATRIB),
        ("==", Sign.COMPARACAO),
        ("<", Sign.MENOR_QUE),
        ("<=", Sign.MENOR_OU_IGUAL),
        (">", Sign.MAIOR_QUE),
        (">=", Sign.MAIOR_OU_IGUAL),
        ("!", Sign.OPERADOR_NEGACAO),
        ("!=", Sign.OPERADOR_DIFERENTE),
        ("&", Sign.PONTEIRO),
        ("&&", Sign.OPERADOR_AND),
        ("||", Sign.OPERADOR_OR),
    ],
)
def test_signs(text, sign):
    assert tokenize(text) == [sn(sign), END]


def test_one_character_operator_leaves_next_character():
    assert tokenize("&x") == [sn(Sign.PONTEIRO), Token(TokenCategory.ID, "x"), END]
    assert tokenize("<y") == [sn(Sign.MENOR_QUE), Token(TokenCategory.ID, "y"), END]


def test_single_pipe_is_an_error():
    with pytest.raises(LexicalError, match="Caractere invalido no ESTADO 43!"):
        tokenize("a | b")


def test_tokens_without_spaces():
    assert tokenize("x+1") == [
        Token(TokenCategory.ID, "x"),
        sn(Sign.ADICAO),
        Token(TokenCategory.CT_I, 1),
        END,
    ]


def test_integer_constants():
    assert tokenize("42 007") == [
        Token(TokenCategory.CT_I, 42),
        Token(TokenCategory.CT_I, 7),
        END,
    ]


def test_real_constant():
    assert tokenize("3.25;") == [
        Token(TokenCategory.CT_REAL, 3.25),
        sn(Sign.PONTO_E_VIRGULA),
        END,
    ]


def test_real_constant_has_single_precision():
    value = tokenize("0.1")[0].value
    assert value == pytest.approx(0.1, rel=1e-6)
    assert value != 0.1


def test_huge_real_saturates():
    tokens = tokenize("1" + "0" * 60 + ".0")
    assert tokens == [Token(TokenCategory.CT_REAL, math.inf), END]


@pytest.mark.parametrize("text", ["3.", "3.x", "3. "])
def test_real_without_fraction_digits(text):
    with pytest.raises(LexicalError, match="Caractere invalido no ESTADO 3!"):
        tokenize(text)


def test_character_constant():
    assert tokenize("'a'") == [Token(TokenCategory.CARACTERE, "'a'"), END]


def test_character_constant_must_close():
    with pytest.raises(LexicalError, match="Estado 8"):
        tokenize("'ab'")
    with pytest.raises(LexicalError, match="Estado 8"):
        tokenize("'")


def test_newline_escape():
    assert tokenize("'\\n'") == [Token(TokenCategory.QUEBRA_DE_LINHA, "'\\n'"), END]


def test_nul_escape_ends_expression_without_counting_line():
    lexer = Lexer("'\\0'")
    tokens = list(lexer)
    assert tokens == [Token(TokenCategory.FIM_EXPR, "'\\0'"), END]
    assert lexer.line == 1


def test_bad_escape():
    with pytest.raises(LexicalError, match="Estado 10"):
        tokenize("'\\t'")


def test_bad_nul_close():
    with pytest.raises(LexicalError, match="Estado 13"):
        tokenize("'\\0x")


def test_string_constant():
    assert tokenize('"hi there" x') == [
        Token(TokenCategory.STRINGCON, '"hi there"'),
        Token(TokenCategory.ID, "x"),
        END,
    ]


def test_string_rejects_quote_and_backslash():
    with pytest.raises(LexicalError, match="Estado 15"):
        tokenize('"it\'s"')
    with pytest.raises(LexicalError, match="Estado 15"):
        tokenize('"a\\b"')


def test_unclosed_string():
    with pytest.raises(LexicalError):
        tokenize('"abc')


def test_block_comment_is_skipped():
    assert tokenize("/* x ** y */ z") == [Token(TokenCategory.ID, "z"), END]


def test_comment_needs_star_before_slash():
    assert tokenize("/*/ a **/b") == [Token(TokenCategory.ID, "b"), END]


def test_unclosed_comment():
    with pytest.raises(LexicalError, match="Comentário de bloco não fechado."):
        tokenize("/* open *")


def test_division_between_names():
    assert tokenize("a/b") == [
        Token(TokenCategory.ID, "a"),
        sn(Sign.DIVISAO),
        Token(TokenCategory.ID, "b"),
        END,
    ]


def test_newlines_count_lines():
    lexer = Lexer("a\nb\n")
    tokens = list(lexer)
    assert [t.category for t in tokens].count(TokenCategory.FIM_EXPR) == 2
    assert lexer.line == 3


def test_invalid_character_reports_line():
    with pytest.raises(LexicalError, match="Caracter invalido na expressao!") as info:
        tokenize("a\nb\n@")
    assert info.value.line == 3


def test_tokenize_ends_with_single_end_token():
    tokens = tokenize("int x = 5;\nfloat y = 2.5;\n")
    assert tokens[-1] == END
    assert tokens.count(END) == 1
    assert tokens[0] == Token(TokenCategory.PR, ReservedWord.INT)