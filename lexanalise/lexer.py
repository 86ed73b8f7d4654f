"""Lexer for a small C-like language, feeding identifiers into a symbol table."""

from __future__ import annotations

import math
import string
import struct
from collections.abc import Iterator

from lexanalise.symbol_table import SymbolTable
from lexanalise.tokens import (
    LexicalError,
    Sign,
    Token,
    TokenCategory,
    lookup_reserved,
)

INVALID_CHARACTER = "Caracter invalido na expressao!"
BAD_FRACTION = "Caractere invalido no ESTADO 3!"
BAD_CHAR_CLOSE = "Caractere inválido no Estado 8"
BAD_ESCAPE = "Caractere inválido no Estado 10"
BAD_NUL_CLOSE = "Caractere inválido no Estado 13"
BAD_STRING_CHAR = "Caractere inválido no Estado 15"
BAD_PIPE = "Caractere invalido no ESTADO 43!"
UNCLOSED_COMMENT = "Comentário de bloco não fechado."
UNCLOSED_NEWLINE_CHAR = "Constante caractere não fechada."
UNCLOSED_STRING = "Cadeia de caracteres não fechada."

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ID_REST = _LETTERS | _DIGITS | {"_"}

_SINGLE_SIGNS = {
    "+": Sign.ADICAO,
    "-": Sign.SUBTRACAO,
    "*": Sign.MULTIPLIC,
    "(": Sign.ABRE_PAR,
    ")": Sign.FECHA_PAR,
    "[": Sign.ABRE_COLCHETE,
    "]": Sign.FECHA_COLCHETE,
    "{": Sign.ABRE_CHAVES,
    "}": Sign.FECHA_CHAVES,
    ",": Sign.VIRGULA,
    ";": Sign.PONTO_E_VIRGULA,
}

# first character -> (sign when followed by '=', sign otherwise)
_EQUALS_PAIRS = {
    ">": (Sign.MAIOR_OU_IGUAL, Sign.MAIOR_QUE),
    "<": (Sign.MENOR_OU_IGUAL, Sign.MENOR_QUE),
    "=": (Sign.COMPARACAO, Sign.ATRIB),
    "!": (Sign.OPERADOR_DIFERENTE, Sign.OPERADOR_NEGACAO),
}


def _to_single(value: float) -> float:
    """Round ``value`` to single precision, saturating to infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Lexer:
    """Splits source text into tokens; ``line`` counts the lines ended so far."""

    def __init__(self, text: str, symbols: SymbolTable | None = None) -> None:
        self._text = text
        self._pos = 0
        self.line = 1
        self.symbols = symbols if symbols is not None else SymbolTable()

    def _read(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        c = self._text[self._pos]
        self._pos += 1
        return c

    def _peek(self) -> str | None:
        return self._text[self._pos] if self._pos < len(self._text) else None

    def _take_while(self, first: str, allowed: frozenset[str]) -> str:
        end = self._pos
        while end < len(self._text) and self._text[end] in allowed:
            end += 1
        word = first + self._text[self._pos:end]
        self._pos = end
        return word

    def _error(self, message: str) -> LexicalError:
        return LexicalError(message, self.line)

    def next_token(self) -> Token:
        """Return the next token; FIM_ARQ is returned at and after the end."""
        while True:
            c = self._read()
            if c is None:
                return Token(TokenCategory.FIM_ARQ)
            if c in (" ", "\t"):
                continue
            if c == "\n":
                self.line += 1
                return Token(TokenCategory.FIM_EXPR)
            if c in _LETTERS:
                return self._identifier(c)
            if c in _DIGITS:
                return self._number(c)
            if c in _SINGLE_SIGNS:
                return Token(TokenCategory.SN, _SINGLE_SIGNS[c])
            if c in _EQUALS_PAIRS:
                with_equals, alone = _EQUALS_PAIRS[c]
                if self._peek() == "=":
                    self._pos += 1
                    return Token(TokenCategory.SN, with_equals)
                return Token(TokenCategory.SN, alone)
            if c == "&":
                if self._peek() == "&":
                    self._pos += 1
                    return Token(TokenCategory.SN, Sign.OPERADOR_AND)
                return Token(TokenCategory.SN, Sign.PONTEIRO)
            if c == "|":
                if self._read() == "|":
                    return Token(TokenCategory.SN, Sign.OPERADOR_OR)
                raise self._error(BAD_PIPE)
            if c == "/":
                if self._peek() == "*":
                    self._pos += 1
                    self._skip_comment()
                    continue
                return Token(TokenCategory.SN, Sign.DIVISAO)
            if c == "'":
                return self._char_constant()
            if c == '"':
                return self._string_constant()
            raise self._error(INVALID_CHARACTER)

    def _identifier(self, first: str) -> Token:
        word = self._take_while(first, _ID_REST)
        reserved = lookup_reserved(word)
        if reserved is not None:
            return Token(TokenCategory.PR, reserved)
        self.symbols.insert(word)
        return Token(TokenCategory.ID, word)

    def _number(self, first: str) -> Token:
        digits = self._take_while(first, _DIGITS)
        if self._peek() != ".":
            return Token(TokenCategory.CT_I, int(digits))
        self._pos += 1
        c = self._read()
        if c is None or c not in _DIGITS:
            raise self._error(BAD_FRACTION)
        digits = digits + "." + self._take_while(c, _DIGITS)
        return Token(TokenCategory.CT_REAL, _to_single(float(digits)))

    def _skip_comment(self) -> None:
        after_star = False
        while True:
            c = self._read()
            if c is None:
                raise self._error(UNCLOSED_COMMENT)
            if after_star and c == "/":
                return
            after_star = c == "*"

    def _char_constant(self) -> Token:
        c = self._read()
        if c is None:
            raise self._error(BAD_CHAR_CLOSE)
        if c not in ("'", "\\"):
            if self._read() != "'":
                raise self._error(BAD_CHAR_CLOSE)
            return Token(TokenCategory.CARACTERE, f"'{c}'")
        escape = self._read()
        if escape == "n":
            while True:
                d = self._read()
                if d is None:
                    raise self._error(UNCLOSED_NEWLINE_CHAR)
                if d == "'":
                    return Token(TokenCategory.QUEBRA_DE_LINHA, f"'{c}n'")
        if escape == "0":
            if self._read() != "'":
                raise self._error(BAD_NUL_CLOSE)
            return Token(TokenCategory.FIM_EXPR, f"'{c}0'")
        raise self._error(BAD_ESCAPE)

    def _string_constant(self) -> Token:
        chars = ['"']
        while True:
            c = self._read()
            if c is None:
                raise self._error(UNCLOSED_STRING)
            if c == '"':
                chars.append(c)
                return Token(TokenCategory.STRINGCON, "".join(chars))
            if c in ("'", "\\"):
                raise self._error(BAD_STRING_CHAR)
            chars.append(c)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.category is TokenCategory.FIM_ARQ:
                return


def tokenize(text: str, symbols: SymbolTable | None = None) -> list[Token]:
    """Return every token of ``text``, ending with FIM_ARQ."""
    return list(Lexer(text, symbols))