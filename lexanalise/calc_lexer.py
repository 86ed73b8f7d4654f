"""Lexer for simple arithmetic expressions, one expression per line."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Union

from lexanalise.tokens import LexicalError

INVALID_CHARACTER = "Caracter invalido na expressao!"
MISSING_INPUT = "Arquivo de entrada da expressao nao encontrado!"
DEFAULT_INPUT = "expressao.dat"


class CalcCategory(IntEnum):
    """Category of an expression token."""

    ID = 1
    SN = 2
    CT_I = 3
    FIM_EXPR = 4
    FIM_ARQ = 5


class CalcSign(IntEnum):
    """Operators of the expression language."""

    ATRIB = 1
    ADICAO = 2
    SUBTRACAO = 3
    MULTIPLIC = 4
    DIVISAO = 5
    ABRE_PAR = 6
    FECHA_PAR = 7
    COMPARACAO = 8


@dataclass(frozen=True)
class CalcToken:
    """A token: sign code for SN, name for ID, value for CT_I, else None."""

    category: CalcCategory
    value: Union[CalcSign, str, int, None] = None


_SINGLE_SIGNS = {
    "+": CalcSign.ADICAO,
    "-": CalcSign.SUBTRACAO,
    "*": CalcSign.MULTIPLIC,
    "/": CalcSign.DIVISAO,
    "=": CalcSign.ATRIB,
    "(": CalcSign.ABRE_PAR,
    ")": CalcSign.FECHA_PAR,
}

_SIGN_LABELS = {
    CalcSign.ADICAO: "ADICAO",
    CalcSign.SUBTRACAO: "SUBTRACAO",
    CalcSign.MULTIPLIC: "MULTIPLICACAO",
    CalcSign.DIVISAO: "DIVISAO",
    CalcSign.ATRIB: "ATRIBUICAO",
    CalcSign.ABRE_PAR: "ABRE_PARENTESES",
    CalcSign.FECHA_PAR: "FECHA_PARENTESES",
}

_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")
_NONZERO = _DIGITS - {"0"}
_ID_REST = _LOWER | _DIGITS | {"_"}


class CalcLexer:
    """Splits expression text into tokens; ``line`` counts lines read so far."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.line = 1

    def _take_while(self, allowed: frozenset[str]) -> str:
        start = self._pos - 1
        end = self._pos
        while end < len(self._text) and self._text[end] in allowed:
            end += 1
        self._pos = end
        return self._text[start:end]

    def next_token(self) -> CalcToken:
        """Return the next token; FIM_ARQ is returned at and after the end."""
        while True:
            if self._pos >= len(self._text):
                return CalcToken(CalcCategory.FIM_ARQ)
            c = self._text[self._pos]
            self._pos += 1
            if c in (" ", "\t"):
                continue
            if c in _LOWER:
                return CalcToken(CalcCategory.ID, self._take_while(_ID_REST))
            if c in _NONZERO:
                return CalcToken(CalcCategory.CT_I, int(self._take_while(_DIGITS)))
            sign = _SINGLE_SIGNS.get(c)
            if sign is not None:
                return CalcToken(CalcCategory.SN, sign)
            if c == "\n":
                self.line += 1
                return CalcToken(CalcCategory.FIM_EXPR)
            raise LexicalError(INVALID_CHARACTER, self.line)

    def __iter__(self) -> Iterator[CalcToken]:
        while True:
            token = self.next_token()
            yield token
            if token.category is CalcCategory.FIM_ARQ:
                return


def tokenize(text: str) -> list[CalcToken]:
    """Return every token of ``text``, ending with FIM_ARQ."""
    return list(CalcLexer(text))


def format_token(token: CalcToken) -> str:
    """Render one token the way the listing shows it."""
    category = token.category
    if category is CalcCategory.ID:
        return f"<ID, {token.value}> "
    if category is CalcCategory.SN:
        label = _SIGN_LABELS.get(token.value)
        return f"<SN, {label}> " if label else ""
    if category is CalcCategory.CT_I:
        return f"<CT_I, {token.value}> "
    if category is CalcCategory.FIM_EXPR:
        return "<FIM_EXPR, 0>\n"
    return " <Fim do arquivo encontrado>\n"


def _render_pieces(text: str) -> Iterator[str]:
    lexer = CalcLexer(text)
    yield f"LINHA {lexer.line}: "
    for token in lexer:
        yield format_token(token)
        if token.category is CalcCategory.FIM_EXPR:
            yield f"LINHA {lexer.line}: "


def render(text: str) -> str:
    """Return the line-by-line token listing of ``text``."""
    return "".join(_render_pieces(text))


def main(argv: Sequence[str] | None = None) -> int:
    """List the tokens of an expression file; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="calcula", description="List the tokens of an expression file."
    )
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("inicio")
    try:
        text = Path(args.path).read_text()
    except OSError:
        out.write(MISSING_INPUT + "\n")
        return 1
    try:
        for piece in _render_pieces(text):
            out.write(piece)
    except LexicalError as exc:
        out.write(f"{exc}\n")
        return 1
    return 0