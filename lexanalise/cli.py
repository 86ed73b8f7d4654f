"""Command that lists the tokens of a source file and its symbol table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from lexanalise.lexer import Lexer
from lexanalise.symbol_table import SymbolTable
from lexanalise.tokens import LexicalError, Sign, Token, TokenCategory

MISSING_INPUT = "Arquivo de entrada da expressao nao encontrado!"
DEFAULT_INPUT = "expressao.dat"
END_OF_FILE = " <Fim do arquivo encontrado>\n"

_SIGN_LABEL_OVERRIDES = {
    Sign.MULTIPLIC: "MULTIPLICACAO",
    Sign.ATRIB: "ATRIBUICAO",
    Sign.ABRE_PAR: "ABRE_PARENTESES",
    Sign.FECHA_PAR: "FECHA_PARENTESES",
}


def _sign_label(sign: Sign) -> str:
    return _SIGN_LABEL_OVERRIDES.get(sign, sign.name)


def format_token(token: Token) -> str:
    """Render one token the way the listing shows it."""
    category = token.category
    value = token.value
    if category is TokenCategory.ID:
        return f"<ID, {value}> "
    if category is TokenCategory.PR:
        return f"<PR, {value.name}> "
    if category is TokenCategory.SN:
        return f"<SN, {_sign_label(value)}> "
    if category is TokenCategory.CT_I:
        return f"<CT_I, {value}> "
    if category is TokenCategory.CT_REAL:
        return f"<CT_REAL, {value:.6f}> "
    if category is TokenCategory.CARACTERE:
        return f"<CARACTERE, {value}> "
    if category is TokenCategory.STRINGCON:
        return f"<STRINGCON, {value}> "
    if category is TokenCategory.QUEBRA_DE_LINHA:
        return f"<QUEBRA_DE_LINHA, {value}> "
    if category is TokenCategory.FIM_EXPR:
        return "<FIM_EXPR, 0>\n"
    return END_OF_FILE


def _render_pieces(text: str, symbols: SymbolTable) -> Iterator[str]:
    lexer = Lexer(text, symbols)
    yield f"LINHA {lexer.line}: "
    for token in lexer:
        yield format_token(token)
        if token.category is TokenCategory.FIM_EXPR:
            yield f"LINHA {lexer.line}: "
    yield symbols.format()


def render(text: str, symbols: SymbolTable | None = None) -> str:
    """Return the token listing of ``text`` followed by its symbol table.

    Identifiers are recorded in ``symbols`` (a fresh table when None).
    Raises LexicalError on invalid input.
    """
    table = symbols if symbols is not None else SymbolTable()
    return "".join(_render_pieces(text, table))


def main(argv: Sequence[str] | None = None) -> int:
    """List the tokens and symbols of a source file; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="analex", description="List the tokens of a source file."
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
        for piece in _render_pieces(text, SymbolTable()):
            out.write(piece)
    except LexicalError as exc:
        out.write(f"{exc}\n")
        return 1
    return 0