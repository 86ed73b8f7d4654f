"""Token categories, sign codes, reserved words and the token record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


class LexicalError(Exception):
    """Raised when the input holds a character no token can start or continue."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class TokenCategory(IntEnum):
    """Broad class of a token."""

    ID = 1
    PR = 2
    SN = 3
    CT_I = 4
    CT_REAL = 5
    CARACTERE = 6
    STRINGCON = 7
    FIM_EXPR = 8
    FIM_ARQ = 9
    QUEBRA_DE_LINHA = 10


class Sign(IntEnum):
    """Operators and punctuation of the language."""

    ATRIB = 1
    ADICAO = 2
    SUBTRACAO = 3
    MULTIPLIC = 4
    DIVISAO = 5
    ABRE_PAR = 6
    FECHA_PAR = 7
    ABRE_COLCHETE = 8
    FECHA_COLCHETE = 9
    ABRE_CHAVES = 10
    FECHA_CHAVES = 11
    VIRGULA = 12
    PONTO_E_VIRGULA = 13
    COMPARACAO = 14
    PONTEIRO = 15
    OPERADOR_AND = 16
    OPERADOR_OR = 17
    OPERADOR_DIFERENTE = 18
    OPERADOR_NEGACAO = 19
    MENOR_QUE = 20
    MENOR_OU_IGUAL = 21
    MAIOR_QUE = 22
    MAIOR_OU_IGUAL = 23


class ReservedWord(IntEnum):
    """Keywords that are never identifiers."""

    IF = 1
    ELSE = 2
    WHILE = 3
    FOR = 4
    RETURN = 5
    INT = 6
    FLOAT = 7
    CHAR = 8
    VOID = 9


_RESERVED = {word.name.lower(): word for word in ReservedWord}

TokenValue = Union[Sign, ReservedWord, int, float, str, None]


@dataclass(frozen=True)
class Token:
    """A token: its category and, depending on it, a code, number or lexeme."""

    category: TokenCategory
    value: TokenValue = None


def lookup_reserved(word: str) -> ReservedWord | None:
    """Return the reserved word spelled exactly as ``word``, or None."""
    return _RESERVED.get(word)