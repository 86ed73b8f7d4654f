"""Finite-automaton lexical analysers for a C-like language and for expressions, with a symbol table."""

__version__ = "0.1.0"