# lexanalise

Lexical analysers built as deterministic finite automata. The package holds
two of them:

- `lexanalise.lexer` for a small C-like language: identifiers (letters, then
  letters, digits or `_`), the reserved words `if`, `else`, `while`, `for`,
  `return`, `int`, `float`, `char` and `void`, integer and real constants,
  character constants such as `'a'`, `'\n'` and `'\0'`, string constants,
  `/* ... */` block comments, arithmetic, relational and logical operators,
  `&`, and punctuation. Every identifier that is not a reserved word is
  recorded in a `SymbolTable`;
- `lexanalise.calc_lexer` for arithmetic expressions: lower-case identifiers,
  integer constants starting with a digit from 1 to 9, `+ - * / =` and
  parentheses.

Both treat each line as one expression: a newline yields a `FIM_EXPR` token,
and the end of the input yields `FIM_ARQ`. Spaces and tabs are skipped. A
character no automaton state accepts raises
`lexanalise.tokens.LexicalError`, whose `line` attribute holds the line
number where it happened.

## Installation

```
pip install .
```

## Command line

```
lexanalise expressao.dat
lexanalise-calc expressao.dat
```

The file argument is optional and defaults to `expressao.dat`. Each command
prints `inicio`, then the tokens of the file line by line in the form
`<CATEGORY, value>`, ending with `<Fim do arquivo encontrado>`.
`lexanalise` then prints the symbol table, one identifier per line with its
position. If the file cannot be read, or the input holds an invalid
character, the command prints a message and exits with status 1.

Given a file holding

```
int x = 10;
```

`lexanalise` prints

```
inicioLINHA 1: <PR, INT> <ID, x> <SN, ATRIBUICAO> <CT_I, 10> <SN, PONTO_E_VIRGULA> <FIM_EXPR, 0>
LINHA 2:  <Fim do arquivo encontrado>

Tabela de Símbolos:
0: x
```

## Library use

```python
from lexanalise.lexer import tokenize
from lexanalise.symbol_table import SymbolTable

symbols = SymbolTable(100)
for token in tokenize("while (i <= 10) i = i + 1\n", symbols):
    print(token.category.name, token.value)

print(symbols.format())
```

Each `Token` carries a `category` (`TokenCategory`) and a `value`: a `Sign`
for operators and punctuation, a `ReservedWord` for keywords, an `int` or a
single-precision `float` for constants, the text for identifiers, character
and string constants, and `None` for `FIM_EXPR` and `FIM_ARQ`.
`lookup_reserved(word)` returns the `ReservedWord` spelled as `word`, or
`None`.

`Lexer(text, symbols)` produces the same tokens one at a time through
`next_token()` or by iteration, and counts lines in its `line` attribute;
`lexanalise.cli.render(text, symbols)` returns the printed token listing and
symbol table of a whole source text as a string, and
`lexanalise.cli.format_token(token)` renders a single token.

The expression lexer works the same way:

```python
from lexanalise.calc_lexer import tokenize, render

tokens = tokenize("a = (b + 12) * c\n")
print(render("a = (b + 12) * c\n"))
```

Its tokens are `CalcToken` records with a `CalcCategory` and a value
(`CalcSign`, name, integer or `None`); `CalcLexer` yields them one at a time.

`SymbolTable` keeps distinct identifiers in order of first appearance, up to
its capacity (100 by default). `insert` returns an identifier's position,
`find` looks one up and returns `None` when it is absent, and inserting a new
name into a full table leaves the table unchanged and returns `None`. The
table supports `len()`, iteration over the names, `clear()` and `format()`.

## What it does not do

The package only splits text into tokens. It does not parse the token
stream, check it against a grammar, or evaluate expressions.

## Running the tests

```
pip install .[test]
pytest
```