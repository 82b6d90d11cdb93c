# freegrammar

Tools for studying context-free grammars whose symbols are single
characters. From a grammar it builds the LR(0) automaton, the FIRST and
FOLLOW sets with nullability, and the LR(0) and SLR(1) parsing tables.
The results can be printed as LaTeX source or as a Graphviz DOT graph.

## Grammar format

One line per non-terminal, alternatives separated by `|`, symbols
separated by spaces, each line ending with a dot. Upper-case letters are
non-terminals, lower-case letters are terminals, and an empty alternative
stands for epsilon:

```
S -> A b | c .
A -> a A | .
```

Everything after the last dot in the text is ignored. The first driver
is the start symbol; a synthetic production `@ -> S` is added for it.

## Command line

```
freegrammar --file grammar.txt --dot
freegrammar --file grammar.txt --latex
freegrammar --base-64 UyAtPiBhIC4= --latex --lr0-parsing-table
```

Input comes from exactly one of `--file` (`-f`) or `--base-64`.
`--dot` prints the LR(0) automaton in DOT notation; `--latex` prints a
LaTeX report. The two are mutually exclusive, and with neither of them
nothing is printed.

With `--latex`, these options pick the report's sections:

- `--grammophone-link` — links to Grammophone and to an online Graphviz
  viewer (this option turns on both links)
- `--grammar-definition` — the productions in an `align*` block
- `--lr0-parsing-table` — the LR(0) parsing table
- `--slr1-parsing-table` — the SLR(1) parsing table
- `--first-follow-set` — FIRST set, FOLLOW set and nullability
- `--all` — every section

With none of them, every section is written. `--graphviz-link` is
accepted but does not select a section on its own.

If the grammar cannot be read or is malformed, a message starting with
`Error decoding grammar:` goes to standard error.

## Library

```python
from freegrammar.grammar import parse_grammar
from freegrammar.lr0 import build_automaton
from freegrammar.analysis import first_follow_table, lr0_parsing_table, slr1_parsing_table
from freegrammar.latex import LatexOptions, generate_latex

grammar = parse_grammar("S -> A b | c .\nA -> a A | .\n")
automaton = build_automaton(grammar)
print(automaton.to_dot())

sets = first_follow_table(grammar)
lr0 = lr0_parsing_table(grammar)
slr1 = slr1_parsing_table(grammar, lr0, sets)

print(generate_latex(grammar, LatexOptions.no_links()))
```

Modules:

- `freegrammar.structs` — `Production`, `Lr0Item`, `FirstFollowSet`,
  `Action` / `ActionKind`, and the error classes.
- `freegrammar.grammar` — `Grammar` (with `lr0_closure`), `parse_grammar`,
  `read_from_file`, `decode_base64`.
- `freegrammar.lr0` — `build_automaton`, `Lr0Automaton` (`to_dot`),
  `Lr0AutomatonNode`, `closures_report`.
- `freegrammar.analysis` — `first_follow_table`, `lr0_parsing_table`,
  `slr1_parsing_table`. A parsing table is a list of rows, one per
  automaton state, each mapping a symbol (terminals, `$`, non-terminals)
  to a list of `Action`s; more than one action in a cell is a conflict.
- `freegrammar.latex` — `generate_latex`, `LatexOptions`,
  `parsing_table_latex`, `first_follow_table_latex`,
  `grammar_as_plain_text`, `grammophone_link`, `graphviz_link`.
- `freegrammar.cli` — the `freegrammar` command (`main`).

## Errors

Malformed grammars raise `InvalidFormatError`. Files that cannot be read
and base64 text that cannot be decoded raise `GrammarParseError`. Both
come from `freegrammar.structs` and share the base class
`GrammarDecodeError`. Building an automaton for a grammar with no
productions, or analysing one that uses a non-terminal with no
productions of its own, raises `ValueError`.

## What it does not do

The package builds parsing tables but does not use them: it has no
parser that reads an input string, and it does not check a grammar for
conflicts beyond showing them in the tables. Symbols are single
characters only.