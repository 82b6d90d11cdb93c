"""LaTeX reports of a grammar: definition, parsing tables, first/follow sets."""

from __future__ import annotations

import base64
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import quote

from .analysis import END_OF_INPUT, first_follow_table, lr0_parsing_table, slr1_parsing_table
from .grammar import Grammar
from .lr0 import build_automaton
from .structs import Action, FirstFollowSet

GRAMMOPHONE_URL = "https://mdaines.github.io/grammophone/?s="
GRAPHVIZ_URL = "https://dreampuf.github.io/GraphvizOnline/?engine=dot#"

LR0_CAPTION = "Tabella di parsing LR(0)"
SLR1_CAPTION = "Tabella di parsing SLR(1)"


@dataclass(frozen=True)
class LatexOptions:
    """Which sections a LaTeX report includes."""

    grammophone_link: bool = True
    graphviz_link: bool = True
    grammar_definition: bool = True
    lr0_parsing_table: bool = True
    slr1_parsing_table: bool = True
    first_follow_set: bool = True

    @staticmethod
    def full() -> LatexOptions:
        return LatexOptions()

    @staticmethod
    def no_links() -> LatexOptions:
        return LatexOptions(grammophone_link=False, graphviz_link=False)


def _escape(symbol: str) -> str:
    return "\\$" if symbol == END_OF_INPUT else symbol


def _productions_by_driver(grammar: Grammar) -> dict[str, list]:
    grouped: dict[str, list] = {}
    for production in grammar.productions:
        grouped.setdefault(production.driver, []).append(production)
    return grouped


def grammar_as_plain_text(grammar: Grammar) -> str:
    """The grammar in the plain ``S -> a S b | .`` notation, one driver per line."""
    grouped = _productions_by_driver(grammar)
    lines = []
    for driver in grammar.sorted_non_terms():
        bodies = " | ".join(" ".join(p.body) for p in grouped[driver])
        lines.append(f"{driver} -> {bodies} .\n")
    return "".join(lines)


def grammophone_link(grammar: Grammar) -> str:
    """A link that opens the grammar in Grammophone."""
    encoded = base64.b64encode(grammar_as_plain_text(grammar).encode("utf-8"))
    return GRAMMOPHONE_URL + encoded.decode("ascii")


def graphviz_link(grammar: Grammar) -> str:
    """The URL-encoded DOT notation of the grammar's LR(0) automaton."""
    return quote(build_automaton(grammar).to_dot(), safe="")


def _cell(row: Mapping[str, Sequence[Action]], symbol: str) -> str:
    actions = row.get(symbol)
    if actions is None:
        return " "
    return "/".join(str(action) for action in actions)


def parsing_table_latex(
    table: Sequence[Mapping[str, Sequence[Action]]],
    terms: Sequence[str],
    non_terms: Sequence[str],
    caption: str | None = None,
) -> str:
    """A LaTeX table with one row per state and one column per symbol."""
    parts = [
        "\\begin{table}[H]",
        "\\centering",
        f"\\begin{{tabular}}{{{'c' * (len(terms) + len(non_terms) + 1)}}}\n",
        "\\toprule\n",
        "States & {} & {}\\\\\n".format(
            " & ".join(_escape(t) for t in terms), " & ".join(non_terms)
        ),
        "\\midrule\n",
    ]
    for index, row in enumerate(table):
        cells = [_cell(row, symbol) for symbol in (*terms, *non_terms)]
        parts.append(f"s{index} & {' & '.join(cells)} \\\\ \n")
    parts.append("\\bottomrule\n")
    parts.append("\\end{tabular}\n")
    if caption is not None:
        parts.append(f"\\caption{{{caption}}}")
    parts.append("\\end{table}")
    return "".join(parts)


def first_follow_table_latex(
    first_follow: Mapping[str, FirstFollowSet],
    terms: Sequence[str],
    non_terms: Sequence[str],
) -> str:
    """A LaTeX table of first set, follow set and nullability per non-terminal."""
    parts = [
        "\\begin{table}[H]",
        "\\centering",
        "\\begin{tabular}{cccc}\n",
        "\\toprule\n",
        "Symbol & First\\-set & Follow\\-set & Nullable\\\\\n",
        "\\midrule\n",
    ]
    for non_term in non_terms:
        entry = first_follow.get(non_term)
        if entry is None:
            continue
        first = ",".join(_escape(t) for t in terms if t in entry.first)
        follow = ",".join(_escape(t) for t in terms if t in entry.follow)
        nullable = "Yes" if entry.nullable else "No"
        parts.append(f"{non_term} & {first} & {follow} & {nullable}\\\\\n")
    parts.append("\\bottomrule\n")
    parts.append("\\end{tabular}\n")
    parts.append("\\end{table}")
    return "".join(parts)


def _grammar_definition_latex(grammar: Grammar, non_terms: Sequence[str]) -> str:
    grouped = _productions_by_driver(grammar)
    separator = " \\mid "
    parts = ["\\begin{align*}\n"]
    for driver in non_terms:
        bodies = [
            "".join(p.body) if p.body else "\\epsilon" for p in grouped[driver]
        ]
        parts.append(f"{driver} &\\rightarrow {separator.join(bodies)} \\\\\n")
    parts.append("\\end{align*}\n")
    return "".join(parts)


def generate_latex(grammar: Grammar, options: LatexOptions | None = None) -> str:
    """The full LaTeX report, with the sections ``options`` selects."""
    if options is None:
        options = LatexOptions.full()

    first_follow = first_follow_table(grammar)
    lr0_table = lr0_parsing_table(grammar)
    slr1_table = slr1_parsing_table(grammar, lr0_table, first_follow)

    terms = [*grammar.sorted_terms(), END_OF_INPUT]
    non_terms = grammar.sorted_non_terms()

    grammophone = ""
    if options.grammophone_link:
        grammophone = f"\\href{{{grammophone_link(grammar)}}}{{View on Grammophone}}"

    graphviz = ""
    if options.graphviz_link:
        graphviz = f"\\href{{{GRAPHVIZ_URL}{graphviz_link(grammar)}}}{{View on Graphviz}}"

    definition = ""
    if options.grammar_definition:
        definition = _grammar_definition_latex(grammar, non_terms)

    lr0 = ""
    if options.lr0_parsing_table:
        lr0 = parsing_table_latex(lr0_table, terms, non_terms, LR0_CAPTION)

    slr1 = ""
    if options.slr1_parsing_table:
        slr1 = parsing_table_latex(slr1_table, terms, non_terms, SLR1_CAPTION)

    sets = ""
    if options.first_follow_set:
        sets = first_follow_table_latex(first_follow, terms, non_terms)

    return (
        f"\n% Grammophone link\n{grammophone} \n\n"
        f"\n% Graphviz link\n{graphviz} \n\n"
        f"\n% Grammar\n{definition} \n\n"
        f"\n% Lr0 parsing table\n{lr0} \n\n"
        f"\n% Slr1 parsing table\n{slr1} \n\n"
        f"\n% First-follow set\n{sets}\n"
    )