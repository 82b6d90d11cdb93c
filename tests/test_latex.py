import base64
from dataclasses import astuple
from urllib.parse import unquote

import pytest

from freegrammar.analysis import first_follow_table, lr0_parsing_table
from freegrammar.grammar import parse_grammar
from freegrammar.latex import (
    GRAMMOPHONE_URL,
    LatexOptions,
    first_follow_table_latex,
    generate_latex,
    grammar_as_plain_text,
    grammophone_link,
    graphviz_link,
    parsing_table_latex,
)
from freegrammar.lr0 import build_automaton
from freegrammar.structs import Action, FirstFollowSet


@pytest.fixture
def grammar():
    return parse_grammar("S -> a S b | .\n")


@pytest.fixture
def expr_grammar():
    return parse_grammar("E -> E p T | T .\nT -> i | o E c .\n")


def test_options_full_enables_everything():
    assert astuple(LatexOptions.full()) == (True, True, True, True, True, True)


def test_options_no_links():
    options = LatexOptions.no_links()
    assert not options.grammophone_link
    assert not options.graphviz_link
    assert options.grammar_definition and options.first_follow_set


def test_plain_text_round_trip(expr_grammar):
    reparsed = parse_grammar(grammar_as_plain_text(expr_grammar))
    assert reparsed.productions == expr_grammar.productions


def test_plain_text_one_line_per_driver(expr_grammar):
    lines = grammar_as_plain_text(expr_grammar).splitlines()
    assert [line.split(" ")[0] for line in lines] == ["E", "T"]
    assert all(line.endswith(" .") for line in lines)


def test_grammophone_link_encodes_plain_text(grammar):
    link = grammophone_link(grammar)
    assert link.startswith(GRAMMOPHONE_URL)
    payload = link[len(GRAMMOPHONE_URL):]
    assert base64.b64decode(payload).decode("utf-8") == grammar_as_plain_text(grammar)


def test_graphviz_link_decodes_to_dot(expr_grammar):
    encoded = graphviz_link(expr_grammar)
    assert " " not in encoded and "\n" not in encoded
    assert unquote(encoded) == build_automaton(expr_grammar).to_dot()


def test_parsing_table_latex_structure():
    table = [
        {"a": [Action.shift(1)], "$": [], "S": [Action.goto(2)]},
        {"a": [Action.reduce(0), Action.shift(3)]},
    ]
    text = parsing_table_latex(table, ["a", "$"], ["S"], "Caption")
    assert "\\begin{tabular}{cccc}\n" in text
    assert "States & a & \\$ & S\\\\\n" in text
    assert f"s0 & {Action.shift(1)} &  & {Action.goto(2)} \\\\ \n" in text
    assert f"s1 & {Action.reduce(0)}/{Action.shift(3)} &   &   \\\\ \n" in text
    assert text.endswith("\\caption{Caption}\\end{table}")


def test_parsing_table_latex_without_caption():
    text = parsing_table_latex([], ["a"], ["S"])
    assert "\\caption" not in text
    assert text.endswith("\\end{tabular}\n\\end{table}")


def test_parsing_table_latex_one_row_per_state(expr_grammar):
    table = lr0_parsing_table(expr_grammar)
    text = parsing_table_latex(table, [*expr_grammar.sorted_terms(), "$"], ["E", "T"])
    rows = [line for line in text.splitlines() if line.startswith("s")]
    assert len(rows) == len(table)


def test_first_follow_table_latex_row():
    sets = {"S": FirstFollowSet({"a"}, {"$", "b"}, True)}
    text = first_follow_table_latex(sets, ["a", "b", "$"], ["S", "X"])
    assert "S & a & b,\\$ & Yes\\\\\n" in text
    assert "X &" not in text


def test_first_follow_table_latex_uses_computed_sets(grammar):
    sets = first_follow_table(grammar)
    text = first_follow_table_latex(sets, ["a", "b", "$"], ["S"])
    nullable = "Yes" if sets["S"].nullable else "No"
    assert text.count(nullable) == 1
    assert "Symbol & First\\-set & Follow\\-set & Nullable" in text


def test_generate_latex_nothing_selected(grammar):
    options = LatexOptions(False, False, False, False, False, False)
    assert generate_latex(grammar, options) == (
        "\n% Grammophone link\n \n\n\n% Graphviz link\n \n\n\n% Grammar\n \n\n"
        "\n% Lr0 parsing table\n \n\n\n% Slr1 parsing table\n \n\n"
        "\n% First-follow set\n\n"
    )


def test_generate_latex_full(grammar):
    text = generate_latex(grammar)
    assert "\\href{" + grammophone_link(grammar) + "}{View on Grammophone}" in text
    assert graphviz_link(grammar) in text
    assert "\\epsilon" in text
    assert "Tabella di parsing LR(0)" in text
    assert "Tabella di parsing SLR(1)" in text
    assert text.count("\\begin{table}[H]") == 3


def test_generate_latex_no_links(grammar):
    text = generate_latex(grammar, LatexOptions.no_links())
    assert "\\href" not in text
    assert "\\begin{align*}\n" in text