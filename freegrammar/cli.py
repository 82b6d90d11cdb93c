"""Command line: read a grammar and print LaTeX tables or the LR(0) automaton."""

from __future__ import annotations

import argparse
import sys

from .grammar import decode_base64, parse_grammar, read_from_file
from .latex import LatexOptions, generate_latex
from .lr0 import build_automaton
from .structs import GrammarDecodeError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freegrammar",
        description="Analyse a context-free grammar with single-character symbols.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", help="Input file path")
    source.add_argument("--base-64", dest="base64", help="Base64 encoded input")

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--latex", action="store_true", help="Generate LaTeX source code")
    output.add_argument(
        "--dot", action="store_true", help="Generate DOT notation for lr0 automaton"
    )

    sections = parser.add_argument_group("latex format")
    sections.add_argument("--grammophone-link", action="store_true", help="Include Grammophone link")
    sections.add_argument("--graphviz-link", action="store_true", help="Include Graphviz link")
    sections.add_argument(
        "--grammar-definition", action="store_true", help="Include grammar definition"
    )
    sections.add_argument(
        "--lr0-parsing-table", action="store_true", help="Include LR(0) parsing table"
    )
    sections.add_argument(
        "--slr1-parsing-table", action="store_true", help="Include SLR(1) parsing table"
    )
    sections.add_argument(
        "--first-follow-set", action="store_true", help="Include first-follow set"
    )
    sections.add_argument(
        "--all", action="store_true", help="Include all of the possible latex format options"
    )
    return parser


def latex_options_from_args(args: argparse.Namespace) -> LatexOptions:
    """The report sections the parsed arguments select; none selected means all."""
    if args.all:
        return LatexOptions.full()
    selected = (
        args.grammophone_link,
        args.grammar_definition,
        args.lr0_parsing_table,
        args.slr1_parsing_table,
        args.first_follow_set,
    )
    if not any(selected):
        return LatexOptions.full()
    return LatexOptions(
        grammophone_link=args.grammophone_link,
        graphviz_link=args.grammophone_link,
        grammar_definition=args.grammar_definition,
        lr0_parsing_table=args.lr0_parsing_table,
        slr1_parsing_table=args.slr1_parsing_table,
        first_follow_set=args.first_follow_set,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        text = read_from_file(args.file) if args.file is not None else decode_base64(args.base64)
        grammar = parse_grammar(text)
    except GrammarDecodeError as err:
        print(f"Error decoding grammar: {type(err).__name__}: {err}", file=sys.stderr)
        return 0

    if args.latex:
        print(generate_latex(grammar, latex_options_from_args(args)))
    elif args.dot:
        print(build_automaton(grammar).to_dot())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())