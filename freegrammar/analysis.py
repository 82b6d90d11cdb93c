"""First/follow sets and LR(0) / SLR(1) parsing tables of a grammar."""

from __future__ import annotations

from .grammar import Grammar
from .lr0 import build_automaton
from .structs import Action, ActionKind, FirstFollowSet

END_OF_INPUT = "$"

ParsingTable = list[dict[str, list[Action]]]


def _check_symbol(grammar: Grammar, symbol: str) -> None:
    if symbol not in grammar.non_terms:
        raise ValueError(f"symbol {symbol!r} is neither a terminal nor a defined non-terminal")


def _propagate(
    initial: dict[str, set[str]], edges: dict[str, set[str]]
) -> dict[str, set[str]]:
    """For every node, the union of the sets of all nodes reachable from it."""
    result: dict[str, set[str]] = {}
    for start in initial:
        seen = {start}
        stack = [start]
        collected: set[str] = set()
        while stack:
            node = stack.pop()
            collected |= initial[node]
            for target in edges.get(node, ()):
                if target not in seen:
                    seen.add(target)
                    stack.append(target)
        result[start] = collected
    return result


def _nullables(grammar: Grammar) -> set[str]:
    nullables = {p.driver for p in grammar.productions if not p.body}
    changed = bool(nullables)
    while changed:
        changed = False
        for production in grammar.productions:
            if production.driver in nullables:
                continue
            if all(symbol in nullables for symbol in production.body):
                nullables.add(production.driver)
                changed = True
    return nullables


def first_follow_table(grammar: Grammar) -> dict[str, FirstFollowSet]:
    """First set, follow set and nullability of every non-terminal."""
    table = {non_term: FirstFollowSet() for non_term in grammar.non_terms}

    nullables = _nullables(grammar)
    for symbol in nullables:
        if symbol in table:
            table[symbol].nullable = True

    # First sets: seed each driver with the first terminal found in its bodies,
    # then inherit along the leading (nullable-separated) non-terminals.
    for production in grammar.productions:
        first_terminal = next((s for s in production.body if s.islower()), None)
        if first_terminal is not None:
            table[production.driver].first.add(first_terminal)

    first_edges: dict[str, set[str]] = {}
    for production in grammar.productions:
        for symbol in production.body:
            if symbol.isupper():
                _check_symbol(grammar, symbol)
                first_edges.setdefault(production.driver, set()).add(symbol)
            if symbol.islower() or symbol not in nullables:
                break

    firsts = _propagate({n: set(s.first) for n, s in table.items()}, first_edges)
    for non_term, symbols in firsts.items():
        table[non_term].first |= symbols

    # Follow sets.
    follow_initial: dict[str, set[str]] = {n: set() for n in grammar.non_terms}
    follow_edges: dict[str, set[str]] = {}
    for production in grammar.productions:
        body = production.body
        for position, left in enumerate(body):
            if left.islower():
                continue
            _check_symbol(grammar, left)

            new_follows: set[str] = set()
            rest_nullable = True
            for right in body[position + 1 :]:
                if right.isupper():
                    _check_symbol(grammar, right)
                    new_follows |= table[right].first
                else:
                    new_follows.add(right)
                if right not in nullables:
                    rest_nullable = False
                    break

            if rest_nullable:
                follow_edges.setdefault(left, set()).add(production.driver)
            follow_initial[left] |= new_follows

    if not grammar.productions:
        raise ValueError("grammar has no productions")
    follow_initial[grammar.productions[0].driver].add(END_OF_INPUT)

    follows = _propagate(follow_initial, follow_edges)
    for non_term, symbols in follows.items():
        table[non_term].follow |= symbols

    return table


def lr0_parsing_table(grammar: Grammar) -> ParsingTable:
    """One row per automaton state, mapping each symbol to its actions."""
    automaton = build_automaton(grammar)
    table: ParsingTable = []
    for index, node in enumerate(automaton.nodes):
        row: dict[str, list[Action]] = {
            symbol: [] for symbol in (*grammar.terms, END_OF_INPUT, *grammar.non_terms)
        }

        for target, symbol in automaton.edges.get(index, ()):
            if symbol not in row:
                raise ValueError(
                    f"symbol {symbol!r} is neither a terminal nor a defined non-terminal"
                )
            action = Action.goto(target) if symbol.isupper() else Action.shift(target)
            row[symbol].append(action)

        for item in (*node.kernel, *node.closure):
            if not item.is_complete():
                continue
            production_index = item.production.index
            if production_index is None:
                row[END_OF_INPUT].append(Action.accept())
            else:
                for term in grammar.terms:
                    row[term].append(Action.reduce(production_index))
                row[END_OF_INPUT].append(Action.reduce(production_index))

        table.append(row)
    return table


def slr1_parsing_table(
    grammar: Grammar,
    parsing_table: ParsingTable | None = None,
    first_follow: dict[str, FirstFollowSet] | None = None,
) -> ParsingTable:
    """The LR(0) table with reductions kept only on the driver's follow set.

    The given table is not modified.
    """
    if parsing_table is None:
        parsing_table = lr0_parsing_table(grammar)
    if first_follow is None:
        first_follow = first_follow_table(grammar)

    def keep(action: Action, symbol: str) -> bool:
        if action.kind is not ActionKind.REDUCE:
            return True
        driver = grammar.productions[action.target].driver
        return symbol in first_follow[driver].follow

    return [
        {symbol: [a for a in actions if keep(a, symbol)] for symbol, actions in row.items()}
        for row in parsing_table
    ]