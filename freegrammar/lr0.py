"""The LR(0) automaton of a grammar."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .grammar import Grammar
from .structs import Lr0Item


@dataclass(frozen=True)
class Lr0AutomatonNode:
    """A state: its kernel items and the items its closure adds."""

    kernel: tuple[Lr0Item, ...]
    closure: tuple[Lr0Item, ...]

    def generated_kernel(self, symbol: str) -> list[Lr0Item]:
        """Kernel of the state reached from this one by reading ``symbol``."""
        return [
            item.advanced()
            for item in (*self.kernel, *self.closure)
            if item.next_symbol() == symbol
        ]


@dataclass
class Lr0Automaton:
    """States, plus outgoing edges ``(target, symbol)`` keyed by source state."""

    nodes: list[Lr0AutomatonNode] = field(default_factory=list)
    edges: dict[int, list[tuple[int, str]]] = field(default_factory=dict)

    def _edge_triples(self):
        for source, targets in self.edges.items():
            for target, symbol in targets:
                yield source, target, symbol

    def to_dot(self) -> str:
        """The automaton in Graphviz DOT notation, one record per state."""
        parts = ["digraph G {\nnode[shape=record]\n\n"]
        for index, node in enumerate(self.nodes):
            kernel = "".join(f"{item}\\n".replace("->", "→") for item in node.kernel)
            closure = "".join(f"{item}\\n".replace("->", "→") for item in node.closure)
            kernel, closure = kernel.rstrip(), closure.rstrip()
            if closure:
                parts.append(f'{index} [label="{{ {index} | {kernel} | {closure} }}"]\n')
            else:
                parts.append(f'{index} [label="{{ {index} | {kernel} }}"]\n')
        parts.append("\n\n//nodes\n")
        for source, target, symbol in self._edge_triples():
            parts.append(f'{source} -> {target} [label="{symbol}"]\n')
        parts.append("}\n")
        return "".join(parts)

    def __str__(self) -> str:
        lines = []
        for index, node in enumerate(self.nodes):
            lines.append(f"Node {index}:")
            lines.append("  Kernel:")
            lines.extend(f"    {item}" for item in node.kernel)
            lines.append("  Closure:")
            lines.extend(f"    {item}" for item in node.closure)
        lines.append("Edges:")
        lines.extend(f"  {s} --{c}--> {t}" for s, t, c in self._edge_triples())
        return "\n".join(lines) + "\n"


def _outgoing_symbols(grammar: Grammar, node: Lr0AutomatonNode) -> list[str]:
    # Kernel symbols keep their kernel order; closure symbols follow in
    # parsing-table column order.
    ordered: list[str] = []
    seen: set[str] = set()
    for item in node.kernel:
        symbol = item.next_symbol()
        if symbol is not None and symbol not in seen:
            ordered.append(symbol)
            seen.add(symbol)

    from_closure: set[str] = set()
    for item in node.closure:
        symbol = item.next_symbol()
        if symbol is not None and symbol not in seen:
            seen.add(symbol)
            from_closure.add(symbol)

    columns = grammar.sorted_terms() + grammar.sorted_non_terms()
    ordered.extend(symbol for symbol in columns if symbol in from_closure)
    return ordered


def _make_node(grammar: Grammar, kernel: list[Lr0Item]) -> Lr0AutomatonNode:
    return Lr0AutomatonNode(tuple(kernel), tuple(grammar.lr0_closure(kernel)))


def build_automaton(grammar: Grammar) -> Lr0Automaton:
    """Build the LR(0) automaton, numbering states breadth first."""
    if grammar.starting_prod is None:
        raise ValueError("grammar has no productions")

    first = _make_node(grammar, [Lr0Item(grammar.starting_prod)])
    automaton = Lr0Automaton(nodes=[first])
    indices = {first: 0}
    pending = deque([0])

    while pending:
        current = pending.popleft()
        node = automaton.nodes[current]
        for symbol in _outgoing_symbols(grammar, node):
            kernel = node.generated_kernel(symbol)
            if not kernel:
                continue
            target_node = _make_node(grammar, kernel)
            if target_node not in indices:
                indices[target_node] = len(automaton.nodes)
                automaton.nodes.append(target_node)
                pending.append(indices[target_node])
            automaton.edges.setdefault(current, []).append(
                (indices[target_node], symbol)
            )
    return automaton


def closures_report(grammar: Grammar) -> str:
    """A listing of the closure of every production's initial item."""
    lines = []
    for production in grammar.productions:
        item = Lr0Item(production)
        lines.append(f"Closure for production {item}:")
        for closed in grammar.lr0_closure([item]):
            body = "".join(closed.production.body)
            lines.append(f"  {closed.production.driver} -> {body}")
    return "".join(line + "\n" for line in lines)