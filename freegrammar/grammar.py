"""Context-free grammars with single-character symbols, and reading them."""

from __future__ import annotations

import base64
import binascii
from collections import deque
from dataclasses import dataclass, field
from itertools import groupby
from typing import Iterable

from .structs import (
    GrammarParseError,
    InvalidFormatError,
    Lr0Item,
    Production,
)

START_SYMBOL = "@"


def truncate_after_last(text: str, char: str) -> str:
    """Cut ``text`` after the last occurrence of ``char``, keeping ``char``."""
    index = text.rfind(char)
    return text[: index + 1] if index >= 0 else text


@dataclass
class Grammar:
    """A grammar: its productions, terminals and non-terminals."""

    starting_prod: Production | None = None
    productions: list[Production] = field(default_factory=list)
    terms: set[str] = field(default_factory=set)
    non_terms: set[str] = field(default_factory=set)

    def add_production(self, production: Production) -> None:
        if self.starting_prod is None:
            self.starting_prod = Production(None, START_SYMBOL, (production.driver,))
        self.non_terms.add(production.driver)
        self.terms.update(s for s in production.body if s.islower())
        self.productions.append(production)

    def add_term(self, term: str) -> None:
        self.terms.add(term)

    def add_non_term(self, non_term: str) -> None:
        self.non_terms.add(non_term)

    def sorted_terms(self) -> list[str]:
        """Terminals in parsing-table order (alphabetical), without ``$``."""
        return sorted(self.terms)

    def sorted_non_terms(self) -> list[str]:
        """Production drivers in grammar order, consecutive repeats removed."""
        return [driver for driver, _ in groupby(p.driver for p in self.productions)]

    def _driver_position(self, driver: str) -> int:
        return next(i for i, p in enumerate(self.productions) if p.driver == driver)

    def lr0_closure(self, items: Iterable[Lr0Item]) -> list[Lr0Item]:
        """Items added by closing ``items``, excluding ``items`` themselves."""
        items = list(items)
        queue = deque(items)
        expanded: set[str] = set()
        closure: list[Lr0Item] = []

        while queue:
            symbol = queue.popleft().next_symbol()
            if symbol is None or symbol in expanded:
                continue
            expanded.add(symbol)
            for production in self.productions:
                if production.driver == symbol:
                    item = Lr0Item(production)
                    queue.append(item)
                    closure.append(item)

        closure.sort(key=lambda item: self._driver_position(item.production.driver))
        return [item for item in closure if item not in items]

    def __str__(self) -> str:
        lines = []
        for p in self.productions:
            index = "?" if p.index is None else str(p.index)
            lines.append(f"{index}\t{p.driver} -> {''.join(p.body)}\n")
        return "".join(lines)


def read_from_file(path) -> str:
    """Read the grammar text stored in ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as err:
        raise GrammarParseError(f"Failed to read file {path}: {err}") from err


def decode_base64(text: str) -> str:
    """Decode standard, padded base64 into UTF-8 text."""
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as err:
        raise GrammarParseError(f"Failed to decode base64 string: {err}") from err
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as err:
        raise GrammarParseError(f"Failed to convert bytes to string: {err}") from err


def parse_grammar(text: str) -> Grammar:
    """Build a grammar from lines such as ``S -> a S b | .``."""
    grammar = Grammar()
    for line in truncate_after_last(text, ".").split("\n"):
        line = line.strip()
        if not line:
            continue
        line = line.rstrip(".")

        arrow = line.find("->")
        if arrow < 0:
            raise InvalidFormatError("No -> arrow")
        driver = line[:arrow].strip()
        bodies = line[arrow + 2 :].strip()

        if len(driver) != 1:
            raise InvalidFormatError(
                "Grammar is not free: expected one symbol on the left side "
                f'of \'->\', found "{driver}"'
            )

        for body_text in bodies.split("|"):
            body = []
            for symbol in body_text.strip().split(" "):
                if len(symbol) == 1:
                    body.append(symbol)
                elif symbol:
                    raise InvalidFormatError(
                        f'Each symbol should be a single character: "{symbol}"'
                    )
            grammar.add_production(
                Production(len(grammar.productions), driver, tuple(body))
            )
    return grammar