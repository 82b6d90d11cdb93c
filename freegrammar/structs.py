"""Core value types: productions, LR(0) items, parsing actions and errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Production:
    """A grammar production ``driver -> body``.

    ``index`` is the production's position in the grammar. It is ``None`` for
    the synthetic starting production.
    """

    index: int | None
    driver: str
    body: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.driver} -> {''.join(self.body)}"


@dataclass(frozen=True)
class Lr0Item:
    """A production with a dot marking how much of its body has been seen."""

    production: Production
    dot: int = 0

    def is_complete(self) -> bool:
        return self.dot >= len(self.production.body)

    def next_symbol(self) -> str | None:
        """The symbol right after the dot, or ``None`` if the item is complete."""
        body = self.production.body
        return body[self.dot] if self.dot < len(body) else None

    def advanced(self) -> Lr0Item | None:
        """The item with the dot moved one symbol right, or ``None`` if complete."""
        if self.is_complete():
            return None
        return Lr0Item(self.production, self.dot + 1)

    def __str__(self) -> str:
        body = "".join(self.production.body)
        return f"{self.production.driver} -> {body[:self.dot]}•{body[self.dot:]}"


@dataclass
class FirstFollowSet:
    """First set, follow set and nullability of one non-terminal."""

    first: set[str] = field(default_factory=set)
    follow: set[str] = field(default_factory=set)
    nullable: bool = False


class ActionKind(Enum):
    SHIFT = "shift"
    REDUCE = "reduce"
    ACCEPT = "accept"
    GOTO = "goto"


@dataclass(frozen=True)
class Action:
    """An entry of an LR parsing table."""

    kind: ActionKind
    target: int | None = None

    @staticmethod
    def shift(to: int) -> Action:
        return Action(ActionKind.SHIFT, to)

    @staticmethod
    def reduce(index: int) -> Action:
        return Action(ActionKind.REDUCE, index)

    @staticmethod
    def goto(to: int) -> Action:
        return Action(ActionKind.GOTO, to)

    @staticmethod
    def accept() -> Action:
        return Action(ActionKind.ACCEPT)

    def __str__(self) -> str:
        if self.kind is ActionKind.SHIFT:
            return f"s{self.target}"
        if self.kind is ActionKind.REDUCE:
            # Productions are shown 1-based.
            return f"r{self.target + 1}"
        if self.kind is ActionKind.GOTO:
            return f"{self.target}"
        return "acc"


class GrammarDecodeError(Exception):
    """Raised when a grammar cannot be read or understood."""


class InvalidFormatError(GrammarDecodeError):
    """The grammar text does not follow the expected format."""


class GrammarParseError(GrammarDecodeError):
    """The grammar text could not be obtained or decoded."""