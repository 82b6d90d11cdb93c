from freegrammar.structs import (
    Action,
    ActionKind,
    FirstFollowSet,
    GrammarDecodeError,
    GrammarParseError,
    InvalidFormatError,
    Lr0Item,
    Production,
)


def test_item_walks_through_body():
    prod = Production(0, "S", ("a", "S", "b"))
    item = Lr0Item(prod)
    seen = []
    while not item.is_complete():
        seen.append(item.next_symbol())
        item = item.advanced()
    assert seen == list(prod.body)
    assert item.dot == len(prod.body)
    assert item.next_symbol() is None


def test_advanced_on_complete_item_is_none():
    item = Lr0Item(Production(0, "S", ()))
    assert item.is_complete()
    assert item.advanced() is None


def test_advanced_does_not_mutate():
    item = Lr0Item(Production(0, "S", ("a",)))
    nxt = item.advanced()
    assert item.dot == 0
    assert nxt.dot == 1


def test_item_display_for_start_production():
    item = Lr0Item(Production(None, "@", ("E",)))
    assert str(item) == "@ -> •E"


def test_item_display_dot_moves():
    item = Lr0Item(Production(0, "S", ("a", "b"))).advanced()
    text = str(item)
    assert text.startswith("S -> a•")
    assert text.endswith("•b")


def test_items_hash_by_value():
    p1 = Production(1, "A", ("x",))
    p2 = Production(1, "A", ("x",))
    assert {Lr0Item(p1), Lr0Item(p2)} == {Lr0Item(p1)}


def test_action_display():
    assert str(Action.accept()) == "acc"
    assert str(Action.reduce(0)) == "r1"
    assert str(Action.shift(4)) == "s4"
    assert str(Action.goto(7)) == str(7)


def test_action_kinds():
    assert Action.shift(2).kind is ActionKind.SHIFT
    assert Action.reduce(2).kind is ActionKind.REDUCE
    assert Action.goto(2).kind is ActionKind.GOTO
    assert Action.accept().target is None


def test_first_follow_defaults():
    s = FirstFollowSet()
    assert s.first == set()
    assert s.follow == set()
    assert s.nullable is False


def test_invalid_format_error_is_decode_error():
    err = InvalidFormatError("No -> arrow")
    assert isinstance(err, GrammarDecodeError)
    assert not isinstance(err, GrammarParseError)
    assert "No -> arrow" in str(err)


def test_parse_error_is_decode_error():
    err = GrammarParseError("Failed to decode base64 string")
    assert isinstance(err, GrammarDecodeError)
    assert not isinstance(err, InvalidFormatError)
    assert "Failed to decode base64 string" in str(err)