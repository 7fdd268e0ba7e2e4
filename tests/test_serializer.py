"""Tests for the serializer."""

import pytest

from bellande_format.errors import UnrepresentableValue
from bellande_format.options import FormatOptions
from bellande_format.serializer import serialize
from bellande_format.values import Null, VBool, VFloat, VInteger, VList, VMap, VString


def test_empty_map():
    assert serialize(VMap()) == ""

def test_flat_map_in_order():
    doc = VMap({
        "b": VInteger(1),
        "a": VString("two words"),
        "c": VBool(False),
        "d": Null,
        "e": VFloat(1.5),
    })
    assert serialize(doc) == 'b: 1\na: "two words"\nc: false\nd: null\ne: 1.5\n'

def test_list_value():
    doc = VMap({"items": VList([VInteger(1), VString("three")])})
    assert serialize(doc) == "items:\n  - 1\n  - three\n"

def test_nested_map():
    doc = VMap({"server": VMap({"host": VString("h"), "ports": VList([VInteger(80)])})})
    assert serialize(doc) == "server:\n  host: h\n  ports:\n    - 80\n"

def test_empty_containers_emit_only_key():
    doc = VMap({"a": VList(), "b": VMap(), "c": VInteger(1)})
    assert serialize(doc) == "a:\nb:\nc: 1\n"

def test_list_of_maps_uses_bare_dash():
    doc = VMap({"users": VList([VMap({"name": VString("ann"), "id": VInteger(1)})])})
    assert serialize(doc) == "users:\n  -\n    name: ann\n    id: 1\n"

def test_list_of_lists():
    doc = VMap({"grid": VList([VList([VInteger(1)]), VList([VInteger(2)])])})
    assert serialize(doc) == "grid:\n  -\n    - 1\n  -\n    - 2\n"

def test_starting_indent():
    assert serialize(VMap({"a": VInteger(1)}), indent=4) == "    a: 1\n"

def test_custom_indent_step():
    doc = VMap({"a": VMap({"b": VList([VInteger(1)])})})
    assert serialize(doc, options=FormatOptions(indent_step=4)) == "a:\n    b:\n        - 1\n"

def test_bare_scalar_renders_inline():
    assert serialize(VString("x y")) == '"x y"\n'

def test_string_quoting():
    doc = VMap({"a": VString("null"), "b": VString("7"), "c": VString("k:v"), "d": VString("")})
    assert serialize(doc) == 'a: "null"\nb: "7"\nc: "k:v"\nd: ""\n'


# ---------------------------------------------------------------------------
# Keys that cannot be read back
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key", ["a:b", "# note", "- item", " padded", "two\nlines"])
def test_bad_keys_rejected(key):
    with pytest.raises(UnrepresentableValue):
        serialize(VMap({key: VInteger(1)}))

@pytest.mark.parametrize("key", ["-", "-x", "", "with space"])
def test_unusual_keys_accepted(key):
    assert serialize(VMap({key: VInteger(1)})) == f"{key}: 1\n"

def test_line_break_in_nested_string_rejected():
    with pytest.raises(UnrepresentableValue):
        serialize(VMap({"a": VList([VString("x\ny")])}))


def test_indent_step_validated():
    with pytest.raises(ValueError):
        FormatOptions(indent_step=0)
