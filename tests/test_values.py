from dataclasses import FrozenInstanceError

import pytest

from values import ByteString, Integer, List, Dict


def test_kind_names_the_variant():
    assert ByteString("x").kind == "ByteString"
    assert Integer(1).kind == "Integer"
    assert List().kind == "List"
    assert Dict().kind == "Dict"


def test_variants_are_distinct():
    assert Integer(1) != ByteString("1")
    assert List() != Dict()


def test_values_are_immutable():
    with pytest.raises(FrozenInstanceError):
        Integer(1).value = 2
    with pytest.raises(TypeError):
        Dict({"a": Integer(1)}).entries["b"] = Integer(2)


def test_list_copies_its_items():
    items = [Integer(1)]
    value = List(items)
    items.append(Integer(2))
    assert value.items == (Integer(1),)
    assert value[0] == Integer(1)
    assert len(value) == 1


def test_dict_copies_its_entries():
    entries = {"a": Integer(1)}
    value = Dict(entries)
    entries["b"] = Integer(2)
    assert "b" not in value
    assert value["a"] == Integer(1)


def test_dict_equality_ignores_key_order():
    first = Dict({"a": Integer(1), "b": Integer(2)})
    second = Dict({"b": Integer(2), "a": Integer(1)})
    assert first == second


def test_dict_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Dict())


def test_to_python():
    value = Dict({
        "announce": ByteString("http://tracker"),
        "info": Dict({"length": Integer(10), "path": List([ByteString("a"), ByteString("b")])}),
    })
    assert value.to_python() == {
        "announce": "http://tracker",
        "info": {"length": 10, "path": ["a", "b"]},
    }
