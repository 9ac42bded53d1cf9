from dataclasses import dataclass

import pytest

from patternkit.typemap import TypeMap, ValueMissingError


@dataclass
class DataA:
    value: str


@dataclass
class DataB:
    value: int


@pytest.fixture
def type_map():
    return TypeMap(int, int, float, float, DataA, DataA, DataB, DataB)


def test_add_and_get_values(type_map):
    type_map.add_value(int, 42)
    type_map.add_value(float, 3.14)
    type_map.add_value(DataA, DataA("Hello, TypeMap!"))
    type_map.add_value(DataB, DataB(10))
    assert type_map.get_value(int) == 42
    assert type_map.get_value(float) == 3.14
    assert type_map.get_value(DataA).value == "Hello, TypeMap!"
    assert type_map.get_value(DataB).value == 10


def test_value_is_converted_to_value_type(type_map):
    type_map.add_value(DataA, "Hello, TypeMap!")
    type_map.add_value(DataB, 10)
    assert type_map.get_value(DataA) == DataA("Hello, TypeMap!")
    assert type_map.get_value(DataB) == DataB(10)


def test_contains(type_map):
    assert not type_map.contains(int)
    type_map.add_value(int, 42)
    assert type_map.contains(int)


def test_removed_value_is_missing(type_map):
    type_map.add_value(float, 3.14)
    type_map.remove_value(float)
    assert not type_map.contains(float)
    with pytest.raises(ValueMissingError, match="Value not present"):
        type_map.get_value(float)


def test_missing_value_is_lookup_error(type_map):
    with pytest.raises(LookupError):
        type_map.get_value(int)


def test_add_value_overwrites(type_map):
    type_map.add_value(int, 1)
    type_map.add_value(int, 2)
    assert type_map.get_value(int) == 2


def test_unknown_key(type_map):
    with pytest.raises(KeyError):
        type_map.add_value(str, "x")
    with pytest.raises(KeyError):
        type_map.contains(str)


def test_odd_number_of_arguments():
    with pytest.raises(TypeError):
        TypeMap(int, int, float)


def test_key_and_value_type_may_differ():
    type_map = TypeMap(str, int)
    type_map.add_value(str, "7")
    assert type_map.get_value(str) == 7