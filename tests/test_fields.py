import dataclasses

import pytest

from lumberjack.fields import Field, FieldInfo


def test_field_info_has_no_name_by_default():
    info = FieldInfo(3)
    assert info.field_index == 3
    assert info.name is None


def test_field_info_equality_depends_on_index_and_name():
    assert FieldInfo(0) == FieldInfo(0)
    assert FieldInfo(0) != FieldInfo(1)
    assert FieldInfo(0, "level") != FieldInfo(0)
    assert FieldInfo(0, "level") == FieldInfo(0, "level")


def test_field_holds_info_and_text():
    field = Field(FieldInfo(1), "message 1")
    assert field.field_info.field_index == 1
    assert field.text == "message 1"
    assert field == Field(FieldInfo(1), "message 1")
    assert field != Field(FieldInfo(1), "message 2")


def test_field_is_immutable():
    field = Field(FieldInfo(0), "hello")
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.text = "goodbye"
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.field_info.field_index = 5
    assert field.text == "hello"
    assert field.field_info.field_index == 0
    assert field == Field(FieldInfo(0), "hello")


def test_field_is_hashable_by_value():
    fields = {Field(FieldInfo(0), "a"), Field(FieldInfo(0), "a"), Field(FieldInfo(1), "a")}
    assert len(fields) == 2