"""Tests for member signature validation."""

from yuidts.config import GeneratorConfig
from yuidts.context import GenerationContext
from yuidts.types import ClassDescriptor, ClassItem, Param, ReturnInfo
from yuidts.validate import validate_member


def _method(name: str, params: list[Param], return_type: str | None = None) -> ClassItem:
    return_ = ReturnInfo(type=return_type) if return_type is not None else None
    return ClassItem(name=name, class_="p5", itemtype="method", params=params, return_=return_)


def _validate(item):
    return validate_member(GenerationContext(GeneratorConfig()), item, item)


def test_valid_method():
    item = _method("foo", [Param(name="a", type="Number")], "Boolean")
    assert _validate(item) == []


def test_required_after_optional():
    item = _method("foo", [Param(name="a", type="Number", optional=True), Param(name="b", type="Number")])
    assert _validate(item) == ['required param "b" follows an optional param']


def test_duplicate_param_names():
    item = _method("foo", [Param(name="x", type="Number"), Param(name="x", type="Number")])
    assert _validate(item) == ['param "x" is defined multiple times']


def test_invalid_names():
    item = _method("foo-bar", [Param(name="1x", type="Number")])
    assert _validate(item) == [
        '"foo-bar" is not a valid JS symbol name',
        'param "1x" is not a valid JS symbol name',
    ]


def test_constructors_are_exempt_from_name_check():
    ctor = ClassDescriptor(name="p5.Vector", is_constructor=True, params=[Param(name="x", type="Number")])
    assert _validate(ctor) == []


def test_invalid_types():
    item = _method("foo", [Param(name="a", type="Frobnicator"), Param(name="b")], "Frobnicator")
    assert _validate(item) == [
        'param "a" has invalid type: Frobnicator',
        'param "b" has invalid type: None',
        "return has invalid type: Frobnicator",
    ]


def test_empty_return_type_is_invalid():
    item = _method("foo", [], "")
    assert _validate(item) == ["return has invalid type: "]


def test_errors_accumulate():
    item = _method("foo", [Param(name="a", type="Number", optional=True), Param(name="a", type="Frobnicator")])
    assert _validate(item) == [
        'required param "a" follows an optional param',
        'param "a" is defined multiple times',
        'param "a" has invalid type: Frobnicator',
    ]
