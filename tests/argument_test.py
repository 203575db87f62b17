import pytest
from clopt.argument import ArgKind, Parameter, Option, Flag, WrongVariantKind


def test_kinds_and_names():
    assert Parameter("value").kind is ArgKind.Parameter
    assert Option("name").kind is ArgKind.Option
    assert Flag("f").kind is ArgKind.Flag

    assert Parameter("value").name == "value"
    assert Option("name", "captured").name == "name"
    assert Flag("f", "captured").name == "f"


def test_captured_values():
    assert not Parameter("value").has_captured_value()
    assert Parameter("value").captured is None

    assert Option("name", "world").has_captured_value()
    assert Option("name", "world").captured == "world"
    assert not Option("name").has_captured_value()

    assert Flag("f", "").has_captured_value()
    assert Flag("f").captured is None


def test_equality_compares_kind():
    assert Option("x") == Option("x")
    assert Option("x", "a") != Option("x", "b")
    assert Option("x") != Flag("x")
    assert Parameter("x") != Option("x")
    assert Parameter("x") != Flag("x")
    assert len({Option("x"), Option("x"), Flag("x"), Parameter("x")}) == 3


def test_optional_accessors():
    opt = Option("name", "value")

    assert opt.as_option() is opt
    assert opt.as_parameter() is None
    assert opt.as_flag() is None
    assert Flag("f").as_flag() == Flag("f")
    assert Parameter("p").as_parameter() == Parameter("p")


def test_expect():
    flag = Flag("v")

    assert flag.expect(ArgKind.Flag) is flag
    assert flag.is_kind(ArgKind.Flag)
    assert not flag.is_kind(ArgKind.Option)

    with pytest.raises(WrongVariantKind) as error:
        flag.expect(ArgKind.Option)
    assert error.value.expected is ArgKind.Option
    assert error.value.actual is ArgKind.Flag
    assert "flag" in error.value.msg


def test_canonical_rendering():
    assert str(Parameter("Hello")) == "Hello"
    assert str(Option("help")) == "--help"
    assert str(Option("opt", "world")) == "--opt"
    assert str(Flag("h")) == "-h"
    assert str(Flag("z", "value")) == "-z"
    assert Option("out").render("/") == "//out"
    assert Flag("v").render("+") == "+v"


def test_flag_symbol_is_one_character():
    with pytest.raises(ValueError):
        Flag("ab")
    with pytest.raises(ValueError):
        Flag("")


def test_arguments_are_immutable():
    from dataclasses import FrozenInstanceError

    with pytest.raises(FrozenInstanceError):
        Option("name").captured = "value"  # type: ignore[misc]
