import pytest
from clopt.argument import Argument, Parameter, Option, Flag
from clopt.config import ParserConfig
from clopt.parser import classify


def test_default_commandline():
    parsed: tuple[Argument, ...] = classify(
        ["-hvac", "--test-inner-dash", "--help", "Hello", "World!", "6000", "-1024", "0x00FE"]
    )

    assert parsed == (
        Flag("h"),
        Flag("v"),
        Flag("a"),
        Flag("c"),
        Option("test-inner-dash"),
        Option("help"),
        Parameter("Hello"),
        Parameter("World!"),
        Parameter("6000"),
        Parameter("-1024"),
        Parameter("0x00FE"),
    )


def test_bundled_flags_without_captures():
    assert classify(["-hvac"]) == (Flag("h"), Flag("v"), Flag("a"), Flag("c"))


def test_long_option_capture():
    config: ParserConfig = ParserConfig.with_captures("opt")

    assert classify(["--opt", "world"], config) == (Option("opt", "world"),)
    assert classify(["--opt", "--other"], config) == (Option("opt"), Option("other"))
    assert classify(["--opt"], config) == (Option("opt"),)


def test_only_adjacent_token_is_captured():
    config: ParserConfig = ParserConfig.with_captures("opt")

    parsed = classify(["--opt", "-v", "value"], config)
    assert parsed == (Option("opt"), Flag("v"), Parameter("value"))


def test_not_capturing_names_leave_values_alone():
    config: ParserConfig = ParserConfig.with_captures("opt")

    assert classify(["--other", "value"], config) == (Option("other"), Parameter("value"))


def test_flag_capture():
    config: ParserConfig = ParserConfig.with_captures("z", "extra-dash-chars")

    parsed = classify(["-z", "flag-capture", "--extra-dash-chars", "hello", "--opt", "world"], config)

    assert parsed == (
        Flag("z", "flag-capture"),
        Option("extra-dash-chars", "hello"),
        Option("opt"),
        Parameter("world"),
    )


def test_capture_inside_bundle():
    config: ParserConfig = ParserConfig.with_captures("o")

    assert classify(["-vox", "out.txt", "in.txt"], config) == (
        Flag("v"),
        Flag("o", "out.txt"),
        Flag("x"),
        Parameter("in.txt"),
    )


def test_only_first_capturing_flag_of_a_bundle_captures():
    # Later capturing flags in the same bundle never take a token,
    # not even the one after the captured value.
    config: ParserConfig = ParserConfig.with_captures("a", "b")

    assert classify(["-ab", "x", "y"], config) == (
        Flag("a", "x"),
        Flag("b"),
        Parameter("y"),
    )


def test_negative_numbers():
    config: ParserConfig = ParserConfig()

    assert classify(["-1024"], config) == (Parameter("-1024"),)
    assert classify(["-3.14"], config) == (Parameter("-3.14"),)
    assert classify(["-.5"], config) == (Parameter("-.5"),)


def test_negative_numbers_disabled():
    config: ParserConfig = ParserConfig(allow_negative_numbers=False)

    assert classify(["-1024"], config) == (Flag("1"), Flag("0"), Flag("2"), Flag("4"))


def test_hex_literal_is_a_flag_cluster():
    parsed = classify(["-0x00FE"], ParserConfig(allow_negative_numbers=True))

    assert parsed == (Flag("0"), Flag("x"), Flag("0"), Flag("0"), Flag("F"), Flag("E"))


def test_mixed_digits_and_letters_are_flags():
    assert classify(["-1a"]) == (Flag("1"), Flag("a"))


def test_negative_number_is_not_captured():
    # The following token starts with a prefix, so it can't be captured
    config: ParserConfig = ParserConfig.with_captures("offset")

    assert classify(["--offset", "-5"], config) == (Option("offset"), Parameter("-5"))


def test_lone_prefixes():
    assert classify(["-"]) == (Parameter("-"),)
    assert classify(["-"], ParserConfig(allow_negative_numbers=False)) == (Parameter("-"),)
    assert classify(["--"]) == (Option(""),)
    assert classify(["---x"]) == (Option("-x"),)


def test_custom_prefix_chars():
    config: ParserConfig = ParserConfig(capture_names={"out"}, prefix_chars="-/")

    parsed = classify(["/v", "//out", "file", "-/x"], config)

    assert parsed == (Flag("v"), Option("out", "file"), Option("x"))


def test_empty_following_token_is_captured():
    config: ParserConfig = ParserConfig.with_captures("name")

    assert classify(["--name", ""], config) == (Option("name", ""),)


def test_empty_input():
    assert classify([]) == ()


def test_accepts_any_iterable():
    assert classify(iter(["a", "-b"])) == (Parameter("a"), Flag("b"))


@pytest.mark.parametrize(
    "tokens",
    [
        ["--alpha", "beta", "-xyz", "gamma"],
        ["plain", "--opt", "-f", "value", "--last"],
        ["-q", "--", "param"],
    ],
)
def test_canonical_text_classifies_the_same(tokens: list[str]):
    parsed = classify(tokens)
    reparsed = classify(" ".join(str(arg) for arg in parsed).split(" "))

    assert [(a.kind, a.name) for a in reparsed] == [(a.kind, a.name) for a in parsed]


def test_captured_tokens_are_not_reclassified():
    config: ParserConfig = ParserConfig.with_captures("o", "input")
    tokens: list[str] = ["--input", "data", "-o", "out", "rest"]

    parsed = classify(tokens, config)

    assert [a.name for a in parsed] == ["input", "o", "rest"]
    assert "data" not in [a.name for a in parsed]
    assert "out" not in [a.name for a in parsed]
