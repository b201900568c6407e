from pathlib import Path

import pytest

from optionsparser import OptionsParser, OptionType


@pytest.fixture
def parser() -> OptionsParser:
    parser = OptionsParser()
    parser.add_option("name", "n", OptionType.STRING, default="guest")
    parser.add_option("count", "c", OptionType.INTEGER, default=1)
    parser.add_option("ratio", "r", OptionType.DOUBLE)
    parser.add_option("debug", "d", OptionType.BOOLEAN)
    return parser


def test_unknown_ids_yield_zero_values(parser):
    assert parser.get_opt_string("nope") == ""
    assert parser.get_opt_file("nope") == Path("")
    assert parser.get_opt_int("nope") == 0
    assert parser.get_opt_double("nope") == 0.0
    assert parser.get_opt_boolean("nope") is False
    assert parser.is_option_set("nope") is False
    assert parser.get_option("nope") is None


def test_defaults_without_parsing(parser):
    assert parser.get_opt_string("name") == "guest"
    assert parser.get_opt_int("count") == 1
    assert parser.get_opt_double("ratio") == 0.0
    assert parser.get_opt_boolean("debug") is False
    assert not parser.is_option_set("name")


def test_defaults_survive_parse(parser):
    assert parser.parse_arguments(["-d"]) is True
    assert parser.get_opt_string("name") == "guest"
    assert parser.get_opt_int("count") == 1
    assert not parser.is_option_set("count")


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), (" 7 ", 7), ("-3", -3), ("3.9", 3), ("abc", 0), ("", 0)],
)
def test_get_opt_int_coercion(parser, raw, expected):
    parser.parse_arguments(["-c", raw])
    assert parser.get_opt_int("count") == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("0.25", 0.25), ("1e3", 1000.0), ("-2", -2.0), ("half", 0.0)],
)
def test_get_opt_double_coercion(parser, raw, expected):
    parser.parse_arguments(["-r", raw])
    assert parser.get_opt_double("ratio") == expected


def test_numeric_reads_of_other_types(parser):
    parser.parse_arguments(["-d", "-r", "2.5"])
    assert parser.get_opt_int("debug") == 1
    assert parser.get_opt_string("debug") == "true"
    assert parser.get_opt_int("ratio") == 2
    assert parser.get_opt_string("ratio") == "2.5"


@pytest.mark.parametrize(
    "raw, expected",
    [("yes", True), ("On", True), ("1", True), ("2", True), ("no", False),
     ("0", False), ("false", False), ("maybe", False)],
)
def test_get_opt_boolean_from_string(parser, raw, expected):
    parser.parse_arguments(["-n", raw])
    assert parser.get_opt_boolean("name") is expected


def test_get_opt_file_wraps_string(parser):
    parser.parse_arguments(["-n", "notes.txt"])
    assert parser.get_opt_file("name") == Path("notes.txt")


def test_string_of_unset_option_without_default(parser):
    assert parser.get_opt_string("ratio") == ""
