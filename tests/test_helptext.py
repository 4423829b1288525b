import io
import re

import pytest

from clikit.helptext import (
    help_table_aware_determine_indent,
    indent_aware_wrap_text,
    prefixed_first_flag_name,
    regexp_split_after,
    tab_aware_string_length,
    wrapped_help_printer,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("one two three", ["one ", "two ", "three"]),
        ("one\ttwo\tthree", ["one\t", "two\t", "three"]),
        ("one\n two    three\t\n ", ["one\n ", "two    ", "three\t\n "]),
        ("onetwothree\n", ["onetwothree\n"]),
        ("\nonetwothree", ["\n", "onetwothree"]),
    ],
)
def test_regexp_split_after(text, expected):
    assert regexp_split_after(re.compile(r"\s+"), text) == expected


@pytest.mark.parametrize(
    "text, delim, expected",
    [
        ("   o three", "\t", "   "),
        ("\to  three", "\t", "\t"),
        ("o three", "\t", ""),
        ("  one\ttwo", "\t", "     \t"),
        ("  \ttwo", "\t", "  \t"),
        ("  hello|world", "\\|", "        "),
        (
            "   exec\tExecute a command with temporary AWS credentials obtained by logging into Gruntwork Houston",
            "\t",
            "       \t",
        ),
    ],
)
def test_help_table_aware_determine_indent(text, delim, expected):
    assert help_table_aware_determine_indent(text, delim) == expected


@pytest.mark.parametrize(
    "text, expected, indent, width",
    [
        ("    Great Scott!", "    Great\n    Scott!", "    ", 15),
        (
            "You made a time machine out of a Delorean!?",
            "You made a time\nmachine out of\na Delorean!?",
            "",
            15,
        ),
        ("  fc\tThe box that", "  fc\tThe\n    \tbox\n    \tthat", "    \t", 15),
        (
            "   exec\tExecute a command with temporary AWS credentials obtained by logging into Gruntwork Houston",
            "   exec\tExecute a command with temporary AWS credentials obtained by\n       \tlogging into Gruntwork Houston",
            "       \t",
            80,
        ),
    ],
)
def test_indent_aware_wrap_text(text, expected, indent, width):
    assert indent_aware_wrap_text(text, width, indent) == expected


def test_tab_aware_string_length():
    assert tab_aware_string_length("a\tb", 8) == 10
    assert tab_aware_string_length("abc", 8) == 3


@pytest.mark.parametrize(
    "name, expected",
    [("help", "--help"), ("h", "-h"), ("config, c", "--config"), (" v ", "-v")],
)
def test_prefixed_first_flag_name(name, expected):
    assert prefixed_first_flag_name(name) == expected


def test_wrapped_help_printer_aligns_table():
    out = io.StringIO()
    wrapped_help_printer(out, "Head\n   a\tfirst\n   long\tsecond\n", 80)
    assert out.getvalue() == "Head\n   a     first\n   long  second\n\n"