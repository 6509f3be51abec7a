"""
Pytest configuration and shared fixtures for jspan tests.

Provides immutable test case fixtures and a test-only materializer that
walks a scanned document through the lazy accessors so results can be
compared against the standard library json module.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jspan
from jspan import Delimiter
from jspan import ErrorKind
from jspan import ValueKind


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@dataclass(frozen=True)
class ScanFailureCase:
    """Malformed input with the failure it must produce."""

    description: str
    input_data: str
    kind: ErrorKind
    delimiter: Delimiter | None
    pos: int


def materialize(
    item: jspan.Value | jspan.JSONObject | jspan.JSONArray,
) -> Any:
    """Decodes a whole value tree through the lazy accessors."""
    if isinstance(item, jspan.JSONObject):
        return {name: materialize(value) for name, value in item.items()}
    if isinstance(item, jspan.JSONArray):
        return [materialize(value) for value in item]

    kind = item.kind
    if kind is ValueKind.OBJECT:
        return materialize(item.as_object())
    if kind is ValueKind.ARRAY:
        return materialize(item.as_array())
    if kind is ValueKind.STRING:
        return item.as_string()
    if item.is_null():
        return None
    if item.raw in ("true", "false"):
        return item.as_bool()
    return item.as_number()


@pytest.fixture
def object_fail_cases() -> list[ScanFailureCase]:
    """
    Provides object texts that must fail scanning.

    Each case names the failure kind, the delimiter class involved and the
    position the error must point at.
    """
    return [
        ScanFailureCase(
            "missing closing brace",
            '{"a":1',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            5,
        ),
        ScanFailureCase(
            "extra closing brace",
            '{"a":1}}',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            7,
        ),
        ScanFailureCase(
            "second top-level object",
            '{"a":1}{"b":2}',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            7,
        ),
        ScanFailureCase(
            "nested opening brace",
            '{{"a":1}}',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            1,
        ),
        ScanFailureCase(
            "unterminated nested array",
            '{"a":[1,2}',
            ErrorKind.UNBALANCED,
            Delimiter.BRACKET,
            5,
        ),
        ScanFailureCase(
            "unterminated nested object",
            '{"a":{"b":1}',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            12,
        ),
        ScanFailureCase(
            "unterminated member name",
            '{"a',
            ErrorKind.MALFORMED_ENTRY,
            Delimiter.QUOTE,
            1,
        ),
        ScanFailureCase(
            "unterminated string value",
            '{"a":"b}',
            ErrorKind.MALFORMED_ENTRY,
            Delimiter.QUOTE,
            5,
        ),
        ScanFailureCase(
            "missing colon",
            '{"a" 1}',
            ErrorKind.MALFORMED_ENTRY,
            None,
            5,
        ),
        ScanFailureCase(
            "missing value",
            '{"a":}',
            ErrorKind.MALFORMED_ENTRY,
            None,
            5,
        ),
        ScanFailureCase(
            "member without object",
            '"a":1',
            ErrorKind.MISSING_STRUCTURE,
            Delimiter.BRACE,
            0,
        ),
        ScanFailureCase(
            "empty input",
            "",
            ErrorKind.MISSING_STRUCTURE,
            Delimiter.BRACE,
            0,
        ),
        ScanFailureCase(
            "closing brace only",
            "  }",
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            2,
        ),
    ]


@pytest.fixture
def array_fail_cases() -> list[ScanFailureCase]:
    """Provides array texts that must fail scanning."""
    return [
        ScanFailureCase(
            "missing closing bracket",
            "[1,2,3",
            ErrorKind.UNBALANCED,
            Delimiter.BRACKET,
            5,
        ),
        ScanFailureCase(
            "extra closing bracket",
            "[1]]",
            ErrorKind.UNBALANCED,
            Delimiter.BRACKET,
            3,
        ),
        ScanFailureCase(
            "second top-level array",
            "[1] [2]",
            ErrorKind.UNBALANCED,
            Delimiter.BRACKET,
            4,
        ),
        ScanFailureCase(
            "no opening bracket",
            "1,2]",
            ErrorKind.MISSING_STRUCTURE,
            Delimiter.BRACKET,
            0,
        ),
        ScanFailureCase(
            "whitespace only",
            " \n\t ",
            ErrorKind.MISSING_STRUCTURE,
            Delimiter.BRACKET,
            0,
        ),
        ScanFailureCase(
            "unterminated string element",
            '["a]',
            ErrorKind.MALFORMED_ENTRY,
            Delimiter.QUOTE,
            1,
        ),
        ScanFailureCase(
            "unterminated nested object",
            '[{"a":1]',
            ErrorKind.UNBALANCED,
            Delimiter.BRACE,
            1,
        ),
        ScanFailureCase(
            "open bracket only",
            "[",
            ErrorKind.UNBALANCED,
            Delimiter.BRACKET,
            1,
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON documents that must scan successfully.

    Taken from the json.org JSON_checker pass suite; the expected output is
    filled in by the tests from the standard library decoder.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_member_values() -> list[JsonTestCase]:
    """
    Provides single-member objects covering each kind of value text.

    The expected output is the raw span text recorded for member "v".
    """
    return [
        JsonTestCase("null value", '{"v":null}', False, "null"),
        JsonTestCase("true boolean", '{"v":true}', False, "true"),
        JsonTestCase("negative integer", '{"v":-17}', False, "-17"),
        JsonTestCase("float", '{"v": 3.14 }', False, "3.14"),
        JsonTestCase("empty string", '{"v":""}', False, '""'),
        JsonTestCase("escaped string", r'{"v":"a\\"}', False, r'"a\\"'),
        JsonTestCase("empty array", '{"v":[]}', False, "[]"),
        JsonTestCase("empty object", '{"v":{}}', False, "{}"),
        JsonTestCase(
            "nested object", '{"v":{"w":[1,{}]}}', False, '{"w":[1,{}]}'
        ),
        JsonTestCase("bareword", '{"v":undefined}', False, "undefined"),
    ]
