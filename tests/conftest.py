"""
Shared fixtures for jparse tests.

The json.org JSON_checker suite (fail1-fail33, pass1-pass3) plus small
per-production cases, each wrapped in an immutable JsonTestCase.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    One parser input and what parsing it should produce.

    For a failing case expected_output holds the error message, for a
    passing one the parsed value. A case with skip_reason is a checker
    document that jparse deliberately accepts.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


# Keyed by JSON_checker file number, https://json.org/JSON_checker/test/
_CHECKER_FAIL_DOCS = {
    1: '"A JSON payload should be an object or array, not a string."',
    2: '["Unclosed array"',
    3: '{unquoted_key: "keys must be quoted"}',
    4: '["extra comma",]',
    5: '["double extra comma",,]',
    6: '[   , "<-- missing value"]',
    7: '["Comma after the close"],',
    8: '["Extra close"]]',
    9: '{"Extra comma": true,}',
    10: '{"Extra value after close": true} "misplaced quoted value"',
    11: '{"Illegal expression": 1 + 2}',
    12: '{"Illegal invocation": alert()}',
    13: '{"Numbers cannot have leading zeroes": 013}',
    14: '{"Numbers cannot be hex": 0x14}',
    15: '["Illegal backslash escape: \\x15"]',
    16: "[\\naked]",
    17: '["Illegal backslash escape: \\017"]',
    18: '[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]',
    19: '{"Missing colon" null}',
    20: '{"Double colon":: null}',
    21: '{"Comma instead of colon", null}',
    22: '["Colon instead of comma": false]',
    23: '["Bad value", truth]',
    24: "['single quote']",
    25: '["\ttab\tcharacter\tin\tstring\t"]',
    26: '["tab\\   character\\   in\\  string\\  "]',
    27: '["line\nbreak"]',
    28: '["line\\\nbreak"]',
    29: "[0e]",
    30: "[0e+]",
    31: "[0e+-1]",
    32: '{"Comma instead if closing brace": true,',
    33: '["mismatch"}',
}

# Checker failures that jparse parses on purpose
_ACCEPTED_FAIL_DOCS = {
    1: "any value is accepted at the top level",
    13: "leading zeros are accepted",
    18: "nesting limit is configurable and defaults above 19",
}


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    JSON_checker failure documents, plus a raw unit separator in a string
    (simplejson issue 3).
    """
    cases = [
        JsonTestCase(
            description=f"fail{number}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=_ACCEPTED_FAIL_DOCS.get(number, ""),
        )
        for number, doc in _CHECKER_FAIL_DOCS.items()
    ]
    cases.append(
        JsonTestCase(
            description="raw control character",
            input_data='["A\u001fZ control characters in string"]',
            should_fail=True,
        )
    )
    return cases


_CHECKER_PASS1 = """[
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
]"""


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    JSON_checker documents that every conforming parser accepts, pass1
    first since tests index into it.
    """
    return [
        JsonTestCase("pass1.json - every value form", _CHECKER_PASS1),
        JsonTestCase(
            "pass2.json - nineteen nested arrays",
            '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "pass3.json - object at the top",
            '{"JSON Test Pattern pass3": {"The outermost value": '
            '"must be an object or array.", "In this test": '
            '"It is an object."}}',
        ),
    ]


def _accepts(description: str, text: str, value: Any) -> JsonTestCase:
    return JsonTestCase(description, text, False, value)


def _rejects(description: str, text: str, message: str) -> JsonTestCase:
    return JsonTestCase(description, text, True, message)


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    One short input per production, with the parsed value or the error
    message it must raise.
    """
    return [
        # literals
        _accepts("null", "null", None),
        _accepts("true", "true", True),
        _accepts("false", "false", False),
        _rejects("truncated literal", "tru", "unexpected end of input"),
        # numbers are always floats
        _accepts("integer", "42", 42.0),
        _accepts("negative", "-17", -17.0),
        _accepts("fraction", "2.5", 2.5),
        _accepts("signed exponent", "-12.5e2", -1250.0),
        _rejects("sign alone", "-x", "expected '-' or '0'..'9'"),
        _rejects("bare point", "1.e5", "expected '0'..'9'"),
        # strings
        _accepts("empty string", '""', ""),
        _accepts("plain string", '"hello"', "hello"),
        _accepts("newline escape", r'"a\nb"', "a\nb"),
        _rejects("unknown escape", r'"\q"', "invalid character escape"),
        # arrays
        _accepts("empty array", "[]", []),
        _accepts("number array", "[1, 2, 3]", [1.0, 2.0, 3.0]),
        _rejects("missing comma", "[1 2]", "expected ']' or ','"),
        _rejects("dangling comma", "[1,]", "trailing comma before ']'"),
        # objects
        _accepts("empty object", "{}", {}),
        _accepts("one member", '{"key": "value"}', {"key": "value"}),
        _accepts("repeated key", '{"a": 1, "a": 2}', {"a": 2.0}),
        _rejects("missing colon", '{"a" 1}', "expected ':'"),
    ]
