"""
Recursive descent productions for the JSON grammar.

Each production consumes characters from a ScanContext and either returns
the parsed value or raises JSONDecodeError at the first failure.
"""

import math
from dataclasses import dataclass

from ._context import ScanContext
from ._profiling import ProfileContext

JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)

DEFAULT_MAX_DEPTH = 256

_WHITESPACE = frozenset(" \n\r\t")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = {char: int(char, 16) for char in "0123456789abcdefABCDEF"}
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Decimal exponents past this are out of float range either way
_MAX_DECIMAL_EXPONENT = 400
_LOG10_2 = math.log10(2)

# UTF-16 surrogate ranges
_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    strict: reject raw control characters inside strings.
    allow_trailing_data: ignore anything after the first complete value.
    max_depth: maximum array/object nesting, None for no limit.
    """

    strict: bool = True
    allow_trailing_data: bool = False
    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if not isinstance(self.allow_trailing_data, bool):
            raise TypeError("allow_trailing_data must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")


def _decimal_to_float(mantissa: int, power: int) -> float:
    """
    Rounds mantissa * 10 ** power to the nearest float.

    Magnitudes beyond float range saturate to inf or 0.0.
    """
    if mantissa == 0:
        return 0.0

    # Rough decimal exponent, bounds the size of 10 ** power below
    estimate = (mantissa.bit_length() - 1) * _LOG10_2 + power
    if estimate > _MAX_DECIMAL_EXPONENT:
        return math.inf
    if estimate < -_MAX_DECIMAL_EXPONENT:
        return 0.0

    try:
        if power < 0:
            return mantissa / 10**-power
        return float(mantissa * 10**power)
    except OverflowError:
        return math.inf


class JsonParser:
    """
    One production method per grammar rule over a single ScanContext.

    parse_value dispatches on the next significant character; parse_array
    and parse_object recurse through it for their elements.
    """

    def __init__(self, ctx: ScanContext, config: ParseConfig) -> None:
        self.ctx = ctx
        self.config = config
        self.depth = 0

    def parse_document(self) -> JsonValue:
        """Parses one value and checks that only whitespace follows it."""
        try:
            value = self.parse_value()
        except RecursionError:
            raise self.ctx.error("maximum nesting depth exceeded") from None
        if not self.config.allow_trailing_data:
            self.skip_whitespace()
            if self.ctx.has_more():
                raise self.ctx.error("unexpected trailing characters")
        return value

    def skip_whitespace(self) -> None:
        ctx = self.ctx
        while ctx.has_more() and ctx.peek() in _WHITESPACE:
            ctx.consume()

    def expect_char(self, expected: str) -> None:
        if self.ctx.next() != expected:
            raise self.ctx.error(f"expected '{expected}'")

    def expect_word(self, word: str) -> None:
        for char in word:
            self.expect_char(char)

    def parse_value(self) -> JsonValue:
        """Parses any JSON value based on the next significant character."""
        self.skip_whitespace()
        char = self.ctx.peek()

        if char == "{":
            return self.parse_object()
        elif char == '"':
            return self.parse_string()
        elif char == "[":
            return self.parse_array()
        elif char == "-" or char in _DIGITS:
            return self.parse_number()
        else:
            return self.parse_literal()

    def parse_literal(self) -> bool | None:
        """Parses true, false or null."""
        with ProfileContext("parse_literal", self.ctx):
            char = self.ctx.peek()
            if char == "t":
                self.expect_word("true")
                return True
            elif char == "f":
                self.expect_word("false")
                return False
            elif char == "n":
                self.expect_word("null")
                return None
            raise self.ctx.error("expected 'true', 'false', or 'null'")

    def parse_string(self) -> str:
        """Parses a quoted string, resolving escape sequences."""
        with ProfileContext("parse_string", self.ctx):
            ctx = self.ctx
            self.expect_char('"')

            chunks: list[str] = []
            while True:
                char = ctx.next()
                if char == '"':
                    return "".join(chunks)
                elif char == "\\":
                    chunks.append(self._parse_escape())
                elif char < " " and self.config.strict:
                    raise ctx.error("invalid control character")
                else:
                    chunks.append(char)

    def _parse_escape(self) -> str:
        """Resolves the escape following a consumed backslash."""
        ctx = self.ctx
        char = ctx.next()
        if char in _ESCAPES:
            return _ESCAPES[char]
        if char != "u":
            raise ctx.error("invalid character escape")

        unit = self._parse_code_unit()
        if unit in _LOW_SURROGATES:
            raise ctx.error("invalid character")
        if unit not in _HIGH_SURROGATES:
            return chr(unit)

        # A high surrogate is only valid as the first half of a \u pair
        if ctx.peek() != "\\":
            raise ctx.error("invalid character")
        ctx.consume()
        if ctx.next() != "u":
            raise ctx.error("invalid character")
        low = self._parse_code_unit()
        if low not in _LOW_SURROGATES:
            raise ctx.error("invalid character")
        return chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))

    def _parse_code_unit(self) -> int:
        unit = 0
        for _ in range(4):
            digit = _HEX_DIGITS.get(self.ctx.next())
            if digit is None:
                raise self.ctx.error("invalid hex digit")
            unit = unit * 16 + digit
        return unit

    def _parse_digits(self, message: str) -> tuple[int, int]:
        """
        Accumulates a run of one or more ASCII digits.

        Returns the integer value of the run and its length. Raises with
        ``message`` when the run is empty.
        """
        ctx = self.ctx
        if ctx.peek() not in _DIGITS:
            raise ctx.error(message)

        value = 0
        count = 0
        while ctx.has_more() and ctx.peek() in _DIGITS:
            value = value * 10 + (ord(ctx.next()) - 48)
            count += 1
        return value, count

    def parse_number(self) -> float:
        """Parses a number into a float by manual digit accumulation."""
        with ProfileContext("parse_number", self.ctx):
            ctx = self.ctx
            negative = ctx.peek() == "-"
            if negative:
                ctx.consume()

            integer, _ = self._parse_digits("expected '-' or '0'..'9'")
            mantissa = integer
            power = 0

            if ctx.has_more() and ctx.peek() == ".":
                ctx.consume()
                fraction, count = self._parse_digits("expected '0'..'9'")
                mantissa = mantissa * 10**count + fraction
                power = -count

            if ctx.has_more() and ctx.peek() in "eE":
                ctx.consume()
                sign = 1
                if ctx.peek() in "+-":
                    sign = -1 if ctx.next() == "-" else 1
                exponent, _ = self._parse_digits("expected '0'..'9'")
                power += sign * exponent

            magnitude = _decimal_to_float(mantissa, power)
            return -magnitude if negative else magnitude

    def _enter_container(self) -> None:
        max_depth = self.config.max_depth
        if max_depth is not None and self.depth >= max_depth:
            raise self.ctx.error("maximum nesting depth exceeded")
        self.depth += 1

    def parse_array(self) -> list[JsonValue]:
        """Parses an array; a comma must be followed by another value."""
        with ProfileContext("parse_array", self.ctx):
            ctx = self.ctx
            self._enter_container()
            self.expect_char("[")
            self.skip_whitespace()

            values: list[JsonValue] = []
            if ctx.peek() == "]":
                ctx.consume()
                self.depth -= 1
                return values

            while True:
                values.append(self.parse_value())
                self.skip_whitespace()

                char = ctx.next()
                if char == "]":
                    break
                elif char != ",":
                    raise ctx.error("expected ']' or ','")

                self.skip_whitespace()
                if ctx.peek() == "]":
                    raise ctx.error("trailing comma before ']'")

            self.depth -= 1
            return values

    def parse_object(self) -> dict[str, JsonValue]:
        """
        Parses an object into a dict with lexicographically sorted keys.

        A repeated key keeps the last value seen.
        """
        with ProfileContext("parse_object", self.ctx):
            ctx = self.ctx
            self._enter_container()
            self.expect_char("{")
            self.skip_whitespace()

            members: dict[str, JsonValue] = {}
            char = ctx.peek()
            if char == "}":
                ctx.consume()
                self.depth -= 1
                return members
            elif char != '"':
                raise ctx.error("expected '\"' or '}'")

            while True:
                key = self.parse_string()
                self.skip_whitespace()
                self.expect_char(":")
                members[key] = self.parse_value()
                self.skip_whitespace()

                char = ctx.next()
                if char == "}":
                    break
                elif char != ",":
                    raise ctx.error("expected '}' or ','")

                self.skip_whitespace()
                if ctx.peek() == "}":
                    raise ctx.error("trailing comma before '}'")

            self.depth -= 1
            return dict(sorted(members.items()))
