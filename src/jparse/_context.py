"""Character cursor with line/column tracking and positioned errors."""

from typing import TypeAlias

Position: TypeAlias = int

END_OF_INPUT = "unexpected end of input"


class JSONDecodeError(ValueError):
    """
    Raised when the input does not conform to the JSON grammar.

    Carries the offending offset and the 1-based line/column of the cursor
    at the moment the failure was detected.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        lineno: int = 1,
        colno: int = 1,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.lineno = lineno
        self.colno = colno

        super().__init__(f"{msg} at {lineno}:{colno}")

    def __reduce__(self) -> tuple[type, tuple[str, str, int, int, int]]:
        return (
            self.__class__,
            (self.msg, self.doc, self.pos, self.lineno, self.colno),
        )


class ScanContext:
    """
    Cursor over the text of a single parse call.

    Every primitive looks at most one character ahead. ``pos`` only moves
    forward; ``line`` advances on each consumed line feed, which resets
    ``column`` to 1.
    """

    __slots__ = ("text", "pos", "line", "column", "length")

    def __init__(self, text: str) -> None:
        self.text = text
        self.length = len(text)
        self.pos: Position = 0
        self.line = 1
        self.column = 1

    def has_more(self) -> bool:
        """Returns True until the cursor reaches the end of input."""
        return self.pos < self.length

    def peek(self) -> str:
        """Returns the current character without advancing."""
        if self.pos >= self.length:
            raise self.error(END_OF_INPUT)
        return self.text[self.pos]

    def consume(self) -> None:
        """Advances past the current character."""
        if self.peek() == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def next(self) -> str:
        """Returns the current character and advances past it."""
        char = self.peek()
        self.consume()
        return char

    def error(self, message: str) -> JSONDecodeError:
        """Builds an error tagged with the current line and column."""
        return JSONDecodeError(
            message, self.text, self.pos, self.line, self.column
        )
