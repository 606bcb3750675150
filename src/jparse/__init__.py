"""
Strict recursive descent JSON parser with positioned error reporting.

Converts JSON text into native Python values: objects become dicts with
sorted keys, arrays lists, strings str, every number a float, and the
literals True, False and None. Malformed input raises JSONDecodeError whose
message ends with the 1-based ``line:column`` where parsing stopped.
"""

from typing import IO
from typing import Any

from ._context import JSONDecodeError
from ._context import ScanContext
from ._parser import DEFAULT_MAX_DEPTH
from ._parser import JsonParser
from ._parser import JsonValue
from ._parser import ParseConfig
from ._profiling import HotPathStats
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats

__version__ = "0.1.0"


def parse(text: str, **kwargs: Any) -> JsonValue:
    """
    Parses a complete JSON document held in memory.

    Keyword arguments are the fields of ParseConfig. Raises TypeError for
    non-str input and JSONDecodeError at the first grammar violation.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON object must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    parser = JsonParser(ScanContext(text), config)
    return parser.parse_document()


def loads(s: str, **kwargs: Any) -> JsonValue:
    """Parses a JSON string; same contract as parse."""
    return parse(s, **kwargs)


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Reads a text file object to the end and parses its contents.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "HotPathStats",
    "JSONDecodeError",
    "JsonParser",
    "JsonValue",
    "ParseConfig",
    "ScanContext",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
]
