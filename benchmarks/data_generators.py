"""
Test data generators for JSON parsing benchmarks.

Each generator returns JSON text produced by the stdlib encoder from a
seeded random source, so every library parses identical documents.
"""

import json
import random
import string
from typing import Any

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
    "unicode_escapes",
)

_SEED = 8259
_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "unicode_escapes": _generate_unicode_escapes,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large JSON object (> 10KB) with many fields."""
    data = {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "city": _random_string(rng, 12),
            "language": rng.choice(["en", "es", "fr", "de", "zh"]),
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "settled": rng.choice([True, False, None]),
            }
            for i in range(80)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a large array with mixed data types."""
    choices = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "score": round(rng.uniform(0, 100), 2)},
    ]
    array: list[Any] = [rng.choice(choices)(i) for i in range(200)]
    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a nested JSON structure eight levels deep."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(8))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON with many short escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice('"\\/\b\f\n\r\t'))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    data = {
        "strings": [create_escaped_string() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt"
            for i in range(20)
        },
    }
    return json.dumps(data)


def _generate_unicode_escapes(rng: random.Random) -> str:
    """Generates strings of \\u escapes, including surrogate pairs."""

    def code_point() -> int:
        if rng.random() < 0.5:
            return rng.randint(0xA0, 0xD7FF)
        return rng.randint(0x10000, 0x1FAFF)

    words = [
        "".join(chr(code_point()) for _ in range(20)) for _ in range(100)
    ]
    return json.dumps({"words": words}, ensure_ascii=True)


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random ASCII letter string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
