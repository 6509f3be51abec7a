"""
Document generators for span scanning benchmarks.

Each document comes with the path of one value deep inside it, so that
full decoders and the lazy scanner can be compared on the same task:
fetch one value out of a larger document.
"""

import json
import random
import string
from typing import Any
from typing import TypeAlias

# Path steps are member names for objects and indices for arrays
LookupPath: TypeAlias = tuple[str | int, ...]

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]
_WIDE_MEMBERS = 2000


def generate_test_data(data_type: str) -> str:
    """Generates a JSON document of the given type."""
    return generate_case(data_type)[0]


def generate_case(data_type: str) -> tuple[str, LookupPath]:
    """Generates a JSON document and the path of the value to fetch from it."""
    generators = {
        "small_object": _generate_small_object,
        "wide_object": _generate_wide_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    data, path = generators[data_type]()
    return json.dumps(data), path


def _generate_small_object() -> tuple[Any, LookupPath]:
    """Small order record (< 1KB)."""
    data = {
        "order": 48213,
        "customer": "Alice Johnson",
        "paid": True,
        "total": 1234.56,
        "shipping": {"carrier": "ups", "eta": "2024-01-15T10:30:00Z"},
    }
    return data, ("shipping", "carrier")


def _generate_wide_object() -> tuple[Any, LookupPath]:
    """Flat object with many members; the wanted member is the last one."""
    data = {
        f"field_{i}": {
            "id": i,
            "label": _random_string(12),
            "weights": [round(random.uniform(0, 1), 4) for _ in range(5)],
        }
        for i in range(_WIDE_MEMBERS)
    }
    return data, (f"field_{_WIDE_MEMBERS - 1}", "label")


def _generate_mixed_array() -> tuple[Any, LookupPath]:
    """Array of scalars and small objects; the wanted element is near the end."""
    makers = [
        lambda i: random.randint(-1000, 1000),
        lambda i: round(random.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(random.randint(5, 30)),
        lambda i: random.choice([True, False, None]),
        lambda i: {"index": i, "score": round(random.uniform(0, 100), 2)},
    ]
    array = [random.choice(makers)(i) for i in range(500)]
    array.append({"index": 500, "tag": "last"})
    return array, (500, "tag")


def _generate_nested_structure() -> tuple[Any, LookupPath]:
    """Tree eight levels deep with three children per level."""

    def branch(depth: int) -> dict[str, Any]:
        if depth == 0:
            return {"leaf": _random_string(10)}
        return {
            "depth": depth,
            "children": [branch(depth - 1) for _ in range(3)],
            "first": branch(depth - 1) if depth > 5 else {},
        }

    return branch(8), ("first", "first", "children", 2, "depth")


def _generate_string_heavy() -> tuple[Any, LookupPath]:
    """Object whose values are dense with escape sequences."""

    def escaped_text() -> str:
        return "".join(
            random.choice(_ESCAPES)
            if random.random() < _ESCAPE_PROBABILITY
            else random.choice(string.ascii_letters + " ")
            for _ in range(50)
        )

    data = {
        "notes": [escaped_text() for _ in range(100)],
        "files": {
            f"doc_{i}": {
                "body": escaped_text(),
                "path": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt",
            }
            for i in range(20)
        },
    }
    return data, ("files", "doc_19", "path")


def _random_string(length: int) -> str:
    return "".join(random.choices(string.ascii_letters, k=length))
