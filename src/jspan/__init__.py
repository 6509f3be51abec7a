"""
Lazy, span-based JSON scanning.

Locates the index ranges of the members and elements of a JSON object or
array in one forward pass, deferring string unescaping, numeric conversion
and descent into nested structures until a caller asks for a specific value.
"""

import logging
import math
import os
import re
import time
import uuid
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import IO
from typing import Any
from typing import TypeAlias
from typing import TypeVar

from jspan._escape import WHITESPACE
from jspan._escape import escape
from jspan._escape import is_escaped
from jspan._escape import is_whitespace
from jspan._escape import unescape

__version__ = "0.1.0"

Position: TypeAlias = int

T = TypeVar("T")

# Hook type definitions - hooks can return custom types
ParseFloatHook = Callable[[str], Any] | None
ParseIntHook = Callable[[str], Any] | None
ParseConstantHook = Callable[[str], Any] | None

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSPAN_PROFILE" in os.environ

logger = logging.getLogger(__name__)


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during scanning."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments to nullcontext
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class ErrorKind(Enum):
    """Failure classes surfaced by scanning and decoding."""

    UNBALANCED = "unbalanced"
    MISSING_STRUCTURE = "missing_structure"
    MALFORMED_ENTRY = "malformed_entry"
    TYPE_MISMATCH = "type_mismatch"


class Delimiter(Enum):
    """Delimiter classes named by scan failures."""

    BRACE = "Curly braces ('{', '}')"
    BRACKET = "Brackets ('[', ']')"
    QUOTE = "Quotes ('\"')"


class JSONDecodeError(ValueError):
    """
    Handles JSON scanning and decoding failures with position information.

    Carries the failure kind and, for delimiter problems, which delimiter
    class was involved, along with line/column numbers computed from the
    document so callers can report where the input went wrong.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        kind: ErrorKind = ErrorKind.MALFORMED_ENTRY,
        delimiter: Delimiter | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind
        self.delimiter = delimiter

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


def _unbalanced(
    delimiter: Delimiter, doc: str, pos: Position
) -> JSONDecodeError:
    return JSONDecodeError(
        f"{delimiter.value} are not balanced",
        doc,
        pos,
        ErrorKind.UNBALANCED,
        delimiter,
    )


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures decoding behavior with immutable settings.

    Carried by every container and value produced from one scan, and handed
    on unchanged to nested re-scans.
    """

    parse_int: ParseIntHook = None
    parse_float: ParseFloatHook = None
    parse_constant: ParseConstantHook = None

    def __post_init__(self) -> None:
        for name in ("parse_int", "parse_float", "parse_constant"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(f"{name} must be callable")


_DEFAULT_CONFIG = ParseConfig()


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of one value token in a buffer."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start


class Buffer:
    """
    Append-only text shared by every structure derived from one document.

    A buffer built from existing text is in read mode and refuses appends.
    An empty buffer is in write mode: builders append value tokens to it and
    keep the returned spans. Spans stay valid because text is never removed
    or rewritten.
    """

    def __init__(self, text: str | None = None) -> None:
        if text is None:
            self.writable = True
            self._chunks: list[str] = []
            self._text: str | None = ""
            self._length = 0
        else:
            if not isinstance(text, str):
                raise TypeError(
                    f"the JSON object must be str, not {type(text).__name__}"
                )
            self.writable = False
            self._chunks = [text]
            self._text = text
            self._length = len(text)

    @property
    def text(self) -> str:
        """Returns the whole buffer as one string."""
        if self._text is None:
            self._text = "".join(self._chunks)
            self._chunks = [self._text]
        return self._text

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, span: Span) -> str:
        return self.text[span.start : span.end]

    def __repr__(self) -> str:
        mode = "write" if self.writable else "read"
        return f"<Buffer {mode} mode, {self._length} chars>"

    def append(self, fragment: str) -> Span:
        """Appends a value token and returns the span covering it."""
        if not self.writable:
            raise TypeError(
                "cannot append to a buffer in read mode; "
                "build into an empty JSONObject or JSONArray instead"
            )
        start = self._length
        self._chunks.append(fragment)
        self._length += len(fragment)
        self._text = None
        return Span(start, self._length)


class ValueKind(Enum):
    """Shape of a value, decided from its first character without decoding."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    LITERAL = "literal"


_CLOSING = {"{": "}", "[": "]"}
_ARRAY_SCALAR_STOPS = WHITESPACE | {",", "]"}
_MEMBER_SCALAR_STOPS = frozenset(",}")


def _skip_whitespace(text: str, i: Position, upper: Position) -> Position:
    while i < upper and text[i] in WHITESPACE:
        i += 1
    return i


def _find_string_end(text: str, start: Position, upper: Position) -> Position:
    """Returns the index of the unescaped quote closing the string at start."""
    i = text.find('"', start + 1, upper)
    while i != -1 and is_escaped(text, i):
        i = text.find('"', i + 1, upper)
    if i == -1:
        raise JSONDecodeError(
            "Unterminated string starting at",
            text,
            start,
            ErrorKind.MALFORMED_ENTRY,
            Delimiter.QUOTE,
        )
    return i


def _find_structure_end(
    text: str, start: Position, upper: Position
) -> Position:
    """
    Returns one past the delimiter that balances the structure at start.

    Counts only the opener found at ``start`` and its matching closer, and
    ignores both while inside a string literal.
    """
    opening = text[start]
    closing = _CLOSING[opening]
    balance = 1
    in_string = False

    for i in range(start + 1, upper):
        char = text[i]
        if char == '"':
            if not is_escaped(text, i):
                in_string = not in_string
        elif in_string:
            continue
        elif char == opening:
            balance += 1
        elif char == closing:
            balance -= 1
            if balance == 0:
                return i + 1

    delimiter = Delimiter.BRACE if opening == "{" else Delimiter.BRACKET
    raise _unbalanced(delimiter, text, start)


def _find_member_scalar_end(
    text: str, start: Position, upper: Position
) -> tuple[Position, Position]:
    """
    Scans an unquoted member value up to the next ',' or '}'.

    Whitespace directly in front of the terminator is left out of the span;
    whitespace followed by more non-delimiter text is kept in it.

    Returns:
        Tuple of (span end, index of the terminator)
    """
    i = start + 1
    while i < upper:
        char = text[i]
        if char in _MEMBER_SCALAR_STOPS:
            return i, i
        if char in WHITESPACE:
            end = i
            i = _skip_whitespace(text, i, upper)
            if i < upper and text[i] in _MEMBER_SCALAR_STOPS:
                return end, i
            continue
        i += 1

    raise _unbalanced(Delimiter.BRACE, text, start)


def _find_element_scalar_end(
    text: str, start: Position, upper: Position
) -> Position:
    """Returns the index of the whitespace, ',' or ']' ending an element."""
    i = start + 1
    while i < upper and text[i] not in _ARRAY_SCALAR_STOPS:
        i += 1
    if i == upper:
        raise _unbalanced(Delimiter.BRACKET, text, start)
    return i


def _decode_text(raw: str, doc: str, pos: Position) -> str:
    """Unescapes raw string text, reporting bad escapes against the document."""
    with ProfileContext("unescape", len(raw)):
        try:
            return unescape(raw)
        except ValueError as e:
            raise JSONDecodeError(
                str(e), doc, pos, ErrorKind.TYPE_MISMATCH
            ) from e


def _scan_member(
    text: str, start: Position, upper: Position
) -> tuple[str, Span, Position]:
    """
    Scans one ``"name": value`` member whose opening quote is at start.

    Returns:
        Tuple of (decoded name, value span, index to resume scanning from)
    """
    name_end = _find_string_end(text, start, upper)
    name = _decode_text(text[start + 1 : name_end], text, start)

    i = _skip_whitespace(text, name_end + 1, upper)
    if i >= upper or text[i] != ":":
        raise JSONDecodeError("Expecting ':' delimiter", text, i)

    i = _skip_whitespace(text, i + 1, upper)
    if i >= upper or text[i] in _MEMBER_SCALAR_STOPS:
        raise JSONDecodeError("Expecting value", text, i)

    char = text[i]
    if char in _CLOSING:
        end = _find_structure_end(text, i, upper)
        return name, Span(i, end), end
    if char == '"':
        end = _find_string_end(text, i, upper) + 1
        return name, Span(i, end), end

    # The terminator is left for the caller so a '}' closes the object
    end, terminator = _find_member_scalar_end(text, i, upper)
    return name, Span(i, end), terminator


def _scan_object(
    buffer: Buffer, lower: Position, upper: Position, config: ParseConfig
) -> "JSONObject":
    """
    Scans ``buffer[lower:upper]`` for exactly one JSON object.

    Only member names are decoded; every value is recorded as a span.
    Content after the object closes is still scanned for balance but its
    members are not recorded.
    """
    with ProfileContext("scan_object", upper - lower):
        text = buffer.text
        obj = JSONObject(buffer, config)
        opened = False
        closed = False

        i = lower
        while i < upper:
            char = text[i]
            if char == "{":
                if opened or closed:
                    raise _unbalanced(Delimiter.BRACE, text, i)
                opened = True
            elif char == "}":
                if not opened:
                    raise _unbalanced(Delimiter.BRACE, text, i)
                opened = False
                closed = True
            elif char == '"':
                if not (opened or closed):
                    raise JSONDecodeError(
                        "Expecting '{' before member name",
                        text,
                        i,
                        ErrorKind.MISSING_STRUCTURE,
                        Delimiter.BRACE,
                    )
                name, span, i = _scan_member(text, i, upper)
                if opened:
                    obj.place(name, span)
                continue
            i += 1

        if opened:
            raise _unbalanced(Delimiter.BRACE, text, upper)
        if not closed:
            raise JSONDecodeError(
                f"There was no JSON object found in range [{lower}, {upper})",
                text,
                lower,
                ErrorKind.MISSING_STRUCTURE,
                Delimiter.BRACE,
            )

    logger.debug(
        "Scanned object with %d members from [%d, %d)", len(obj), lower, upper
    )
    return obj


def _scan_array(
    buffer: Buffer, lower: Position, upper: Position, config: ParseConfig
) -> "JSONArray":
    """
    Scans ``buffer[lower:upper]`` for exactly one JSON array.

    The first non-whitespace character in range must open the array.
    Elements are recorded as spans in source order.
    """
    with ProfileContext("scan_array", upper - lower):
        text = buffer.text
        i = _skip_whitespace(text, lower, upper)
        if i >= upper or text[i] != "[":
            raise JSONDecodeError(
                f"There was no JSON array found in range [{lower}, {upper})",
                text,
                lower,
                ErrorKind.MISSING_STRUCTURE,
                Delimiter.BRACKET,
            )

        array = JSONArray(buffer, config)
        opened = True
        i += 1
        while i < upper:
            char = text[i]
            if char in WHITESPACE or char == ",":
                i += 1
                continue
            if char == "]":
                if not opened:
                    raise _unbalanced(Delimiter.BRACKET, text, i)
                opened = False
                i += 1
                continue

            if char in _CLOSING:
                if not opened:
                    raise _unbalanced(Delimiter.BRACKET, text, i)
                end = _find_structure_end(text, i, upper)
            elif char == '"':
                end = _find_string_end(text, i, upper) + 1
            else:
                end = _find_element_scalar_end(text, i, upper)

            if opened:
                array.place(Span(i, end))
            i = end

        if opened:
            raise _unbalanced(Delimiter.BRACKET, text, upper)

    logger.debug(
        "Scanned array with %d elements from [%d, %d)",
        len(array),
        lower,
        upper,
    )
    return array


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_CONSTANTS = frozenset({"NaN", "Infinity", "-Infinity"})


@dataclass(frozen=True)
class Value:
    """
    Lazy accessor over one value span of a shared buffer.

    Nothing is decoded or cached up front: each accessor re-reads the span
    text, and as_object()/as_array() re-scan the span into a new container
    that shares the same buffer.
    """

    buffer: Buffer = field(repr=False)
    span: Span
    config: ParseConfig = field(default=_DEFAULT_CONFIG, repr=False)

    @property
    def raw(self) -> str:
        """Returns the span text, still escape-encoded for strings."""
        return self.buffer[self.span]

    def __str__(self) -> str:
        return self.raw

    @property
    def kind(self) -> ValueKind:
        if not self.span:
            return ValueKind.LITERAL
        first = self.buffer.text[self.span.start]
        if first == "{":
            return ValueKind.OBJECT
        elif first == "[":
            return ValueKind.ARRAY
        elif first == '"':
            return ValueKind.STRING
        return ValueKind.LITERAL

    def _mismatch(self, expected: str) -> JSONDecodeError:
        return JSONDecodeError(
            f"Invalid {expected} literal",
            self.buffer.text,
            self.span.start,
            ErrorKind.TYPE_MISMATCH,
        )

    def is_null(self) -> bool:
        return self.raw == "null"

    def as_object(self) -> "JSONObject":
        """Re-scans this value's span as a JSON object."""
        return _scan_object(
            self.buffer, self.span.start, self.span.end, self.config
        )

    def as_array(self) -> "JSONArray":
        """Re-scans this value's span as a JSON array."""
        return _scan_array(
            self.buffer, self.span.start, self.span.end, self.config
        )

    def as_string(self) -> str:
        """Returns the text with surrounding quotes removed and escapes decoded."""
        text = self.buffer.text
        start, end = self.span.start, self.span.end
        if end > start and text[start] == '"':
            start += 1
        if end > start and text[end - 1] == '"':
            end -= 1
        return _decode_text(text[start:end], text, self.span.start)

    def as_bool(self) -> bool:
        raw = self.raw
        if raw == "true":
            return True
        elif raw == "false":
            return False
        raise self._mismatch("boolean")

    def _to_int(self, raw: str) -> int:
        try:
            return int(raw)
        except ValueError as e:
            # Python's int conversion digit limit
            raise self._mismatch("integer") from e

    def as_int(self, bits: int | None = None) -> int:
        """
        Decodes an integer literal.

        When ``bits`` is given the value must fit a signed integer of that
        width; 8, 16, 32 and 64 give byte, short, int and long ranges.
        """
        if bits is not None and bits < 1:
            raise ValueError("bits must be a positive integer")

        raw = self.raw
        if not _INT_PATTERN.fullmatch(raw):
            raise self._mismatch("integer")
        value = self._to_int(raw)

        if bits is not None:
            limit = 1 << (bits - 1)
            if not -limit <= value < limit:
                raise JSONDecodeError(
                    f"Integer out of range for {bits}-bit width",
                    self.buffer.text,
                    self.span.start,
                    ErrorKind.TYPE_MISMATCH,
                )
        return value

    def as_float(self) -> float:
        raw = self.raw
        if raw not in _CONSTANTS and not _FLOAT_PATTERN.fullmatch(raw):
            raise self._mismatch("floating-point")
        return float(raw)

    def as_number(self) -> Any:
        """
        Decodes a number, choosing int or float from the literal text.

        Applies the ``parse_int``, ``parse_float`` and ``parse_constant``
        hooks of the scan's configuration. The constants NaN, Infinity and
        -Infinity are only accepted through ``parse_constant``.
        """
        raw = self.raw
        if raw in _CONSTANTS:
            if self.config.parse_constant:
                return self.config.parse_constant(raw)
            raise self._mismatch("number")

        if _INT_PATTERN.fullmatch(raw):
            if self.config.parse_int:
                return self.config.parse_int(raw)
            return self._to_int(raw)

        if _FLOAT_PATTERN.fullmatch(raw):
            if self.config.parse_float:
                return self.config.parse_float(raw)
            return float(raw)

        raise self._mismatch("number")

    def as_char(self) -> str:
        decoded = self.as_string()
        if len(decoded) != 1:
            raise self._mismatch("character")
        return decoded

    def as_uuid(self) -> uuid.UUID:
        try:
            return uuid.UUID(self.as_string())
        except ValueError as e:
            raise self._mismatch("UUID") from e


def _encode_number(n: int | float) -> str:
    """Encode numeric values with JSON compliance."""
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        return float.__repr__(n)
    return int.__repr__(n)


def _encode_entry(value: Any) -> str:  # noqa: PLR0911
    """Encodes one builder value as the token its span will cover."""
    if value is None:
        return "null"
    elif value is True:
        return "true"
    elif value is False:
        return "false"
    elif isinstance(value, str):
        return '"' + escape(value) + '"'
    elif isinstance(value, int | float):
        return _encode_number(value)
    elif isinstance(value, JSONObject | JSONArray):
        return str(value)
    elif isinstance(value, Value):
        return value.raw
    else:
        msg = f"Object of type {type(value).__name__} is not JSON serializable"
        raise TypeError(msg)


class JSONObject:
    """
    Ordered mapping from member name to the span of its value text.

    A scanned object shares the buffer of the document it was read from and
    decodes values only when they are looked up. An object constructed
    without a buffer starts empty in write mode and grows through add().
    """

    def __init__(
        self, buffer: Buffer | None = None, config: ParseConfig | None = None
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.config = config if config is not None else _DEFAULT_CONFIG
        self._members: dict[str, Span] = {}

    def place(self, name: str, span: Span) -> None:
        """Records a member span; a repeated name keeps its position."""
        self._members[name] = span

    def add(self, name: str, value: Any) -> "JSONObject":
        """Appends the encoded value to the buffer and records its span."""
        if not isinstance(name, str):
            raise TypeError(f"keys must be str, not {type(name).__name__}")
        self._members[name] = self.buffer.append(_encode_entry(value))
        return self

    @property
    def spans(self) -> Mapping[str, Span]:
        return MappingProxyType(self._members)

    def _value(self, span: Span) -> Value:
        return Value(self.buffer, span, self.config)

    def get(self, name: str, default: Value | None = None) -> Value | None:
        span = self._members.get(name)
        return default if span is None else self._value(span)

    def __getitem__(self, name: str) -> Value:
        return self._value(self._members[name])

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def items(self) -> Iterator[tuple[str, Value]]:
        for name, span in self._members.items():
            yield name, self._value(span)

    def values(self) -> list[Value]:
        return [self._value(span) for span in self._members.values()]

    def __str__(self) -> str:
        text = self.buffer.text
        members = ",".join(
            f'"{escape(name)}":{text[span.start : span.end]}'
            for name, span in self._members.items()
        )
        return "{" + members + "}"

    def __repr__(self) -> str:
        return f"<JSONObject with {len(self)} members>"


class JSONArray:
    """
    Ordered sequence of element spans over a shared buffer.

    Elements become Values on access; iterating hands out a fresh Value per
    element, so concurrent consumers never share traversal state.
    """

    def __init__(
        self, buffer: Buffer | None = None, config: ParseConfig | None = None
    ) -> None:
        self.buffer = buffer if buffer is not None else Buffer()
        self.config = config if config is not None else _DEFAULT_CONFIG
        self._elements: list[Span] = []

    def place(self, span: Span) -> None:
        self._elements.append(span)

    def add(self, value: Any) -> "JSONArray":
        """Appends the encoded value to the buffer and records its span."""
        self._elements.append(self.buffer.append(_encode_entry(value)))
        return self

    @property
    def spans(self) -> tuple[Span, ...]:
        return tuple(self._elements)

    def get(self, index: int) -> Value:
        return Value(self.buffer, self._elements[index], self.config)

    __getitem__ = get

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Value]:
        for span in self._elements:
            yield Value(self.buffer, span, self.config)

    def values(self) -> list[Value]:
        return list(self)

    def parallel_map(
        self, func: Callable[[Value], T], max_workers: int | None = None
    ) -> list[T]:
        """
        Applies func to every element on a thread pool.

        Each call receives its own Value; results keep element order.
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(func, self))

    def __str__(self) -> str:
        text = self.buffer.text
        return "[" + ",".join(text[s.start : s.end] for s in self._elements) + "]"

    def __repr__(self) -> str:
        return f"<JSONArray with {len(self)} elements>"


def _as_buffer(text: str | Buffer) -> Buffer:
    if isinstance(text, Buffer):
        return text
    return Buffer(text)


def _resolve_range(
    buffer: Buffer, lower: Position, upper: Position | None
) -> tuple[Position, Position]:
    if upper is None:
        upper = len(buffer)
    if not 0 <= lower <= upper <= len(buffer):
        raise ValueError(
            f"Range [{lower}, {upper}) is outside the {len(buffer)}-char text"
        )
    return lower, upper


def parse_object(
    text: str | Buffer,
    lower: Position = 0,
    upper: Position | None = None,
    **kwargs: Any,
) -> JSONObject:
    """
    Scans text, or the ``[lower, upper)`` part of it, as a JSON object.

    Keyword arguments build the ParseConfig used by every value decoded
    from the result.
    """
    buffer = _as_buffer(text)
    lower, upper = _resolve_range(buffer, lower, upper)
    return _scan_object(buffer, lower, upper, ParseConfig(**kwargs))


def parse_array(
    text: str | Buffer,
    lower: Position = 0,
    upper: Position | None = None,
    **kwargs: Any,
) -> JSONArray:
    """Scans text, or the ``[lower, upper)`` part of it, as a JSON array."""
    buffer = _as_buffer(text)
    lower, upper = _resolve_range(buffer, lower, upper)
    return _scan_array(buffer, lower, upper, ParseConfig(**kwargs))


def parse(text: str | Buffer, **kwargs: Any) -> JSONObject | JSONArray:
    """Scans text as whichever structure its first significant character opens."""
    buffer = _as_buffer(text)
    config = ParseConfig(**kwargs)
    source = buffer.text
    i = _skip_whitespace(source, 0, len(buffer))

    if i < len(buffer) and source[i] == "{":
        return _scan_object(buffer, 0, len(buffer), config)
    if i < len(buffer) and source[i] == "[":
        return _scan_array(buffer, 0, len(buffer), config)
    raise JSONDecodeError(
        "Expecting '{' or '['", source, i, ErrorKind.MISSING_STRUCTURE
    )


def _read(fp: IO[str]) -> str:
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")
    text = fp.read()
    logger.debug("Read %d characters from %r", len(text), fp)
    return text


def load(fp: IO[str], **kwargs: Any) -> JSONObject | JSONArray:
    """Reads a whole file-like object into one buffer and scans it."""
    return parse(_read(fp), **kwargs)


def load_object(fp: IO[str], **kwargs: Any) -> JSONObject:
    return parse_object(_read(fp), **kwargs)


def load_array(fp: IO[str], **kwargs: Any) -> JSONArray:
    return parse_array(_read(fp), **kwargs)


def dump(obj: JSONObject | JSONArray, fp: IO[str]) -> None:
    """
    Writes the serialized text of a container to a file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(str(obj))


__all__ = [
    "Buffer",
    "Delimiter",
    "ErrorKind",
    "HotPathStats",
    "JSONArray",
    "JSONDecodeError",
    "JSONObject",
    "ParseConfig",
    "Span",
    "Value",
    "ValueKind",
    "clear_hot_path_stats",
    "dump",
    "escape",
    "get_hot_path_stats",
    "is_escaped",
    "is_whitespace",
    "load",
    "load_array",
    "load_object",
    "parse",
    "parse_array",
    "parse_object",
    "unescape",
]
