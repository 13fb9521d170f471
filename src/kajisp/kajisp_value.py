"""Kajisp Value hierarchy - immutable value types for the language."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
import math
from typing import Any, List, Tuple


def parse_number(text: str) -> float | None:
    """
    Parse text as a double-precision float literal.

    Accepts the usual literal forms (42, -2.5, 1e3, .5, inf, nan).  Whitespace
    padding, '_' digit separators and non-ASCII digits are rejected.

    Args:
        text: Text to parse

    Returns:
        The parsed value, or None if the text is not a float literal
    """
    if not text or not text.isascii() or '_' in text or text.strip() != text:
        return None

    try:
        return float(text)

    except ValueError:
        return None


def format_number(value: float) -> str:
    """
    Format a float the way Kajisp displays numbers.

    Uses the shortest digits that read back as the same float, always in
    positional notation ("100000000000000000000000", "0.0000001").  Integral
    values have no fractional part ("3", not "3.0").
    """
    if math.isnan(value):
        return "NaN"

    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), 'f')
    if text.endswith('.0'):
        return text[:-2]

    return text


class KajispValue(ABC):
    """
    Abstract base class for all Kajisp values.

    All Kajisp values are immutable.  Every variant provides all of the
    coercion views, and none of them may raise.
    """

    @abstractmethod
    def to_number(self) -> float:
        """Number view."""

    @abstractmethod
    def to_display(self) -> str:
        """Display text view (strings are shown quoted)."""

    @abstractmethod
    def to_text(self) -> str:
        """Raw text view (strings are shown without quotes)."""

    @abstractmethod
    def to_boolean(self) -> bool:
        """Boolean view."""

    @abstractmethod
    def to_list(self) -> Tuple['KajispValue', ...]:
        """List view."""

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python value."""

    @abstractmethod
    def type_name(self) -> str:
        """Return Kajisp type name for error messages."""


@dataclass(frozen=True)
class KajispNumber(KajispValue):
    """Represents numeric values (always double-precision floats)."""
    value: float

    def to_number(self) -> float:
        return self.value

    def to_display(self) -> str:
        return format_number(self.value)

    def to_text(self) -> str:
        return format_number(self.value)

    def to_boolean(self) -> bool:
        return self.value != 0

    def to_list(self) -> Tuple[KajispValue, ...]:
        return (self,)

    def to_python(self) -> float:
        return self.value

    def type_name(self) -> str:
        return "number"


@dataclass(frozen=True)
class KajispBoolean(KajispValue):
    """Represents boolean values."""
    value: bool

    def to_number(self) -> float:
        return 1.0 if self.value else 0.0

    def to_display(self) -> str:
        return "true" if self.value else "false"

    def to_text(self) -> str:
        return self.to_display()

    def to_boolean(self) -> bool:
        return self.value

    def to_list(self) -> Tuple[KajispValue, ...]:
        return (self,)

    def to_python(self) -> bool:
        return self.value

    def type_name(self) -> str:
        return "boolean"


@dataclass(frozen=True)
class KajispSymbol(KajispValue):
    """Represents bare words: operator names and identifiers used as text."""
    name: str

    def to_number(self) -> float:
        number = parse_number(self.name)
        return 0.0 if number is None else number

    def to_display(self) -> str:
        return self.name

    def to_text(self) -> str:
        return self.name

    def to_boolean(self) -> bool:
        return self.name == "true"

    def to_list(self) -> Tuple[KajispValue, ...]:
        return (self,)

    def to_python(self) -> str:
        """Symbols convert to their name string."""
        return self.name

    def type_name(self) -> str:
        return "symbol"

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f'KajispSymbol({self.name!r})'


@dataclass(frozen=True)
class KajispString(KajispValue):
    """Represents string values (only ever created from double-quoted source)."""
    value: str

    def to_number(self) -> float:
        number = parse_number(self.value)
        return 0.0 if number is None else number

    def to_display(self) -> str:
        return f'"{self.value}"'

    def to_text(self) -> str:
        return self.value

    def to_boolean(self) -> bool:
        return self.value == "true"

    def to_list(self) -> Tuple[KajispValue, ...]:
        return (self,)

    def to_python(self) -> str:
        return self.value

    def type_name(self) -> str:
        return "string"


@dataclass(frozen=True)
class KajispList(KajispValue):
    """Represents lists of Kajisp values."""
    elements: Tuple[KajispValue, ...] = ()

    def to_number(self) -> float:
        """Lists count as their length."""
        return float(len(self.elements))

    def to_display(self) -> str:
        return f"({' '.join(elem.to_display() for elem in self.elements)})"

    def to_text(self) -> str:
        return f"({' '.join(elem.to_text() for elem in self.elements)})"

    def to_boolean(self) -> bool:
        return len(self.elements) > 0

    def to_list(self) -> Tuple[KajispValue, ...]:
        return self.elements

    def to_python(self) -> List[Any]:
        """Convert to Python list with Python values."""
        return [elem.to_python() for elem in self.elements]

    def type_name(self) -> str:
        return "list"

    def length(self) -> int:
        """Return the length of the list."""
        return len(self.elements)

    def is_empty(self) -> bool:
        """Check if the list is empty."""
        return len(self.elements) == 0

    def drop(self, n: int) -> 'KajispList':
        """Drop the first n elements."""
        return KajispList(self.elements[n:])


@dataclass(frozen=True)
class KajispNil(KajispValue):
    """Represents the absence of a value, written `nil`."""

    def to_number(self) -> float:
        return 0.0

    def to_display(self) -> str:
        return "nil"

    def to_text(self) -> str:
        return ""

    def to_boolean(self) -> bool:
        return False

    def to_list(self) -> Tuple[KajispValue, ...]:
        return ()

    def to_python(self) -> None:
        return None

    def type_name(self) -> str:
        return "nil"
