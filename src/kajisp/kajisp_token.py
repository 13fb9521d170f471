"""Token representation for Kajisp source text."""

from dataclasses import dataclass


@dataclass
class KajispToken:
    """
    Represents a single token: an atom, a complete parenthesized group or a
    complete double-quoted string, as raw text.
    """
    value: str
    position: int

    def __repr__(self) -> str:
        return f"KajispToken({self.value!r}, pos={self.position})"
