# SPDX-License-Identifier: MIT
"""A position tracked character stream with lookahead.

The stream keeps an immutable copy of its input and one integer cursor. All
reads go through the cursor explicitly; iterating the stream never moves it.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .chartype import CharType, classify, matches_any


class UnexpectedElementError(Exception):
    """Raised when the next element is not of any expected type."""

    def __init__(
        self,
        element: Optional[str],
        position: int,
        expected: tuple[CharType, ...] = (),
    ):
        self.element = element
        self.position = position
        self.expected = frozenset(expected)
        message = f"Unexpected element {element!r} at position {position}"
        if expected:
            names = ", ".join(str(t) for t in expected)
            message += f", expecting one of [{names}]"
        super().__init__(message)


class CharacterStream:
    """Pull based sequence over the characters of a string.

    Attributes:
        offset: Index of the next element to be consumed
    """

    __slots__ = ("_elements", "offset")

    def __init__(self, text: str):
        self._elements: tuple[str, ...] = tuple(text)
        self.offset = 0

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[str]:
        return self.remaining()

    def remaining(self) -> Iterator[str]:
        """Yield the unconsumed elements without moving the cursor."""
        index = self.offset
        while index < len(self._elements):
            yield self._elements[index]
            index += 1

    def to_tuple(self) -> tuple[str, ...]:
        """Return the unconsumed elements."""
        return self._elements[self.offset :]

    def consume(self, *expected: CharType) -> Optional[str]:
        """Consume and return the next element.

        Without arguments the next element is returned unconditionally, or
        None once the input is exhausted. With expected types the element is
        consumed only if it belongs to one of them.

        Raises:
            UnexpectedElementError: If the next element matches none of the
                expected types
        """
        if expected:
            lookahead = self.look_ahead()
            if not matches_any(lookahead, expected):
                raise UnexpectedElementError(lookahead, self.offset, expected)
        if self.offset >= len(self._elements):
            return None
        element = self._elements[self.offset]
        self.offset += 1
        return element

    def push_back(self) -> None:
        """Move the cursor back by one element."""
        if self.offset > 0:
            self.offset -= 1

    def look_ahead(self, position: int = 1) -> Optional[str]:
        """Return the element ``position`` places ahead (1-indexed), or None."""
        index = self.offset + position - 1
        if 0 <= index < len(self._elements):
            return self._elements[index]
        return None

    def positive_look_ahead(self, *expected: CharType) -> bool:
        """Return True if the next element is of one of the expected types."""
        return matches_any(self.look_ahead(), expected)

    def positive_look_ahead_before(self, boundary: CharType, *expected: CharType) -> bool:
        """Return True if an expected element occurs before the first boundary.

        The scan stops at the first element of the boundary type, or at the
        end of input.
        """
        for element in self.remaining():
            char_type = classify(element)
            if char_type is boundary:
                return False
            if char_type in expected:
                return True
        return False

    def positive_look_ahead_until(self, until: int, *expected: CharType) -> bool:
        """Return True if one of the next ``until`` elements is expected."""
        return any(
            matches_any(self.look_ahead(i), expected) for i in range(1, until + 1)
        )

    def __repr__(self) -> str:
        return f"CharacterStream({''.join(self._elements)!r}, offset={self.offset})"
