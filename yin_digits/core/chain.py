"""Digit chain: an owned, singly linked base-2048 numeral.

WHY: The converter emits digits one at a time, each new chunk installed
in front of the ones already produced. A head-linked chain makes that
prepend O(1) and keeps the printed order identical to the order the
chunks were installed, which is what existing encoded numbers rely on.

HOW: ChainNode holds one YinDigit and the next (lower-order) node.
DigitChain owns the head. Each node is referenced only by its
predecessor, so releasing the chain walks the links once and unlinks
them. The chain is also a context manager so ``with`` releases it.

RULES:
- Head is the most significant digit; iteration is head-first
- render() joins syllables with DELIMITER and appends "\\n"
- render() is repeatable and never mutates the chain
- release() on an empty chain is a no-op; a second release raises
  ChainReleasedError, as does any read of a released chain
- to_int() folds head-first: acc = acc * 2048 + digit
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from yin_digits.config import DELIMITER, YIN_LEN, YIN_MASK
from yin_digits.core.codec import YinDigit, decode, encode, parse_digit, render_digit
from yin_digits.core.errors import ChainReleasedError, InvalidSyllableError


@dataclass
class ChainNode:
    """One digit plus the link to the next, lower-order node."""

    digit: YinDigit
    next: Optional[ChainNode] = None


class DigitChain:
    """An ordered chain of yin digits, most significant first."""

    def __init__(self) -> None:
        self._head: Optional[ChainNode] = None
        self._length = 0
        self._released = False

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def prepend(self, value: int) -> ChainNode:
        """Encode ``value`` and install it as the new head.

        Raises:
            OutOfRangeError: ``value`` does not fit in one digit.
            ChainReleasedError: The chain has already been released.
        """
        self._check_live()
        node = ChainNode(digit=encode(value), next=self._head)
        self._head = node
        self._length += 1
        return node

    @classmethod
    def from_int(cls, number: int) -> DigitChain:
        """Build the exact base-2048 chain for a non-negative integer.

        Zero produces a single zero digit, matching what the converter
        emits for "0".
        """
        if number < 0:
            raise ValueError("Yin numbers are non-negative, got {}".format(number))
        chain = cls()
        chain.prepend(number & YIN_MASK)
        number >>= YIN_LEN
        while number:
            chain.prepend(number & YIN_MASK)
            number >>= YIN_LEN
        return chain

    @classmethod
    def parse(cls, text: str) -> DigitChain:
        """Parse a rendered chain such as ``"bex.ham.bit"``.

        Surrounding whitespace (including the trailing newline render()
        adds) is ignored. Blank text raises InvalidSyllableError.
        """
        stripped = text.strip()
        if not stripped:
            raise InvalidSyllableError(text, "empty")

        chain = cls()
        for syllable in reversed(stripped.split(DELIMITER)):
            chain.prepend(decode(parse_digit(syllable)))
        return chain

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[YinDigit]:
        self._check_live()
        node = self._head
        while node is not None:
            yield node.digit
            node = node.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        if self._released:
            return "DigitChain(<released>)"
        return "DigitChain({!r})".format(self.render().rstrip("\n"))

    @property
    def released(self) -> bool:
        return self._released

    def values(self) -> List[int]:
        """Integer value of each digit, head first."""
        return [decode(digit) for digit in self]

    def syllables(self) -> List[str]:
        """Rendered syllable of each digit, head first."""
        return [render_digit(digit) for digit in self]

    def to_int(self) -> int:
        """Reconstruct the integer the chain spells."""
        total = 0
        for digit in self:
            total = (total << YIN_LEN) | decode(digit)
        return total

    def render(self) -> str:
        """Render the chain as dotted syllables terminated by a newline."""
        return DELIMITER.join(self.syllables()) + "\n"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def release(self) -> None:
        """Unlink every node exactly once.

        Iterates rather than recursing so long chains do not grow the stack.
        """
        self._check_live()
        node = self._head
        while node is not None:
            next_node = node.next
            node.next = None
            node = next_node
        self._head = None
        self._length = 0
        self._released = True

    def __enter__(self) -> DigitChain:
        self._check_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._released:
            self.release()

    def _check_live(self) -> None:
        if self._released:
            raise ChainReleasedError("Digit chain has already been released")


def render(chain: DigitChain) -> str:
    """Module-level alias for DigitChain.render()."""
    return chain.render()


def release(chain: DigitChain) -> None:
    """Module-level alias for DigitChain.release()."""
    chain.release()
