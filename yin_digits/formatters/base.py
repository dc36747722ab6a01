"""Abstract base formatter for rendering digit chains.

WHY: The CLI can print a converted chain in more than one shape (the
classic dotted syllables, or a machine-readable JSON line). A common
base class lets the CLI work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements, a ``name`` property
and a ``format()`` method that turns one chain into one output line.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns exactly one line, terminated by "\\n"
- ``format()`` must not release or otherwise mutate the chain
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from yin_digits.core.chain import DigitChain


class BaseFormatter(ABC):
    """Abstract base for all chain formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Plain Text'."""

    @abstractmethod
    def format(self, chain: DigitChain) -> str:
        """Render one chain as a single newline-terminated line.

        Args:
            chain: A live (not yet released) digit chain.

        Returns:
            The rendered line, including its trailing newline.
        """
