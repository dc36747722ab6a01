"""JSON-lines formatter for scripts that consume converted chains.

WHY: Downstream tools that store or compare yin numbers want the digit
values alongside the syllables without re-implementing the codec.

HOW: Emits one compact JSON object per chain:
``{"syllables": ["bex", "ham", "bit"], "values": [39, 534, 57],
"value": 164671545}`` where ``value`` is the head-first fold of the
digit values.

RULES:
- Keys: syllables, values, value (always all three)
- Lists are head first, same order as the dotted rendering
- One object per line, no indentation, "\\n" terminated
- Output conforms to yin_chain_schema.json
"""

from __future__ import annotations

import json

from yin_digits.core.chain import DigitChain
from yin_digits.formatters.base import BaseFormatter


class JsonLinesFormatter(BaseFormatter):
    """Formatter that prints one JSON object per chain."""

    @property
    def name(self) -> str:
        return "JSON Lines"

    def format(self, chain: DigitChain) -> str:
        record = {
            "syllables": chain.syllables(),
            "values": chain.values(),
            "value": chain.to_int(),
        }
        return json.dumps(record, separators=(",", ":")) + "\n"
