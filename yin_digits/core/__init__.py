"""Core codec, chain, and streaming conversion modules.

WHY: The core package is the stable heart of the converter: the digit
codec, the chain that owns digits, and the streaming converter that
builds chains. Every encoded number ever printed depends on these
staying bit-for-bit compatible.

HOW: codec.py maps one 11-bit value to a syllable and back, chain.py
holds digits in significance order, converter.py streams decimal text
into chains, errors.py defines the failure types.

RULES:
- Codec and chain layout are the contract; change with care
- Core modules never print or exit; they return values or raise
"""
