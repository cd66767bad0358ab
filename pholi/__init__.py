"""Tokenizer, name stacks, three-valued lattice operations and finite function tables for a partial higher-order logic."""

__version__ = "0.1.0"