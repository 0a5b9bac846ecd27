"""Tokenizer, syntax checker, expander and command builder for a small shell language."""

__version__ = "0.1.0"

__all__ = ["commands", "expander", "shell", "syntax", "textutil", "tokens"]