"""A small shell toolkit: tokenizer, parser, executor, integer variables and history."""

__version__ = "0.1.0"