"""askdoc: question answering over a pasted block of text."""

__version__ = "1.0.0"
