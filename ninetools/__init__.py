"""Command-line tools: exchange-rate conversion, RPN evaluation and merge-insertion sorting."""

__version__ = "0.1.0"