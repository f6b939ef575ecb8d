"""Count blank, comment and code lines of source files by language or by file."""

__version__ = "0.1.0"