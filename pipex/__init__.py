"""Run two commands joined by a pipe between an input file and an output file, plus C-style string, memory and formatting helpers."""

__version__ = "0.1.0"