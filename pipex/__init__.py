"""Run two commands joined by a pipe between an input file and an output file,
with small ASCII character, number and string helpers."""

__version__ = "0.1.0"