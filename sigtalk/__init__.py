"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2,
with small text, memory, number, formatting and linked-list helpers."""

__version__ = "0.1.0"