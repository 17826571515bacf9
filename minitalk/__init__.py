"""Send text between processes over SIGUSR1 and SIGUSR2, one bit per signal, with small C-style text helpers."""

__version__ = "1.0.0"