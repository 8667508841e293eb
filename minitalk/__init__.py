"""Text messaging between processes over SIGUSR1 and SIGUSR2, with helpers for bit encoding, formatting and line reading."""

__version__ = "0.1.0"

__all__ = ["cfmt", "client", "linereader", "parsing", "protocol", "server"]