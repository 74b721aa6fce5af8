"""Best-effort inspection of public GitHub repositories."""

__version__ = "0.1.0"
