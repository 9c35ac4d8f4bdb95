"""Single-box puzzle board generation and solving."""

__version__ = "0.1.0"
