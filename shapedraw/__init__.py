"""shapedraw — shape path engine for interactive chart annotations."""

__version__ = "0.1.0"
