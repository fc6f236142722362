"""Classic algorithms and data structures: graphs, dynamic programming, scheduling, containers and small puzzles."""

__version__ = "0.1.0"