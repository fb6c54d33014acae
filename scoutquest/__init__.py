"""Scout Quest - achievements, ranks and rewards for scouts."""

__version__ = "0.1.0"
