"""Media pricing - polymorphic pricing of streaming and download services."""

__version__ = "0.1.0"
