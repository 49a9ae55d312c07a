"""Rules engine and alpha-beta search for the Game of the Amazons."""

__version__ = "0.1.0"
