"""Command-line interface for building and printing decks."""
