"""Command parsing, output wording and the interpreter loop."""
