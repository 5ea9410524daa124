"""Command-line interface for devtraits."""
