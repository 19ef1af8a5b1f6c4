"""Command line interface for LinguaBridge."""
