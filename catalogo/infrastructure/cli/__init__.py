"""Command line interface for Catalogo."""
