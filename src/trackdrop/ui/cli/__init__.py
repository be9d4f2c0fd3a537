"""Command line interface for trackdrop."""
