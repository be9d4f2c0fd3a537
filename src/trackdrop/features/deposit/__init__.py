"""Destination planning and the deposit step."""
