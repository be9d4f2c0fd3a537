"""Feature packages: tagging and deposit."""
