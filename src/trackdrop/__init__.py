"""trackdrop - tag media files from their titles and deposit them into an organized library."""

__version__ = "0.1.0"
