"""Title parsing, tag templates and the tag step."""
