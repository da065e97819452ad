"""Text decoding and variable substitution."""
