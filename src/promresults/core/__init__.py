"""Core decoding logic. Depends only on the standard library."""
