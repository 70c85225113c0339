"""Local analytics, search and image normalization backend for a notes app."""
