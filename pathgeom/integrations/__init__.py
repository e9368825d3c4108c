"""Output backends for pathgeom paths."""
