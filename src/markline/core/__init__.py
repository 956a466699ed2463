"""Conversion core: tag catalog, line matching and document assembly."""
