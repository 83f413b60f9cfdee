"""Catalog services built on the recipe source and the catalog store."""
