"""Catalogo - restaurant menus and artist catalogs as plain domain objects."""
