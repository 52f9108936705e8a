"""Terminal store management: products in CSV files, menus, and a name-ordered tree."""

__version__ = "0.1.0"