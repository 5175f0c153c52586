"""Core business logic layer.

Subpackages:
- shopping: ingredient parsing, aisle lookup, list building and list edits
- recipes: recipe search, filters and sort orders

Everything here is pure; persistence lives in recipebox.infra.
"""
__all__ = ["shopping", "recipes"]
