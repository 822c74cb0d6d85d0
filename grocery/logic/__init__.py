"""Core business logic layer.

Subpackages:
- shopping: grocery list aggregation (collector, merger, categorizer, reporter)
"""
__all__ = ["shopping"]
