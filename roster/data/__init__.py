"""
Seed data package for the roster query engine.
"""

from roster.data.seed import seed_records

__all__ = ["seed_records"]
