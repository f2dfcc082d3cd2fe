"""
Models module - data access over the relational store.

Each model is a class of static methods that run parameterized SQL and
return plain dicts keyed by application field names.
"""

from jobboard.models.job import Job

__all__ = ["Job"]
