"""
Job Board API
CRUD over jobs with filtering and admin-only mutations.

Architecture:
- PostgreSQL: jobs and companies, queried with raw parameterized SQL
- FastAPI: HTTP layer, pydantic request/response schemas
- JWT bearer tokens: caller identity with an isAdmin flag
"""

__version__ = "1.0.0"
