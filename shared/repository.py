"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

import re
from datetime import datetime, timezone
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import QueryError


T = TypeVar("T")

# Characters with meaning inside PostgREST filter expressions
_FILTER_SYNTAX = re.compile(r"[,()%*\\]")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Query execution with SDK errors translated to QueryError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class JobRepository(BaseRepository[Job]):
            def get_by_id(self, job_id: str) -> Optional[Job]:
                result = self._execute(
                    self._db.table("jobs").select("*").eq("id", job_id),
                    "jobs",
                )
                if not result.data:
                    return None
                return Job.model_validate(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _execute(query: Any, table: str) -> Any:
        """
        Execute a query builder.

        Raises:
            QueryError: If PostgREST rejects the query or the request fails
        """
        try:
            return query.execute()
        except APIError as e:
            raise QueryError(e.message or str(e), table=table, code=e.code) from e
        except httpx.HTTPError as e:
            raise QueryError(str(e), table=table) from e

    @staticmethod
    def _contains(term: str) -> str:
        """
        Build a case-insensitive substring pattern for ``ilike``.

        Filter syntax characters are stripped so user input cannot
        break out of an ``or`` expression.
        """
        cleaned = _FILTER_SYNTAX.sub(" ", term).strip()
        return f"%{cleaned}%"

    @staticmethod
    def _now() -> str:
        """Current UTC time as an ISO string for ``updated_at`` columns."""
        return datetime.now(timezone.utc).isoformat()
