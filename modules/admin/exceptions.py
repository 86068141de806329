"""
Admin module exceptions.
"""

from shared.exceptions import NotFoundError


class RecordNotFoundError(NotFoundError):
    """Raised when a moderated record does not exist."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(
            f"{kind.capitalize()} not found: {record_id}",
            code=f"{kind.upper()}_NOT_FOUND",
            details={f"{kind}_id": record_id},
        )
