"""Error taxonomy for the point pipeline.

Every error is raised eagerly and propagates to the caller; nothing in the
pipeline substitutes default data on failure.

- ``ValidationError``: malformed seed data (bad position, non-array payload).
- ``InvalidArgumentError``: precondition violation (empty seed set,
  non-positive target count, empty category registry).
- ``NetworkError``: the seed asset could not be fetched.

Example:
    Surface the offending record:
        >>> from points_explorer.core.errors import ValidationError
        >>> try:
        ...     normalize_seed_points([{"id": "x"}], categories=..., settings=...)
        ... except ValidationError as e:
        ...     print(e.index)  # 0
"""

from __future__ import annotations


class PointsExplorerError(Exception):
    """Base class for all errors raised by the point pipeline."""


class ValidationError(PointsExplorerError, ValueError):
    """Raised when seed data is malformed.

    Attributes:
        index: Position of the offending record in the seed array, or None
            when the payload as a whole is invalid.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidArgumentError(PointsExplorerError, ValueError):
    """Raised when a pipeline function is called outside its preconditions."""


class NetworkError(PointsExplorerError, RuntimeError):
    """Raised when fetching the seed asset does not succeed.

    Attributes:
        status_code: HTTP status code, or None if no response was received.
        status_text: HTTP reason phrase or transport error description.
        url: The URL that was requested.
    """

    def __init__(
        self,
        status_code: int | None,
        status_text: str,
        url: str,
    ) -> None:
        if status_code is None:
            message = f"Failed to load {url}: {status_text}"
        else:
            message = f"Failed to load {url}: {status_code} {status_text}"
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
        self.url = url
