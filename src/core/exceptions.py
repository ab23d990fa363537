"""Custom exceptions raised across layers. The API layer maps them onto the response envelope."""

from src.core.shared_types import ErrorKind


class GameError(Exception):
    """Top-level exception for anything going wrong in the score keeper."""

    kind: ErrorKind = ErrorKind.INTERNAL


class InvalidRequestError(GameError):
    """Request content that can not be accepted (e.g. blank player name)."""

    kind = ErrorKind.VALIDATION


class NotFoundError(GameError):
    """Requested record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ReferentialError(NotFoundError):
    """Operation references a Player or Game that does not exist."""

    kind = ErrorKind.REFERENTIAL


class ConflictError(GameError):
    """Uniqueness violation, e.g. attaching the same player to a game twice."""

    kind = ErrorKind.CONFLICT


class StoreError(GameError):
    """Underlying persistence failure."""

    kind = ErrorKind.STORE
