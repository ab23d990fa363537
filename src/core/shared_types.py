"""
Type definitions used across layers
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Internal classification of failures. Only logged, never sent to clients."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REFERENTIAL = "referential"
    CONFLICT = "conflict"
    STORE = "store"
    INTERNAL = "internal"


class Message(StrEnum):
    """Values of the `message` field in the response envelope."""

    ALL_GOOD = "all good"
    USER_CREATED = "user_created"
    PLAYER_FOUND = "player_found"
    GAME_CREATED = "game_created"
    GAME_FOUND = "game_found"
    GAME_PLAYER_CREATED = "game_player_created"
    GAME_UPDATED = "game_updated"
    SCORES = "scores"
    STANDINGS = "standings"

    # --- failures
    INVALID_JSON = "invalid_json"
    INVALID_REQUEST = "invalid_request"
    VALIDATION_ERROR = "validation_error"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL_SERVER_ERROR = "internal_server_error"
