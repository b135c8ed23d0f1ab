from enum import Enum


class JoinOutcome(str, Enum):
    """Результат вступления в группу или подписки на тему."""

    JOINED = "joined"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    INVALID_USER = "invalid_user"
