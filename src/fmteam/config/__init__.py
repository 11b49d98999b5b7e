"""Static catalogues: roles, abilities, and category membership."""

from .catalogue import (
    ABILITIES,
    MIN_PLAYER_COUNT,
    REQUIRED_ROLE_COUNT,
    ROLES,
    is_valid_role,
    role_index,
)
from .categories import (
    PlayerCategory,
    categories_for_role,
    parse_category,
    role_in_category,
    roles_for_category,
)

__all__ = [
    "ABILITIES",
    "MIN_PLAYER_COUNT",
    "REQUIRED_ROLE_COUNT",
    "ROLES",
    "PlayerCategory",
    "categories_for_role",
    "is_valid_role",
    "parse_category",
    "role_in_category",
    "role_index",
    "roles_for_category",
]
