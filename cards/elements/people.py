"""
Teams people icon (persona) components.

https://learn.microsoft.com/en-us/microsoftteams/platform/task-modules-and-cards/cards/cards-format#people-icon-in-an-adaptive-card
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from cards.card_types import PeopleIconElement, PersonProperties
from cards.elements.exceptions import InvalidShape

logger = logging.getLogger(__name__)

USER_COMPONENT = "graph.microsoft.com/user"
USERS_COMPONENT = "graph.microsoft.com/users"

# Plain values that cannot describe a user
_SCALAR_TYPES = (str, bytes, int, float)


def person_properties(user: Any) -> PersonProperties:
    """Rename a user identity to the Graph field names.

    ``user`` may be a mapping or an object with ``id``, ``name`` and
    ``email`` attributes. Missing fields come through as ``None``; values are
    not validated.
    """
    if isinstance(user, Mapping):
        get = user.get
    elif user is not None and not isinstance(user, _SCALAR_TYPES):
        def get(key):
            return getattr(user, key, None)
    else:
        raise InvalidShape(
            f"user must be a mapping or an object, got {type(user).__name__}",
            element="PeopleIcon",
            field="user",
        )
    return {
        "id": get("id"),
        "displayName": get("name"),
        "userPrincipalName": get("email"),
    }


def user_icon(user: Any) -> PeopleIconElement:
    """People icon for a single user (aad object id, name, email)."""
    return {
        "type": "Component",
        "name": USER_COMPONENT,
        "view": "compact",
        "properties": person_properties(user),
    }


def user_icon_set(users: Iterable) -> PeopleIconElement:
    """People icon set showing several users, in the order given.

    Duplicates are kept.
    """
    if isinstance(users, (str, bytes, Mapping)) or not isinstance(users, Iterable):
        raise InvalidShape(
            f"users must be a sequence of user identities, got {type(users).__name__}",
            element="PeopleIconSet",
            field="users",
        )
    people = [person_properties(user) for user in users]
    logger.debug(f"Built people icon set with {len(people)} user(s)")
    return {
        "type": "Component",
        "name": USERS_COMPONENT,
        "view": "compact",
        "properties": {"users": people},
    }


__all__ = [
    "USER_COMPONENT",
    "USERS_COMPONENT",
    "person_properties",
    "user_icon",
    "user_icon_set",
]
