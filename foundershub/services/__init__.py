from .auth import authenticate_user, register_user, InvalidCredentialsError
from .feed import get_feed, merge_feed
from .polls import create_poll, get_poll, list_polls
from .status import list_statuses, set_status
from .updates import create_update, list_updates
from .users import get_current_profile, get_user, get_user_profile
from .vote import has_voted, vote_in_poll

__all__ = [
    # auth
    "authenticate_user",
    "register_user",
    "InvalidCredentialsError",
    # feed
    "get_feed",
    "merge_feed",
    # polls
    "create_poll",
    "get_poll",
    "list_polls",
    # status
    "list_statuses",
    "set_status",
    # updates
    "create_update",
    "list_updates",
    # users
    "get_current_profile",
    "get_user",
    "get_user_profile",
    # vote
    "has_voted",
    "vote_in_poll",
]
