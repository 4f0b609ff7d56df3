"""Resolves the signed-in user from the session cookie."""

import logging
from typing import Optional

import jwt

from ..domain import UserContext
from .exceptions import InvalidToken, ExpiredToken

logger = logging.getLogger(__name__)

ALGORITHM = 'HS256'


def decode(token: str, secret: str) -> UserContext:
    """
    Decode a session token into a :class:`.UserContext`.

    Parameters
    ----------
    token : str
        A JWT signed with ``secret``. Must carry a ``user_id`` claim.
    secret : str

    Raises
    ------
    :class:`.ExpiredToken`
    :class:`.InvalidToken`

    """
    try:
        claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise ExpiredToken('Session token has expired') from e
    except jwt.InvalidTokenError as e:
        raise InvalidToken(f'Not a valid session token: {e}') from e
    if not claims.get('user_id'):
        raise InvalidToken('Session token has no user_id')
    return UserContext(
        user_id=str(claims['user_id']),
        username=claims.get('username', ''),
        email=claims.get('email', '')
    )


def load_user(token: Optional[str], secret: str) -> Optional[UserContext]:
    """Get the user for a session cookie, or ``None`` if not signed in."""
    if not token:
        return None
    try:
        return decode(token, secret)
    except ExpiredToken:
        logger.debug('Session token is expired')
    except InvalidToken as e:
        logger.warning('Invalid session token: %s', e)
    return None
