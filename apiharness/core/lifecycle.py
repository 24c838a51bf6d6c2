"""
Per-test account lifecycle: create a user, authenticate it, and delete it
again when the test is over.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import requests
from pydantic import ValidationError

from apiharness.api_client import AccountClient
from apiharness.core.errors import SetupError, TransportError
from apiharness.core.identity import generate_user_data
from apiharness.core.models import CreatedUser, Session, TestUser, TokenResponse

logger = logging.getLogger(__name__)


def open_session(client: AccountClient, user: Optional[TestUser] = None) -> Session:
    """
    Create ``user`` (or a freshly generated one) and fetch a bearer token for it.

    Any deviation from 201 on create or 200 + token on GenerateToken raises
    SetupError. There is no retry.
    """
    user = user or generate_user_data()

    try:
        created_res = client.create_user(user)
    except TransportError as e:
        raise SetupError(f"Creating {user.user_name} failed: {e.body}", e.response) from e
    if created_res.status_code != 201:
        raise SetupError(f"Expected 201 creating {user.user_name}, got {created_res.status_code}", created_res)

    try:
        created = CreatedUser.model_validate(created_res.json())
    except (ValueError, ValidationError) as e:
        raise SetupError(f"Create response for {user.user_name} has no userID", created_res) from e

    try:
        token_res = client.generate_token(user.user_name, user.password)
    except TransportError as e:
        raise SetupError(f"Token request for {user.user_name} failed: {e.body}", e.response) from e
    if token_res.status_code != 200:
        raise SetupError(f"Expected 200 from GenerateToken, got {token_res.status_code}", token_res)

    try:
        token = TokenResponse.model_validate(token_res.json())
    except (ValueError, ValidationError) as e:
        raise SetupError(f"Unreadable GenerateToken response for {user.user_name}", token_res) from e
    if not token.token:
        raise SetupError(f"No token issued for {user.user_name}: {token.result}", token_res)

    logger.info(f"Opened session for {user.user_name} ({created.user_id})")
    return Session(user=user, user_id=created.user_id, token=token.token)


def close_session(client: AccountClient, session: Optional[Session]) -> bool:
    """
    Best-effort delete of the session's user. Never raises.

    Returns True when the service confirmed the deletion with 204.
    """
    if session is None or session.released or not (session.user_id and session.token):
        return False

    try:
        res = client.delete_user(session.user_id, session.token)
    except (TransportError, requests.RequestException) as e:
        # Already gone, or the network is down: neither should fail the test
        logger.warning(f"Cleanup of {session.user.user_name} failed: {e}")
        return False

    session.released = True
    if res.status_code != 204:
        logger.warning(f"Cleanup of {session.user.user_name} answered {res.status_code}")
        return False
    return True


@contextmanager
def user_session(client: AccountClient, user: Optional[TestUser] = None) -> Iterator[Session]:
    """
    Scope a throwaway account to a ``with`` block.

    The account is deleted on every way out of the block. A test that
    deletes the account itself should set ``session.released = True`` so the
    teardown does not try again.
    """
    session = open_session(client, user)
    try:
        yield session
    finally:
        close_session(client, session)
