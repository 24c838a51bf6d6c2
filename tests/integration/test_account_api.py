import pytest

from apiharness.core.errors import TransportError
from apiharness.core.identity import USERNAME_PATTERN, generate_user_data
from apiharness.core.lifecycle import user_session
from apiharness.core.models import AccountUser, TokenResponse
from apiharness.core.results import LogicalFailure, Ok

pytestmark = pytest.mark.live


def test_create_user_with_valid_data(session, user_data):
    # The session fixture already created the user; check what it got back
    assert session.user_id
    assert USERNAME_PATTERN.match(user_data.user_name)


def test_create_user_fails_with_empty_password(account_client):
    user = generate_user_data(password="")

    with pytest.raises(TransportError, match="status code 400") as exc_info:
        account_client.create_user(user)

    assert exc_info.value.status_code == 400


def test_generate_token_for_valid_user(session):
    assert isinstance(session.token, str)
    assert session.token != ""


def test_generate_token_fails_with_wrong_password(account_client, session, user_data):
    res = account_client.generate_token(user_data.user_name, "wrongPass123")

    # Transport says OK, the body says otherwise
    assert res.status_code == 200
    body = TokenResponse.model_validate(res.json())
    assert body.status == "Failed"
    assert body.result == "User authorization failed."


def test_wrong_password_classifies_as_logical_failure(account_client, session, user_data):
    wrong = user_data.model_copy(update={"password": "wrongPass123"})

    result = account_client.authenticate(wrong)

    assert isinstance(result, LogicalFailure)
    assert result.status == 200
    assert result.message == "User authorization failed."


def test_get_user_returns_created_user(account_client, session, user_data):
    res = account_client.get_user(session.user_id, session.token)

    assert res.status_code == 200
    assert AccountUser.model_validate(res.json()).username == user_data.user_name


def test_get_user_fails_with_wrong_id(account_client, session):
    with pytest.raises(TransportError):
        account_client.get_user("invalid-id", session.token)


def test_delete_user(account_client):
    # Own account, so the shared teardown never races this delete
    with user_session(account_client) as temp:
        res = account_client.delete_user(temp.user_id, temp.token)
        temp.released = True

        assert res.status_code == 204


def test_delete_user_twice(account_client):
    with user_session(account_client) as temp:
        first = account_client.delete_user(temp.user_id, temp.token)
        temp.released = True
        assert first.status_code == 204

        second = account_client.delete_user(temp.user_id, temp.token)
        assert second.status_code == 200
        assert second.json()["message"] == "User Id not correct!"


def test_repeat_delete_classifies_as_logical_failure(account_client):
    with user_session(account_client) as temp:
        assert isinstance(account_client.remove_user(temp.user_id, temp.token), Ok)
        temp.released = True

        again = account_client.remove_user(temp.user_id, temp.token)
        assert isinstance(again, LogicalFailure)
        assert again.message == "User Id not correct!"
