import logging
from typing import Any, Optional

import requests

from apiharness.config import get_settings
from apiharness.core.errors import TransportError
from apiharness.core.models import TestUser
from apiharness.core.results import ApiResult, classify_response, is_success, parse_body

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin wrapper around a requests session bound to one base URL.

    ``request`` raises TransportError on any non-2xx status and returns the
    response otherwise. ``send`` never raises for a status code and returns
    the classified ApiResult instead.
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self.http = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        headers = dict(kwargs.pop("headers", None) or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = self.url(path)
        logger.debug(f"{method} {url}")
        response = self.http.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response

    def request(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        response = self._send(method, path, token=token, **kwargs)
        if not is_success(response.status_code):
            raise TransportError(response, body=parse_body(response))
        return response

    def send(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> ApiResult:
        return classify_response(self._send(method, path, token=token, **kwargs))

    def close(self):
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


# ----------------------------------------------------------------------
# Account service (Account/v1)
# ----------------------------------------------------------------------
class AccountClient(ApiClient):
    def __init__(self, base_url: Optional[str] = None, **kwargs):
        super().__init__(base_url or get_settings().account_api_url, **kwargs)

    def create_user(self, user: TestUser) -> requests.Response:
        return self.request("POST", "/User", json=user.credentials())

    def generate_token(self, user_name: str, password: str) -> requests.Response:
        return self.request("POST", "/GenerateToken", json={"userName": user_name, "password": password})

    def get_user(self, user_id: str, token: str) -> requests.Response:
        return self.request("GET", f"/User/{user_id}", token=token)

    def delete_user(self, user_id: str, token: str) -> requests.Response:
        return self.request("DELETE", f"/User/{user_id}", token=token)

    def authenticate(self, user: TestUser) -> ApiResult:
        """GenerateToken, classified: a bad password is a LogicalFailure, not an error."""
        return self.send("POST", "/GenerateToken", json=user.credentials())

    def remove_user(self, user_id: str, token: str) -> ApiResult:
        return self.send("DELETE", f"/User/{user_id}", token=token)


# ----------------------------------------------------------------------
# Profile API (stubbed in tests)
# ----------------------------------------------------------------------
class ProfileClient(ApiClient):
    def __init__(self, base_url: Optional[str] = None, **kwargs):
        super().__init__(base_url or get_settings().profile_api_url, **kwargs)

    def get_user(self, user_id: Any) -> requests.Response:
        return self.request("GET", f"/users/{user_id}")
