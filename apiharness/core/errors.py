from typing import Any, Optional

import requests


class HarnessError(Exception):
    """Base class for every error raised by the harness."""


class TransportError(HarnessError):
    """
    The server answered with a non-2xx status.

    Raised for every 4xx/5xx (and any other non-2xx) answer. The original
    response stays reachable on the error so tests can assert on its
    status and body.
    """

    def __init__(self, response: requests.Response, body: Any = None):
        self.response = response
        self.status_code = response.status_code
        self.body = body
        super().__init__(f"Request failed with status code {response.status_code}")


class SetupError(HarnessError):
    """Creating or authenticating a test user did not go as expected."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        self.response = response
        super().__init__(message)
