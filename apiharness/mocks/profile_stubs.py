import logging
from typing import Any, Dict, Tuple

import responses

logger = logging.getLogger(__name__)


MOCK_USER = {
    "id": 1,
    "name": "John Doe",
    "email": "john.doe@example.com",
    "username": "johndoe",
    "phone": "+1-555-123-4567",
    "address": {
        "street": "123 Main St",
        "city": "New York",
        "state": "NY",
        "zipcode": "10001",
        "country": "USA",
    },
    "company": {
        "name": "Doe Enterprises",
        "industry": "Technology",
        "position": "Software Engineer",
    },
    "dob": "1990-05-15",
    "profile_picture_url": "https://example.com/images/johndoe.jpg",
    "is_active": True,
    "created_at": "2023-01-01T12:00:00Z",
    "updated_at": "2023-10-01T12:00:00Z",
    "preferences": {
        "language": "en",
        "timezone": "America/New_York",
        "notifications_enabled": True,
    },
}

# (method, path) -> (status, body); a None body means no content at all
PROFILE_FIXTURE: Dict[Tuple[str, str], Tuple[int, Any]] = {
    ("GET", "/users/1"): (200, MOCK_USER),
    ("GET", "/users/2"): (204, None),
    ("GET", "/users/3"): (403, {"error": "Forbidden", "details": "Access denied."}),
    ("GET", "/users/4"): (404, {"error": "Not Found", "details": "User not found."}),
    ("GET", "/users/5"): (502, {"error": "Bad Gateway", "details": "Server unavailable."}),
}


class MockFixture:
    """A fixed set of canned responses bound to one base URL."""

    def __init__(self, base_url: str, routes: Dict[Tuple[str, str], Tuple[int, Any]] = PROFILE_FIXTURE):
        self.base_url = base_url.rstrip("/")
        self.routes = dict(routes)

    def install(self, rsps: responses.RequestsMock) -> responses.RequestsMock:
        """Drop whatever ``rsps`` had registered, then register this fixture's routes."""
        rsps.reset()
        for (method, path), (status, body) in self.routes.items():
            url = f"{self.base_url}{path}"
            if body is None:
                rsps.add(method, url, status=status)
            else:
                rsps.add(method, url, json=body, status=status)
        logger.debug(f"Installed {len(self.routes)} stubs under {self.base_url}")
        return rsps
