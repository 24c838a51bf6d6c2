import re
import time
import threading
from typing import Optional

from apiharness.config import get_settings
from apiharness.core.models import TestUser

USERNAME_PATTERN = re.compile(r"^user_\d+$")

_lock = threading.Lock()
_last_seed = 0


def _next_seed() -> int:
    # Millisecond clock, bumped so two calls in the same millisecond still differ
    global _last_seed
    with _lock:
        _last_seed = max(int(time.time() * 1000), _last_seed + 1)
        return _last_seed


def generate_user_data(password: Optional[str] = None) -> TestUser:
    """Fresh credentials for a single test: ``user_<millis>`` plus the standard password."""
    return TestUser(
        user_name=f"user_{_next_seed()}",
        password=password if password is not None else get_settings().test_user_password,
    )
