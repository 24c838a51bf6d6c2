import os
import logging
from pydantic import BaseModel, Field


class HarnessSettings(BaseModel):
    account_api_url: str = Field(
        default="https://demoqa.com/Account/v1",
        description="Base URL of the live account service",
    )
    profile_api_url: str = Field(
        default="https://api.example.com",
        description="Base URL the profile API stubs are registered under",
    )
    test_user_password: str = Field(
        default="P@ssw0rd123",
        description="Valid password given to every generated test user",
    )
    http_timeout: float = Field(default=30.0, description="Per-request timeout in seconds")
    run_live_tests: bool = Field(default=False, description="Whether the live-API suite may hit the network")
    log_level: str = Field(default="INFO", description="Root logging level for the test run")

    @classmethod
    def from_env(cls) -> "HarnessSettings":
        """
        Read settings from the environment, falling back to the field defaults.
        """
        values = {
            "account_api_url": os.getenv("ACCOUNT_API_URL"),
            "profile_api_url": os.getenv("PROFILE_API_URL"),
            "test_user_password": os.getenv("TEST_USER_PASSWORD"),
            "http_timeout": os.getenv("HTTP_TIMEOUT"),
            "run_live_tests": os.getenv("RUN_LIVE_TESTS"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        return cls(**{k: v for k, v in values.items() if v not in (None, "")})


def get_settings() -> HarnessSettings:
    return HarnessSettings.from_env()


def configure_logging(level=None):
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
