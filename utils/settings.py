"""
settings.py

Runtime configuration for the checkout suite.

Values come from environment variables (optionally from a local .env file). The root conftest.py
pushes command-line options into the environment before the settings are first read.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from data.products import SamplingPolicy

DEFAULT_BASE_URL = "https://www.saucedemo.com"
DEFAULT_SEED = 12345


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """
    Immutable snapshot of the suite configuration.

    Timeouts are in milliseconds, matching Playwright.
    """
    base_url: str = DEFAULT_BASE_URL
    test_id_attribute: str = "data-test"
    action_timeout: int = 10000
    navigation_timeout: int = 30000
    expect_timeout: int = 5000
    headless: bool = False
    browser_name: str = "chromium"
    seed: int = DEFAULT_SEED
    sampling_policy: SamplingPolicy = SamplingPolicy.STRICT

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the process environment.

        Environment Variables:
            BASE_URL, TEST_ID_ATTRIBUTE, ACTION_TIMEOUT, NAVIGATION_TIMEOUT, EXPECT_TIMEOUT,
            HEADLESS, BROWSER, SEED, SAMPLING_POLICY
        """
        load_dotenv()
        return cls(
            base_url=os.getenv("BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            test_id_attribute=os.getenv("TEST_ID_ATTRIBUTE", "data-test"),
            action_timeout=int(os.getenv("ACTION_TIMEOUT", "10000")),
            navigation_timeout=int(os.getenv("NAVIGATION_TIMEOUT", "30000")),
            expect_timeout=int(os.getenv("EXPECT_TIMEOUT", "5000")),
            headless=_env_bool("HEADLESS") or os.getenv("GITHUB_RUN") is not None,
            browser_name=os.getenv("BROWSER", "chromium"),
            seed=int(os.getenv("SEED", str(DEFAULT_SEED))),
            sampling_policy=SamplingPolicy(os.getenv("SAMPLING_POLICY", SamplingPolicy.STRICT.value).lower()),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
