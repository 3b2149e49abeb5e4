import os
from dataclasses import dataclass

JOB_URL = "https://athenahealth.wd1.myworkdayjobs.com/External/job/Remote---MA/Lead-Linux-Systems-Engineer--Load-Balancing_R12284"

WEBDRIVER_PORT = 4444
WEBDRIVER_URL = f"http://localhost:{WEBDRIVER_PORT}"

# Connection
CONNECT_RETRIES = 3
CONNECT_RETRY_DELAY = 0.5  # seconds

# Element actions
ACTION_RETRIES = 3
LOCATE_TIMEOUT = 15
LOCATE_POLL = 1

# Session timeouts
IMPLICIT_WAIT = 10
PAGE_LOAD_TIMEOUT = 30

# Post-submit confirmation
CONFIRMATION_TIMEOUT = 20
CONFIRMATION_POLL = 2

CONSENT_ATTEMPTS = 3

# Hold-open loop sleeps in chunks of this many seconds until Ctrl+C
HOLD_OPEN_POLL = 60

EMAIL = "user@example.com"
PASSWORD = "SecurePass123!"

DRIVER_MODES = ("remote", "local")


@dataclass(frozen=True)
class Settings:
    job_url: str = JOB_URL
    webdriver_url: str = WEBDRIVER_URL
    email: str = EMAIL
    password: str = PASSWORD
    driver_mode: str = "remote"
    headless: bool = False
    close_on_exit: bool = False


def _flag(value):
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(environ=None):
    """Build Settings from the fixed constants, letting WORKDAY_* variables override them"""
    if environ is None:
        environ = os.environ

    email = environ.get("WORKDAY_EMAIL", "").strip() or EMAIL
    password = environ.get("WORKDAY_PASSWORD", "").strip() or PASSWORD
    job_url = environ.get("WORKDAY_JOB_URL", "").strip() or JOB_URL
    webdriver_url = environ.get("WORKDAY_WEBDRIVER_URL", "").strip() or WEBDRIVER_URL

    driver_mode = environ.get("WORKDAY_DRIVER_MODE", "").strip().lower() or "remote"
    if driver_mode not in DRIVER_MODES:
        print(f"⚠ Unknown WORKDAY_DRIVER_MODE '{driver_mode}', using remote")
        driver_mode = "remote"

    # Same CI detection as the login helper: no display on CI runners
    headless = bool(environ.get("CI") or environ.get("GITHUB_ACTIONS"))

    return Settings(
        job_url=job_url,
        webdriver_url=webdriver_url,
        email=email,
        password=password,
        driver_mode=driver_mode,
        headless=headless,
        close_on_exit=_flag(environ.get("WORKDAY_CLOSE_ON_EXIT", "")),
    )
