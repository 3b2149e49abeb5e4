import time

from selenium import webdriver
from selenium.webdriver.firefox.options import Options
from selenium.webdriver.firefox.service import Service
from selenium.common.exceptions import WebDriverException
from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed
from urllib3.exceptions import MaxRetryError
from webdriver_manager.firefox import GeckoDriverManager

from workday_apply import config
from workday_apply.errors import ConnectionFailed

CONNECT_ERRORS = (WebDriverException, MaxRetryError, OSError)


def build_options(settings):
    options = Options()
    if settings.headless:
        options.add_argument("--headless")
        options.add_argument("--width=1920")
        options.add_argument("--height=1080")
    return options


def driver_factory(settings):
    """Return a zero-argument callable that opens one WebDriver session"""
    def remote():
        return webdriver.Remote(command_executor=settings.webdriver_url, options=build_options(settings))

    def local():
        return webdriver.Firefox(
            service=Service(GeckoDriverManager().install()),
            options=build_options(settings),
        )

    return local if settings.driver_mode == "local" else remote


def connect(settings, factory=None, attempts=config.CONNECT_RETRIES, delay=config.CONNECT_RETRY_DELAY):
    """Open the browser session, retrying a few times before giving up"""
    if factory is None:
        factory = driver_factory(settings)
    target = settings.webdriver_url if settings.driver_mode == "remote" else "local geckodriver"

    def report(retry_state):
        error = retry_state.outcome.exception()
        print(f"  Connection attempt {retry_state.attempt_number}/{attempts} failed: {str(error)[:100]}")

    retrying = Retrying(
        stop=stop_after_attempt(attempts),
        wait=wait_fixed(delay),
        retry=retry_if_exception_type(CONNECT_ERRORS),
        before_sleep=report,
        sleep=time.sleep,
    )
    try:
        driver = retrying(factory)
    except RetryError as e:
        raise ConnectionFailed(target, attempts) from e.last_attempt.exception()
    print(f"✓ WebDriver session opened ({target})")
    return driver


def configure_timeouts(driver):
    driver.implicitly_wait(config.IMPLICIT_WAIT)
    driver.set_page_load_timeout(config.PAGE_LOAD_TIMEOUT)
