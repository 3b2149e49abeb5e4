import time
from enum import Enum

from selenium.common.exceptions import WebDriverException
from urllib3.exceptions import MaxRetryError

from workday_apply import config
from workday_apply.actions import (
    click_with_redundancy,
    locate,
    send_keys_with_redundancy,
    wait_for_displayed,
)
from workday_apply.errors import StepFailed, WorkflowError
from workday_apply.locators import CONFIRMATION_SELECTOR, Target
from workday_apply.recovery import consent_with_fallback, submit_with_fallback
from workday_apply.session import configure_timeouts, connect


class State(Enum):
    CONNECT = "Opening WebDriver session"
    NAVIGATE = "Navigating to application page"
    CLICK_APPLY = "Clicking primary apply button"
    CLICK_MANUAL_APPLY = "Clicking manual apply button"
    VERIFY_FORM = "Waiting for application form"
    FILL_EMAIL = "Entering email"
    FILL_PASSWORD = "Entering password"
    FILL_VERIFY_PASSWORD = "Entering verify password"
    CHECK_CONSENT = "Checking consent checkbox"
    SUBMIT = "Submitting form"
    VERIFY_CONFIRMATION = "Waiting for submission confirmation"
    IDLE = "Holding browser open"


class ApplicationWorkflow:
    """
    Runs the create-account flow one state at a time.
    Any failure aborts the run with StepFailed naming the state it happened in.
    """

    def __init__(self, settings, connector=connect):
        self.settings = settings
        self.connector = connector
        self.driver = None
        self.state = None
        self.completed = []

    def steps(self):
        return [
            (State.CONNECT, self.open_session),
            (State.NAVIGATE, self.navigate),
            (State.CLICK_APPLY, lambda: click_with_redundancy(self.driver, Target.APPLY_BUTTON)),
            (State.CLICK_MANUAL_APPLY, lambda: click_with_redundancy(self.driver, Target.MANUAL_APPLY)),
            (State.VERIFY_FORM, lambda: locate(self.driver, Target.APPLICATION_FORM)),
            (State.FILL_EMAIL, lambda: send_keys_with_redundancy(
                self.driver, Target.EMAIL_INPUT, self.settings.email)),
            (State.FILL_PASSWORD, lambda: send_keys_with_redundancy(
                self.driver, Target.PASSWORD_INPUT, self.settings.password)),
            (State.FILL_VERIFY_PASSWORD, lambda: send_keys_with_redundancy(
                self.driver, Target.VERIFY_PASSWORD_INPUT, self.settings.password)),
            (State.CHECK_CONSENT, self.check_consent),
            (State.SUBMIT, lambda: submit_with_fallback(self.driver)),
            (State.VERIFY_CONFIRMATION, self.verify_confirmation),
        ]

    def run(self):
        total = len(self.steps())
        for idx, (state, step) in enumerate(self.steps(), 1):
            self.state = state
            print(f"Step {idx}/{total}: {state.value}...")
            try:
                step()
            except (WorkflowError, WebDriverException, MaxRetryError) as e:
                print(f"  ✗ {state.value} failed: {str(e)[:100]}")
                raise StepFailed(state) from e
            self.completed.append(state)
            print(f"  ✓ {state.value} complete")

        self.state = State.IDLE
        return self.driver

    def open_session(self):
        self.driver = self.connector(self.settings)
        configure_timeouts(self.driver)

    def navigate(self):
        print(f"  Loading URL: {self.settings.job_url}")
        self.driver.get(self.settings.job_url)
        print(f"  Current URL: {self.driver.current_url}")

    def check_consent(self):
        # Unconditional passes, even after the first one succeeds
        for attempt in range(1, config.CONSENT_ATTEMPTS + 1):
            print(f"  Consent checkbox attempt {attempt}/{config.CONSENT_ATTEMPTS}")
            consent_with_fallback(self.driver)

    def verify_confirmation(self):
        wait_for_displayed(
            self.driver,
            CONFIRMATION_SELECTOR,
            "Submission confirmation",
            config.CONFIRMATION_TIMEOUT,
            config.CONFIRMATION_POLL,
        )


def hold_open(driver, close_on_exit=False, sleep=time.sleep):
    """Keep the session alive for manual inspection until Ctrl+C"""
    print(f"\n{'='*60}")
    print("Browser window kept open for inspection")
    print("Press Ctrl+C in terminal to exit the program")
    print(f"{'='*60}\n")

    try:
        while True:
            sleep(config.HOLD_OPEN_POLL)
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if close_on_exit:
        print("Closing browser session...")
        driver.quit()
    else:
        print("Leaving browser session open.")
