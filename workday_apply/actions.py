from selenium.webdriver.common.by import By
from selenium.webdriver.support.ui import WebDriverWait
from selenium.common.exceptions import (
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt

from workday_apply import config
from workday_apply.errors import ElementNotFound, InteractionFailed, ScriptExecutionFailed

SCROLL_AND_CLICK_JS = "arguments[0].scrollIntoView(true); arguments[0].click();"

# React-controlled inputs ignore a bare value assignment, so call the
# component's onChange first when the props are reachable.
SET_VALUE_JS = """
const input = arguments[0];
const value = arguments[1];
const propKey = Object.keys(input).find(key => key.startsWith('__reactProps$'));
if (propKey && input[propKey] && typeof input[propKey].onChange === 'function') {
    input[propKey].onChange({
        target: {value: value, name: input.name || input.id},
        currentTarget: input,
        bubbles: true,
        preventDefault: () => {},
        stopPropagation: () => {},
        persist: () => {}
    });
}
input.value = value;
input.dispatchEvent(new Event('input', {bubbles: true}));
"""


def _first_displayed(selector):
    def condition(driver):
        for element in driver.find_elements(By.CSS_SELECTOR, selector):
            try:
                if element.is_displayed():
                    return element
            except StaleElementReferenceException:
                continue
        return False
    return condition


def wait_for_displayed(driver, selector, description, timeout, poll):
    """
    Poll until an element matching `selector` is present and displayed.
    The implicit wait is switched off while polling so a miss costs at most
    `timeout` plus one poll; it is restored afterwards.
    """
    wait = WebDriverWait(
        driver,
        timeout,
        poll_frequency=poll,
        ignored_exceptions=[StaleElementReferenceException],
    )
    driver.implicitly_wait(0)
    try:
        return wait.until(_first_displayed(selector))
    except TimeoutException as e:
        raise ElementNotFound(description, selector, timeout) from e
    finally:
        driver.implicitly_wait(config.IMPLICIT_WAIT)


def locate(driver, target, timeout=config.LOCATE_TIMEOUT, poll=config.LOCATE_POLL):
    """Resolve a Target to a live, displayed element"""
    return wait_for_displayed(driver, target.selector, target.description, timeout, poll)


def run_script(driver, script, *args, label="script"):
    """execute_script wrapper; transport errors are fatal"""
    try:
        return driver.execute_script(script, *args)
    except WebDriverException as e:
        raise ScriptExecutionFailed(label) from e


def attempt_with_fallback(action, fallback, attempts=config.ACTION_RETRIES, label="action"):
    """
    Run `action` up to `attempts` times.
    Between two failed attempts `fallback` runs exactly once; after the last
    failed attempt InteractionFailed is raised from the last error.
    """
    def before_retry(retry_state):
        error = retry_state.outcome.exception()
        print(f"  ⚠ {label} attempt {retry_state.attempt_number}/{attempts} failed: {str(error)[:100]}")
        fallback()

    retrying = Retrying(
        stop=stop_after_attempt(attempts),
        retry=retry_if_exception_type(WebDriverException),
        before_sleep=before_retry,
    )
    try:
        return retrying(action)
    except RetryError as e:
        raise InteractionFailed(label, attempts) from e.last_attempt.exception()


def click_with_redundancy(driver, target, attempts=config.ACTION_RETRIES):
    element = locate(driver, target)

    def scroll_and_click():
        run_script(driver, SCROLL_AND_CLICK_JS, element, label=f"{target.description} scroll-and-click")

    attempt_with_fallback(element.click, scroll_and_click, attempts, label=f"Click {target.description}")


def send_keys_with_redundancy(driver, target, text, attempts=config.ACTION_RETRIES):
    element = locate(driver, target)

    def set_value():
        run_script(driver, SET_VALUE_JS, element, text, label=f"{target.description} value injection")

    attempt_with_fallback(lambda: element.send_keys(text), set_value, attempts,
                          label=f"Input {target.description}")
