from unittest.mock import patch

import pytest
from selenium.common.exceptions import JavascriptException, WebDriverException

from workday_apply.errors import ElementNotFound, InteractionFailed, ScriptExecutionFailed
from workday_apply.locators import (
    CONSENT_CHECKBOX_AUTOMATION_SELECTOR,
    CONSENT_CHECKBOX_ID,
    CONSENT_LABEL_SELECTOR,
    SUBMIT_OVERLAY_SELECTOR,
    Target,
)
from workday_apply.recovery import (
    CHECK_CONSENT_JS,
    CLEAR_OVERLAYS_JS,
    ENTER_KEYPRESS_JS,
    FORCE_SUBMIT_JS,
    SCROLL_CONSENT_JS,
    check_consent,
    consent_with_fallback,
    force_submit,
    submit_with_fallback,
)


class TestConsentCheckbox:

    def test_absent_checkbox_returns_false(self, driver):
        driver.execute_script.side_effect = [None, False]

        assert check_consent(driver) is False

    def test_checked_via_script(self, driver):
        driver.execute_script.side_effect = [None, True]

        assert check_consent(driver) is True
        calls = driver.execute_script.call_args_list
        assert calls[0].args == (SCROLL_CONSENT_JS, CONSENT_CHECKBOX_ID)
        assert calls[1].args == (
            CHECK_CONSENT_JS,
            CONSENT_CHECKBOX_ID,
            CONSENT_CHECKBOX_AUTOMATION_SELECTOR,
            CONSENT_LABEL_SELECTOR,
        )

    def test_script_dispatches_full_event_sequence(self):
        assert "['mousedown', 'mouseup', 'click', 'change']" in CHECK_CONSENT_JS
        assert "label.click()" in CHECK_CONSENT_JS
        assert "if (!checkbox) return false;" in CHECK_CONSENT_JS

    def test_transport_error_is_fatal(self, driver):
        driver.execute_script.side_effect = WebDriverException("no such window")

        with pytest.raises(ScriptExecutionFailed):
            check_consent(driver)

    def test_fallback_to_plain_click_when_absent(self, driver, element):
        driver.execute_script.side_effect = [None, False]

        with patch("workday_apply.recovery.locate", return_value=element) as mock_locate:
            consent_with_fallback(driver)

        mock_locate.assert_called_once_with(driver, Target.CONSENT_CHECKBOX)
        element.click.assert_called_once()

    def test_no_fallback_when_script_succeeds(self, driver):
        driver.execute_script.side_effect = [None, True]

        with patch("workday_apply.recovery.locate") as mock_locate:
            consent_with_fallback(driver)

        mock_locate.assert_not_called()

    def test_fallback_click_missing_element_is_fatal(self, driver):
        driver.execute_script.side_effect = [None, False]
        missing = ElementNotFound("Consent Checkbox", Target.CONSENT_CHECKBOX.selector, 15)

        with patch("workday_apply.recovery.locate", side_effect=missing):
            with pytest.raises(ElementNotFound):
                consent_with_fallback(driver)


@patch("workday_apply.recovery.time.sleep")
class TestForceSubmit:

    def test_scripted_click_succeeds(self, mock_sleep, driver, element):
        driver.execute_script.side_effect = [None, True]

        with patch("workday_apply.recovery.locate", return_value=element):
            assert force_submit(driver) is True

        calls = driver.execute_script.call_args_list
        assert calls[0].args == (CLEAR_OVERLAYS_JS, SUBMIT_OVERLAY_SELECTOR)
        assert calls[1].args == (FORCE_SUBMIT_JS, element)
        assert len(calls) == 2
        mock_sleep.assert_called_once_with(0.1)

    def test_enter_keypress_when_scripted_click_fails(self, mock_sleep, driver, element):
        driver.execute_script.side_effect = [None, False, None]

        with patch("workday_apply.recovery.locate", return_value=element):
            assert force_submit(driver) is False

        assert driver.execute_script.call_args_list[-1].args == (ENTER_KEYPRESS_JS,)

    def test_keypress_transport_error_is_fatal(self, mock_sleep, driver, element):
        driver.execute_script.side_effect = [None, False, JavascriptException("form is null")]

        with patch("workday_apply.recovery.locate", return_value=element):
            with pytest.raises(ScriptExecutionFailed):
                force_submit(driver)

    def test_missing_button_is_fatal(self, mock_sleep, driver):
        missing = ElementNotFound("Submit Button", Target.SUBMIT_BUTTON.selector, 15)

        with patch("workday_apply.recovery.locate", side_effect=missing):
            with pytest.raises(ElementNotFound):
                force_submit(driver)

        assert driver.execute_script.call_count == 1

    def test_submit_script_covers_form_paths(self, mock_sleep):
        assert "form.dispatchEvent(new Event('submit'" in FORCE_SUBMIT_JS
        assert "form.submit()" in FORCE_SUBMIT_JS
        assert "zIndex > 100" in CLEAR_OVERLAYS_JS


class TestSubmitWithFallback:

    def test_native_click_skips_bypass(self, driver):
        with patch("workday_apply.recovery.click_with_redundancy") as mock_click, \
                patch("workday_apply.recovery.force_submit") as mock_force:
            submit_with_fallback(driver)

        mock_click.assert_called_once_with(driver, Target.SUBMIT_BUTTON, attempts=1)
        mock_force.assert_not_called()

    def test_bypass_after_native_failure(self, driver):
        failure = InteractionFailed("Click Submit Button", 1)
        with patch("workday_apply.recovery.click_with_redundancy", side_effect=failure), \
                patch("workday_apply.recovery.force_submit", return_value=True) as mock_force:
            submit_with_fallback(driver)

        mock_force.assert_called_once_with(driver)

    def test_bypass_script_error_propagates(self, driver):
        failure = InteractionFailed("Click Submit Button", 1)
        with patch("workday_apply.recovery.click_with_redundancy", side_effect=failure), \
                patch("workday_apply.recovery.force_submit", side_effect=ScriptExecutionFailed("force submit")):
            with pytest.raises(ScriptExecutionFailed):
                submit_with_fallback(driver)
