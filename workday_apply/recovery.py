"""
Workday-specific scripts for the consent checkbox and the submit button.

Both target markup quirks of the create-account form: a React checkbox that
ignores WebDriver clicks, and overlays that intercept clicks on submit.
"""

import time

from workday_apply.actions import click_with_redundancy, locate, run_script
from workday_apply.errors import InteractionFailed
from workday_apply.locators import (
    CONSENT_CHECKBOX_AUTOMATION_SELECTOR,
    CONSENT_CHECKBOX_ID,
    CONSENT_LABEL_SELECTOR,
    SUBMIT_OVERLAY_SELECTOR,
    Target,
)

SCROLL_CONSENT_JS = """
const checkbox = document.getElementById(arguments[0]);
if (checkbox) { checkbox.scrollIntoView({block: 'center'}); }
"""

CHECK_CONSENT_JS = """
const checkbox = document.getElementById(arguments[0]) || document.querySelector(arguments[1]);
if (!checkbox) return false;

const label = document.querySelector(arguments[2]);
if (label) {
    label.click();
    setTimeout(() => {
        if (!checkbox.checked) {
            checkbox.checked = true;
            checkbox.setAttribute('aria-checked', 'true');
            ['mousedown', 'mouseup', 'click', 'change'].forEach(eventType => {
                checkbox.dispatchEvent(new Event(eventType, {
                    bubbles: true,
                    cancelable: true,
                    composed: true
                }));
            });
        }
    }, 50);
} else {
    checkbox.click();
    if (checkbox.checked !== !!checkbox.getAttribute('aria-checked')) {
        checkbox.dispatchEvent(new MouseEvent('click', {bubbles: true, cancelable: true, composed: true}));
        checkbox.dispatchEvent(new Event('change', {bubbles: true, cancelable: true}));
    }
    checkbox.checked = true;
}
return true;
"""

CLEAR_OVERLAYS_JS = """
const overlay = document.querySelector(arguments[0]);
if (overlay) {
    overlay.style.display = 'none';
    overlay.style.pointerEvents = 'none';
}
document.querySelectorAll('div[style*="z-index"]').forEach(el => {
    const zIndex = parseInt(window.getComputedStyle(el).zIndex);
    if (zIndex > 100) {
        el.style.display = 'none';
        el.style.pointerEvents = 'none';
    }
});
"""

FORCE_SUBMIT_JS = """
const button = arguments[0];
button.scrollIntoView({block: 'center'});
try {
    button.click();
    ['mousedown', 'mouseup', 'click'].forEach(eventType => {
        button.dispatchEvent(new MouseEvent(eventType, {
            bubbles: true,
            cancelable: true,
            composed: true
        }));
    });
    const form = button.closest('form');
    if (form) {
        form.dispatchEvent(new Event('submit', {bubbles: true, cancelable: true}));
        if (typeof form.submit === 'function') {
            form.submit();
        }
    }
    return true;
} catch (err) {
    console.error('Error in JS button click:', err);
    return false;
}
"""

ENTER_KEYPRESS_JS = """
document.querySelector('form button[type="submit"]').form.dispatchEvent(new KeyboardEvent('keypress', {
    key: 'Enter',
    code: 'Enter',
    keyCode: 13,
    which: 13,
    bubbles: true
}));
"""

OVERLAY_SETTLE_DELAY = 0.1


def check_consent(driver):
    """
    Tick the consent checkbox through its label, forcing the checked state
    if React does not pick up the click.
    Returns False when no checkbox is on the page.
    """
    run_script(driver, SCROLL_CONSENT_JS, CONSENT_CHECKBOX_ID, label="scroll consent checkbox")
    result = run_script(
        driver,
        CHECK_CONSENT_JS,
        CONSENT_CHECKBOX_ID,
        CONSENT_CHECKBOX_AUTOMATION_SELECTOR,
        CONSENT_LABEL_SELECTOR,
        label="check consent checkbox",
    )
    return result is True


def consent_with_fallback(driver):
    if check_consent(driver):
        print("  ✓ Checkbox checked via JavaScript")
        return
    print("  ⚠ JavaScript approach found no checkbox, falling back to WebDriver click")
    locate(driver, Target.CONSENT_CHECKBOX).click()


def force_submit(driver):
    """
    Clear overlays and push the submit button through every event path.
    Returns True when the scripted click went through, False when only the
    Enter keypress fallback was sent.
    """
    run_script(driver, CLEAR_OVERLAYS_JS, SUBMIT_OVERLAY_SELECTOR, label="clear overlays")
    time.sleep(OVERLAY_SETTLE_DELAY)

    button = locate(driver, Target.SUBMIT_BUTTON)
    result = run_script(driver, FORCE_SUBMIT_JS, button, label="force submit")
    if result is True:
        print("  ✓ Submit button clicked via JavaScript bypass")
        return True

    print("  ⚠ JavaScript bypass failed, simulating Enter on the form")
    run_script(driver, ENTER_KEYPRESS_JS, label="enter keypress")
    print("  ✓ Enter key simulation performed")
    return False


def submit_with_fallback(driver):
    try:
        click_with_redundancy(driver, Target.SUBMIT_BUTTON, attempts=1)
        print("  ✓ Submit button clicked")
    except InteractionFailed as e:
        print(f"  ⚠ Native submit failed: {e}. Using JavaScript bypass...")
        force_submit(driver)
