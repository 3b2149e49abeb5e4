from enum import Enum

# Ids and class names the recovery scripts rely on. These are not derived from
# the target selectors below; keep both in sync when the Workday markup moves.
CONSENT_CHECKBOX_ID = "input-8"
CONSENT_CHECKBOX_AUTOMATION_SELECTOR = "input[data-automation-id='createAccountCheckbox']"
CONSENT_LABEL_SELECTOR = f"label[for='{CONSENT_CHECKBOX_ID}']"
SUBMIT_OVERLAY_SELECTOR = ".css-16klg09"

CONFIRMATION_SELECTOR = ", ".join([
    "div[data-automation-id*='success']",
    "div[data-automation-id*='confirmation']",
    ".css-success-message",
    "h1",
    ".form-confirmation",
])


class Target(Enum):
    """Fixed UI targets of the Workday create-account flow"""

    APPLY_BUTTON = ("Apply Button", (
        "a[role='button'][data-automation-id='adventureButton']",
        "a[role='button'][data-uxi-element-id*='Apply']",
    ))
    MANUAL_APPLY = ("Manual Apply Button", (
        "a[role='button'][data-automation-id='applyManually']",
    ))
    # The sign-in form has shipped under several automation ids
    APPLICATION_FORM = ("Application Form", (
        "form[data-automation-id='signInFormo']",
        "div[data-automation-id='signInContent']",
        "div[data-automation-id='applyFlowPage']",
    ))
    EMAIL_INPUT = ("Email Input", (
        "input[data-automation-id='email']",
    ))
    PASSWORD_INPUT = ("Password Input", (
        "input[data-automation-id='password']",
    ))
    VERIFY_PASSWORD_INPUT = ("Verify Password Input", (
        "input[data-automation-id='verifyPassword']",
    ))
    CONSENT_CHECKBOX = ("Consent Checkbox", (
        f"#{CONSENT_CHECKBOX_ID}",
        CONSENT_CHECKBOX_AUTOMATION_SELECTOR,
        ".css-d3pjdr input[type='checkbox']",
        f"{CONSENT_LABEL_SELECTOR} ~ div input",
    ))
    SUBMIT_BUTTON = ("Submit Button", (
        "button[data-automation-id='createAccountSubmitButton']",
        "button.css-r4e0dj[type='submit']",
    ))

    def __init__(self, description, selectors):
        self.description = description
        self.selectors = tuple(selectors)

    @property
    def selector(self):
        """CSS selector list matching any of the alternatives"""
        return ", ".join(self.selectors)
