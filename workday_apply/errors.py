"""Errors that abort the application workflow"""


class WorkflowError(Exception):
    pass


class ElementNotFound(WorkflowError):
    def __init__(self, description, selector, timeout):
        self.description = description
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"{description} not displayed after {timeout}s (selector: {selector})")


class InteractionFailed(WorkflowError):
    def __init__(self, label, attempts):
        self.label = label
        self.attempts = attempts
        super().__init__(f"{label} failed after {attempts} attempts")


class ConnectionFailed(WorkflowError):
    def __init__(self, url, attempts):
        self.url = url
        self.attempts = attempts
        super().__init__(f"Could not open a WebDriver session at {url} after {attempts} attempts")


class ScriptExecutionFailed(WorkflowError):
    def __init__(self, label):
        self.label = label
        super().__init__(f"Injected script failed: {label}")


class StepFailed(WorkflowError):
    """Raised by the workflow driver; the original error is the __cause__"""

    def __init__(self, state):
        self.state = state
        super().__init__(f"Workflow aborted at {state.name}")
