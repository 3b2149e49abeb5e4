from workday_apply.config import load_settings
from workday_apply.errors import StepFailed, WorkflowError
from workday_apply.workflow import ApplicationWorkflow, hold_open
import sys

# Force output to flush immediately for real-time logging in CI
import functools
print = functools.partial(print, flush=True)

def main():
    settings = load_settings()

    print("Starting Workday application automation...")
    print(f"Target: {settings.job_url}")
    print(f"WebDriver: {settings.webdriver_url if settings.driver_mode == 'remote' else 'local geckodriver'}")
    if settings.headless:
        print("CI detected. Running browser headless.")

    workflow = ApplicationWorkflow(settings)
    try:
        driver = workflow.run()
    except StepFailed as e:
        print(f"ERROR: {e}")
        print(f"Cause: {e.__cause__!r}")
        print(f"Completed steps: {', '.join(state.name for state in workflow.completed) or 'none'}")
        sys.exit(1)
    except WorkflowError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print("Form submission verification complete")
    hold_open(driver, close_on_exit=settings.close_on_exit)

if __name__ == "__main__":
    main()
