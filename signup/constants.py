"""Exit codes for `python -m signup` and fixed navigation targets."""

SIGNUP_SUCCESS = 0  # Profile submitted, navigated to dashboard
SIGNUP_QUIT = 1  # User cancelled (Ctrl+C or empty prompt)
SIGNUP_FAILED = 2  # Submission failed and user declined to retry

DASHBOARD_ROUTE = "/dashboard"
