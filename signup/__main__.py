"""Entry point for `python -m signup`."""

import sys
from pathlib import Path

from flexsync.logging_config import setup_logging
from flexsync.settings import load_env, load_settings
from signup.constants import SIGNUP_FAILED, SIGNUP_QUIT, SIGNUP_SUCCESS
from signup.terminal import run_wizard


def main() -> int:
    """Run the signup wizard. Returns the process exit code."""
    project_root = Path(__file__).resolve().parent.parent
    settings = load_settings(project_root / "config", env_vars=load_env(project_root))
    setup_logging(project_root, settings)

    try:
        result = run_wizard(settings)
    except KeyboardInterrupt:
        print("\n\nInscription annulée.")
        return SIGNUP_QUIT

    if result.success:
        print(f"\n✅ Inscription terminée ! Redirection vers {result.route}\n")
        return SIGNUP_SUCCESS

    if result.failed:
        return SIGNUP_FAILED

    print("\nInscription annulée.")
    return SIGNUP_QUIT


if __name__ == "__main__":
    sys.exit(main())
