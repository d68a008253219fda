"""Password testing CLI flows.

Allows users to check the strength of a password they already have.
"""

import getpass

from cli.generator import display_strength
from password_checker import check_password_strength


def test_password_flow() -> None:
    """Allow user to test a password's strength without echoing it."""
    print("\n--- Test a Password ---")

    user_pwd = getpass.getpass("Enter the password you want to test: ")
    if not user_pwd:
        print("No password entered.")
        return

    display_strength(check_password_strength(user_pwd))
