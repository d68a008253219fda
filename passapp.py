# CraftMyPass terminal tool
# Purpose: generate passwords and diceware passphrases, score them with zxcvbn,
# copy them to the clipboard and optionally save them as password.txt

from cli import generate_password_flow, generate_passphrase_flow, test_password_flow
from core import GeneratorSession


# main app menu and selection options
# one session is kept for the whole run so the last result is simply replaced
def main_menu():
    session = GeneratorSession()

    while True:
        print("\n=== CraftMyPass Menu ===")
        print("1. Generate a password")
        print("2. Generate a passphrase")
        print("3. Test a password")
        print("4. Exit")

        choice = input("Choose an option (1-4): ").strip()
        if choice == '1':
            generate_password_flow(session)
        elif choice == '2':
            generate_passphrase_flow(session)
        elif choice == '3':
            test_password_flow()
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


if __name__ == "__main__":
    main_menu()
