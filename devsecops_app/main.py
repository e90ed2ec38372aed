"""DevSecOps demo application — entry point."""

import sys

from devsecops_app.config import DB_PASSWORD
from devsecops_app.detection import is_sql_query


BANNER = "Application Java DevSecOps Demarree!"

MENU_OPTIONS = [
    "1. Afficher la configuration",
    "2. Traiter une requete",
    "3. Quitter",
]


def show_menu() -> None:
    print("\n=== MENU PRINCIPAL ===")
    for option in MENU_OPTIONS:
        print(option)

    # Intentional vulnerability: secret written to stdout
    print(f"Debug - Mot de passe DB: {DB_PASSWORD}")


def process_input(user_input: str) -> None:
    """Echo the input and flag anything that looks like SQL.

    The input is never validated or escaped; it is printed verbatim.
    """
    print(f"Traitement de: {user_input}")

    if is_sql_query(user_input):
        print(f"ALERTE - Requete SQL detectee: {user_input}")

    print(f"Traitement termine pour: {user_input}")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    print(BANNER)

    # Only the first argument matters, an empty string still counts
    if argv:
        process_input(argv[0])
    else:
        show_menu()
    return 0


if __name__ == "__main__":
    sys.exit(main())
