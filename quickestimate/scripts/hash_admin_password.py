"""
Print an ADMIN_PASSWORD_HASH line for the given password.

Usage:
    python -m quickestimate.scripts.hash_admin_password '<password>'
"""

import sys

from quickestimate.common.security import create_password_hash


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or not args[0]:
        print("Usage: python -m quickestimate.scripts.hash_admin_password '<password>'", file=sys.stderr)
        return 1

    print(f"ADMIN_PASSWORD_HASH={create_password_hash(args[0])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
