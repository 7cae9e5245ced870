from __future__ import annotations

import argparse
import secrets
import string
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from jobboard.config import build_sqlalchemy_db_url, get_settings, should_create_tables  # noqa: E402
from jobboard.database import Database  # noqa: E402
from jobboard.errors import ConflictError, ValidationError  # noqa: E402
from jobboard.models.enums import UserRole, enum_values  # noqa: E402
from jobboard.services.credential_service import CredentialService  # noqa: E402


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user account (candidate or employer).")
    parser.add_argument("--email", required=True, help="Account email (matched case-sensitively)")
    parser.add_argument("--name", required=True, help="Display name")
    parser.add_argument("--password", default=None, help="Password (generated if omitted)")
    parser.add_argument("--role", default=UserRole.CANDIDATE.value, choices=enum_values(UserRole))
    parser.add_argument("--print-token", action="store_true", help="Print a bearer token for the new user")
    args = parser.parse_args(argv)

    settings = get_settings()
    database = Database(build_sqlalchemy_db_url(settings))
    if should_create_tables(settings):
        database.create_all()

    password = args.password or _generate_password()
    try:
        with database.session() as db:
            result = CredentialService(db, settings).register(
                {"name": args.name, "email": args.email, "password": password, "role": args.role}
            )
    except ConflictError as exc:
        sys.stderr.write(f"{exc.message}: {args.email}\n")
        return 1
    except ValidationError as exc:
        for issue in exc.issues:
            sys.stderr.write(f"{issue.path}: {issue.message}\n")
        return 2
    finally:
        database.dispose()

    print(f"created user id={result.user.id} email={result.user.email} role={result.user.role.value}")
    if args.password is None:
        # Print the password so the operator can log in immediately.
        print(f"generated password: {password}")
    if args.print_token:
        print(f"token: {result.token}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
