from __future__ import annotations

import argparse
import secrets
import string
import sys

from pydantic import ValidationError

from jobly.config import build_sqlalchemy_db_url, settings
from jobly.database import create_schema
from jobly.db.queries import execute, query_one
from jobly.errors import JoblyError
from jobly.schemas.user import UserCreate
from jobly.services import user_service


def _ensure_tables() -> None:
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        create_schema()


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create (or promote) an admin user account.")
    parser.add_argument("--username", required=True, help="Admin username")
    parser.add_argument("--email", required=True, help="Admin email")
    parser.add_argument("--password", default=None, help="Admin password (generated if omitted)")
    parser.add_argument("--first-name", default="Admin", help="First name")
    parser.add_argument("--last-name", default="User", help="Last name")
    parser.add_argument(
        "--update-password",
        action="store_true",
        help="If the user exists, overwrite their password",
    )

    args = parser.parse_args(argv)

    _ensure_tables()

    password = args.password or _generate_password()

    try:
        existing = query_one("SELECT username FROM users WHERE username = $1", [args.username])
        if existing is None:
            user_service.register(
                UserCreate(
                    username=args.username,
                    password=password,
                    first_name=args.first_name,
                    last_name=args.last_name,
                    email=args.email,
                    is_admin=True,
                )
            )
            print(f"created admin username={args.username}")
            if args.password is None:
                print(f"generated password: {password}")
            return 0

        # Promotion is not exposed through the API, so it goes straight to the table.
        execute("UPDATE users SET is_admin = $1 WHERE username = $2", [True, args.username])
        print(f"user already exists username={args.username}; promoted to admin")
        if args.update_password:
            user_service.update_user(args.username, {"password": password})
            print("password updated")
            if args.password is None:
                print(f"generated password: {password}")
        return 0
    except JoblyError as exc:
        sys.stderr.write(f"error: {exc.message}\n")
        return 1
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        sys.stderr.write(f"error: {problems}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
