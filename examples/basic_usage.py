#!/usr/bin/env python3
"""
Basic typed-errors example.

This example demonstrates:
- Raising classified errors
- Branching on error kind with composable checks
- Rendering an error as an HTTP response

Usage:
    python examples/basic_usage.py
"""

from typed_errors.errors import (
    AllErrorCheck,
    new_forbidden_with_http,
    new_not_foundf,
)
from typed_errors.transport import BufferedResponseWriter, to_http_response


class UserService(AllErrorCheck):
    """Service that composes every capability check."""

    def __init__(self) -> None:
        self._users = {"ada": "Ada Lovelace"}

    def get(self, user_id: str) -> str:
        if user_id == "root":
            raise new_forbidden_with_http("forbidden", "root lookup attempted")
        if user_id not in self._users:
            raise new_not_foundf("user %s not found", user_id)
        return self._users[user_id]


def main() -> None:
    service = UserService()

    for user_id in ("ada", "bob", "root"):
        try:
            print(f"{user_id}: {service.get(user_id)}")
        except Exception as e:
            if service.is_not_found_error(e):
                print(f"{user_id}: resource not found ({e})")
            elif service.is_auth_error(e):
                print(f"{user_id}: access denied ({e})")
            else:
                raise

            writer = BufferedResponseWriter()
            status, written = to_http_response(e, writer)
            print(f"  -> HTTP {status} written={written} body={writer.text!r}")


if __name__ == "__main__":
    main()
