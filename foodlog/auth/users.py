from __future__ import annotations

from typing import Any

import bcrypt

_users: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _seed_users() -> None:
    """Pre-seed demo accounts on import."""
    _users["demo@foodlog.app"] = {
        "id": "user-demo",
        "display_name": "demo",
        "password_hash": _hash_password("demo123"),
    }
    _users["guest@foodlog.app"] = {
        "id": "user-guest",
        "display_name": "guest",
        "password_hash": _hash_password("guest123"),
    }


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{id, email, display_name}`` or ``None``."""
    record = _users.get(email.strip().lower())
    if record and _verify_password(password, record["password_hash"]):
        return {
            "id": record["id"],
            "email": email.strip().lower(),
            "display_name": record["display_name"],
        }
    return None


_seed_users()
