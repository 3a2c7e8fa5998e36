"""Session gates for the JSON controllers.

The hosting identity provider puts ``user_id`` and ``role`` into the Flask
session; these decorators only read them.
"""

from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def _deny(status: int, message: str):
    return jsonify({"success": False, "error": "forbidden" if status == 403 else "unauthorized", "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return _deny(401, "Please sign in to continue")
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return _deny(401, "Please sign in to continue")
            if session.get("role") not in allowed:
                return _deny(403, "You are not allowed to perform this action")
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required(Role.ADMIN)
writer_required = roles_required(Role.ADMIN, Role.USER)
