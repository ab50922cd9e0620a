"""Helpers shared by the Flask controllers (session gates, error mapping, CSV)."""

from __future__ import annotations

import logging
from datetime import date
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import SessionRole
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    StoreFailureError,
    ValidationError,
)
from .datetime_utils import format_year_month, parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ValidationError, 400),
)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def role_required(*roles: SessionRole):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "role" not in session:
                return fail("Please sign in to continue", 401)
            if session.get("role") not in allowed:
                return fail("You do not have access to this page", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def domain_errors(view):
    """Turn service exceptions into user-visible JSON messages."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except StoreFailureError:
            return fail("The record store is unavailable, please try again", 500)
        except DomainError as e:
            for exc_type, status in _STATUS_BY_ERROR:
                if isinstance(e, exc_type):
                    return fail(str(e), status)
            return fail(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Unexpected system error", 500)

    return wrapper


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def optional_date(value: str | None) -> date | None:
    return parse_iso_date(value) if value else None


def month_arg() -> str:
    return request.args.get("month") or format_year_month(date.today())


def csv_response(app: Flask, content: str, *, filename: str):
    return app.response_class(
        content.encode("utf-8-sig"),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
