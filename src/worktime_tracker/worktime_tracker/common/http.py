from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict, Optional

from flask import jsonify, request

from ..core.exceptions import InvalidArgumentError, NotFoundError, ValidationError, WorkTimeValidationError

logger = logging.getLogger(__name__)


def json_ok(data: Any = None, status: int = 200, **extra: Any):
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status


def json_error(message: str, status: int, errors: Optional[Dict[str, str]] = None):
    body: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def api_errors(view):
    """Map domain exceptions raised by a JSON view to status codes."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except WorkTimeValidationError as e:
            return json_error("Validation failed", 400, errors=e.errors)
        except (ValidationError, InvalidArgumentError) as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return json_error("Internal server error", 500)

    return wrapper
