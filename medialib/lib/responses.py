"""JSON envelopes for API responses.

Every response has the shape::

    {"success": bool, "message": str, "data": ..., "pagination": {...}, "errors": [...]}

where ``data``, ``pagination`` and ``errors`` are only present when set.
"""
from math import ceil

from flask import jsonify, Response


def respond_with(data, status=200) -> Response:
    """Create a JSON response with CORS headers."""
    resp = jsonify(data)
    resp.status_code = status
    resp.headers['Access-Control-Allow-Origin'] = "*"
    resp.headers['Access-Control-Allow-Headers'] = '*'
    return resp


def success(message, data=None, status=200) -> Response:
    body = {'success': True, 'message': message}
    if data is not None:
        body['data'] = data
    return respond_with(body, status)


def created(message, data=None) -> Response:
    return success(message, data, 201)


def no_content() -> Response:
    # 204 must not carry a body
    return Response(status=204)


def error(message, status=400, errors=None) -> Response:
    body = {'success': False, 'message': message}
    if errors:
        body['errors'] = errors
    return respond_with(body, status)


def paginated(message, data, page, limit, total, total_pages=None, status=200) -> Response:
    if total_pages is None:
        total_pages = ceil(total / limit) if limit > 0 else 0
    body = {
        'success': True,
        'message': message,
        'data': list(data),
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': total_pages,
        },
    }
    return respond_with(body, status)


def validation_error(errors) -> Response:
    """errors: list of {'field': ..., 'message': ...}"""
    return error('Validation failed', 400, errors)


def not_found(message='Resource not found') -> Response:
    return error(message, 404)


def unauthorized(message='Unauthorized') -> Response:
    return error(message, 401)


def forbidden(message='Forbidden') -> Response:
    return error(message, 403)


def conflict(message='Conflict') -> Response:
    return error(message, 409)


def rate_limit(message='Too many requests') -> Response:
    return error(message, 429)


def internal_error(message='Internal server error') -> Response:
    return error(message, 500)
