from werkzeug.exceptions import HTTPException
from ..lib.responses import error, not_found, internal_error


def register_error_handlers(app):
    """Render errors with the same JSON envelope as regular responses."""

    @app.errorhandler(404)
    def handle_not_found(e):
        return not_found()

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return error(e.description or e.name, e.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception(f"Unhandled error: {e}")
        return internal_error()
