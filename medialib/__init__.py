import logging
from flask import Flask
from .extensions import db, migrate, compress, cors
from config import get_config
from . import models


def create_app(config_class=None):
    """Create and configure the Flask application using the factory pattern."""
    app = Flask(__name__, instance_relative_config=True)

    app.config.from_object(config_class or get_config())

    if app.config['DEBUG']:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if not app.config.get('CDN_URL'):
        app.logger.info("CDN_URL is not set, file URLs will fall back to object keys / presigned URLs.")

    db.init_app(app)
    migrate.init_app(app, db)
    compress.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": "*"}})

    from .routes.languages import languages_bp
    from .routes.subtitles import subtitles_bp
    from .routes.users import users_bp
    from .routes.errors import register_error_handlers

    app.register_blueprint(languages_bp)
    app.register_blueprint(subtitles_bp)
    app.register_blueprint(users_bp)
    register_error_handlers(app)

    from .commands import register_commands
    register_commands(app)

    @app.shell_context_processor
    def make_shell_context():
        return {'db': db, 'app': app}

    return app
