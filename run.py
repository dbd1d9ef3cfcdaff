import os
from medialib import create_app
from waitress import serve

# Create the Flask app instance using the factory
app = create_app()


if __name__ == '__main__':
    if app.config['DEBUG']:
        app.run(debug=True)
    else:
        # For waitress, read from environment
        host = os.environ.get('FLASK_RUN_HOST', '0.0.0.0')
        port = int(os.environ.get('FLASK_RUN_PORT', '5000'))
        app.logger.info(f"Starting production server on {host}:{port}")
        serve(app, host=host, port=port)
