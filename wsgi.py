"""WSGI entry point"""
import os
from medialib import create_app

app = create_app()

if __name__ == "__main__":
    host = os.environ.get('FLASK_RUN_HOST', '0.0.0.0')
    port = int(os.environ.get('FLASK_RUN_PORT', '5000'))
    app.logger.info(f"Starting server on {host}:{port}")
    app.run(host=host, port=port, debug=True)
