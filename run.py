#!/usr/bin/env python3
"""
Entry point for the tournament API.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development, production or testing (default: development)
    HOST: Interface to bind (default: 0.0.0.0)
    PORT: Port to run on (default: 8080)
    LOG_LEVEL: Root logging level (default: DEBUG in development, INFO otherwise)
    REDIS_URL: Redis for change events; unset disables publishing
"""
import logging
import os

from campeonato.app import create_app


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def run_server():
    """Run the API with one thread per request."""
    app = create_app()
    configure_logging(app.config['LOG_LEVEL'])

    host = app.config['HOST']
    port = app.config['PORT']
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    app.logger.info(f"Starting API Campeonato on {host}:{port}...")
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)


if __name__ == '__main__':
    run_server()
