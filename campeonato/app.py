import os
from flask import Flask, request, jsonify, Response
from werkzeug.exceptions import HTTPException

from .config import config
from .errors import ApiError, InvalidIdentifier, MethodNotAllowed
from .openapi import build_openapi_document
from .payload import parse_tournament_payload, parse_id_from_path
from .pubsub import PubSubClient
from .torneio_service import TournamentService

API_VERSION = '1.0'

# Every verb reaches the view so a bad id is reported before a bad method
DETAIL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'DELETE', 'PATCH', 'OPTIONS']


def create_app(
    config_name: str = None,
    service: TournamentService = None,
    publisher: PubSubClient = None
) -> Flask:
    """Application factory for the tournament API."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))

    # Change events go to Redis only when it is configured
    if publisher is None and app.config.get('REDIS_URL'):
        publisher = PubSubClient(
            redis_url=app.config['REDIS_URL'],
            channel=app.config['EVENTS_CHANNEL'],
            log_key=app.config['EVENT_LOG_KEY'],
            log_size=app.config['EVENT_LOG_SIZE']
        )

    if service is None:
        service = TournamentService(publisher=publisher)

    # Store services on app for access in routes
    app.service = service
    app.publisher = publisher

    register_error_handlers(app)
    register_api_routes(app)

    return app


def plain_text_error(message: str, status_code: int) -> Response:
    response = Response(message + "\n", status=status_code, mimetype='text/plain')
    response.headers['X-Content-Type-Options'] = 'nosniff'
    return response


def register_error_handlers(app: Flask):
    """Render every request error as a one-line plain-text body."""

    @app.errorhandler(ApiError)
    def handle_api_error(error: ApiError):
        return plain_text_error(error.message, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(error: HTTPException):
        # "/torneios/" has no id segment; routing cannot match it
        if request.path.startswith('/torneios/'):
            return handle_api_error(InvalidIdentifier())
        return plain_text_error('404 page not found', 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error: HTTPException):
        return handle_api_error(MethodNotAllowed())


def register_api_routes(app: Flask):
    """Register API routes."""

    # ==================== Tournament CRUD ====================

    @app.route('/torneios', methods=['POST'])
    def create_tournament():
        """Create a tournament from {nome, ano}."""
        name, year = parse_tournament_payload(request.get_data())
        tournament = app.service.create(name, year)
        return jsonify(tournament.to_dict()), 201

    @app.route('/torneios', methods=['GET'])
    def list_tournaments():
        """List every tournament in memory."""
        return jsonify([t.to_dict() for t in app.service.list()])

    @app.route('/torneios/<path:subpath>', methods=DETAIL_METHODS)
    def tournament_detail(subpath: str):
        """Parse the id, then dispatch on the method."""
        tournament_id = parse_id_from_path(request.path)

        if request.method in ('GET', 'HEAD'):
            tournament = app.service.get_by_id(tournament_id)
            return jsonify(tournament.to_dict())

        if request.method == 'PUT':
            name, year = parse_tournament_payload(request.get_data())
            tournament = app.service.update(tournament_id, name, year)
            return jsonify(tournament.to_dict())

        if request.method == 'DELETE':
            app.service.delete(tournament_id)
            return '', 204

        raise MethodNotAllowed()

    # ==================== API Document ====================

    @app.route('/swagger/doc.json')
    def openapi_document():
        return jsonify(build_openapi_document(API_VERSION))

    # ==================== Health Check ====================

    @app.route('/health')
    def health_check():
        """Health check endpoint."""
        if app.publisher is None:
            events = 'disabled'
        elif app.publisher.ping():
            events = 'connected'
        else:
            events = 'disconnected'

        status = 'unhealthy' if events == 'disconnected' else 'healthy'
        code = 503 if status == 'unhealthy' else 200

        return jsonify({
            'status': status,
            'torneios': app.service.count(),
            'events': events
        }), code
