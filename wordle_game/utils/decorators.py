"""
Request Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import request, jsonify


def require_game(f):
    """
    Decorator for endpoints that act on an existing game session.

    Resolves the game service, answers 500 when it is not initialised and
    404 when ``game_id`` is unknown; otherwise calls the view with the
    service passed as ``game_service``.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        from ..services.game_service import get_game_service
        from .game_logger import game_logger

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        if game_service.get_session(game_id) is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, request.endpoint or 'unknown', False,
                                            error_response, game_id)
            return jsonify(error_response), 404

        kwargs['game_service'] = game_service
        return f(game_id, *args, **kwargs)

    return decorated_function
