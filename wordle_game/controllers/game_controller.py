"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..models.word_list import EmptyWordListError
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _internal_error(action, error, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        data = request.get_json(silent=True) or {}
        hard_mode = data.get('hard_mode')
        if hard_mode is not None and not isinstance(hard_mode, bool):
            error_response = {
                'success': False,
                'error': 'hard_mode must be true or false'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'new_game', hard_mode=hard_mode)

        game_id = game_service.create_new_game(hard_mode)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )

        return jsonify(response_data)

    except EmptyWordListError as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': 'No target words available'
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 503
    except Exception as e:
        return _internal_error('new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            guess_count=state.guess_count, game_state=state.state
        )

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('get_state', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game
def add_letter(game_id, game_service):
    """Type one letter into the active row."""
    try:
        data = request.get_json(silent=True)
        letter = data.get('letter') if isinstance(data, dict) else None
        if not isinstance(letter, str) or len(letter) != 1 or not letter.isalpha():
            error_response = {
                'success': False,
                'error': 'A single letter is required'
            }
            game_logger.log_server_response(request, 'add_letter', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'add_letter', game_id, letter=letter)

        state = game_service.add_letter(game_id, letter)
        if state is None:
            return _game_not_found('add_letter', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'add_letter', True, response_data, game_id,
                                        current_input=state.current_input)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('add_letter', e, game_id)


@game_bp.route('/game/<game_id>/letter', methods=['DELETE'])
@require_game
def remove_letter(game_id, game_service):
    """Delete the last letter of the active row."""
    try:
        game_logger.log_user_action(request, 'remove_letter', game_id)

        state = game_service.remove_letter(game_id)
        if state is None:
            return _game_not_found('remove_letter', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'remove_letter', True, response_data, game_id,
                                        current_input=state.current_input)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('remove_letter', e, game_id)


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game
def submit_guess(game_id, game_service):
    """Submit the active row for validation and evaluation."""
    try:
        game_logger.log_user_action(request, 'submit_guess', game_id)

        outcome = game_service.submit_guess(game_id)
        if outcome is None:
            return _game_not_found('submit_guess', game_id)
        result, state = outcome

        if not result.is_success:
            error_response = {
                'success': False,
                'error': result.message,
                'result': result.to_dict(),
                'state': asdict(state)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=result.outcome.value, attempted_guess=state.current_input
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'result': result.to_dict(),
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess_count=state.guess_count, game_state=state.state
        )
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, game_service):
    """Start a fresh puzzle under the same game id."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        if state is None:
            return _game_not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('reset_game', e, game_id)


@game_bp.route('/game/<game_id>/hard_mode', methods=['POST'])
@require_game
def toggle_hard_mode(game_id, game_service):
    """Toggle hard mode (only before the first guess)."""
    try:
        game_logger.log_user_action(request, 'toggle_hard_mode', game_id)

        outcome = game_service.toggle_hard_mode(game_id)
        if outcome is None:
            return _game_not_found('toggle_hard_mode', game_id)
        changed, state = outcome

        response_data = {
            'success': True,
            'changed': changed,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'toggle_hard_mode', True, response_data, game_id,
                                        changed=changed, hard_mode=state.hard_mode)
        return jsonify(response_data)

    except Exception as e:
        return _internal_error('toggle_hard_mode', e, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted')

        return jsonify(response_data)

    except Exception as e:
        return _internal_error('delete_game', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'game_service_available': game_service is not None,
            'total_games': len(game_service.games) if game_service else 0,
            'active_games': game_service.active_game_count() if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
