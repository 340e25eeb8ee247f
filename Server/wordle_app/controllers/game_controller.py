"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..config.game_settings import get_word_statistics
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import build_game_payload

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _read_word_length(game_service, data):
    """Returns (word_length, error_message); word_length is None when the body omits it."""
    word_length = data.get('word_length')
    if word_length is None:
        return None, None
    if not game_service.is_supported_length(word_length):
        supported = ', '.join(str(n) for n in game_service.supported_lengths)
        return None, f'Invalid word length. Must be one of: {supported}'
    return word_length, None


def _command_response(game_service, game_id, action, result, **log_details):
    """Turns a CommandResult into a JSON response and logs it, including game over events."""
    if result is None:
        return _game_not_found(action, game_id)

    response_data = build_game_payload(result.state, result.keyboard, result)

    game_logger.log_server_response(
        request, action, result.accepted, response_data, game_id,
        round=result.state.current_round, status=result.state.status.value, **log_details
    )

    if not result.accepted:
        return jsonify(response_data), 400

    if result.guess is not None and result.state.game_over:
        event = 'game_won' if result.state.won else 'game_lost'
        game_logger.log_game_event(
            game_id, event, request.remote_addr,
            rounds_used=result.state.current_round, target_word=result.state.answer,
            final_guess=result.guess.word
        )

    return jsonify(response_data)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        word_length, error = _read_word_length(game_service, data)
        if error:
            error_response = {'success': False, 'error': error}
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'new_game', word_length=word_length)

        game_id = game_service.create_new_game(word_length)
        snapshot = game_service.get_snapshot(game_id)
        if snapshot is None:
            return _game_not_found('new_game', game_id)

        state, keyboard = snapshot
        response_data = build_game_payload(state, keyboard, game_id=game_id)

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state and keyboard."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        snapshot = game_service.get_snapshot(game_id)
        if snapshot is None:
            return _game_not_found('get_state', game_id)

        state, keyboard = snapshot
        response_data = build_game_payload(state, keyboard, game_id=game_id)
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
def add_letter(game_id):
    """Type one letter into the current guess."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        if 'letter' not in data:
            error_response = {
                'success': False,
                'error': 'Letter is required'
            }
            game_logger.log_server_response(request, 'add_letter', False, error_response, game_id)
            return jsonify(error_response), 400

        letter = data['letter']
        game_logger.log_user_action(request, 'add_letter', game_id, letter=letter)

        result = game_service.add_letter(game_id, letter)
        return _command_response(game_service, game_id, 'add_letter', result)

    except Exception as e:
        game_logger.log_error(request, e, 'add_letter', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'add_letter', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/backspace', methods=['POST'])
def remove_letter(game_id):
    """Delete the last letter of the current guess."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'remove_letter', game_id)

        result = game_service.remove_letter(game_id)
        return _command_response(game_service, game_id, 'remove_letter', result)

    except Exception as e:
        game_logger.log_error(request, e, 'remove_letter', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'remove_letter', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
def submit_guess(game_id):
    """Submit the typed letters as a guess."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'submit_guess', game_id)

        result = game_service.submit_guess(game_id)
        return _command_response(game_service, game_id, 'submit_guess', result)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Type and submit a whole word in one request."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'make_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']
        game_logger.log_user_action(request, 'make_guess', game_id, guess=guess)

        result = game_service.make_guess(game_id, guess)
        return _command_response(game_service, game_id, 'make_guess', result, attempted_guess=guess)

    except Exception as e:
        game_logger.log_error(request, e, 'make_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'make_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start a new word in an existing session, optionally changing the word length."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True) or {}
        word_length, error = _read_word_length(game_service, data)
        if error:
            error_response = {'success': False, 'error': error}
            game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'restart_game', game_id, word_length=word_length)

        result = game_service.restart_game(game_id, word_length)
        return _command_response(game_service, game_id, 'restart_game', result)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        if not game_service.delete_game(game_id):
            return _game_not_found('delete_game', game_id)

        response_data = {'success': True}
        game_logger.log_server_response(request, 'delete_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/config', methods=['GET'])
def game_config():
    """Options the client needs to lay out the board."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    return jsonify({
        'success': True,
        'supported_word_lengths': list(game_service.supported_lengths),
        'default_word_length': game_service.default_word_length,
        'max_guesses': game_service.max_guesses,
        'enforce_dictionary': game_service.enforce_dictionary
    })


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_game_count() if game_service else 0,
            'word_statistics': get_word_statistics(game_service.dictionary.as_word_lists()) if game_service else None,
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
