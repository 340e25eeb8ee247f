"""
WebSocket Event Handlers

Keystroke channel for the on-screen and physical keyboards. A client joins the
room of its game and receives a 'game_state' event after every accepted command;
rejected commands are answered with 'command_rejected' to the sender only.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import build_game_payload


def _resolve_game(data):
    """Returns (game_service, game_id) or emits an error and returns (None, None)."""
    game_service = get_game_service()
    if not game_service:
        emit('error', {'error': 'Game service unavailable'})
        return None, None

    if not isinstance(data, dict) or not data.get('game_id'):
        emit('error', {'error': 'game_id is required'})
        return None, None

    game_id = data['game_id']
    if game_service.get_game_state(game_id) is None:
        emit('error', {'error': 'Game not found', 'game_id': game_id})
        return None, None

    return game_service, game_id


def _publish(game_id, action, result):
    if result is None:
        emit('error', {'error': 'Game not found', 'game_id': game_id})
        return

    payload = build_game_payload(result.state, result.keyboard, result, game_id)
    game_logger.log_server_response(request, action, result.accepted, payload, game_id, transport='websocket')

    if not result.accepted:
        emit('command_rejected', payload)
        return

    emit('game_state', payload, to=game_id)

    if result.guess is not None and result.state.game_over:
        event = 'game_won' if result.state.won else 'game_lost'
        game_logger.log_game_event(
            game_id, event, request.remote_addr,
            rounds_used=result.state.current_round, target_word=result.state.answer,
            final_guess=result.guess.word
        )


def _report_error(action, error, data):
    game_id = data.get('game_id') if isinstance(data, dict) else None
    game_logger.log_error(request, error, action, game_id)
    emit('error', {'error': str(error)})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Subscribe this socket to a game's updates and send the current state."""
        try:
            game_service, game_id = _resolve_game(data)
            if not game_service:
                return

            snapshot = game_service.get_snapshot(game_id)
            if snapshot is None:
                emit('error', {'error': 'Game not found', 'game_id': game_id})
                return

            join_room(game_id)
            game_logger.log_user_action(request, 'join_game', game_id, transport='websocket')

            state, keyboard = snapshot
            emit('game_state', build_game_payload(state, keyboard, game_id=game_id))

        except Exception as e:
            _report_error('join_game', e, data)

    @socketio.on('leave_game')
    def handle_leave_game(data):
        try:
            if isinstance(data, dict) and data.get('game_id'):
                leave_room(data['game_id'])
        except Exception as e:
            _report_error('leave_game', e, data)

    @socketio.on('add_letter')
    def handle_add_letter(data):
        try:
            game_service, game_id = _resolve_game(data)
            if not game_service:
                return

            letter = data.get('letter')
            game_logger.log_user_action(request, 'add_letter', game_id, letter=letter, transport='websocket')
            _publish(game_id, 'add_letter', game_service.add_letter(game_id, letter))

        except Exception as e:
            _report_error('add_letter', e, data)

    @socketio.on('remove_letter')
    def handle_remove_letter(data):
        try:
            game_service, game_id = _resolve_game(data)
            if not game_service:
                return

            game_logger.log_user_action(request, 'remove_letter', game_id, transport='websocket')
            _publish(game_id, 'remove_letter', game_service.remove_letter(game_id))

        except Exception as e:
            _report_error('remove_letter', e, data)

    @socketio.on('submit_guess')
    def handle_submit_guess(data):
        try:
            game_service, game_id = _resolve_game(data)
            if not game_service:
                return

            game_logger.log_user_action(request, 'submit_guess', game_id, transport='websocket')
            _publish(game_id, 'submit_guess', game_service.submit_guess(game_id))

        except Exception as e:
            _report_error('submit_guess', e, data)

    @socketio.on('new_game')
    def handle_new_game(data):
        """Restart the joined game, optionally with a new word length."""
        try:
            game_service, game_id = _resolve_game(data)
            if not game_service:
                return

            word_length = data.get('word_length')
            if word_length is not None and not game_service.is_supported_length(word_length):
                emit('error', {'error': 'Invalid word length', 'game_id': game_id})
                return

            game_logger.log_user_action(request, 'restart_game', game_id, word_length=word_length,
                                        transport='websocket')
            _publish(game_id, 'restart_game', game_service.restart_game(game_id, word_length))

        except Exception as e:
            _report_error('restart_game', e, data)
