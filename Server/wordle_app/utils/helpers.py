"""
Helper Functions

Contains utility functions used by the HTTP and WebSocket layers.
"""

from typing import Any, Dict, Mapping, Optional

from ..models.game import CommandResult, GameState, KeyStatus
from ..services.keyboard_tracker import keyboard_to_dict


def build_game_payload(state: GameState,
                       keyboard: Mapping[str, KeyStatus],
                       result: Optional[CommandResult] = None,
                       game_id: Optional[str] = None) -> Dict[str, Any]:
    """JSON body shared by HTTP responses and socket events."""
    payload: Dict[str, Any] = {
        'success': result.accepted if result else True,
        'state': state.to_dict(),
        'keyboard': keyboard_to_dict(keyboard),
    }
    if game_id is not None:
        payload['game_id'] = game_id
    if result is not None and not result.accepted:
        payload['reason'] = result.reason.value
        payload['error'] = result.message
    return payload
