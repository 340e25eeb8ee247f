"""
Wordle Game Server - Main Entry Point

Validates the word lists, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordle_app import create_app
from wordle_app.config import Config, SUPPORTED_WORD_LENGTHS, validate_word_list_integrity
from wordle_app.exceptions import ConfigurationError
from wordle_app.services.game_service import initialize_game_service
from wordle_app.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service()

        # Every length the board can be set to, and the default, must have target words
        required_lengths = tuple(sorted(set(SUPPORTED_WORD_LENGTHS) | {Config.DEFAULT_WORD_LENGTH}))
        validate_word_list_integrity(game_service.dictionary.as_word_lists(), required_lengths)
        print(f"✓ Game service initialized ({len(game_service.dictionary)} words, "
              f"lengths {', '.join(str(n) for n in game_service.supported_lengths)})")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting - default word length %s, enforce dictionary %s",
                                Config.DEFAULT_WORD_LENGTH, Config.ENFORCE_DICTIONARY)

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        game_logger.logger.error(f"Configuration error: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
