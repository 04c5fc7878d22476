"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It initializes the game service and starts the Flask application.
"""

from wordle_game import create_app
from wordle_game.config import Config
from wordle_game.services.game_service import initialize_game_service
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(
            max_guesses=Config.MAX_GUESSES,
            hard_mode_default=Config.HARD_MODE_DEFAULT
        )
        print(f"✓ Game service initialized ({len(game_service.word_list)} words)")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Hard mode by default: {Config.HARD_MODE_DEFAULT}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
