# main.py
import time

from .control.errors import ConfigError
from .utils.logging_system import setup_log_system

logger = setup_log_system()


def main() -> int:
    """Load the fleet, mark every bot running and serve Discord commands."""
    # Imported after logging is configured so module loggers inherit it
    from .fleet_controller import FleetController

    try:
        controller = FleetController()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    controller.start_all_bots()
    if not controller.start_discord():
        return 1
    logger.info("Listening for remote-control commands…")
    try:
        while controller.discord_running:
            time.sleep(0.1)
    except KeyboardInterrupt:
        logger.debug("Shutting down (KeyboardInterrupt received)…")
    finally:
        controller.stop_discord()
        controller.stop_all_bots()
        logger.info("Application terminated.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
