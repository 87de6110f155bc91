"""Entry point for rocket-tui."""

from rocket_tui.app import RocketApp
from rocket_tui.config import get_config
from rocket_tui.logs import configure_logging


def main() -> None:
    """Run the rocket-tui application."""
    config = get_config()
    configure_logging(
        level=config.log_level,
        log_json=config.log_json,
        log_file=config.log_file,
    )
    app = RocketApp(config)
    app.run()


if __name__ == "__main__":
    main()
