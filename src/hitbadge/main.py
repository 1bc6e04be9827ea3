"""Application entry point for the hitbadge server."""

from hitbadge.app import App
from hitbadge.config import Config
from hitbadge.logging import setup_logging
from hitbadge.web.runner import run_server


def main() -> None:
    config = Config()  # type: ignore[call-arg]
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
