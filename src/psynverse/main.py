"""Application entry point for the Psynverse backend server."""

from psynverse.app import App
from psynverse.config import Config
from psynverse.logging import setup_logging
from psynverse.web.runner import run_server


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(config)
    run_server(app, config)


if __name__ == "__main__":
    main()
