import logging

from uvicorn import Config, Server

from capitals.config import settings
from capitals.logging_config import setup_logging
from capitals.main import create_app

logger = logging.getLogger("capitals")


def run() -> None:
    setup_logging(settings.log_level, settings.log_file)
    app = create_app(settings=settings)
    config = Config(app=app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Listening on port http://%s:%s", settings.host, settings.port)
    try:
        server.run()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
