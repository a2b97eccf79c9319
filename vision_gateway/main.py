"""Entry point — wires Config → GoogleVisionClient → FastAPI app → uvicorn."""
import logging

import uvicorn
from rich.logging import RichHandler

from vision_gateway.config import Config
from vision_gateway.constants import MSG_SERVER_RUNNING
from vision_gateway.server import create_app
from vision_gateway.vision.google import GoogleVisionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)

    vision = GoogleVisionClient(config.credentials_path)
    app = create_app(config, vision)

    logger.info(MSG_SERVER_RUNNING, config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
