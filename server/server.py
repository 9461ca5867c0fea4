"""
BridgeServer class for CLI control of the FastAPI application.
"""
import logging
from typing import Optional

import uvicorn

from settings import PORT, LOG_LEVEL, BIND_ADDRESS
from bridge.adapter import PodioAdapter
from .app import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(debug: bool = False):
    """Configure the root logger for the server process"""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # httpx logs every request at info
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if debug:
        logger.info("Debug logging enabled")


class BridgeServer:
    """Bridge server wrapper for CLI control"""

    def __init__(
        self,
        adapter: PodioAdapter,
        debug: bool = False,
        bind_address: Optional[str] = None,
        port: Optional[int] = None
    ):
        self.server = None
        self.config = None
        self.debug = debug
        self.bind_address = bind_address or BIND_ADDRESS
        self.port = port or PORT
        self.app = create_app(adapter)

        setup_logging(debug)

    def run(self):
        """Run the bridge server (blocking)"""
        logger.info(f"Starting Podio bridge on http://{self.bind_address}:{self.port}")
        logger.info("Available endpoints: /contacts, /oauth2/redirect, /oauth2/callback, /health")
        self.config = uvicorn.Config(
            self.app,
            host=self.bind_address,
            port=self.port,
            log_level="debug" if self.debug else LOG_LEVEL,
            access_log=False  # request middleware already logs
        )
        self.server = uvicorn.Server(self.config)
        self.server.run()

    def stop(self):
        """Stop the bridge server"""
        if self.server:
            self.server.should_exit = True
