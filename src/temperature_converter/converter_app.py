#!/usr/bin/env python3
"""
Temperature Converter
Main application entry point
"""

import os
import sys
import logging
from typing import Optional
from dotenv import load_dotenv

from .converter import ConverterView
from .display import ConverterDisplay
from . import web_interface

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Configure root logging from arguments or environment"""
    log_level = (log_level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    log_file = log_file if log_file is not None else os.getenv('LOG_FILE', '')

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}, using {default}")
        return default


class AppConfig:
    """Host process settings (server and logging only)"""
    def __init__(self):
        self.host = os.getenv('WEB_HOST', '127.0.0.1')
        self.port = _env_int('WEB_PORT', 5000)
        self.debug = _env_bool('WEB_DEBUG', False)
        self.display_enabled = _env_bool('DISPLAY_ENABLED', True)


def create_app(config: AppConfig = None):
    """Wire the state store, display and web interface together"""
    if config is None:
        config = AppConfig()

    view = ConverterView()
    web_interface.set_converter(view)

    if config.display_enabled:
        panel = ConverterDisplay()
        view.subscribe(panel.update)
        panel.update(view.get_state())
        web_interface.set_display(panel)
        logger.info("Display panel enabled")
    else:
        web_interface.set_display(None)

    return web_interface.app


def main():
    """Main entry point"""
    load_dotenv('config.env')
    configure_logging()

    logger.info("=" * 60)
    logger.info("Temperature Converter Starting")
    logger.info("=" * 60)

    config = AppConfig()
    create_app(config)

    try:
        web_interface.run_web_server(config.host, config.port, config.debug)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == '__main__':
    main()
