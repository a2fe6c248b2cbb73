"""
Logging utilities for the relay services

Provides centralized structlog configuration on top of stdlib logging.
"""

import os
import logging
import logging.config
from typing import Optional, Dict, Any

import structlog
import yaml

# Default stdlib logging configuration, structlog renders the message itself
DEFAULT_LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    }
}

LOG_FORMATS = ('json', 'console')


def load_logging_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load a stdlib dictConfig from a YAML file

    Falls back to DEFAULT_LOGGING_CONFIG when no path is given or the
    file does not exist.
    """
    if config_path and os.path.exists(config_path):
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Logging config {config_path} is not a mapping")
        return config

    # Deep enough copy for the keys we override below
    config = dict(DEFAULT_LOGGING_CONFIG)
    config['handlers'] = {k: dict(v) for k, v in DEFAULT_LOGGING_CONFIG['handlers'].items()}
    config['root'] = dict(DEFAULT_LOGGING_CONFIG['root'])
    return config


def configure_logging(
    service_name: str,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    config_path: Optional[str] = None
) -> None:
    """
    Setup stdlib logging and structlog for a service

    Args:
        service_name: Bound to every log line as ``service``
        log_level: Override log level (defaults to LOG_LEVEL env or INFO)
        log_format: 'json' or 'console' (defaults to LOG_FORMAT env or json)
        config_path: YAML dictConfig path (defaults to LOGGING_CONFIG_PATH env)
    """
    log_level = (log_level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    log_format = (log_format or os.getenv('LOG_FORMAT', 'json')).lower()
    if log_format not in LOG_FORMATS:
        log_format = 'json'

    config = load_logging_config(config_path or os.getenv('LOGGING_CONFIG_PATH'))
    if 'root' in config:
        config['root']['level'] = log_level
    for handler_config in config.get('handlers', {}).values():
        handler_config['level'] = log_level
    logging.config.dictConfig(config)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == 'json'
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get logger instance

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)
