"""
Logging Configuration

Console logging for the application and its services.
"""

import logging.config


def setup_logging(level='INFO'):
    """Configure root logging. Safe to call more than once."""
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
            },
        },
        'root': {
            'level': level,
            'handlers': ['console'],
        },
        'loggers': {
            # SQL echo stays off unless asked for
            'sqlalchemy.engine': {'level': 'WARNING'},
        },
    })
