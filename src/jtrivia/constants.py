"""
Constants and default configuration values for jtrivia.

This module centralizes the endpoint, the fixed decoder messages and the
default settings so the rest of the package has no magic strings.
"""

# Question source
JSERVICE_RANDOM_URL = "http://jservice.io/api/random"

# Largest value a question id or point value may take (unsigned 64 bit)
MAX_UNSIGNED_64 = 2 ** 64 - 1

# Fields read from the first object of the response, in check order
REQUIRED_FIELDS = {
    'question': str,
    'answer': str,
    'id': int,
    'value': int
}

# Fixed decoder messages
SHAPE_ERRORS = {
    'not_an_array': "failed to parse jservice.io random question json, expected array",
    'not_an_object': "failed to parse jservice.io random question json, expected object",
    'field': "failed to parse jservice.io random question json, field {field} missing or wrong type"
}

# File Paths and Names
DEFAULT_PATHS = {
    'config_file': 'config/settings.json',
    'logs_dir': 'logs'
}

DEFAULT_SETTINGS = {
    'source': {
        'endpoint': JSERVICE_RANDOM_URL,
        'timeout': None
    },
    'logging': {
        'level': 'INFO',
        'console_level': 'WARNING',
        'file': 'logs/jtrivia.log',
        'max_size': 10485760,
        'backup_count': 5
    }
}

# Interactive menu
MENU_BANNER = "JTRIVIA \n"
MENU_OPTIONS = [
    "OPTIONS: ",
    "1- START ",
    "2- EXIT \n"
]
MENU_START = 1
MENU_EXIT = 2
