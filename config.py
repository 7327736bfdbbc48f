"""Settings for the statement preview service."""

import os

APP_CONFIG = {
    'locale': os.getenv('STMT_LOCALE', 'en'),
    'default_database': os.getenv('STMT_DATABASE', ''),
    'json_sort_keys': os.getenv('STMT_JSON_SORT_KEYS', 'false').lower() in ('1', 'true', 'yes'),
}
