"""Quoting, bind type and message tables used by the statement builder."""

from typing import Dict

# Identifier quote character (MySQL / MariaDB style)
quote_char = '`'

# Placeholder prefix for named parameters
placeholder_prefix = ':'

# Bind type hints, matching PDO::PARAM_INT / PDO::PARAM_STR
PARAM_INT = 1
PARAM_STR = 2

# Python type name -> bind type hint. Anything not listed binds as a string.
type_hint_map: Dict[str, int] = {
    'bool': PARAM_STR,
    'int': PARAM_INT,
    'float': PARAM_INT,
    'str': PARAM_STR,
    'NoneType': PARAM_STR,
}

# Explicit type tokens accepted in {'value': ..., 'type': ...} payloads
type_tokens: Dict[str, int] = {
    'int': PARAM_INT, 'integer': PARAM_INT, 'float': PARAM_INT, 'double': PARAM_INT,
    'str': PARAM_STR, 'string': PARAM_STR, 'bool': PARAM_STR, 'boolean': PARAM_STR,
    'null': PARAM_STR,
}

default_locale = 'en'

# Message catalog: locale -> key -> template
messages: Dict[str, Dict[str, str]] = {
    'en': {
        'exception.NotEmptyParam': '::params:: cannot be empty!',
        'exception.InvalidParam': '::params:: is invalid!',
    },
    'fr': {
        'exception.NotEmptyParam': '::params:: ne peut pas être vide !',
        'exception.InvalidParam': '::params:: est invalide !',
    },
}
