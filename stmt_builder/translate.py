"""Message translation hook used to render builder error messages."""

import logging
from typing import Callable, Dict, Optional

from .mappings import default_locale, messages

logger = logging.getLogger(__name__)

Translator = Callable[[str, Optional[str], Optional[Dict[str, str]]], str]

_translator: Optional[Translator] = None


def default_translate(key: str, locale: Optional[str] = None, params: Optional[Dict[str, str]] = None) -> str:
    """Render a catalog message, substituting each params key with its value."""
    catalog = messages.get(locale or default_locale)
    if catalog is None:
        logger.warning(f'Unknown locale {locale!r}, falling back to {default_locale!r}')
        catalog = messages[default_locale]
    text = catalog.get(key, key)
    for token, value in (params or {}).items():
        text = text.replace(token, str(value))
    return text


def set_translator(fn: Optional[Translator]):
    """Install an external translator; None restores the built-in catalog."""
    global _translator
    _translator = fn


def translate(key: str, locale: Optional[str] = None, params: Optional[Dict[str, str]] = None) -> str:
    """Translate a message key through the installed translator."""
    fn = _translator or default_translate
    return fn(key, locale, params)
