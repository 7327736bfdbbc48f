"""Hand built statements to SQLAlchemy with typed bind parameters."""

import logging
import re
from typing import Any, Dict

from sqlalchemy import Integer, String, bindparam, text
from sqlalchemy.sql.elements import TextClause

from .binds import Statement, TypeHint

logger = logging.getLogger(__name__)

sa_types = {
    TypeHint.INTEGER: Integer,
    TypeHint.STRING: String,
}

_rx_unsafe = re.compile(r'\W')


def _param_names(statement: Statement) -> Dict[str, str]:
    """Map each placeholder to a name SQLAlchemy's text() can parse."""
    names = {}
    taken = {ph.lstrip(':') for ph in statement.binds}
    for ph in statement.binds:
        name = ph.lstrip(':')
        safe = _rx_unsafe.sub('_', name)
        if safe != name:
            if safe in taken:
                raise ValueError(f'Cannot rename placeholder {ph}: {safe} already bound')
            logger.warning(f'Renaming placeholder {ph} to :{safe}')
            taken.add(safe)
        names[ph] = safe
    return names


def to_params(statement: Statement) -> Dict[str, Any]:
    """Plain {name: value} parameters, placeholder names made SQLAlchemy-safe."""
    names = _param_names(statement)
    return {names[ph]: bv.value for ph, bv in statement.binds.items()}


def to_text(statement: Statement) -> TextClause:
    """Build a text() clause carrying one typed bindparam per bind."""
    names = _param_names(statement)
    sql = statement.sql
    for ph in names:
        if names[ph] != ph.lstrip(':'):
            sql = re.sub(rf'{re.escape(ph)}(?![\w.])', f':{names[ph]}', sql)
    params = [
        bindparam(names[ph], bv.value, type_=sa_types[bv.type]())
        for ph, bv in statement.binds.items()
    ]
    return text(sql).bindparams(*params)
