"""JSON payload handling for statement generation."""

from typing import Any, Dict, List, Union

from .binds import Statement
from .errors import MissingArgument
from .identifiers import quote
from .query_builder import QueryBuilder


def _builder(payload: Dict[str, Any], required: List[str]) -> QueryBuilder:
    """Check required fields and create the builder for payload's database/table."""
    for key in ['database', 'table'] + required:
        if key not in payload or payload[key] in (None, '', [], {}):
            raise MissingArgument(key)
    return QueryBuilder(payload['database'], payload['table'])


def _order_entry(entry: Union[str, Dict[str, str]]) -> str:
    """Order entries are literal strings or {'field': ..., 'direction': ...}."""
    if isinstance(entry, str):
        return entry
    direction = entry.get('direction', 'ASC').upper()
    if direction not in ('ASC', 'DESC'):
        raise ValueError(f'Invalid order direction: {direction}')
    return f'{quote(entry["field"])} {direction}'


def json_select(payload: Dict[str, Any]) -> Statement:
    """Generate SELECT from JSON payload."""
    qb = _builder(payload, [])
    fields = payload.get('fields', [])
    qb.data.set([] if fields == '*' else fields)
    qb.where.set(payload.get('condition') or {})
    qb.join.set(payload.get('join') or [])
    qb.group.set(payload.get('groupby') or [])
    qb.having.set(payload.get('having') or {})
    qb.order.set(_order_entry(o) for o in payload.get('orderby') or [])
    qb.limit.set(payload.get('limit'))
    qb.offset.set(payload.get('offset', payload.get('start')))
    return qb.select()


def json_insert(payload: Dict[str, Any]) -> Statement:
    """Generate multi-row INSERT from JSON payload."""
    qb = _builder(payload, ['rows'])
    qb.data.set(payload['rows'])
    return qb.insert()


def json_delete(payload: Dict[str, Any]) -> Statement:
    """Generate DELETE from JSON payload."""
    qb = _builder(payload, [])
    qb.where.set(payload.get('condition') or {})
    qb.join.set(payload.get('join') or [])
    return qb.delete()


def _flag(payload: Dict[str, Any], key: str, default: bool) -> bool:
    """Read a JSON boolean; strings such as "false" are rejected."""
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f'Invalid {key}: expected true or false, got {value!r}')
    return value


def json_update_bulk(payload: Dict[str, Any]) -> Statement:
    """Generate CASE-based bulk UPDATE from JSON payload."""
    qb = _builder(payload, ['updates'])
    qb.data.set(payload['updates'])
    return qb.update_bulk(strict=_flag(payload, 'strict', True), assign=_flag(payload, 'assign', False))
