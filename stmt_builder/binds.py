"""Bind values, type hints and the bind table produced by each statement."""

import numbers
import re
from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, NamedTuple

from .mappings import PARAM_INT, PARAM_STR, type_hint_map, type_tokens

# ':' + the column text (+ '_n'), up to the next separator the builder writes
_rx_placeholder = re.compile(r'''(?<![\w:]):([^\s,():;'"`]+)''')


class TypeHint(IntEnum):
    """Driver binding type for a placeholder value."""
    INTEGER = PARAM_INT
    STRING = PARAM_STR


def infer_type(value: Any) -> TypeHint:
    """Integers and floats bind as INTEGER; everything else (bool and None included) as STRING."""
    hint = type_hint_map.get(type(value).__name__)
    if hint is None:
        # numpy scalars, IntEnum members and other registered numbers
        is_number = isinstance(value, numbers.Real) and not isinstance(value, bool)
        hint = PARAM_INT if is_number else PARAM_STR
    return TypeHint(hint)


def is_typed_value(value: Any) -> bool:
    """True for explicit {'value': ..., 'type': ...} payloads."""
    return isinstance(value, Mapping) and set(value.keys()) == {'value', 'type'}


class BindValue(NamedTuple):
    """A bound literal and the type hint it is passed to the driver with."""
    value: Any
    type: TypeHint

    @classmethod
    def of(cls, value: Any) -> 'BindValue':
        """Wrap a scalar or an explicit typed value."""
        if isinstance(value, BindValue):
            return value
        if is_typed_value(value):
            token = str(value['type']).lower()
            if token not in type_tokens:
                raise ValueError(f'Invalid bind type: {value["type"]}')
            return cls(value['value'], TypeHint(type_tokens[token]))
        return cls(value, infer_type(value))

    def to_dict(self) -> Dict[str, Any]:
        return {'value': self.value, 'type': int(self.type)}


class BindTable(Mapping):
    """Ordered placeholder -> BindValue mapping filled by one terminal operation."""

    def __init__(self):
        self._binds: Dict[str, BindValue] = {}

    def add(self, name: str, value: Any) -> str:
        """Bind a value under a placeholder name and return the placeholder."""
        if name in self._binds:
            raise ValueError(f'Placeholder already bound: {name}')
        self._binds[name] = BindValue.of(value)
        return name

    def clear(self):
        self._binds.clear()

    def __getitem__(self, name: str) -> BindValue:
        return self._binds[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._binds)

    def __len__(self) -> int:
        return len(self._binds)

    def __repr__(self) -> str:
        return f'BindTable({self._binds!r})'

    def freeze(self) -> Mapping:
        """Read-only snapshot of the current binds."""
        return MappingProxyType(dict(self._binds))


class Statement(NamedTuple):
    """SQL text plus its bind table, as returned by every terminal operation."""
    sql: str
    binds: Mapping

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form: {'sql': ..., 'binds': {placeholder: {'value', 'type'}}}."""
        return {'sql': self.sql, 'binds': {k: v.to_dict() for k, v in self.binds.items()}}


def placeholders_in(sql: str) -> List[str]:
    """
    Named placeholders in order of first appearance, colon included.

    Names may hold any character the builder copies from a column name except
    whitespace, commas, parentheses, semicolons and quotes.
    """
    seen: Dict[str, None] = {}
    for name in _rx_placeholder.findall(sql):
        seen.setdefault(f':{name}', None)
    return list(seen)
