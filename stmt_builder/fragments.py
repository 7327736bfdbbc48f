"""Clause fragments owned by a QueryBuilder."""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .binds import BindTable
from .identifiers import placeholder, quote

logger = logging.getLogger(__name__)


def render_equality(pairs: Iterable[Tuple[str, Any]], binds: BindTable,
                    name_for: Optional[Callable[[str], str]] = None) -> str:
    """Render `col` = :ph AND ... binding each value; placeholders default to :col."""
    name_for = name_for or placeholder
    parts = []
    for column, value in pairs:
        ph = binds.add(name_for(column), value)
        parts.append(f'{quote(column)} = {ph}')
    return ' AND '.join(parts)


class ListFragment:
    """Ordered literal entries (join, group, order), emitted verbatim."""
    __slots__ = ('_items',)

    def __init__(self, items: Optional[Iterable[str]] = None):
        self._items: List[str] = list(items or [])

    def get(self) -> List[str]:
        return list(self._items)

    def set(self, items: Iterable[str]):
        self._items = list(items or [])

    def append(self, item: str):
        self._items.append(item)

    def clear(self):
        self._items = []

    def render(self, sep: str) -> str:
        return sep.join(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._items!r})'


class MapFragment:
    """Ordered column -> value entries (where, having) rendered as conjunctive equality."""
    __slots__ = ('_items',)

    def __init__(self, items: Optional[Mapping[str, Any]] = None):
        self._items: Dict[str, Any] = dict(items or {})

    def get(self) -> Dict[str, Any]:
        return dict(self._items)

    def set(self, items: Mapping[str, Any]):
        self._items = dict(items or {})

    def append(self, key: str, value: Any):
        self._items[key] = value

    def clear(self):
        self._items = {}

    def render(self, binds: BindTable) -> str:
        return render_equality(self._items.items(), binds)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._items!r})'


class DataFragment(ListFragment):
    """
    Statement data in one of three shapes, depending on the operation:

    * insert: rows, each a mapping of column -> value
    * select: flat list of column names ([] or [''] selects everything)
    * update_bulk: specs of the form {'filter': {...}, 'values': {...}}
    """
    __slots__ = ()

    def columns(self) -> List[str]:
        """Column names for SELECT; empty when the fragment holds anything but names."""
        if not all(isinstance(c, str) for c in self._items):
            logger.warning('Data fragment does not hold column names, selecting all columns')
            return []
        if self._items == ['']:
            return []
        return list(self._items)


class ValueFragment:
    """Optional non-negative integer (limit, offset); None means absent."""
    __slots__ = ('name', '_value')

    def __init__(self, name: str, value: Optional[int] = None):
        self.name = name
        self._value: Optional[int] = None
        self.set(value)

    @property
    def value(self) -> Optional[int]:
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> Optional[int]:
        return self._value

    def set(self, value: Optional[int]):
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
            raise ValueError(f'Invalid {self.name}: {value!r}')
        self._value = value

    def clear(self):
        self._value = None

    def render(self, keyword: str) -> str:
        """`KEYWORD n` when set (0 included), else an empty string."""
        return '' if self._value is None else f'{keyword} {self._value}'

    def __repr__(self) -> str:
        return f'ValueFragment({self.name!r}, {self._value!r})'
