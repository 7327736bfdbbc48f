"""SQL statement builder for INSERT, DELETE, SELECT and CASE-based bulk UPDATE."""

import itertools
import logging
from typing import Any, Dict, List, Mapping

from .binds import BindTable, Statement, TypeHint, infer_type
from .errors import InvalidConstruction, MissingArgument
from .fragments import DataFragment, ListFragment, MapFragment, ValueFragment, render_equality
from .identifiers import join_clauses, placeholder, qualify, quote

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Builds parameterized statements against one `database`.`table`."""

    def __init__(self, database: str, table: str):
        """Initialize with the target database and table; neither may be empty."""
        if not database:
            raise InvalidConstruction('database')
        if not table:
            raise InvalidConstruction('table')
        self._database = database
        self._table = table
        self.data = DataFragment()
        self.where = MapFragment()
        self.join = ListFragment()
        self.group = ListFragment()
        self.having = MapFragment()
        self.order = ListFragment()
        self.limit = ValueFragment('limit')
        self.offset = ValueFragment('offset')
        self._last = Statement('', BindTable().freeze())

    @staticmethod
    def get_type_from_value(value: Any) -> TypeHint:
        """Bind type hint for a scalar value."""
        return infer_type(value)

    @property
    def database(self) -> str:
        return self._database

    @property
    def table(self) -> str:
        return self._table

    @property
    def sql(self) -> str:
        """SQL of the last statement built."""
        return self._last.sql

    @property
    def binds(self) -> Mapping:
        """Binds of the last statement built."""
        return self._last.binds

    def clear(self):
        """Reset every fragment."""
        for fragment in (self.data, self.where, self.join, self.group, self.having,
                         self.order, self.limit, self.offset):
            fragment.clear()

    def _target(self) -> str:
        return qualify(self._database, self._table)

    def _finish(self, sql: str, binds: BindTable) -> Statement:
        self._last = Statement(sql, binds.freeze())
        logger.debug(f'SQL: {sql} | Binds: {len(binds)}')
        return self._last

    def insert(self) -> Statement:
        """Generate a multi-row INSERT from the data fragment's rows."""
        rows = self.data.get()
        if not rows:
            raise MissingArgument('data')
        columns = list(rows[0].keys())
        binds = BindTable()
        ph_rows = []
        for idx, row in enumerate(rows, start=1):
            phs = [binds.add(placeholder(column, idx), value) for column, value in row.items()]
            ph_rows.append(f'({", ".join(phs)})')
        sql = (f'INSERT INTO {self._target()} ({", ".join(quote(c) for c in columns)}) '
               f'VALUES {", ".join(ph_rows)}')
        return self._finish(sql, binds)

    def delete(self) -> Statement:
        """Generate DELETE; an empty where fragment deletes every row."""
        binds = BindTable()
        where_sql = self.where.render(binds)
        sql = join_clauses(
            f'DELETE FROM {self._target()}',
            self.join.render(' '),
            f'WHERE {where_sql}' if where_sql else '',
        )
        return self._finish(sql, binds)

    def select(self) -> Statement:
        """Generate SELECT with joins, where, group, having, order, limit and offset."""
        binds = BindTable()
        columns = self.data.columns()
        cols = ', '.join(quote(c) for c in columns) if columns else '*'
        where_sql = self.where.render(binds)
        having_sql = self.having.render(binds)
        sql = join_clauses(
            f'SELECT {cols} FROM {self._target()}',
            self.join.render(' '),
            f'WHERE {where_sql}' if where_sql else '',
            f'GROUP BY {self.group.render(", ")}' if self.group else '',
            f'HAVING {having_sql}' if having_sql else '',
            f'ORDER BY {self.order.render(", ")}' if self.order else '',
            self.limit.render('LIMIT'),
            self.offset.render('OFFSET'),
        )
        return self._finish(sql, binds)

    def update_bulk(self, strict: bool = True, assign: bool = False) -> Statement:
        """
        Generate one UPDATE that sets each target column through a CASE expression.

        Every spec in the data fragment looks like
        ``{'filter': {col: value, ...}, 'values': {col: value, ...}}``. Each
        distinct column named in any spec's values gets one
        ``CASE WHEN <filter> THEN :bind_m ... END`` block, with one WHEN arm
        per spec in spec order. The ``filter_k`` and ``bind_m`` counters run
        across the whole statement.

        With ``assign`` each block is written as an executable assignment,
        ``col = CASE ... ELSE col END``, so rows matched by no arm keep their value.

        With ``strict`` every spec must give a value for every target column.
        Otherwise a spec contributes arms only to the columns it names.
        """
        specs: List[Dict[str, Any]] = self.data.get()
        if not specs:
            raise MissingArgument('data')
        columns: Dict[str, None] = {}
        for spec in specs:
            if not spec.get('filter'):
                raise MissingArgument('filter')
            for column in spec.get('values') or {}:
                columns.setdefault(column, None)
        if not columns:
            raise MissingArgument('values')
        if strict:
            for spec in specs:
                values = spec.get('values') or {}
                for column in columns:
                    if column not in values:
                        raise MissingArgument(f'values.{column}')

        binds = BindTable()
        filter_ids = itertools.count(1)
        bind_ids = itertools.count(1)

        def filter_name(_column: str) -> str:
            return placeholder('filter', next(filter_ids))

        blocks = []
        for column in columns:
            arms = []
            for spec in specs:
                values = spec.get('values') or {}
                if column not in values:
                    continue
                predicate = render_equality(spec['filter'].items(), binds, filter_name)
                then = binds.add(placeholder('bind', next(bind_ids)), values[column])
                arms.append(f'WHEN {predicate} THEN {then}')
            if not arms:
                continue
            if assign:
                blocks.append(f'{quote(column)} = CASE {" ".join(arms)} ELSE {quote(column)} END')
            else:
                blocks.append(f'CASE {" ".join(arms)} END')
        sql = f'UPDATE {self._target()} SET {", ".join(blocks)}'
        return self._finish(sql, binds)
