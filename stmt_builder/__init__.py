"""Statement builder package: parameterized SQL text plus a typed bind table."""

from .query_builder import QueryBuilder
from .binds import BindTable, BindValue, Statement, TypeHint, infer_type, placeholders_in
from .errors import StatementError, InvalidConstruction, MissingArgument
from .identifiers import quote, qualify, placeholder, join_clauses
from .translate import translate, set_translator
from .adapt_sql import to_text, to_params
from .json_handler import json_select, json_insert, json_delete, json_update_bulk
from .df_handler import df_insert, df_update_bulk

__all__ = [
    'QueryBuilder',
    'BindTable',
    'BindValue',
    'Statement',
    'TypeHint',
    'infer_type',
    'placeholders_in',
    'StatementError',
    'InvalidConstruction',
    'MissingArgument',
    'quote',
    'qualify',
    'placeholder',
    'join_clauses',
    'translate',
    'set_translator',
    'to_text',
    'to_params',
    'json_select',
    'json_insert',
    'json_delete',
    'json_update_bulk',
    'df_insert',
    'df_update_bulk',
]
