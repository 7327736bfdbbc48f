"""
Pytest configuration and shared fixtures.
"""
import pytest

from stmt_builder import QueryBuilder, placeholders_in, set_translator


@pytest.fixture
def qb():
    """Builder scoped to `db`.`table`."""
    return QueryBuilder('db', 'table')


@pytest.fixture(autouse=True)
def reset_translator():
    """Restore the built-in message catalog after each test."""
    yield
    set_translator(None)


@pytest.fixture
def assert_round_trip():
    """Check that SQL placeholders and bind keys match exactly."""
    def check(statement):
        sql_placeholders = placeholders_in(statement.sql)
        assert len(sql_placeholders) == len(set(sql_placeholders))
        assert set(sql_placeholders) == set(statement.binds)
    return check
