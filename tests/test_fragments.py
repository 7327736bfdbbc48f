"""
Tests for clause fragments.
"""
import pytest

from stmt_builder.binds import BindTable, TypeHint
from stmt_builder.fragments import (
    DataFragment, ListFragment, MapFragment, ValueFragment, render_equality,
)


class TestListFragment:
    """Tests for ListFragment."""

    def test_set_append_clear(self):
        frag = ListFragment()
        assert not frag
        frag.set(['a', 'b'])
        frag.append('c')
        assert frag.get() == ['a', 'b', 'c']
        assert len(frag) == 3
        frag.clear()
        assert frag.get() == []

    def test_get_returns_a_copy(self):
        frag = ListFragment(['a'])
        frag.get().append('b')
        assert frag.get() == ['a']

    def test_render(self):
        assert ListFragment(['a', 'b']).render(', ') == 'a, b'


class TestMapFragment:
    """Tests for MapFragment."""

    def test_append_keeps_order(self):
        frag = MapFragment({'id': 1})
        frag.append('name', 'x')
        assert list(frag) == ['id', 'name']

    def test_render_binds_unsuffixed_placeholders(self):
        binds = BindTable()
        sql = MapFragment({'id': 1, 'name': 'Hadi Darwish'}).render(binds)
        assert sql == '`id` = :id AND `name` = :name'
        assert binds == {':id': (1, TypeHint.INTEGER), ':name': ('Hadi Darwish', TypeHint.STRING)}

    def test_render_empty(self):
        binds = BindTable()
        assert MapFragment().render(binds) == ''
        assert len(binds) == 0


class TestRenderEquality:
    """Tests for render_equality with custom placeholder names."""

    def test_custom_names(self):
        binds = BindTable()
        names = iter([':f_1', ':f_2'])
        sql = render_equality([('id', 1), ('key', 'k')], binds, lambda _col: next(names))
        assert sql == '`id` = :f_1 AND `key` = :f_2'
        assert list(binds) == [':f_1', ':f_2']


class TestDataFragment:
    """Tests for DataFragment.columns."""

    @pytest.mark.parametrize('data', [[], ['']])
    def test_all_columns(self, data):
        assert DataFragment(data).columns() == []

    def test_named_columns(self):
        assert DataFragment(['name', 'age']).columns() == ['name', 'age']

    def test_rows_are_not_columns(self, caplog):
        """Row-shaped data never reaches a SELECT column list."""
        frag = DataFragment([{'name': 'x'}])
        assert frag.columns() == []
        assert 'does not hold column names' in caplog.text


class TestValueFragment:
    """Tests for ValueFragment."""

    def test_absent_by_default(self):
        frag = ValueFragment('limit')
        assert frag.value is None
        assert not frag.is_set
        assert frag.render('LIMIT') == ''

    def test_zero_is_not_absent(self):
        frag = ValueFragment('limit', 0)
        assert frag.is_set
        assert frag.render('LIMIT') == 'LIMIT 0'

    def test_clear(self):
        frag = ValueFragment('offset', 5)
        frag.clear()
        assert frag.get() is None

    @pytest.mark.parametrize('value', [-1, 1.5, '10', True])
    def test_invalid_values(self, value):
        with pytest.raises(ValueError, match='Invalid limit'):
            ValueFragment('limit').set(value)
