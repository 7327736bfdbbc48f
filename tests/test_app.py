"""
Tests for the Flask preview service.
"""
import pytest

from app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


class TestStatementEndpoints:
    """Each endpoint answers {sql, binds}."""

    def test_select(self, client):
        resp = client.post('/statement/select', json={
            'database': 'db', 'table': 'table', 'fields': ['name'], 'condition': {'id': 1}, 'limit': 5,
        })
        assert resp.status_code == 200
        assert resp.get_json() == {
            'sql': 'SELECT `name` FROM `db`.`table` WHERE `id` = :id LIMIT 5',
            'binds': {':id': {'value': 1, 'type': 1}},
        }

    def test_insert(self, client):
        resp = client.post('/statement/insert', json={
            'database': 'db', 'table': 'table', 'rows': [{'name': 'Hadi Darwish', 'active': True}],
        })
        assert resp.status_code == 200
        body = resp.get_json()
        assert body['sql'] == 'INSERT INTO `db`.`table` (`name`, `active`) VALUES (:name_1, :active_1)'
        assert body['binds'][':active_1'] == {'value': True, 'type': 2}

    def test_delete(self, client):
        resp = client.post('/statement/delete', json={'database': 'db', 'table': 'table'})
        assert resp.get_json() == {'sql': 'DELETE FROM `db`.`table`', 'binds': {}}

    def test_update_bulk(self, client):
        resp = client.post('/statement/update_bulk', json={
            'database': 'db', 'table': 'table',
            'updates': [{'filter': {'id': 1}, 'values': {'age': 2}}],
        })
        assert resp.status_code == 200
        assert resp.get_json()['sql'] == (
            'UPDATE `db`.`table` SET CASE WHEN `id` = :filter_1 THEN :bind_1 END'
        )

    def test_update_bulk_assign(self, client):
        resp = client.post('/statement/update_bulk', json={
            'database': 'db', 'table': 'table', 'assign': True,
            'updates': [{'filter': {'id': 1}, 'values': {'age': 2}}],
        })
        assert resp.get_json()['sql'] == (
            'UPDATE `db`.`table` SET `age` = CASE WHEN `id` = :filter_1 THEN :bind_1 ELSE `age` END'
        )


class TestErrors:
    """Errors map to 400 responses with translated messages."""

    def test_missing_rows(self, client):
        resp = client.post('/statement/insert', json={'database': 'db', 'table': 'table'})
        assert resp.status_code == 400
        assert resp.get_json() == {'error': 'rows cannot be empty!', 'field': 'rows'}

    def test_missing_rows_in_french(self, client):
        resp = client.post('/statement/insert?locale=fr', json={'database': 'db', 'table': 'table'})
        assert resp.get_json()['error'] == 'rows ne peut pas être vide !'

    def test_accept_language(self, client):
        resp = client.post('/statement/select', json={'table': 'table'}, headers={'Accept-Language': 'fr'})
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'database ne peut pas être vide !'

    def test_invalid_limit(self, client):
        resp = client.post('/statement/select', json={'database': 'db', 'table': 't', 'limit': -1})
        assert resp.status_code == 400
        assert 'Invalid limit' in resp.get_json()['error']

    def test_strict_must_be_boolean(self, client):
        resp = client.post('/statement/update_bulk', json={
            'database': 'db', 'table': 'table', 'strict': 'false',
            'updates': [{'filter': {'id': 1}, 'values': {'a': 1}}, {'filter': {'id': 2}, 'values': {'b': 2}}],
        })
        assert resp.status_code == 400
        assert 'Invalid strict' in resp.get_json()['error']

    def test_body_must_be_object(self, client):
        resp = client.post('/statement/delete', json=[1, 2])
        assert resp.status_code == 400
