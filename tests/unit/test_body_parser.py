"""
Body parser unit tests.

Url-encoded bodies use bracket syntax for nesting; JSON bodies are parsed as-is.
Both land in g.body.
"""
from unittest.mock import patch

import pytest

from engine.body_parser import parse_nested_form, split_key


class TestSplitKey:
    @pytest.mark.parametrize('key,expected', [
        ('name', ['name']),
        ('user[name]', ['user', 'name']),
        ('user[address][city]', ['user', 'address', 'city']),
        ('tags[]', ['tags', '']),
        ('[name]', ['[name]']),
        ('user[name', ['user[name']),
        ('user[name]x', ['user[name]x']),
    ])
    def test_split(self, key, expected):
        assert split_key(key) == expected


class TestParseNestedForm:
    def test_flat_pairs(self):
        assert parse_nested_form([('a', '1'), ('b', '2')]) == {'a': '1', 'b': '2'}

    def test_nested_objects(self):
        body = parse_nested_form([
            ('user[name]', 'ada'),
            ('user[address][city]', 'London'),
        ])
        assert body == {'user': {'name': 'ada', 'address': {'city': 'London'}}}

    def test_array_syntax(self):
        body = parse_nested_form([('tags[]', 'py'), ('tags[]', 'c')])
        assert body == {'tags': ['py', 'c']}

    def test_repeated_plain_key_becomes_list(self):
        body = parse_nested_form([('tag', 'a'), ('tag', 'b'), ('tag', 'c')])
        assert body == {'tag': ['a', 'b', 'c']}

    def test_objects_inside_arrays(self):
        body = parse_nested_form([('items[][name]', 'x'), ('items[][name]', 'y')])
        assert body == {'items': [{'name': 'x'}, {'name': 'y'}]}

    def test_empty(self):
        assert parse_nested_form([]) == {}


@pytest.fixture
def users_client(make_app):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=['tests.plugins.users_routes:register_routes'])
    return app.test_client()


def test_urlencoded_body_is_nested(users_client):
    response = users_client.post('/api/users', data={
        'user[name]': 'ada',
        'user[langs][]': ['py', 'c'],
    })

    assert response.status_code == 201
    assert response.get_json() == {'created': {'user': {'name': 'ada', 'langs': ['py', 'c']}}}


def test_json_body(users_client):
    response = users_client.post('/api/users', json={'name': 'grace', 'tags': [1, 2]})

    assert response.status_code == 201
    assert response.get_json() == {'created': {'name': 'grace', 'tags': [1, 2]}}


def test_missing_body_is_empty_dict(users_client):
    response = users_client.post('/api/users')

    assert response.get_json() == {'created': {}}


def test_empty_json_body_is_empty_dict(users_client):
    response = users_client.post('/api/users', data='', content_type='application/json')

    assert response.get_json() == {'created': {}}


def test_malformed_json_redirects_to_error_page(users_client):
    with patch('engine.init.error_handlers.logger') as mock_logger:
        response = users_client.post('/api/users', data='{"name": ', content_type='application/json')

    assert response.status_code == 302
    assert response.headers['Location'] == '/server-error'
    mock_logger.error.assert_called_once()
