"""
Method override unit tests.

POST requests may ask for another verb through X-HTTP-Method-Override.
"""
from engine.method_override import ORIGINAL_METHOD_KEY, MethodOverrideMiddleware
from tests.conftest import find_wsgi_middleware


def _capture_app():
    seen = {}

    def wsgi_app(environ, start_response):
        seen['method'] = environ['REQUEST_METHOD']
        seen['original'] = environ.get(ORIGINAL_METHOD_KEY)
        start_response('200 OK', [])
        return [b'']

    return wsgi_app, seen


def _call(middleware, method, override=None):
    environ = {'REQUEST_METHOD': method, 'PATH_INFO': '/items/1'}
    if override is not None:
        environ['HTTP_X_HTTP_METHOD_OVERRIDE'] = override
    middleware(environ, lambda status, headers, exc_info=None: None)


def test_post_is_overridden():
    wsgi_app, seen = _capture_app()
    _call(MethodOverrideMiddleware(wsgi_app), 'POST', 'delete')

    assert seen == {'method': 'DELETE', 'original': 'POST'}


def test_only_configured_methods_are_overridden():
    wsgi_app, seen = _capture_app()
    _call(MethodOverrideMiddleware(wsgi_app), 'GET', 'DELETE')

    assert seen == {'method': 'GET', 'original': None}


def test_unknown_verb_is_ignored():
    wsgi_app, seen = _capture_app()
    _call(MethodOverrideMiddleware(wsgi_app), 'POST', 'TRACE-ME')

    assert seen['method'] == 'POST'


def test_missing_header_leaves_method():
    wsgi_app, seen = _capture_app()
    _call(MethodOverrideMiddleware(wsgi_app), 'POST')

    assert seen['method'] == 'POST'


def test_custom_header_name():
    wsgi_app, seen = _capture_app()
    middleware = MethodOverrideMiddleware(wsgi_app, header='X-Method')
    environ = {'REQUEST_METHOD': 'POST', 'HTTP_X_METHOD': 'PATCH'}
    middleware(environ, lambda *args: None)

    assert seen['method'] == 'PATCH'


def test_middleware_installed(app):
    assert find_wsgi_middleware(app, MethodOverrideMiddleware) is not None


def test_override_reaches_route(make_app):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=['tests.plugins.users_routes'])
    client = app.test_client()

    response = client.post(
        '/api/users/7',
        json={'name': 'ada'},
        headers={'X-HTTP-Method-Override': 'PUT'},
    )

    assert response.status_code == 200
    assert response.get_json() == {'id': 7, 'method': 'PUT', 'body': {'name': 'ada'}}


def test_plain_post_to_put_route_is_not_allowed(make_app):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=['tests.plugins.users_routes'])

    response = app.test_client().post('/api/users/7')

    assert response.status_code == 405
