"""
Error handler unit tests.

Unexpected errors are logged once and redirected to the server error page.
"""
from unittest.mock import patch

import pytest
from flask import abort, request
from werkzeug.exceptions import BadRequest, Forbidden, InternalServerError, NotFound

from engine.init.error_handlers import redirect_to_error_page


def test_no_error_passes_through(app):
    with app.test_request_context('/'):
        with patch('engine.init.error_handlers.logger') as mock_logger:
            assert redirect_to_error_page(None) is None

    mock_logger.error.assert_not_called()


def test_error_redirects_and_logs_stack(app):
    error = ValueError('broken')

    with app.test_request_context('/'):
        with patch('engine.init.error_handlers.logger') as mock_logger:
            response = redirect_to_error_page(error)

    assert response.status_code == 302
    assert response.headers['Location'] == '/server-error'
    mock_logger.error.assert_called_once()
    assert mock_logger.error.call_args.kwargs['exc_info'] is error


def test_stack_logged_without_show_stack_error(app):
    app.config['SHOW_STACK_ERROR'] = False
    error = RuntimeError('quiet')

    with app.test_request_context('/'):
        with patch('engine.init.error_handlers.logger') as mock_logger:
            redirect_to_error_page(error)

    assert mock_logger.error.call_args.kwargs['exc_info'] is error


def test_routing_miss_passes_through(app):
    with app.test_request_context('/does-not-exist'):
        error = request.routing_exception

        assert isinstance(error, NotFound)
        assert redirect_to_error_page(error) is error


@pytest.mark.parametrize('error', [NotFound(), Forbidden(), BadRequest(), InternalServerError()])
def test_raised_http_errors_redirect(app, error):
    with app.test_request_context('/'):
        with patch('engine.init.error_handlers.logger') as mock_logger:
            response = redirect_to_error_page(error)

    assert response.status_code == 302
    assert response.headers['Location'] == '/server-error'
    mock_logger.error.assert_called_once()


def test_error_page_path_configurable(make_app):
    app = make_app(ERROR_PAGE_PATH='/oops')

    with app.test_request_context('/'):
        with patch('engine.init.error_handlers.logger'):
            response = redirect_to_error_page(KeyError('k'))

    assert response.headers['Location'] == '/oops'


def _failing_routes(router):
    @router.route('/fail')
    def fail():
        raise RuntimeError('view failed')


def test_view_error_redirects_once(make_app):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=[_failing_routes])

    with patch('engine.init.error_handlers.logger') as mock_logger:
        response = app.test_client().get('/fail')

    assert response.status_code == 302
    assert response.headers['Location'] == '/server-error'
    mock_logger.error.assert_called_once()


def test_unknown_route_is_404_not_redirect(client):
    response = client.get('/does-not-exist')

    assert response.status_code == 404


def test_without_error_routes_exception_propagates(make_app):
    app = make_app(INIT_ERROR_ROUTES=False, INIT_ROUTES=True, ROUTE_MODULES=[_failing_routes])

    with pytest.raises(RuntimeError, match='view failed'):
        app.test_client().get('/fail')


def _aborting_routes(router):
    @router.route('/forbidden')
    def forbidden():
        abort(403)

    @router.route('/crash')
    def crash():
        abort(500)


@pytest.mark.parametrize('path', ['/forbidden', '/crash'])
def test_aborted_view_redirects_once(make_app, path):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=[_aborting_routes])

    with patch('engine.init.error_handlers.logger') as mock_logger:
        response = app.test_client().get(path)

    assert response.status_code == 302
    assert response.headers['Location'] == '/server-error'
    mock_logger.error.assert_called_once()


def test_wrong_method_is_405_not_redirect(make_app):
    app = make_app(INIT_ROUTES=True, ROUTE_MODULES=[_aborting_routes])

    response = app.test_client().post('/forbidden')

    assert response.status_code == 405
