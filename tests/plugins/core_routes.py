"""Core route unit."""
from tests.plugins import calls


def register_routes(router):
    calls.append(('routes', 'core'))

    @router.route('/api/shared')
    def shared():
        return 'core'

    @router.route('/api/boom')
    def boom():
        raise ValueError('boom')

    @router.route('/server-error')
    def server_error():
        return 'Server error page', 500
