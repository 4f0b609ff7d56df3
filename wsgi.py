"""Web Server Gateway Interface entry-point."""

from gatekeeper.factory import create_web_app

__flask_app__ = create_web_app()


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key, value in environ.items():
        # uWSGI may pass the container ID as SERVER_NAME; we keep the
        # explicitly configured value. Only known parameters are overridden.
        if key == 'SERVER_NAME' or key not in __flask_app__.config:
            continue
        __flask_app__.config[key] = str(value)
    return __flask_app__(environ, start_response)
