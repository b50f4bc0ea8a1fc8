"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from nodeguard.interfaces.api.resources.health import HealthResource


def create_app(health_resource: HealthResource, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    return app
