"""Tests for how the API routes are registered."""

import inspect

from fastapi.routing import APIRoute

from src.main import app


def test_database_routes_run_in_the_threadpool():
    # sync handlers keep blocking Session calls off the event loop
    routes = [route for route in app.routes if isinstance(route, APIRoute)]

    assert {route.path.split("/")[1] for route in routes} >= {"auth", "transactions", "gpts"}
    for route in routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path
