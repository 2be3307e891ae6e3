"""Test the error-handling chain."""

import pytest
from fastapi import HTTPException

from cicd_api.core.errors import (
    ApiError,
    ErrorKind,
    error_body,
    error_response,
    fault_status,
)


class StatusFault(Exception):
    status = 503


class BogusStatusFault(Exception):
    status_code = "teapot"


def test_uncaught_fault_returns_500(app, client):
    """Test an unexpected exception becomes a 500 envelope."""

    @app.get("/boom")
    def boom():
        raise RuntimeError("database exploded")

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "database exploded"}}


def test_async_fault_returns_500(app, client):
    """Test faults from async handlers are caught too."""

    @app.get("/boom-async")
    async def boom_async():
        raise ValueError("bad value")

    response = client.get("/boom-async")

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "bad value"}}


def test_fault_declared_status(app, client):
    """Test a fault's declared status is used."""

    @app.get("/teapot")
    def teapot():
        raise ApiError("I am a teapot", status_code=418)

    @app.get("/unavailable")
    def unavailable():
        raise StatusFault("try later")

    response = client.get("/teapot")
    assert response.status_code == 418
    assert response.json() == {"error": {"message": "I am a teapot"}}

    response = client.get("/unavailable")
    assert response.status_code == 503
    assert response.json() == {"error": {"message": "try later"}}


def test_http_exception_keeps_status_and_detail(app, client):
    """Test HTTP exceptions raised by handlers use the envelope."""

    @app.get("/forbidden")
    def forbidden():
        raise HTTPException(status_code=403, detail="Forbidden zone")

    response = client.get("/forbidden")

    assert response.status_code == 403
    assert response.json() == {"error": {"message": "Forbidden zone"}}


def test_fault_does_not_break_later_requests(app, client):
    """Test the app keeps serving after a fault."""

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    assert client.get("/boom").status_code == 500
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to our API!"}


def test_fault_status():
    """Test status extraction from exceptions."""
    assert fault_status(RuntimeError("x")) == 500
    assert fault_status(ApiError("x")) == 500
    assert fault_status(ApiError("x", status_code=409)) == 409
    assert fault_status(StatusFault("x")) == 503
    assert fault_status(BogusStatusFault("x")) == 500


@pytest.mark.parametrize("status", [200, 204, 600, True])
def test_fault_status_ignores_non_error_codes(status):
    """Test declared statuses outside 3xx-5xx fall back to 500."""
    exc = ApiError("x", status_code=status)
    assert fault_status(exc) == 500


def test_error_body_shape():
    """Test the envelope shape."""
    assert error_body("oops") == {"error": {"message": "oops"}}


def test_error_response_defaults():
    """Test default statuses per error kind."""
    assert error_response(ErrorKind.NOT_FOUND, "Not Found").status_code == 404
    assert error_response(ErrorKind.RESOURCE_NOT_FOUND, "User not found").status_code == 404
    assert error_response(ErrorKind.INTERNAL, "boom").status_code == 500
    assert error_response(ErrorKind.INTERNAL, "boom", status_code=502).status_code == 502


def test_validation_error_uses_envelope(app, client):
    """Test request validation errors are rendered as a 422 envelope."""

    @app.get("/n/{n}")
    def number(n: int):
        return {"n": n}

    response = client.get("/n/abc")

    assert response.status_code == 422
    assert response.json() == {"error": {"message": "Invalid request"}}


def test_fault_redirect_status_kept(app, client):
    """Test a declared 3xx status is kept."""

    @app.get("/moved")
    def moved():
        raise ApiError("moved", status_code=302)

    response = client.get("/moved", follow_redirects=False)

    assert fault_status(ApiError("moved", status_code=302)) == 302
    assert response.status_code == 302
    assert response.json() == {"error": {"message": "moved"}}
