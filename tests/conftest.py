import pytest
from flask import Flask
from flask.testing import FlaskClient

from app import create_app
from qrgen.functional_areas import build_reserved_grid
from qrgen.grid import ModuleGrid


@pytest.fixture
def app() -> Flask:
    return create_app({"TESTING": True})


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def reserved_v1() -> ModuleGrid:
    return build_reserved_grid(1)


@pytest.fixture
def reserved_v2() -> ModuleGrid:
    return build_reserved_grid(2)
