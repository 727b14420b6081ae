import pytest

import config
from db import init_db, get_session
from import_engine import FailureReporter
from main import create_app
from tests.factories import FamilyFactory, ProductFactory


@pytest.fixture
def db_url(tmp_path):
    """A fresh SQLite file per test."""
    return f"sqlite:///{(tmp_path / 'catalog.sqlite').as_posix()}"


@pytest.fixture(autouse=True)
def _database(db_url):
    init_db(db_url)
    yield


@pytest.fixture(autouse=True)
def failure_dir(tmp_path, monkeypatch):
    """Point failure reports at a temporary directory."""
    p = tmp_path / "failures"
    monkeypatch.setattr(config, "FAILURE_DIR", p)
    return p


@pytest.fixture
def reporter(failure_dir):
    return FailureReporter(failure_dir)


@pytest.fixture
def session():
    """A session also used by the model factories."""
    s = get_session()
    FamilyFactory._meta.sqlalchemy_session = s
    ProductFactory._meta.sqlalchemy_session = s
    yield s
    s.close()


@pytest.fixture
def app(db_url):
    app = create_app(db_url)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()
