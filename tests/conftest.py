import pytest

from surveydemo import create_app
from surveydemo.extensions import db


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", {"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'survey.db'}"})
    yield app
    with app.app_context():
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(**body):
        resp = client.post("/api/register", json=body)
        assert resp.status_code == 200
        return resp.get_json()["respondent_id"]
    return _register
