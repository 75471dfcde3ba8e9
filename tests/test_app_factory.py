from flask_sqlalchemy import SQLAlchemy

import surveydemo
from surveydemo import create_app, extensions


def test_package_import_keeps_extension_objects():
    assert isinstance(extensions.db, SQLAlchemy)
    assert surveydemo.db is extensions.db


def test_create_app_testing(tmp_path):
    app = create_app("testing", {
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'factory.db'}",
        "BOOTSTRAP_MODE": "off",
    })
    assert app.testing
    assert app.extensions["sqlalchemy"] is extensions.db
    assert {"health.health", "respondents.register", "questions.list_questions",
            "answers.submit_demo"} <= set(app.view_functions)
