"""Configuration selection and the multi-worker cache setup."""

import pytest

from app import create_app
from models import db
from services import create_supplier, suppliers_page


def test_production_workers_see_each_others_writes(tmp_path):
    uri = f"sqlite:///{tmp_path / 'kitchen.db'}"
    worker_a = create_app('production', {'SQLALCHEMY_DATABASE_URI': uri})
    worker_b = create_app('production', {'SQLALCHEMY_DATABASE_URI': uri})

    with worker_a.app_context():
        db.create_all()

    with worker_b.app_context():
        assert suppliers_page() == {'suppliers': []}

    with worker_a.app_context():
        assert create_supplier({'name': 'Bakery'})['success'] is True

    with worker_b.app_context():
        assert [s['name'] for s in suppliers_page()['suppliers']] == ['Bakery']

    for worker in (worker_a, worker_b):
        with worker.app_context():
            db.engine.dispose()


def test_production_refuses_process_local_cache():
    with pytest.raises(RuntimeError, match='per-process'):
        create_app('production', {'CACHE_TYPE': 'SimpleCache'})


def test_production_accepts_null_cache():
    app = create_app('production', {
        'CACHE_TYPE': 'NullCache',
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    })
    assert app.config['CACHE_TYPE'] == 'NullCache'


def test_testing_config():
    app = create_app('testing')
    assert app.testing is True
    assert app.config['SQLALCHEMY_DATABASE_URI'] == 'sqlite:///:memory:'
