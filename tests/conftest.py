import pytest

from leelo import models
from leelo import storage


@pytest.fixture
def table_path(tmp_path):
    path = tmp_path / 'ratings.csv'
    table = models.RatingTable()
    table.create_player('Alice')
    table.create_player('Bob')
    storage.save(table, path)
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv('LEELO_LOG_LEVEL', raising=False)
