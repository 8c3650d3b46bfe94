import logging

import pytest

from leelo import models
from leelo import storage


@pytest.mark.parametrize(
    'ratings', [
        {},
        {'Alice': 1000.0},
        {'Alice': 1020.0, 'Bob': 980.0, 'Carol': 1013.2744869735624},
        {'player, with comma': 999.9999999999999, 'quote "q"': -12.5},
    ]
)
def test_save_load(tmp_path, ratings):
    path = tmp_path / 'ratings.csv'
    storage.save(models.RatingTable(ratings), path)
    loaded = storage.load(path)
    assert dict(loaded.all_entries()) == ratings
    storage.save(loaded, path)
    assert dict(storage.load(path).all_entries()) == ratings


def test_save_format(tmp_path):
    path = tmp_path / 'ratings.csv'
    storage.save(models.RatingTable({'Alice': 1020.0, 'Bob': 980.0}), path)
    assert path.read_text(encoding='utf-8').splitlines() == [
        'Player ID,Rating',
        'Alice,1020.0',
        'Bob,980.0',
    ]


def test_load_keeps_file_order(tmp_path):
    path = _write(tmp_path, 'Player ID,Rating\nZed,1000\nAmy,1200.5\n')
    assert storage.load(path).all_entries() == [('Zed', 1000.0), ('Amy', 1200.5)]


def test_load_skips_blank_lines(tmp_path):
    path = _write(tmp_path, 'Player ID,Rating\n\nAlice,1000\n\n')
    assert storage.load(path).all_entries() == [('Alice', 1000.0)]


@pytest.mark.parametrize(
    'text', [
        '',
        'Alice,1000\n',
        'Name,Score\nAlice,1000\n',
        'Player ID,Rating\nAlice\n',
        'Player ID,Rating\nAlice,1000,extra\n',
        'Player ID,Rating\nAlice,strong\n',
        'Player ID,Rating\n,1000\n',
        'Player ID,Rating\nAlice,nan\n',
        'Player ID,Rating\nAlice,inf\n',
        'Player ID,Rating\nAlice,1000\nAlice,1100\n',
    ]
)
def test_load_malformed_failure(tmp_path, text):
    path = _write(tmp_path, text)
    with pytest.raises(storage.MalformedRecord):
        storage.load(path)


def test_load_malformed_failure_names_line(tmp_path):
    path = _write(tmp_path, 'Player ID,Rating\nAlice,1000\nBob,weak\n')
    with pytest.raises(storage.MalformedRecord, match=':3:'):
        storage.load(path)


def test_load_not_utf8_failure(tmp_path):
    path = tmp_path / 'ratings.csv'
    path.write_bytes(b'Player ID,Rating\n\xff\xfe,1000\n')
    with pytest.raises(storage.MalformedRecord):
        storage.load(path)


def test_load_missing_file_failure(tmp_path):
    with pytest.raises(storage.SourceUnavailable):
        storage.load(tmp_path / 'missing.csv')


def test_save_unwritable_failure(tmp_path):
    with pytest.raises(storage.DestinationUnwritable):
        storage.save(models.RatingTable(), tmp_path / 'no_such_dir' / 'ratings.csv')


def test_load_logs_time(tmp_path, caplog):
    caplog.set_level(logging.DEBUG, logger='leelo.storage')
    path = _write(tmp_path, 'Player ID,Rating\nAlice,1000\n')
    storage.load(path)
    assert any('leelo.storage.load' in record.getMessage() and 'took' in record.getMessage()
               for record in caplog.records)


def _write(tmp_path, text):
    path = tmp_path / 'ratings.csv'
    path.write_text(text, encoding='utf-8')
    return path


def test_save_not_encodable_id_failure(tmp_path):
    path = _write(tmp_path, 'Player ID,Rating\nAlice,1000.0\n')
    before = path.read_bytes()
    table = models.RatingTable({'Bob': 980.0, b'\xff'.decode('utf-8', 'surrogateescape'): 1000.0, 'Carol': 1.0})
    with pytest.raises(storage.DestinationUnwritable):
        storage.save(table, path)
    assert path.read_bytes() == before
    assert sorted(tmp_path.iterdir()) == [path]


def test_save_keeps_table_when_write_fails(tmp_path, monkeypatch):
    path = _write(tmp_path, 'Player ID,Rating\nAlice,1000.0\n')
    before = path.read_bytes()

    def failing_replace(src, dst):
        raise OSError(28, 'No space left on device')

    monkeypatch.setattr(storage.os, 'replace', failing_replace)
    with pytest.raises(storage.DestinationUnwritable, match='No space left'):
        storage.save(models.RatingTable({'Alice': 1020.0}), path)
    assert path.read_bytes() == before
    assert sorted(tmp_path.iterdir()) == [path]


def test_save_keeps_file_mode(tmp_path):
    path = _write(tmp_path, 'Player ID,Rating\n')
    path.chmod(0o640)
    storage.save(models.RatingTable({'Alice': 1000.0}), path)
    assert path.stat().st_mode & 0o777 == 0o640


def test_save_logs_failure(tmp_path, caplog):
    caplog.set_level(logging.DEBUG, logger='leelo.storage')
    with pytest.raises(storage.DestinationUnwritable):
        storage.save(models.RatingTable(), tmp_path / 'no_such_dir' / 'ratings.csv')
    assert any('leelo.storage.save' in record.getMessage() and 'failed after' in record.getMessage()
               for record in caplog.records)
