import pytest

from leelo import cfg


def test_get_config_default():
    assert cfg.get_config().log_level == 'WARNING'


@pytest.mark.parametrize('value, expected', [('debug', 'DEBUG'), ('INFO', 'INFO'), ('Error', 'ERROR')])
def test_get_config_log_level(monkeypatch, value, expected):
    monkeypatch.setenv('LEELO_LOG_LEVEL', value)
    assert cfg.get_config().log_level == expected


@pytest.mark.parametrize('value', ['loud', '', 'CRITICAL'])
def test_get_config_failure(monkeypatch, value):
    monkeypatch.setenv('LEELO_LOG_LEVEL', value)
    with pytest.raises(cfg.ConfigError):
        cfg.get_config()
