from pathlib import Path

import pytest
from pydantic import ValidationError

from termpong.config.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('TERMPONG_TICK_PERIOD_MS', raising=False)
    settings = Settings(_env_file=None)
    assert settings.tick_period_ms == 75
    assert settings.tick_period == pytest.approx(0.075)
    assert settings.log_file == Path('app.log')
    assert settings.display.min_width == 150
    assert settings.display.min_height == 60
    assert not settings.debug


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('TERMPONG_TICK_PERIOD_MS', '30')
    monkeypatch.setenv('TERMPONG_DEBUG', 'true')
    monkeypatch.setenv('TERMPONG_DISPLAY_FOREGROUND', 'green')

    settings = Settings(_env_file=None)

    assert settings.tick_period == pytest.approx(0.03)
    assert settings.debug
    assert settings.display.foreground == 'green'


def test_tick_period_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(tick_period_ms=0)
