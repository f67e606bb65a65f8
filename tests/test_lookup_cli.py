"""
Tests for the one-shot lookup CLI.
"""

import io
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from citycast.api.errors import CityNotFoundError
from citycast.cli import lookup
from citycast.cli.lookup import ConsoleSurface, main
from citycast.config import ConfigError, Settings
from citycast.models.weather import UnitMode

from conftest import make_record


class TestConsoleSurface:
    def test_render_weather(self):
        out = io.StringIO()
        ConsoleSurface(out).render_weather(make_record(), UnitMode.METRIC)
        text = out.getvalue()
        assert "Abuja, NG" in text
        assert "31°C" in text
        assert "Humidity: 40%" in text
        assert "Wind: 5 km/h" in text

    def test_show_error(self):
        out = io.StringIO()
        ConsoleSurface(out).show_error("City not found. Try another search.")
        assert "City not found. Try another search." in out.getvalue()


class TestMain:
    """Test main() with the client replaced."""

    @pytest.fixture
    def settings(self):
        with patch.object(lookup, "load_settings", return_value=Settings(api_key="KEY")):
            yield

    @pytest.fixture
    def client(self):
        with patch.object(lookup, "WeatherClient") as mock_cls:
            instance = MagicMock()
            instance.fetch_current = AsyncMock()
            mock_cls.return_value.__enter__.return_value = instance
            yield instance

    def test_success(self, settings, client, capsys):
        client.fetch_current.return_value = make_record()
        assert main(["Abuja"]) == 0
        client.fetch_current.assert_called_once_with("Abuja", UnitMode.METRIC)
        assert "31°C" in capsys.readouterr().out

    def test_imperial_flag(self, settings, client, capsys):
        client.fetch_current.return_value = make_record(temperature=88.6, wind_speed=11.4)
        assert main(["Abuja", "--imperial"]) == 0
        client.fetch_current.assert_called_once_with("Abuja", UnitMode.IMPERIAL)
        assert "89°F" in capsys.readouterr().out

    def test_not_found(self, settings, client, capsys):
        client.fetch_current.side_effect = CityNotFoundError("Nowhereville")
        assert main(["Nowhereville"]) == 1
        assert "City not found. Try another search." in capsys.readouterr().out

    def test_config_error(self, capsys):
        with patch.object(lookup, "load_settings", side_effect=ConfigError("OPENWEATHER_API_KEY is not set")):
            assert main(["Abuja"]) == 2
        assert "OPENWEATHER_API_KEY" in capsys.readouterr().err

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_city_is_usage_error(self, settings, client, blank, capsys):
        with pytest.raises(SystemExit) as info:
            main([blank])
        assert info.value.code == 2
        assert "city must not be blank" in capsys.readouterr().err
        client.fetch_current.assert_not_called()
