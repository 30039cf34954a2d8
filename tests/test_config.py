"""Tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from ptouchprint.config import AppConfig, Settings, load_config
from ptouchprint.models.printer import SpoolerConnection, TCPConnection


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file(self, tmp_path):
        config = load_config(tmp_path / "config.yaml")
        assert config == AppConfig()
        assert config.printers == []

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path).printers == []

    def test_empty_printers_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("printers:\n")
        assert load_config(path).printers == []

    def test_printers(self, tmp_path):
        path = tmp_path / "config.yaml"
        with open(path, "w") as f:
            yaml.dump(
                {
                    "printers": [
                        {
                            "name": "desk",
                            "connection": {"type": "tcp", "host": "192.168.1.50"},
                            "job": {"tape_size": 24, "auto_cut": 0},
                        },
                        {
                            "name": "office",
                            "connection": {"type": "spooler", "destination": "PT-P750W"},
                            "enabled": False,
                        },
                    ]
                },
                f,
            )

        config = load_config(path)

        desk = config.get_printer("desk")
        assert isinstance(desk.connection, TCPConnection)
        assert desk.connection.port == 9100
        assert desk.job.tape_size == 24
        assert desk.job.auto_cut == 0
        assert desk.job.margin_size == 14

        office = config.get_printer("office")
        assert isinstance(office.connection, SpoolerConnection)
        assert office.connection.destination == "PT-P750W"
        assert office.enabled is False

    def test_get_printer_unknown(self):
        assert AppConfig().get_printer("nope") is None

    def test_invalid_connection_type(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("printers:\n  - name: x\n    connection:\n      type: bluetooth\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_invalid_job_settings(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "printers:\n  - name: x\n    connection:\n      type: tcp\n      host: a\n    job:\n      tape_size: 0\n"
        )
        with pytest.raises(ValidationError):
            load_config(path)


class TestSettings:
    """Tests for environment settings."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.connect_timeout == 30.0
        assert settings.spooler_timeout == 60.0
        assert str(settings.lpr_path) == "/usr/bin/lpr"
        assert settings.debug is False

    def test_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PTOUCHPRINT_CONNECT_TIMEOUT", "5")
        monkeypatch.setenv("PTOUCHPRINT_LPR_PATH", "/opt/bin/lpr")
        monkeypatch.setenv("PTOUCHPRINT_DEBUG", "true")

        settings = Settings()

        assert settings.connect_timeout == 5.0
        assert str(settings.lpr_path) == "/opt/bin/lpr"
        assert settings.debug is True

    def test_unbounded_spooler_timeout(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PTOUCHPRINT_SPOOLER_TIMEOUT", "none")

        assert Settings().spooler_timeout is None
