"""Tests for configuration module."""

import pytest
from pathlib import Path
from seo_analyzer.config.settings import Settings, get_settings


def test_settings_defaults(monkeypatch):
    """Test default settings values."""
    monkeypatch.delenv("SEO_ANALYZER_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    
    assert settings.log_level == "INFO"
    assert settings.output_dir == Path("outputs")
    assert settings.report_indent == 2


def test_reports_dir_created_on_demand(tmp_path):
    """The report directory is only created when asked for."""
    settings = Settings(output_dir=tmp_path / "outputs")
    
    assert not (tmp_path / "outputs").exists()
    reports = settings.reports_dir()
    
    assert reports == tmp_path / "outputs" / "reports"
    assert reports.exists()


def test_settings_from_env(monkeypatch):
    """Test loading settings from prefixed environment variables."""
    monkeypatch.setenv("SEO_ANALYZER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SEO_ANALYZER_REPORT_INDENT", "4")
    
    get_settings.cache_clear()
    
    settings = get_settings()
    
    assert settings.log_level == "DEBUG"
    assert settings.report_indent == 4
    
    get_settings.cache_clear()


def test_unprefixed_env_ignored(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.delenv("SEO_ANALYZER_LOG_LEVEL", raising=False)
    
    assert Settings(_env_file=None).log_level == "INFO"


def test_settings_log_level_validation():
    """Test log level field validation."""
    for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        assert Settings(log_level=level).log_level == level
    
    with pytest.raises(ValueError):
        Settings(log_level="VERBOSE")


def test_report_indent_bounds():
    with pytest.raises(ValueError):
        Settings(report_indent=20)


def test_get_settings_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
