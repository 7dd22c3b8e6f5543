"""Tests for settings and logging configuration."""

import json
import logging

import pytest
from pydantic import ValidationError

from record_cache import RecordCacheSettings, create_record_cache_service
from record_cache.config.logging_config import (
    JSONFormatter,
    LoggingConfig,
    get_format_string,
    get_log_level_from_verbosity,
)

from sample_records import Apple


class TestRecordCacheSettings:
    """Test cases for RecordCacheSettings."""
    
    def test_defaults(self):
        settings = RecordCacheSettings()
        
        assert settings.unicode_normalization_form == "NFC"
        assert settings.version_attribute == "lock_version"
    
    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("RECORD_CACHE_UNICODE_NORMALIZATION_FORM", "nfkc")
        monkeypatch.setenv("RECORD_CACHE_LOG_VERBOSITY", "debug")
        
        settings = RecordCacheSettings()
        
        assert settings.unicode_normalization_form == "NFKC"
        assert settings.log_verbosity == "DEBUG"
    
    def test_invalid_normalization_form(self):
        with pytest.raises(ValidationError):
            RecordCacheSettings(unicode_normalization_form="NFX")
    
    @pytest.mark.parametrize("form,expected", [
        ("NFC", [1, 2]),
        ("NFD", [2, 1]),
    ])
    def test_normalization_setting_applied(self, form, expected):
        service = create_record_cache_service(
            settings=RecordCacheSettings(unicode_normalization_form=form)
        )
        records = [Apple(id=1, name="\u00e9a"), Apple(id=2, name="eb")]
        
        service.sort(records, "name")
        
        assert [record.get("id") for record in records] == expected


class TestLoggingConfig:
    """Test cases for LoggingConfig."""
    
    @pytest.mark.parametrize("verbosity,level", [
        ("QUIET", "ERROR"),
        ("normal", "WARNING"),
        ("VERBOSE", "INFO"),
        ("DEBUG", "DEBUG"),
        ("unknown", "WARNING"),
    ])
    def test_verbosity_mapping(self, verbosity, level):
        assert get_log_level_from_verbosity(verbosity) == level
    
    def test_format_strings(self):
        assert "%(lineno)d" in get_format_string("detailed")
        assert get_format_string("simple") == "%(asctime)s - %(levelname)s - %(message)s"
    
    def test_build_config(self):
        config = LoggingConfig.build_config("VERBOSE", "simple")
        
        assert config["handlers"]["console"]["level"] == "INFO"
        assert config["loggers"]["record_cache"]["level"] == "INFO"
        assert config["disable_existing_loggers"] is False
    
    def test_json_format_uses_json_formatter(self):
        config = LoggingConfig.build_config("NORMAL", "json")
        
        assert config["formatters"]["default"] == {"()": JSONFormatter}
    
    def test_json_formatter_escapes_messages(self):
        record = logging.LogRecord(
            "record_cache.tests", logging.WARNING, __file__, 1,
            'Type %s said "hi"\n', ("Apple",), None,
        )
        
        line = JSONFormatter().format(record)
        
        assert "\n" not in line
        payload = json.loads(line)
        assert payload["message"] == 'Type Apple said "hi"\n'
        assert payload["level"] == "WARNING"
        assert payload["module"] == "record_cache.tests"
    
    def test_set_module_level(self):
        LoggingConfig.set_module_level("record_cache.tests", "error")
        
        assert logging.getLogger("record_cache.tests").level == logging.ERROR
