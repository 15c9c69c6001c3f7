"""Tests for environment settings and CSV candidate loading."""

import pytest

from fuzzbridge._config import Settings, get_settings
from fuzzbridge._io import load_candidates, read_csv


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("SCORE_CUTOFF", "LIMIT", "SCORER", "METRIC", "LOG_LEVEL"):
            monkeypatch.delenv(f"FUZZBRIDGE_{name}", raising=False)
        assert get_settings() == Settings()
        assert get_settings().score_cutoff == 50.0
        assert get_settings().limit == 3

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("FUZZBRIDGE_SCORE_CUTOFF", "75.5")
        monkeypatch.setenv("FUZZBRIDGE_LIMIT", "10")
        monkeypatch.setenv("FUZZBRIDGE_SCORER", "TokenSetRatio")
        monkeypatch.setenv("FUZZBRIDGE_METRIC", "indel")
        monkeypatch.setenv("FUZZBRIDGE_LOG_LEVEL", "debug")

        settings = get_settings()
        assert settings.score_cutoff == 75.5
        assert settings.limit == 10
        assert settings.scorer == "TokenSetRatio"
        assert settings.metric == "indel"
        assert settings.log_level == "DEBUG"

    def test_bad_number_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUZZBRIDGE_LIMIT", "many")
        assert get_settings().limit == 3

    def test_bad_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("FUZZBRIDGE_LOG_LEVEL", "verbose")
        assert get_settings().log_level == "WARNING"

    def test_level_name_is_trimmed_and_uppercased(self, monkeypatch):
        monkeypatch.setenv("FUZZBRIDGE_LOG_LEVEL", " info ")
        assert get_settings().log_level == "INFO"


class TestLoadCandidates:
    def test_column_values_in_order(self, cities_csv):
        assert load_candidates(cities_csv, "city") == [
            "New York", "Newark", "São Paulo", "Zürich", "Montréal", "York",
        ]

    def test_values_stay_text(self, cities_csv):
        df = read_csv(cities_csv)
        assert df["id"].tolist()[0] == "1"

    def test_missing_column(self, cities_csv):
        with pytest.raises(ValueError, match="not found"):
            load_candidates(cities_csv, "town")
