from __future__ import annotations

from pathlib import Path

import pytest

from tagdash.io import DashboardSettings, IoConfigError

_ENV_KEYS = [
    "TAGDASH_DATA_PATH",
    "TAGDASH_TOP_N_TAGS",
    "TAGDASH_USE_PERCENTAGE",
    "TAGDASH_MEASURES",
    "TAGDASH_NORMALIZE_TIMELINE",
    "TAGDASH_LOG_LEVEL",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write_tagdash_toml(tmp: Path, content: str) -> Path:
    p = tmp / "tagdash.toml"
    p.write_text(content)
    return p


def test_settings_precedence_env_over_toml(tmp_path: Path, monkeypatch) -> None:
    # Arrange TOML
    _write_tagdash_toml(
        tmp_path,
        """
        [dashboard]
        data_path = "from_toml.csv"
        top_n_tags = 4
        use_percentage = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    # Arrange ENV that should override TOML
    monkeypatch.setenv("TAGDASH_DATA_PATH", "from_env.csv")
    monkeypatch.setenv("TAGDASH_TOP_N_TAGS", "7")
    monkeypatch.setenv("TAGDASH_USE_PERCENTAGE", "yes")

    # Act
    s = DashboardSettings.load()

    # Assert precedence: env > TOML
    assert s.data_path == "from_env.csv"
    assert s.top_n_tags == 7
    assert s.use_percentage is True


def test_settings_from_toml_when_no_env(tmp_path: Path, monkeypatch) -> None:
    _write_tagdash_toml(
        tmp_path,
        """
        top_n_tags = 3
        measures = ["ViewCount", "ScoreCount"]
        normalize_timeline = false
        log_level = "debug"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = DashboardSettings.load()

    assert s.top_n_tags == 3
    assert s.measures == ("ViewCount", "ScoreCount")
    assert s.normalize_timeline is False
    assert s.log_level == "DEBUG"


def test_settings_from_pyproject_tool_table(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
        [project]
        name = "x"

        [tool.tagdash]
        measures = "AnswerCount, RecordCount"
        """.strip()
    )
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = DashboardSettings.load()

    assert s.measures == ("AnswerCount", "RecordCount")


def test_settings_defaults_when_no_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)

    s = DashboardSettings.load()

    assert s == DashboardSettings()
    assert s.top_n_tags == 10
    assert s.use_percentage is False
    assert s.measures == ("CommentCount", "OwnerUserIdCount", "AnswerCount", "FavoriteCount")


def test_invalid_values_keep_previous_and_validate_rejects(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _clear_env(monkeypatch)
    monkeypatch.setenv("TAGDASH_TOP_N_TAGS", "many")
    monkeypatch.setenv("TAGDASH_LOG_LEVEL", "loud")

    s = DashboardSettings.load()
    assert s.top_n_tags == 10
    assert s.log_level == "WARNING"

    with pytest.raises(IoConfigError):
        DashboardSettings(top_n_tags=-1).validate()
    with pytest.raises(IoConfigError):
        DashboardSettings(measures=("Bogus",)).validate()
    assert DashboardSettings().validate() == DashboardSettings()
