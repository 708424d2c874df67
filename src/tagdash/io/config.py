"""
Configuration for the dashboard.

Defines DashboardSettings, a frozen dataclass carrying runtime configuration for
dataset loading and view defaults. Defaults are sourced from tagdash.core.constants.

Precedence: environment (TAGDASH_*) > TOML > defaults.

TOML search order when no explicit path is given:
    1) ./tagdash.toml (either a [dashboard] table or top-level keys)
    2) ./pyproject.toml under [tool.tagdash]

Notes
- Invalid values in a mapping are ignored and the previous value kept; call
  ``validate()`` to reject out-of-range settings explicitly.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from tagdash.core.constants import DEFAULT_MEASURES, DEFAULT_TOP_N_TAGS, MEASURES

from .errors import IoConfigError

__all__ = ["DashboardSettings"]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


@dataclass(frozen=True)
class DashboardSettings:
    """
    Runtime settings for the dashboard.

    Attributes:
        data_path (str | None): Dataset CSV to load. None lets the shell use a demo file.
        top_n_tags (int): Tags tracked individually by the timeline view.
        use_percentage (bool): Weight co-occurrence edges by overlap ratio instead of count.
        measures (tuple[str, ...]): Measures drawn by the bar chart view.
        normalize_timeline (bool): Draw monthly shares instead of counts.
        log_level (str): Level passed to logging.basicConfig by the launcher.

    Examples:
        >>> from tagdash.io import DashboardSettings
        >>> DashboardSettings(top_n_tags=5).top_n_tags
        5
    """

    data_path: str | None = None
    top_n_tags: int = DEFAULT_TOP_N_TAGS
    use_percentage: bool = False
    measures: tuple[str, ...] = DEFAULT_MEASURES
    normalize_timeline: bool = True
    log_level: str = "WARNING"

    def validate(self) -> DashboardSettings:
        """Return self, or raise IoConfigError for out-of-range values."""
        if self.top_n_tags < 0:
            raise IoConfigError(f"top_n_tags must be >= 0, got {self.top_n_tags}")
        unknown = [m for m in self.measures if m not in MEASURES]
        if unknown:
            raise IoConfigError(f"unknown measures: {unknown!r} (allowed={list(MEASURES)!r})")
        if self.log_level not in _LOG_LEVELS:
            raise IoConfigError(f"unknown log level {self.log_level!r}")
        return self

    @classmethod
    def _apply_mapping(cls, base: DashboardSettings, cfg: dict[str, Any] | None) -> DashboardSettings:
        """Apply a loose config mapping, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "data_path" in cfg and isinstance(cfg["data_path"], str) and cfg["data_path"].strip():
            s = replace(s, data_path=cfg["data_path"].strip())

        if "top_n_tags" in cfg:
            try:
                s = replace(s, top_n_tags=int(cfg["top_n_tags"]))
            except (TypeError, ValueError):
                pass

        if "use_percentage" in cfg:
            s = replace(s, use_percentage=_bool(cfg["use_percentage"]))

        if "normalize_timeline" in cfg:
            s = replace(s, normalize_timeline=_bool(cfg["normalize_timeline"]))

        if "measures" in cfg:
            raw = cfg["measures"]
            if isinstance(raw, str):
                raw = [m.strip() for m in raw.split(",")]
            if isinstance(raw, (list, tuple)):
                measures = tuple(str(m) for m in raw if str(m))
                if measures:
                    s = replace(s, measures=measures)

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)

        return s

    @classmethod
    def from_env(
        cls, base: DashboardSettings | None = None, prefix: str = "TAGDASH_"
    ) -> DashboardSettings:
        """
        Build settings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - TAGDASH_DATA_PATH
            - TAGDASH_TOP_N_TAGS
            - TAGDASH_USE_PERCENTAGE (1/0/true/false/yes/no/on/off)
            - TAGDASH_MEASURES (comma separated)
            - TAGDASH_NORMALIZE_TIMELINE
            - TAGDASH_LOG_LEVEL
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for key in (
            "data_path",
            "top_n_tags",
            "use_percentage",
            "measures",
            "normalize_timeline",
            "log_level",
        ):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> DashboardSettings:
        """Build settings from a TOML file; defaults when no file is found."""
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "tagdash.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("tagdash") if isinstance(tool, dict) else None
            elif isinstance(data.get("dashboard"), dict):
                cfg = data["dashboard"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> DashboardSettings:
        """
        Load settings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search tagdash.toml, pyproject.toml.
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
