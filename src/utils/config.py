import json
from dataclasses import dataclass, field
from pathlib import Path

from src.filter.models import DEFAULT_PRESETS, Preset
from src.filter.presets import load_presets


PT_BR_MONTH_ABBR = (
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
)


def load_config(config_path: str | Path = "conf/config.json") -> dict:
    """Load project config from JSON file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return json.load(f)


@dataclass(frozen=True)
class DateFilterConfig:
    presets: tuple[Preset, ...] = DEFAULT_PRESETS
    label: str = "Período:"
    month_abbr: tuple[str, ...] = PT_BR_MONTH_ABBR
    respect_max_bound: bool = False
    default_days: int = 30


def date_filter_config(config: dict) -> DateFilterConfig:
    """
    Reads the `date_filter` section, falling back to defaults for missing keys.
    """
    section = config.get("date_filter") or {}

    month_abbr = tuple(section.get("month_abbr", PT_BR_MONTH_ABBR))
    if len(month_abbr) != 12:
        raise ValueError(f"month_abbr needs 12 entries, got {len(month_abbr)}")

    default_days = int(section.get("default_days", 30))
    if default_days < 1:
        raise ValueError(f"default_days must be positive, got {default_days}")

    return DateFilterConfig(
        presets=load_presets(section.get("presets")),
        label=section.get("label", "Período:"),
        month_abbr=month_abbr,
        respect_max_bound=bool(section.get("respect_max_bound", False)),
        default_days=default_days,
    )
