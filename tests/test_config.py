import json
import pytest

from src.filter.models import DEFAULT_PRESETS, Preset
from src.utils.config import PT_BR_MONTH_ABBR, date_filter_config, load_config


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_reads_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"app": {"title": "x"}}))
        assert load_config(path) == {"app": {"title": "x"}}


class TestDateFilterConfig:
    def test_defaults(self):
        cfg = date_filter_config({})
        assert cfg.presets == DEFAULT_PRESETS
        assert cfg.month_abbr == PT_BR_MONTH_ABBR
        assert cfg.respect_max_bound is False
        assert cfg.default_days == 30

    def test_custom_section(self):
        cfg = date_filter_config({
            "date_filter": {
                "label": "Period:",
                "presets": [{"label": "Last week", "days": 7}],
                "respect_max_bound": True,
                "default_days": 7,
            }
        })
        assert cfg.label == "Period:"
        assert cfg.presets == (Preset("Last week", 7),)
        assert cfg.respect_max_bound is True
        assert cfg.default_days == 7

    def test_bad_month_abbr(self):
        with pytest.raises(ValueError):
            date_filter_config({"date_filter": {"month_abbr": ["jan"]}})

    def test_bad_default_days(self):
        with pytest.raises(ValueError):
            date_filter_config({"date_filter": {"default_days": 0}})

    def test_shipped_config(self):
        cfg = date_filter_config(load_config("conf/config.json"))
        assert [p.days for p in cfg.presets] == [7, 14, 30, 90]
