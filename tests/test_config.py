import pytest

from voterlookup.config import DEFAULT_FIELD_WEIGHTS, Config, SearchConfig, get_config, reset_config
from voterlookup.exceptions import ConfigurationError


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.threshold == 0.25
        assert config.distance == 100
        assert config.min_match_char_length == 2
        assert config.ignore_location is True
        assert config.include_score is True
        assert dict(config.field_weights) == {
            "name": 2.0,
            "manglish_name": 1.5,
            "sl_no_str": 2.0,
            "id_card_no": 1.5,
            "house_name": 1.0,
            "manglish_house": 1.0,
            "guardian_name": 0.8,
            "manglish_guardian": 0.8,
            "house_no": 0.8,
        }

    def test_normalized_weights_sum_to_one(self):
        weights = SearchConfig().normalized_weights
        assert sum(weights.values()) == pytest.approx(1.0)
        assert weights["name"] > weights["house_no"]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"threshold": -0.1},
            {"threshold": 1.5},
            {"distance": -1},
            {"min_match_char_length": 0},
            {"field_weights": {}},
            {"field_weights": {"name": 0}},
        ],
    )
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ConfigurationError):
            SearchConfig(**kwargs)

    def test_field_weights_cannot_be_changed_after_build(self):
        weights = {"name": 1.0}
        config = SearchConfig(field_weights=weights)
        weights["house_no"] = 1.0

        assert config.fields == ("name",)
        with pytest.raises(TypeError):
            config.field_weights["name"] = 5.0
        with pytest.raises(TypeError):
            DEFAULT_FIELD_WEIGHTS["name"] = 5.0

    def test_to_dict(self):
        data = SearchConfig().to_dict()
        assert data["threshold"] == 0.25
        assert data["field_weights"]["sl_no_str"] == 2.0


class TestConfig:
    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DEBUG", "1")
        monkeypatch.setenv("DATA_DIR", str(tmp_path))
        monkeypatch.setenv("DEFAULT_SOURCE", "roll.json")

        config = Config()
        assert config.debug is True
        assert config.data_dir == tmp_path
        assert config.default_source_path == tmp_path / "roll.json"

    def test_no_default_source(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_SOURCE", raising=False)
        assert Config().default_source_path is None

    def test_global_instance_is_cached(self):
        assert get_config() is get_config()
        first = get_config()
        reset_config()
        assert get_config() is not first
