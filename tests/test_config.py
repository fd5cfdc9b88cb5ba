"""Tests for run configuration decoding."""

import io
import json

import pytest

from gen_alg import Binary, ConfigError, Integer, IntegerPermutation, Real, RunConfig, encoding_from_dict


def _config_json(encoding: dict, **overrides) -> io.StringIO:
    doc = {"encoding": encoding, "pop_size": 30, "runs": 10, "generations": 200}
    doc.update(overrides)
    return io.StringIO(json.dumps(doc))


class TestRunConfigFromJson:
    """Tests for RunConfig.from_json."""

    def test_integer_encoding(self) -> None:
        reader = _config_json({"type": "Integer", "dim": 12, "bounds": [0, 10]})

        config = RunConfig.from_json(reader)

        assert config == RunConfig(
            encoding=Integer(dim=12, bounds=(0, 10)),
            pop_size=30,
            runs=10,
            generations=200,
        )

    @pytest.mark.parametrize(
        ("encoding", "expected"),
        [
            ({"type": "Binary", "dim": 5}, Binary(dim=5)),
            ({"type": "IntegerPermutation", "dim": 7}, IntegerPermutation(dim=7)),
            ({"type": "Real", "dim": 3, "bounds": [-1.5, 2.5]}, Real(dim=3, bounds=(-1.5, 2.5))),
        ],
    )
    def test_other_encodings(self, encoding: dict, expected) -> None:
        assert RunConfig.from_json(_config_json(encoding)).encoding == expected

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError, match="invalid JSON configuration") as exc_info:
            RunConfig.from_json(io.StringIO("{not json"))
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_missing_top_level_key(self) -> None:
        doc = {"encoding": {"type": "Binary", "dim": 5}, "pop_size": 30, "runs": 10}
        with pytest.raises(ConfigError, match="missing required key 'generations'"):
            RunConfig.from_json(io.StringIO(json.dumps(doc)))

    def test_negative_pop_size(self) -> None:
        with pytest.raises(ConfigError, match="pop_size must be non-negative"):
            RunConfig.from_json(_config_json({"type": "Binary", "dim": 5}, pop_size=-3))

    def test_non_integer_runs(self) -> None:
        with pytest.raises(ConfigError, match="runs must be an integer"):
            RunConfig.from_json(_config_json({"type": "Binary", "dim": 5}, runs="ten"))

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(ConfigError, match="configuration must be an object"):
            RunConfig.from_json(io.StringIO("[1, 2, 3]"))


class TestEncodingFromDict:
    """Tests for decoding the tagged encoding object."""

    def test_unknown_type(self) -> None:
        with pytest.raises(ConfigError, match="unknown encoding type 'Ternary'"):
            encoding_from_dict({"type": "Ternary", "dim": 3})

    def test_missing_type(self) -> None:
        with pytest.raises(ConfigError, match="missing required key 'type'"):
            encoding_from_dict({"dim": 3})

    def test_missing_bounds(self) -> None:
        with pytest.raises(ConfigError, match="missing required key 'bounds'"):
            encoding_from_dict({"type": "Integer", "dim": 3})

    def test_unexpected_bounds_on_binary(self) -> None:
        with pytest.raises(ConfigError, match="unexpected keys for Binary encoding: bounds"):
            encoding_from_dict({"type": "Binary", "dim": 3, "bounds": [0, 1]})

    def test_bounds_wrong_length(self) -> None:
        with pytest.raises(ConfigError, match="two-element list"):
            encoding_from_dict({"type": "Real", "dim": 3, "bounds": [0.0]})

    def test_inverted_bounds(self) -> None:
        with pytest.raises(ConfigError, match="lower <= upper"):
            encoding_from_dict({"type": "Integer", "dim": 3, "bounds": [9, 1]})

    def test_negative_dim(self) -> None:
        with pytest.raises(ConfigError, match="dim must be non-negative"):
            encoding_from_dict({"type": "Binary", "dim": -4})

    def test_encoding_must_be_object(self) -> None:
        with pytest.raises(ConfigError, match="encoding must be an object"):
            encoding_from_dict("Binary")
