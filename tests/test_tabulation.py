from __future__ import annotations

import pytest

from colldb.exceptions import ConfigurationException
from colldb.transport import TabulationConfig


class TestTabulationConfig:
    def test_defaults(self):
        config = TabulationConfig.from_mapping({})
        assert config == TabulationConfig(True, 300.0, 20000.0, 100.0)
        assert config.n_points == 198

    def test_whole_span_is_valid(self):
        config = TabulationConfig.from_mapping({"Tmin": 300, "Tmax": 20000, "dT": 100})
        assert config.grid()[-1] == 20000.0

    def test_fractional_span_is_rejected(self):
        with pytest.raises(ConfigurationException, match="whole number"):
            TabulationConfig.from_mapping({"Tmin": 300, "Tmax": 20050, "dT": 100})

    @pytest.mark.parametrize(
        "attributes, message",
        [
            ({"Tmin": 0}, "Tmin must be positive"),
            ({"Tmax": -1}, "Tmax must be positive"),
            ({"dT": 0}, "dT must be positive"),
            ({"Tmin": 5000, "Tmax": 1000}, "Tmin must be < Tmax"),
        ],
    )
    def test_invalid_bounds(self, attributes, message):
        with pytest.raises(ConfigurationException, match=message):
            TabulationConfig.from_mapping(attributes)

    def test_bounds_ignored_when_disabled(self):
        config = TabulationConfig.from_mapping({"tabulate": "no", "Tmin": 300, "Tmax": 20050})
        assert not config.tabulate
        assert not config.contains(1000.0)

    @pytest.mark.parametrize("flag, expected", [("yes", True), ("NO", False), ("true", True), (False, False)])
    def test_tabulate_flag_parsing(self, flag, expected):
        assert TabulationConfig.from_mapping({"tabulate": flag}).tabulate is expected

    def test_bad_tabulate_flag(self):
        with pytest.raises(ConfigurationException, match="tabulate"):
            TabulationConfig.from_mapping({"tabulate": "maybe"})

    def test_non_numeric_bound(self):
        with pytest.raises(ConfigurationException):
            TabulationConfig.from_mapping({"Tmin": "cold"})

    def test_contains_is_inclusive(self):
        config = TabulationConfig()
        assert config.contains(300.0)
        assert config.contains(20000.0)
        assert not config.contains(299.9)
        assert not config.contains(20000.1)

    def test_frozen(self):
        config = TabulationConfig()
        with pytest.raises(AttributeError):
            config.Tmin = 10.0
