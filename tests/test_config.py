"""Tests for FieldConfig defaults, validation and mapping construction."""

import pytest

from tick_wave.config import FieldConfig
from tick_wave.types import WaveConfigError


def make(**overrides):
    values = dict(canvas_width=800, canvas_height=600, x_dots=10, y_dots=10)
    values.update(overrides)
    return FieldConfig(**values)


class TestDefaults:
    def test_documented_defaults(self):
        cfg = make()
        assert cfg.space_between_x_dots == 60
        assert cfg.hollow_dots == 2
        assert cfg.hollow_stride == 3
        assert cfg.center_position == 0.5
        assert cfg.wave_max_height == 100
        assert cfg.horizon_angle == 0.0
        assert cfg.color == "black"
        assert cfg.dot_size == 0.3
        assert cfg.wave_delay == 0
        assert cfg.wave_pattern == "straight"
        assert cfg.repeat is True
        assert cfg.frame_qtd == 100
        assert cfg.frame_cap == 30
        assert cfg.backwards is False
        assert cfg.show_grid is True

    def test_frame_length(self):
        assert make(frame_cap=20).frame_length == pytest.approx(0.05)

    def test_frozen(self):
        cfg = make()
        with pytest.raises(AttributeError):
            cfg.x_dots = 3  # type: ignore[misc]

    def test_resized_copy(self):
        cfg = make()
        smaller = cfg.resized(400, 300)
        assert (smaller.canvas_width, smaller.canvas_height) == (400, 300)
        assert smaller.x_dots == cfg.x_dots
        assert (cfg.canvas_width, cfg.canvas_height) == (800, 600)


class TestValidation:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("x_dots", -1),
            ("y_dots", -1),
            ("canvas_width", -1),
            ("frame_qtd", 0),
            ("frame_cap", 0),
            ("frame_cap", -30),
            ("space_between_x_dots", 0),
            ("hollow_dots", -1),
            ("dot_size", -0.1),
            ("wave_delay", -1),
            ("wave_max_height", -5),
            ("center_position", 1.5),
            ("x_dots", 2.5),
            ("y_dots", 3.0),
            ("frame_qtd", 10.5),
            ("hollow_dots", 1.0),
            ("x_dots", True),
            ("y_dots", "4"),
        ],
    )
    def test_invalid_values_raise(self, field, value):
        with pytest.raises(WaveConfigError):
            make(**{field: value})

    def test_non_int_counts_name_the_field(self):
        """Integral floats are rejected too, before any layout runs."""
        with pytest.raises(WaveConfigError, match="y_dots must be an int, got float"):
            make(y_dots=3.0)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            make(frame_qtd=0)

    def test_unknown_pattern(self):
        with pytest.raises(WaveConfigError, match="wave_pattern"):
            make(wave_pattern="diagonal")

    def test_zero_grid_is_legal(self):
        cfg = make(x_dots=0, y_dots=0)
        assert cfg.x_dots == 0


class TestFromMapping:
    def test_missing_keys_take_defaults(self):
        cfg = FieldConfig.from_mapping(
            {"canvas_width": 800, "canvas_height": 600, "x_dots": 4, "y_dots": 4}
        )
        assert cfg == make(x_dots=4, y_dots=4)

    def test_none_takes_default(self):
        cfg = FieldConfig.from_mapping(
            {
                "canvas_width": 800,
                "canvas_height": 600,
                "x_dots": 4,
                "y_dots": 4,
                "hollow_dots": None,
                "repeat": None,
            }
        )
        assert cfg.hollow_stride == 3
        assert cfg.repeat is True

    def test_explicit_falsy_values_kept(self):
        cfg = FieldConfig.from_mapping(
            {
                "canvas_width": 800,
                "canvas_height": 600,
                "x_dots": 4,
                "y_dots": 4,
                "hollow_dots": 0,
                "repeat": False,
                "center_position": 0,
            }
        )
        assert cfg.hollow_stride == 1
        assert cfg.repeat is False
        assert cfg.center_position == 0

    def test_unknown_key(self):
        with pytest.raises(WaveConfigError, match="frameQtd"):
            FieldConfig.from_mapping(
                {"canvas_width": 1, "canvas_height": 1, "x_dots": 1, "y_dots": 1,
                 "frameQtd": 10}
            )

    def test_missing_required_key(self):
        with pytest.raises(WaveConfigError):
            FieldConfig.from_mapping({"canvas_width": 800})
