from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from springkit.tuning import SpringTuning


def test_defaults_are_critically_damped_unit_speed() -> None:
    t = SpringTuning()
    assert t.damping == 1.0
    assert t.speed == 1.0
    assert SpringTuning.critical(speed=3.0) == SpringTuning(damping=1.0, speed=3.0)


def test_presets_cover_each_damping_regime() -> None:
    assert SpringTuning.bouncy().damping < 1.0
    assert SpringTuning.critical().damping == 1.0
    assert SpringTuning.sluggish().damping > 1.0


def test_with_overrides_returns_modified_copy() -> None:
    base = SpringTuning()
    fast = base.with_overrides(speed=8.0)
    assert fast.speed == 8.0
    assert fast.damping == 1.0
    assert base.speed == 1.0


def test_sanitized_clamps_out_of_range_values() -> None:
    t = SpringTuning(damping=-0.5, speed=-3.0).sanitized()
    assert t == SpringTuning(damping=0.0, speed=0.0)

    t = SpringTuning(damping=math.nan, speed=math.inf).sanitized()
    assert t == SpringTuning(damping=1.0, speed=1.0)


def test_from_dict_keeps_defaults_for_missing_keys() -> None:
    t = SpringTuning.from_dict({"speed": 4})
    assert t.speed == 4.0
    assert isinstance(t.speed, float)
    assert t.damping == 1.0


def test_from_dict_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        SpringTuning.from_dict({"stiffness": 170.0})
    with pytest.raises(ValueError):
        SpringTuning.from_dict({"damping": "high"})
    with pytest.raises(ValueError):
        SpringTuning.from_dict({"damping": True})
    with pytest.raises(ValueError):
        SpringTuning.from_dict([1.0, 2.0])  # type: ignore[arg-type]


def test_from_json_reads_tuning_file(tmp_path: Path) -> None:
    p = tmp_path / "camera_spring.json"
    p.write_text(json.dumps({"damping": 0.6, "speed": 12.0}), encoding="utf-8")

    t = SpringTuning.from_json(p)

    assert t == SpringTuning(damping=0.6, speed=12.0)
    assert t.to_dict() == {"damping": 0.6, "speed": 12.0}
