from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path


@dataclass(frozen=True)
class SpringTuning:
    """
    Designer-facing spring response settings.

    `damping` is the damping ratio: below 1 overshoots and rings, 1 settles as fast
    as possible without overshoot, above 1 creeps in. `speed` scales time; 0 freezes.
    """

    damping: float = 1.0
    speed: float = 1.0

    @classmethod
    def critical(cls, *, speed: float = 1.0) -> "SpringTuning":
        return cls(damping=1.0, speed=float(speed))

    @classmethod
    def bouncy(cls, *, speed: float = 1.0) -> "SpringTuning":
        return cls(damping=0.35, speed=float(speed))

    @classmethod
    def sluggish(cls, *, speed: float = 1.0) -> "SpringTuning":
        return cls(damping=2.0, speed=float(speed))

    def with_overrides(self, **kwargs) -> "SpringTuning":
        return replace(self, **kwargs)

    def sanitized(self) -> "SpringTuning":
        """Copy clamped to the ranges a spring accepts (non-negative, finite)."""

        damping = float(self.damping)
        speed = float(self.speed)
        return SpringTuning(
            damping=max(0.0, damping) if math.isfinite(damping) else 1.0,
            speed=max(0.0, speed) if math.isfinite(speed) else 1.0,
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "SpringTuning":
        """
        Build tuning from a plain mapping.

        Keys must match SpringTuning field names; missing keys keep defaults.
        """

        if not isinstance(data, dict):
            raise ValueError("Spring tuning must be a JSON object.")
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, float] = {}
        for k, v in data.items():
            if k not in known:
                raise ValueError(f"Unknown spring tuning field '{k}'.")
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ValueError(f"Spring tuning field '{k}' must be a number.")
            kwargs[k] = float(v)
        return cls(**kwargs)

    @classmethod
    def from_json(cls, path: str | Path) -> "SpringTuning":
        p = Path(path)
        return cls.from_dict(json.loads(p.read_text(encoding="utf-8")))
