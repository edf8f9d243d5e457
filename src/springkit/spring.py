from __future__ import annotations

import logging

from springkit.clock import Clock, default_clock
from springkit.errors import InvalidMemberError
from springkit.solver import evaluate
from springkit.tuning import SpringTuning
from springkit.vectors import Nlerpable, copy_value, zero_like

logger = logging.getLogger(__name__)

# Public member names (and short aliases) accepted by `Spring.get` / `Spring.set`.
_MEMBER_ALIASES: dict[str, str] = {
    "position": "position",
    "p": "position",
    "velocity": "velocity",
    "v": "velocity",
    "target": "target",
    "t": "target",
    "damping": "damping",
    "d": "damping",
    "speed": "speed",
    "s": "speed",
    "clock": "clock",
}
_READ_ONLY_MEMBERS: frozenset[str] = frozenset({"initial", "time"})


def _resolve_member(name: object, *, writable: bool) -> str:
    if not isinstance(name, str):
        raise InvalidMemberError(name)
    key = name.lower()
    member = _MEMBER_ALIASES.get(key)
    if member is None and not writable and key in _READ_ONLY_MEMBERS:
        member = key
    if member is None:
        raise InvalidMemberError(name)
    return member


def _clamp_speed(value: float) -> float:
    speed = float(value)
    # Also catches NaN, which compares false against everything.
    if not speed >= 0.0:
        logger.warning("Clamping negative spring speed %s to 0.", speed)
        return 0.0
    return speed


class Spring:
    """
    Damped harmonic oscillator pulling a value toward a target.

    State is evaluated lazily and in closed form: reading `position` / `velocity`
    projects the last settled state to the current clock time without storing it.
    Every write first settles the state at the current time, so the trajectory up to
    the write is preserved and the new value only affects motion from then on.

    Values may be floats, `LVector2f` or `LVector3f`. Vectors are copied in and out.
    """

    __slots__ = ("_clock", "_time", "_position", "_velocity", "_target", "_damping", "_speed", "_initial")

    def __init__(
        self,
        initial: Nlerpable,
        damping: float | None = 1.0,
        speed: float | None = 1.0,
        clock: Clock | None = None,
    ) -> None:
        if clock is not None and not callable(clock):
            raise TypeError("Spring clock must be a callable returning the current time.")
        clock_fn = default_clock() if clock is None else clock
        start = copy_value(initial)
        self._clock = clock_fn
        self._time = float(clock_fn())
        self._position = copy_value(start)
        self._velocity = zero_like(start)
        self._target = copy_value(start)
        self._damping = 1.0 if damping is None else float(damping)
        self._speed = 1.0 if speed is None else _clamp_speed(speed)
        self._initial = start

    @classmethod
    def from_tuning(cls, initial: Nlerpable, *, tuning: SpringTuning, clock: Clock | None = None) -> "Spring":
        tuned = tuning.sanitized()
        return cls(initial, damping=tuned.damping, speed=tuned.speed, clock=clock)

    def __repr__(self) -> str:
        return f"Spring(target={self._target!r}, damping={self._damping:g}, speed={self._speed:g})"

    def __getattr__(self, name: str):
        # Only reached when normal lookup fails.
        raise InvalidMemberError(name)

    def __setattr__(self, name: str, value) -> None:
        if name in Spring.__slots__ or name in _MEMBER_ALIASES:
            object.__setattr__(self, name, value)
            return
        raise InvalidMemberError(name)

    # -- evaluation ----------------------------------------------------------

    def _evaluate(self, now: float) -> tuple[Nlerpable, Nlerpable]:
        return evaluate(
            position=self._position,
            velocity=self._velocity,
            target=self._target,
            damping=self._damping,
            speed=self._speed,
            elapsed=float(now) - self._time,
        )

    def _settle(self, now: float) -> None:
        self._position, self._velocity = self._evaluate(now)
        self._time = float(now)

    # -- time-dependent members ----------------------------------------------

    @property
    def position(self) -> Nlerpable:
        pos, _ = self._evaluate(float(self._clock()))
        return pos

    @position.setter
    def position(self, value: Nlerpable) -> None:
        now = float(self._clock())
        _, vel = self._evaluate(now)
        self._position = copy_value(value)
        self._velocity = vel
        self._time = now

    @property
    def velocity(self) -> Nlerpable:
        _, vel = self._evaluate(float(self._clock()))
        return vel

    @velocity.setter
    def velocity(self, value: Nlerpable) -> None:
        now = float(self._clock())
        pos, _ = self._evaluate(now)
        self._position = pos
        self._velocity = copy_value(value)
        self._time = now

    # -- stored members ------------------------------------------------------

    @property
    def target(self) -> Nlerpable:
        return copy_value(self._target)

    @target.setter
    def target(self, value: Nlerpable) -> None:
        self._settle(float(self._clock()))
        self._target = copy_value(value)

    @property
    def damping(self) -> float:
        return self._damping

    @damping.setter
    def damping(self, value: float) -> None:
        self._settle(float(self._clock()))
        self._damping = float(value)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._settle(float(self._clock()))
        self._speed = _clamp_speed(value)

    @property
    def clock(self) -> Clock:
        return self._clock

    @clock.setter
    def clock(self, value: Clock) -> None:
        if not callable(value):
            raise TypeError("Spring clock must be a callable returning the current time.")
        # Read the new clock first so a failing clock leaves the spring untouched.
        anchor = float(value())
        self._settle(float(self._clock()))
        self._clock = value
        # The settled state is re-anchored to the new clock's timeline.
        self._time = anchor
        logger.debug("Spring clock replaced; re-anchored at t=%s", self._time)

    @property
    def initial(self) -> Nlerpable:
        return copy_value(self._initial)

    @property
    def time(self) -> float:
        """Clock time of the last settled state."""
        return self._time

    p = position
    v = velocity
    t = target
    d = damping
    s = speed

    # -- dynamic member access -----------------------------------------------

    def get(self, name: str):
        """Read a member by name or alias (case-insensitive), e.g. "Position" or "P"."""
        return getattr(self, _resolve_member(name, writable=False))

    def set(self, name: str, value) -> None:
        setattr(self, _resolve_member(name, writable=True), value)

    # -- operations ----------------------------------------------------------

    def reset(self, target: Nlerpable | None = None) -> None:
        """Jump to `target` (or the initial value) at rest, discarding all motion."""

        now = float(self._clock())
        set_to = copy_value(self._initial if target is None else target)
        self._position = set_to
        self._target = copy_value(set_to)
        self._velocity = zero_like(set_to)
        self._time = now
        logger.debug("Spring reset to %r at t=%s", set_to, now)

    def impulse(self, velocity: Nlerpable) -> None:
        self.velocity = self.velocity + velocity

    def time_skip(self, delta: float) -> None:
        """
        Advance (or rewind, for negative `delta`) the simulated motion by `delta`.

        The settled state is anchored at the real current time, so later reads
        continue from the skipped-to state as time passes normally.
        """

        now = float(self._clock())
        self._position, self._velocity = self._evaluate(now + float(delta))
        self._time = now
        logger.debug("Spring skipped %s time units at t=%s", float(delta), now)
