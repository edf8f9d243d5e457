from __future__ import annotations

import math
import sys
from dataclasses import dataclass

from springkit.vectors import Nlerpable

# Largest exponent math.exp can return without raising OverflowError.
_MAX_EXPONENT = math.log(sys.float_info.max)


@dataclass(frozen=True)
class SpringCoefficients:
    """
    Linear weights of the closed-form damped oscillator for one elapsed interval.

    new_pos = pos + (target - pos) * pull_to_target + vel * vel_pos_push
    new_vel = (target - pos) * vel_push_rate + vel * velocity_decay
    """

    pull_to_target: float
    vel_pos_push: float
    vel_push_rate: float
    velocity_decay: float


IDENTITY = SpringCoefficients(pull_to_target=0.0, vel_pos_push=0.0, vel_push_rate=0.0, velocity_decay=1.0)


def _exp(x: float) -> float:
    return math.exp(min(_MAX_EXPONENT, float(x)))


def spring_coefficients(*, damping: float, speed: float, elapsed: float) -> SpringCoefficients:
    """
    Exact response weights after `elapsed` clock units.

    `elapsed` may be negative (rewind). A frozen spring (speed 0) does not move.
    """

    zeta = float(damping)
    omega = float(speed)
    if omega <= 0.0:
        return IDENTITY

    dt = omega * float(elapsed)
    zeta_sq = zeta * zeta

    if zeta_sq < 1.0:
        ang_freq = math.sqrt(1.0 - zeta_sq)
        exp_term = _exp(-zeta * dt) / ang_freq
        cos_theta = exp_term * math.cos(ang_freq * dt)
        sin_theta = exp_term * math.sin(ang_freq * dt)
    elif zeta_sq == 1.0:
        # Exact critical case; the general formulas divide by a zero frequency here.
        ang_freq = 1.0
        exp_term = _exp(-zeta * dt)
        cos_theta = exp_term
        sin_theta = exp_term * dt
    else:
        ang_freq = math.sqrt(zeta_sq - 1.0)
        ang_freq2 = 2.0 * ang_freq
        u = _exp((-zeta + ang_freq) * dt) / ang_freq2
        v = _exp((-zeta - ang_freq) * dt) / ang_freq2
        cos_theta = u + v
        sin_theta = u - v

    return SpringCoefficients(
        pull_to_target=1.0 - (ang_freq * cos_theta + zeta * sin_theta),
        vel_pos_push=sin_theta / omega,
        vel_push_rate=omega * sin_theta,
        velocity_decay=ang_freq * cos_theta - zeta * sin_theta,
    )


def evaluate(
    *,
    position: Nlerpable,
    velocity: Nlerpable,
    target: Nlerpable,
    damping: float,
    speed: float,
    elapsed: float,
) -> tuple[Nlerpable, Nlerpable]:
    """Position and velocity `elapsed` clock units after the given settled state."""

    c = spring_coefficients(damping=damping, speed=speed, elapsed=elapsed)
    diff = target - position
    new_position = position + diff * c.pull_to_target + velocity * c.vel_pos_push
    new_velocity = diff * c.vel_push_rate + velocity * c.velocity_decay
    return new_position, new_velocity
