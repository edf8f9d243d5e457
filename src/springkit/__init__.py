"""Closed-form damped springs for animating values toward moving targets."""

from springkit.clock import Clock, ManualClock, default_clock
from springkit.errors import InvalidMemberError
from springkit.spring import Spring
from springkit.tuning import SpringTuning
from springkit.vectors import Nlerpable, copy_value, zero_like

__all__ = [
    "Clock",
    "InvalidMemberError",
    "ManualClock",
    "Nlerpable",
    "Spring",
    "SpringTuning",
    "copy_value",
    "default_clock",
    "zero_like",
]

__version__ = "0.1.0"
