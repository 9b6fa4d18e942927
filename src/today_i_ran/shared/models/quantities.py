"""Canonical quantities: distances in meters, durations in seconds."""

from pydantic import BaseModel, Field

from .units import KMH_IN_MPS, MPH_IN_MPS


class Distance(BaseModel):
    """A distance covered, stored in meters."""

    meters: float = Field(description="Distance in meters", ge=0)

    model_config = {"frozen": True}


class Duration(BaseModel):
    """
    A span of time, stored in seconds.

    Infinity is a valid value and stands for a distance that is never
    reached, e.g. a projection at zero velocity.
    """

    seconds: float = Field(description="Duration in seconds", ge=0)

    model_config = {"frozen": True}


class Velocity(BaseModel):
    """An average velocity, stored in meters per second."""

    meters_per_second: float = Field(description="Velocity in meters per second", ge=0)

    model_config = {"frozen": True}

    @property
    def kilometers_per_hour(self) -> float:
        """Velocity in km/h."""
        return self.meters_per_second / KMH_IN_MPS

    @property
    def miles_per_hour(self) -> float:
        """Velocity in mph."""
        return self.meters_per_second / MPH_IN_MPS

    @classmethod
    def from_kilometers_per_hour(cls, kmh: float) -> "Velocity":
        return cls(meters_per_second=kmh * KMH_IN_MPS)
