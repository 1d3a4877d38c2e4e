# core/ray.py
from core.vector import Vec3


class Ray:
    """
    Represents a ray in 3D space with an origin, a direction and the time at
    which it was cast. Static scenes ignore the time; moving spheres use it.
    """
    __slots__ = ("origin", "direction", "time")

    def __init__(self, origin: Vec3, direction: Vec3, time: float = 0.0):
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction)
        object.__setattr__(self, "time", time)

    def __setattr__(self, name, value):
        raise AttributeError("Ray is immutable")

    def __delattr__(self, name):
        raise AttributeError("Ray is immutable")

    def point_at_parameter(self, t: float) -> Vec3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + t * self.direction

    at = point_at_parameter

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r}, time={self.time})"
