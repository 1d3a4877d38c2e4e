# geometry/moving_sphere.py
from typing import Optional
from core.vector import Vec3, fdiv
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.sphere import hit_sphere


class MovingSphere(Hittable):
    """
    A sphere whose center travels in a straight line from center0 at time0 to
    center1 at time1. Rays are intersected against the center at ray.time.
    """
    def __init__(self, center0: Vec3, center1: Vec3, time0: float, time1: float,
                 radius: float, material):
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vec3:
        # Extrapolates outside [time0, time1]; time0 == time1 gives NaN/inf.
        s = fdiv(time - self.time0, self.time1 - self.time0)
        return self.center0 + s * (self.center1 - self.center0)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center(ray.time), self.radius, self.material,
                          ray, t_min, t_max)

    def __repr__(self) -> str:
        return (f"MovingSphere({self.center0} -> {self.center1}, "
                f"t=[{self.time0}, {self.time1}], {self.radius})")
