# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vec3, fdiv
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


def hit_sphere(center: Vec3, radius: float, material, ray: Ray,
               t_min: float, t_max: float) -> Optional[HitRecord]:
    """
    Solves |O + tD - C|^2 = r^2 for t and returns the nearest root strictly
    inside (t_min, t_max). Both bounds are exclusive so a scattered ray does not
    hit the surface it starts on.
    """
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - a * c

    if not discriminant > 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # a underflows to 0 for very short directions; fdiv keeps that total.
    for root in (fdiv(-b - sqrt_disc, a), fdiv(-b + sqrt_disc, a)):
        if t_min < root < t_max:
            p = ray.point_at_parameter(root)
            return HitRecord(root, p, (p - center) / radius, material)
    return None


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vec3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        return hit_sphere(self.center, self.radius, self.material, ray, t_min, t_max)

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
