# geometry/hittable.py
from typing import NamedTuple, Optional
from core.vector import Vec3
from core.ray import Ray


class HitRecord(NamedTuple):
    """
    Records details of a ray-object intersection.
    """
    t: float          # Ray parameter at intersection
    p: Vec3           # Intersection point
    normal: Vec3      # Outward surface normal at intersection
    material: object  # Material of the surface that was hit


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
