# materials/metal.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vec3, rvius
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.material import Material


class Metal(Material):
    """
    Metal material with mirror reflection perturbed by fuzz (0 is a perfect mirror).
    """
    def __init__(self, albedo: Vec3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vec3]]:
        reflected = reflect(ray_in.direction.unit(), rec.normal)
        direction = reflected + self.fuzz * rvius(rng) if self.fuzz > 0 else reflected
        scattered = Ray(rec.p, direction, ray_in.time)

        if scattered.direction.dot(rec.normal) > 0:
            return scattered, self.albedo
        return None  # Absorb rays that would scatter below the surface

    def __repr__(self) -> str:
        return f"Metal({self.albedo}, fuzz={self.fuzz})"
