# materials/lambertian.py
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vec3, rvius
from geometry.hittable import HitRecord
from materials.material import Material


class Lambertian(Material):
    """
    Ideal diffuse material. Always scatters, towards a random point in the unit
    sphere that touches the surface at the hit point.
    """

    def __init__(self, albedo: Vec3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Tuple[Ray, Vec3]:
        target = rec.p + rec.normal + rvius(rng)
        scattered = Ray(rec.p, target - rec.p, ray_in.time)
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo})"
