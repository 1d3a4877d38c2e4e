# src/materials/dielectric.py
import math
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vec3, ONES, fdiv
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material such as glass or water. The hit normal always
    points out of the sphere, so the side of entry is read from the sign of
    dot(direction, normal).
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vec3]]:
        attenuation = ONES  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)
        d_dot_n = direction.dot(rec.normal)

        if d_dot_n > 0:
            # Leaving the material
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = fdiv(self.ref_idx * d_dot_n, direction.length())
        else:
            outward_normal = rec.normal
            ni_over_nt = fdiv(1.0, self.ref_idx)
            cosine = fdiv(-d_dot_n, direction.length())

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is not None:
            reflect_prob = schlick(cosine, self.ref_idx)
        else:
            reflect_prob = 1.0  # Total internal reflection

        if rng.random() < reflect_prob:
            return Ray(rec.p, reflected, ray_in.time), attenuation
        return Ray(rec.p, refracted, ray_in.time), attenuation

    def __repr__(self) -> str:
        return f"Dielectric({self.ref_idx})"


def refract(v: Vec3, n: Vec3, ni_over_nt: float) -> Optional[Vec3]:
    """
    Bends v through a surface with normal n by Snell's law.
    Returns None when the angle gives total internal reflection.
    """
    uv = v.unit()
    dt = uv.dot(n)
    discriminant = 1.0 - ni_over_nt * ni_over_nt * (1.0 - dt * dt)
    if discriminant > 0:
        return ni_over_nt * (uv - dt * n) - math.sqrt(discriminant) * n
    return None


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = fdiv(1.0 - ref_idx, 1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
