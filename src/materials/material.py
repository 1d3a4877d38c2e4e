# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vec3
from geometry.hittable import HitRecord


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord,
                rng: random.Random) -> Optional[Tuple[Ray, Vec3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        Any randomness must be drawn from rng.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
