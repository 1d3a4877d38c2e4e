# materials/presets.py
from core.vector import Vec3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vec3(0.8, 0.6, 0.2), fuzz=0.3)

    @staticmethod
    def silver() -> Metal:
        return Metal(Vec3(0.8, 0.8, 0.8), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class ColorPresets:
    """Common albedo colors."""

    RED = Vec3(0.8, 0.3, 0.3)
    GROUND = Vec3(0.8, 0.8, 0.0)
    BLUE = Vec3(0.1, 0.2, 0.5)
    GRAY = Vec3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vec3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
