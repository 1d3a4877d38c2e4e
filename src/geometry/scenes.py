# geometry/scenes.py
"""
Scene presets. Every builder returns a fresh HittableList so callers never
share mutable state between renders.
"""
from core.vector import Vec3
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.moving_sphere import MovingSphere
from materials.presets import ColorPresets, DielectricPresets, MetalPresets


def single_sphere() -> HittableList:
    """One diffuse sphere in front of the viewport."""
    return HittableList([
        Sphere(Vec3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.GRAY)),
    ])


def materials() -> HittableList:
    """Diffuse, metal and glass spheres resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vec3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GROUND)))
    world.add(Sphere(Vec3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    world.add(Sphere(Vec3(1, 0, -1), 0.5, MetalPresets.gold()))
    world.add(Sphere(Vec3(-1, 0, -1), 0.5, DielectricPresets.glass()))
    # Negative radius flips the normals, giving a hollow glass bubble.
    world.add(Sphere(Vec3(-1, 0, -1), -0.45, DielectricPresets.glass()))
    return world


def motion() -> HittableList:
    """Spheres travelling over the shutter interval [0, 1]."""
    world = HittableList()
    world.add(Sphere(Vec3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GROUND)))
    world.add(MovingSphere(Vec3(-1, 0, -1), Vec3(1, 0, -1), 0.0, 1.0, 0.4,
                           ColorPresets.matte(ColorPresets.RED)))
    world.add(MovingSphere(Vec3(0, -0.1, -1.8), Vec3(0, 0.4, -1.8), 0.0, 1.0, 0.3,
                           MetalPresets.silver()))
    return world


SCENES = {
    "sphere": single_sphere,
    "normals": single_sphere,
    "materials": materials,
    "motion": motion,
}
