# renderer/raytracer.py
import logging
import math
import random
from typing import List, Optional

from core.ray import Ray
from core.vector import Vec3, ZERO, ONES
from camera.viewport import Viewport
from geometry.hittable import Hittable

logger = logging.getLogger(__name__)

# Shading constants
INFINITY = math.inf
T_MIN = 0.001  # Keeps scattered rays from re-hitting the surface they leave
MAX_DEPTH = 50
SKY_BLUE = Vec3(0.5, 0.7, 1.0)
DEFAULT_SEED = 42


def background(ray: Ray) -> Vec3:
    """
    Vertical gradient: white when looking straight down, sky blue straight up.
    """
    unit_direction = ray.direction.unit()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * ONES + t * SKY_BLUE


def color(ray: Ray, world: Hittable, depth: int, rng: random.Random,
          max_depth: int = MAX_DEPTH) -> Vec3:
    """
    Color seen along ray. Each surface hit asks its material for a scattered
    ray and multiplies that ray's color by the attenuation; absorbed rays and
    rays past max_depth bounces are black, and misses see the background.
    """
    rec = world.hit(ray, T_MIN, INFINITY)
    if rec is None:
        return background(ray)
    if depth >= max_depth:
        return ZERO
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return ZERO
    scattered, attenuation = scatter
    return attenuation * color(scattered, world, depth + 1, rng, max_depth)


def normal_color(ray: Ray, world: Hittable) -> Vec3:
    """Debug shading: maps the unit surface normal into [0, 1] RGB."""
    rec = world.hit(ray, 0.0, INFINITY)
    if rec is None:
        return background(ray)
    n = rec.normal.unit()
    return 0.5 * (n + ONES)


class Renderer:
    """
    Traces one ray per pixel through a fixed viewport.

    Rows come back top to bottom, so row 0 holds the pixels with
    j = height - 1 and the grid can be written out without flipping.
    """
    def __init__(self, width: int, height: int, max_depth: int = MAX_DEPTH,
                 time: float = 0.0, normals: bool = False):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.width = width
        self.height = height
        self.max_depth = max_depth
        self.time = time
        self.normals = normals

    def shade(self, ray: Ray, world: Hittable, rng: random.Random) -> Vec3:
        if self.normals:
            return normal_color(ray, world)
        return color(ray, world, 0, rng, self.max_depth)

    def render(self, viewport: Viewport, world: Hittable,
               rng: Optional[random.Random] = None) -> List[List[Vec3]]:
        if rng is None:
            rng = random.Random(DEFAULT_SEED)

        logger.info("Rendering %dx%d (max depth %d, time %s)",
                    self.width, self.height, self.max_depth, self.time)
        report_every = max(1, self.height // 10)

        rows = []
        for row, j in enumerate(range(self.height - 1, -1, -1)):
            v = j / self.height
            pixels = []
            for i in range(self.width):
                u = i / self.width
                ray = viewport.get_ray(u, v, self.time)
                pixels.append(self.shade(ray, world, rng))
            rows.append(pixels)
            if (row + 1) % report_every == 0:
                logger.debug("Rendered %d/%d rows", row + 1, self.height)

        logger.info("Finished rendering %d pixels", self.width * self.height)
        return rows


def render(viewport: Viewport, world: Hittable, width: int, height: int,
           rng: Optional[random.Random] = None,
           max_depth: int = MAX_DEPTH) -> List[List[Vec3]]:
    """
    Renders world through viewport into a height x width grid of colors.
    """
    return Renderer(width, height, max_depth=max_depth).render(viewport, world, rng)
