# camera/viewport.py
from core.vector import Vec3
from core.ray import Ray

# Default viewport: a 4x2 window one unit down the -z axis.
DEFAULT_ORIGIN = Vec3(0.0, 0.0, 0.0)
DEFAULT_LOWER_LEFT = Vec3(-2.0, -1.0, -1.0)
DEFAULT_HORIZONTAL = Vec3(4.0, 0.0, 0.0)
DEFAULT_VERTICAL = Vec3(0.0, 2.0, 0.0)


class Viewport:
    """
    Fixed axis-aligned viewport. Screen coordinates (u, v) in [0, 1] map to the
    point lower_left + u*horizontal + v*vertical on the image plane.
    """
    def __init__(self, origin: Vec3 = DEFAULT_ORIGIN,
                 lower_left_corner: Vec3 = DEFAULT_LOWER_LEFT,
                 horizontal: Vec3 = DEFAULT_HORIZONTAL,
                 vertical: Vec3 = DEFAULT_VERTICAL):
        self.origin = origin
        self.lower_left_corner = lower_left_corner
        self.horizontal = horizontal
        self.vertical = vertical

    def get_ray(self, u: float, v: float, time: float = 0.0) -> Ray:
        """Ray from the origin through the image-plane point at (u, v)."""
        direction = (self.lower_left_corner +
                     u * self.horizontal +
                     v * self.vertical -
                     self.origin)
        return Ray(self.origin, direction, time)

    def __repr__(self) -> str:
        return (f"Viewport(origin={self.origin}, lower_left={self.lower_left_corner}, "
                f"horizontal={self.horizontal}, vertical={self.vertical})")
