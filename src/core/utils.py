# core/utils.py
from core.vector import Vec3


def reflect(v: Vec3, n: Vec3) -> Vec3:
    """
    Reflects vector v about the normal n.
    """
    return v - 2.0 * v.dot(n) * n
