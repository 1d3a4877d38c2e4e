# core/vector.py
import math
import random


def fdiv(a: float, b: float) -> float:
    """
    Float division that follows IEEE-754 for a zero divisor instead of raising:
    x/0 gives a signed infinity and 0/0 gives NaN.
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Vec3:
    """
    An immutable value in R3. It is used both as a cartesian vector and as an
    RGB color, so x/y/z and r/g/b read the same three components.

    Arithmetic never mutates; every operation returns a new Vec3.
    """
    __slots__ = ("e0", "e1", "e2")

    def __init__(self, e0: float, e1: float, e2: float):
        object.__setattr__(self, "e0", float(e0))
        object.__setattr__(self, "e1", float(e1))
        object.__setattr__(self, "e2", float(e2))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vec3 is immutable")

    @property
    def x(self) -> float:
        return self.e0

    @property
    def y(self) -> float:
        return self.e1

    @property
    def z(self) -> float:
        return self.e2

    @property
    def r(self) -> float:
        return self.e0

    @property
    def g(self) -> float:
        return self.e1

    @property
    def b(self) -> float:
        return self.e2

    def __iter__(self):
        yield self.e0
        yield self.e1
        yield self.e2

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.e0 + other.e0, self.e1 + other.e1, self.e2 + other.e2)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.e0 - other.e0, self.e1 - other.e1, self.e2 - other.e2)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vec3(self.e0 * other, self.e1 * other, self.e2 * other)
        if isinstance(other, Vec3):
            return Vec3(self.e0 * other.e0, self.e1 * other.e1, self.e2 * other.e2)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vec3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            # Reciprocal multiply, so a zero divisor yields inf/NaN components.
            inv = fdiv(1.0, other)
            return Vec3(self.e0 * inv, self.e1 * inv, self.e2 * inv)
        if isinstance(other, Vec3):
            return Vec3(fdiv(self.e0, other.e0),
                        fdiv(self.e1, other.e1),
                        fdiv(self.e2, other.e2))
        return NotImplemented

    def __neg__(self) -> "Vec3":
        return Vec3(-self.e0, -self.e1, -self.e2)

    def dot(self, other: "Vec3") -> float:
        return self.e0 * other.e0 + self.e1 * other.e1 + self.e2 * other.e2

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.e1 * other.e2 - self.e2 * other.e1,
            self.e2 * other.e0 - self.e0 * other.e2,
            self.e0 * other.e1 - self.e1 * other.e0
        )

    def lensq(self) -> float:
        """Squared length, for comparisons that do not need the square root."""
        return self.e0 * self.e0 + self.e1 * self.e1 + self.e2 * self.e2

    def length(self) -> float:
        return math.sqrt(self.lensq())

    def unit(self) -> "Vec3":
        # No guard for the zero vector: the result is NaN in every component.
        return self / self.length()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.e0 == other.e0 and self.e1 == other.e1 and self.e2 == other.e2

    def __hash__(self) -> int:
        return hash((self.e0, self.e1, self.e2))

    def __repr__(self) -> str:
        return f"Vec3({self.e0}, {self.e1}, {self.e2})"

    def __str__(self) -> str:
        return f"({self.e0:.2f}, {self.e1:.2f}, {self.e2:.2f})"


ZERO = Vec3(0.0, 0.0, 0.0)
ONES = Vec3(1.0, 1.0, 1.0)


def add(*vs: Vec3) -> Vec3:
    """Sum of any number of vectors, starting from ZERO."""
    e0 = e1 = e2 = 0.0
    for v in vs:
        e0 += v.e0
        e1 += v.e1
        e2 += v.e2
    return Vec3(e0, e1, e2)


def sub(u: Vec3, *vs: Vec3) -> Vec3:
    """Subtracts every vector in vs from u, left to right."""
    e0, e1, e2 = u.e0, u.e1, u.e2
    for v in vs:
        e0 -= v.e0
        e1 -= v.e1
        e2 -= v.e2
    return Vec3(e0, e1, e2)


def mul(*args) -> Vec3:
    """
    Element-wise product of the given vectors, starting from ONES.
    A leading scalar scales the product: mul(t, u, v) == t * (u * v).
    """
    t = None
    if args and isinstance(args[0], (int, float)):
        t, args = args[0], args[1:]
    e0 = e1 = e2 = 1.0
    for v in args:
        e0 *= v.e0
        e1 *= v.e1
        e2 *= v.e2
    if t is not None:
        return Vec3(e0 * t, e1 * t, e2 * t)
    return Vec3(e0, e1, e2)


def div(u: Vec3, v) -> Vec3:
    """Element-wise division by a vector, or reciprocal-multiply by a scalar."""
    return u / v


def neg(v: Vec3) -> Vec3:
    return -v


def dot(u: Vec3, v: Vec3) -> float:
    return u.dot(v)


def cross(u: Vec3, v: Vec3) -> Vec3:
    return u.cross(v)


def length(u: Vec3) -> float:
    return u.length()


def lensq(u: Vec3) -> float:
    return u.lensq()


def unit(u: Vec3) -> Vec3:
    return u.unit()


def rvius(rng: random.Random) -> Vec3:
    """
    Random vector in the unit sphere. Points are drawn from the cube [-1, 1)^3
    and rejected until one falls strictly inside the sphere.
    """
    while True:
        p = Vec3(2.0 * rng.random() - 1.0,
                 2.0 * rng.random() - 1.0,
                 2.0 * rng.random() - 1.0)
        if p.lensq() < 1.0:
            return p
