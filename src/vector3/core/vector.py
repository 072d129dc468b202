import math
from typing import Iterator

from . import utils

__all__ = ["Vector3", "parse_vector"]


class Vector3:
    """Mutable three component vector of floats.

    Methods return a new vector unless prefixed with `m` (`madd`, `msub`,
    `mmul`, `mdiv`), which write the result into the vector itself and
    return it for chaining. Numeric edge cases are never raised but
    resolved to IEEE-754 special values (`inf`, `nan`).

    Ordering (`lt`, `lte`, `gt`, `gte`) compares magnitudes only, vectors
    of same length but different direction satisfy both `lte` and `gte`.
    """

    __slots__ = ("x", "y", "z")

    __hash__ = None  # mutable

    def __init__(
        self,
        x: "Vector3 | float | None" = None,
        y: float | None = None,
        z: float | None = None,
    ) -> None:
        self.x: float = 0.0
        self.y: float = 0.0
        self.z: float = 0.0
        self.set(x, y, z)

    @classmethod
    def from_scalar(cls, value: float) -> "Vector3":
        """Return uniform vector with all components set to `value`."""
        return cls(value, value, value)

    @classmethod
    def from_components(cls, x: float, y: float, z: float) -> "Vector3":
        return cls(x, y, z)

    @classmethod
    def from_vector(cls, other: "Vector3") -> "Vector3":
        return cls(other.x, other.y, other.z)

    def set(
        self,
        x: "Vector3 | float | None" = None,
        y: float | None = None,
        z: float | None = None,
    ) -> "Vector3":
        """Assign components, returns self.

        Accepts another vector (copied), a single scalar (uniform vector),
        two scalars (`x` and shared `y`, `z`) or three scalars. A missing
        or falsy single argument (`None`, zero, NaN) sets all components to
        zero, a `None` for `x` next to other scalars is taken as zero.
        """
        if isinstance(x, Vector3):
            self.x = x.x
            self.y = x.y
            self.z = x.z
        elif y is None:
            value = float(x or 0)
            if math.isnan(value):
                value = 0.0
            self.x = self.y = self.z = value
        elif z is None:
            self.x = float(x or 0)
            self.y = self.z = float(y)
        else:
            self.x = float(x or 0)
            self.y = float(y)
            self.z = float(z)
        return self

    def clone(self) -> "Vector3":
        return Vector3(self)

    def copy_to(self, other: "Vector3") -> "Vector3":
        """Copy components into `other`, returns `other`."""
        other.x = self.x
        other.y = self.y
        other.z = self.z
        return other

    # Arithmetic

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def madd(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def sub(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def msub(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def mul(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def mmul(self, other: "Vector3") -> "Vector3":
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        return self

    def div(self, other: "Vector3") -> "Vector3":
        return Vector3(
            utils.divide(self.x, other.x),
            utils.divide(self.y, other.y),
            utils.divide(self.z, other.z),
        )

    def mdiv(self, other: "Vector3") -> "Vector3":
        self.x = utils.divide(self.x, other.x)
        self.y = utils.divide(self.y, other.y)
        self.z = utils.divide(self.z, other.z)
        return self

    # Geometry

    def dot(self, other: "Vector3 | None" = None) -> float:
        """Dot product, with itself if `other` is omitted."""
        if other is None:
            other = self
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def mag(self) -> float:
        return math.sqrt(self.dot())

    def normalize(self) -> "Vector3":
        """Return unit vector, all NaN for a zero vector."""
        return self.div(Vector3(self.mag()))

    def distance(self, other: "Vector3") -> float:
        return other.sub(self).mag()

    def theta(self) -> float:
        """Azimuth angle in the x-z plane in radians."""
        return math.atan2(self.z, self.x)

    def phi(self) -> float:
        """Elevation angle in radians, NaN for a zero vector."""
        return utils.asin(utils.divide(self.y, self.mag()))

    def angle(self, other: "Vector3") -> float:
        """Angle between both directions in radians.

        The cosine is not clamped, nearly parallel vectors can overshoot
        [-1, 1] by rounding and return NaN.
        """
        return utils.acos(self.normalize().dot(other.normalize()))

    def scale(self, value: float) -> "Vector3":
        """Return vector of same direction with magnitude `value`."""
        mag = self.mag()
        return Vector3(
            utils.divide(self.x * value, mag),
            utils.divide(self.y * value, mag),
            utils.divide(self.z * value, mag),
        )

    def abs(self) -> "Vector3":
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def neg(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def lerp(self, other: "Vector3", amount: float) -> "Vector3":
        """Linear interpolation, `amount` outside [0, 1] extrapolates."""
        return self.add(other.sub(self).mul(Vector3(amount)))

    def round(self) -> "Vector3":
        """Round components, ties toward positive infinity."""
        return Vector3(
            utils.round_half_up(self.x),
            utils.round_half_up(self.y),
            utils.round_half_up(self.z),
        )

    # Comparison

    def equals(self, other: "Vector3") -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def lt(self, other: "Vector3") -> bool:
        return self.mag() < other.mag()

    def lte(self, other: "Vector3") -> bool:
        return self.mag() <= other.mag()

    def gt(self, other: "Vector3") -> bool:
        return self.mag() > other.mag()

    def gte(self, other: "Vector3") -> bool:
        return self.mag() >= other.mag()

    # Rendering

    def to_string(self) -> str:
        return ",".join(utils.format_number(value) for value in self)

    def to_fixed(self, digits: int) -> str:
        return ",".join(utils.format_fixed(value, digits) for value in self)

    def inspect(self) -> str:
        x, y, z = (utils.format_number(value) for value in self)
        return f"<Vector3D x: {x} y: {y} z: {z}>"

    # Python protocol

    def __iter__(self) -> Iterator[float]:
        return iter([self.x, self.y, self.z])

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return self.inspect()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def __neg__(self) -> "Vector3":
        return self.neg()

    def __abs__(self) -> "Vector3":
        return self.abs()

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.madd(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.msub(other)

    def __mul__(self, other: "Vector3 | float") -> "Vector3":
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __imul__(self, other: "Vector3 | float") -> "Vector3":
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.mmul(other)

    def __truediv__(self, other: "Vector3 | float") -> "Vector3":
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __itruediv__(self, other: "Vector3 | float") -> "Vector3":
        other = _as_operand(other)
        if other is None:
            return NotImplemented
        return self.mdiv(other)


def _as_operand(value) -> Vector3 | None:
    if isinstance(value, Vector3):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Vector3.from_scalar(value)
    return None


def parse_vector(text: str) -> Vector3:
    """Parse vector from its string form `x,y,z`.

    One or two components are expanded like the constructor does, `5` is
    `5,5,5` and `1,2` is `1,2,2`.
    """
    parts = [part.strip() for part in text.split(",")]
    if not 1 <= len(parts) <= 3:
        raise ValueError(f"Invalid vector: {text!r}")
    try:
        values = [float(part) for part in parts]
    except ValueError as exc:
        raise ValueError(f"Invalid vector: {text!r}") from exc
    return Vector3(*values)
