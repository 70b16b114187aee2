#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math


class Vec3:
    """Immutable 3-component vector."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __repr__(self):
        return f"Vec3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        if index == 2: return self.z
        raise IndexError("Vec3 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar):
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vec3':
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> 'Vec3':
        m = self.magnitude()
        if m == 0:
            return Vec3(0, 0, 0)
        return self / m

    @classmethod
    def of(cls, value) -> 'Vec3':
        """Coerce a Vec3 or any (x, y, z) sequence to a Vec3."""
        if isinstance(value, Vec3):
            return value
        x, y, z = value
        return cls(x, y, z)


class Vec2:
    """Immutable 2-component vector (a projected screen point)."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("Vec2 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)


ORIGIN = Vec3(0.0, 0.0, 0.0)


def difference(a: Vec3, b: Vec3) -> Vec3:
    """Vector pointing from a to b."""
    return b - a


def midpoint(a: Vec3, b: Vec3) -> Vec3:
    return Vec3((a.x + b.x) / 2.0, (a.y + b.y) / 2.0, (a.z + b.z) / 2.0)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation; t=0 gives a, t=1 gives b."""
    return Vec3(a.x + (b.x - a.x) * t,
                a.y + (b.y - a.y) * t,
                a.z + (b.z - a.z) * t)


def length(v: Vec3) -> float:
    return v.magnitude()


def degrees_to_radians(deg: float) -> float:
    return deg * math.pi / 180.0


def radians_to_degrees(rad: float) -> float:
    return rad * 180.0 / math.pi


class Mat3:
    """3x3 rotation matrix, [row][col] storage."""
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = tuple(tuple(float(v) for v in row) for row in data)
        else:
            self.m = ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))

    def __repr__(self):
        return f"Mat3({self.m!r})"

    def __eq__(self, other):
        if isinstance(other, Mat3):
            return self.m == other.m
        return NotImplemented

    def __hash__(self):
        return hash(self.m)

    @classmethod
    def identity(cls) -> 'Mat3':
        return cls(((1.0, 0.0, 0.0),
                    (0.0, 1.0, 0.0),
                    (0.0, 0.0, 1.0)))

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((1.0, 0.0, 0.0),
                    (0.0, c, -s),
                    (0.0, s, c)))

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((c, 0.0, s),
                    (0.0, 1.0, 0.0),
                    (-s, 0.0, c)))

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        c = math.cos(rad)
        s = math.sin(rad)
        return cls(((c, -s, 0.0),
                    (s, c, 0.0),
                    (0.0, 0.0, 1.0)))

    @classmethod
    def rotation(cls, roll: float, pitch: float, yaw: float) -> 'Mat3':
        """Tait-Bryan composition Rz(yaw) @ Ry(pitch) @ Rx(roll), written out."""
        sina, cosa = math.sin(yaw), math.cos(yaw)
        sinb, cosb = math.sin(pitch), math.cos(pitch)
        sing, cosg = math.sin(roll), math.cos(roll)
        return cls((
            (cosa * cosb,
             cosa * sinb * sing - sina * cosg,
             cosa * sinb * cosg + sina * sing),
            (sina * cosb,
             sina * sinb * sing + cosa * cosg,
             sina * sinb * cosg - cosa * sing),
            (-sinb,
             cosb * sing,
             cosb * cosg),
        ))

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            a, b = self.m, other.m
            return Mat3(tuple(
                tuple(sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3))
                for r in range(3)
            ))
        return NotImplemented

    def mul_vec3(self, v: Vec3) -> Vec3:
        m = self.m
        return Vec3(m[0][0]*v.x + m[0][1]*v.y + m[0][2]*v.z,
                    m[1][0]*v.x + m[1][1]*v.y + m[1][2]*v.z,
                    m[2][0]*v.x + m[2][1]*v.y + m[2][2]*v.z)
