"""
Geometric methods for vectors.

Intended to be used as a mix-in on ``Vector``. Methods that only make
sense in the plane (``rotate``, the direction forms of ``angle`` and
``signed_angle``) require a 2-component vector and raise DimensionError
otherwise.

Degenerate inputs do not raise: ``angle`` returns 0 for a zero-length
vector, ``refract`` returns a zero vector on total internal reflection,
and ``normalize`` of a zero vector propagates NaN like IEEE division.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from geode.core.arithmetic import exact_sum, checked, wrapping, wrapping_sum
from geode.core.exceptions import DimensionError
from geode.core.protocols import AngleLike
from geode.core.tolerances import ANGLE_EPSILON


class VectorGeometry:
    """Magnitude, direction and surface interaction."""

    __slots__ = ()

    def mag(self) -> Any:
        """
        Magnitude (length) of this vector.
        
        ```
        Vector([3, 4]).mag()  # => 5.0
        ```
        """
        return np.sqrt(self.mag2())

    def mag2(self) -> Any:
        """
        Magnitude squared, the sum of ``abs2`` of the components.
        
        Avoids the square root, so it is exact for integer vectors.
        
        ```
        Vector([3, 4]).mag2()  # => 25
        ```
        """
        return exact_sum(self.abs2()._data, name="mag2")

    def length(self) -> Any:
        """Same as ``mag``."""
        return self.mag()

    def normalize(self):
        """
        Unit vector pointing the same way.
        
        A zero vector has no direction; the result is then NaN in every
        component and checking for that is the caller's responsibility.
        """
        return self / self.mag()

    def scale_to(self, length: Any):
        """
        Vector pointing the same way with the given magnitude.
        
        ```
        Vector([1, 0, -1]).scale_to(2).mag()  # => 2.0
        ```
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            factor = length / self.mag()
        return self * factor

    def dot(self, other: Any) -> Any:
        """
        Dot product of this vector and another of the same size.
        
        ```
        Vector([2, 5, 7]).dot(Vector([1, 0, -5]))  # => -33
        ```
        """
        other_data = self._same_shape_data(other, "dot")
        product = checked(np.multiply, self._data, other_data, name="dot")
        return exact_sum(product, name="dot")

    def dot_wrapping(self, other: Any) -> Any:
        """Dot product where integer overflow wraps instead of raising."""
        other_data = self._same_shape_data(other, "dot_wrapping")
        return wrapping_sum(wrapping(np.multiply, self._data, other_data))

    def angle(self, other: Any = None) -> float:
        """
        Angle of this vector, or the angle between two vectors.
        
        Without *other* the vector must have two components, and the result
        is its direction measured counter-clockwise from the positive x-axis,
        in ``[0, 2π)``.
        
        With *other* the result is the unsigned angle between the two
        vectors, in ``[0, π]``. If either vector has zero length the angle
        is 0.
        """
        if other is None:
            self._require_planar("angle")
            theta = math.atan2(float(self._data[1]), float(self._data[0]))
            if theta < 0:
                theta += 2 * math.pi
            if theta >= 2 * math.pi:
                theta = 0.0
            return theta

        self._same_shape_data(other, "angle")
        denominator = math.sqrt(float(self.mag2()) * float(other.mag2()))
        if denominator <= ANGLE_EPSILON:
            return 0.0
        cosine = float(self.dot(other)) / denominator
        return math.acos(min(1.0, max(-1.0, cosine)))

    def signed_angle(self, other: Any = None) -> float:
        """
        Signed direction of this 2-component vector, or the signed angle
        from this vector to *other*.
        
        Positive values are counter-clockwise. The result lies in ``(-π, π]``.
        """
        self._require_planar("signed_angle")
        x1, y1 = (float(v) for v in self._data)
        if other is None:
            theta = math.atan2(y1, x1)
        else:
            other_data = self._same_shape_data(other, "signed_angle")
            x2, y2 = (float(v) for v in other_data)
            theta = math.atan2(x1 * y2 - y1 * x2, x1 * x2 + y1 * y2)
        return math.pi if theta <= -math.pi else theta

    def rotate(self, angle: Any):
        """
        Rotate this 2-component vector counter-clockwise.
        
        Args:
            angle: Radians as a plain number, or any angle object with a
                ``to_radians()`` method
        """
        from geode.matrices.matrix import Matrix

        self._require_planar("rotate")
        radians = float(angle.to_radians()) if isinstance(angle, AngleLike) else float(angle)
        cos, sin = math.cos(radians), math.sin(radians)
        rotation = Matrix([[cos, -sin], [sin, cos]])
        return rotation * self

    def project(self, onto: Any):
        """
        Projection of this vector onto another.
        
        Computed as ``onto * (dot(self, onto) / mag2(onto))``.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            factor = np.true_divide(self.dot(onto), onto.mag2())
        return onto * factor

    def forward(self, surface: Any):
        """
        This vector, flipped if needed to face the same side as *surface*.
        
        Returns this vector when ``dot(self, surface) >= 0``, otherwise its
        negation.
        """
        return self if self.dot(surface) >= 0 else -self

    def reflect(self, surface: Any):
        """
        Reflect this vector off a surface with the given normal.
        
        The normal does not need to be unit length.
        
        ```
        Vector([2, -1]).reflect(Vector([0, 1]))  # => (2.0, 1.0)
        ```
        """
        normal = surface.normalize()
        return self - normal * (2 * self.dot(normal))

    def refract(self, surface: Any, eta: float):
        """
        Refract this vector through a surface with the given normal.
        
        *eta* is the ratio of the indices of refraction. On total internal
        reflection (negative discriminant) a zero vector is returned.
        
        ```
        Vector([2, -1]).refract(Vector([0, 1]), 1.5)  # => (3.0, -1.0)
        ```
        """
        normal = surface.normalize()
        d = float(normal.dot(self))
        k = 1.0 - eta * eta * (1.0 - d * d)
        if k < 0:
            dtype = np.result_type(self._data, normal._data, float)
            return type(self).zero(self.size, dtype=dtype)
        return self * eta - normal * (eta * d + math.sqrt(k))

    def _require_planar(self, operation: str) -> None:
        if self.size != 2:
            raise DimensionError(
                f"{operation} requires a 2-component vector (got {self.size})",
                expected=(2,),
                actual=self.shape,
            )
