"""Differentiable scalar and planar parametric functions."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathmotion.math.vector import Derivatives, Vector2d, VectorDerivatives


class MathFunction(ABC):
    """Scalar function of a free parameter with derivatives up to third order."""

    @abstractmethod
    def __call__(self, t: float) -> float:
        """Evaluate the function.

        Args:
            t: Free parameter.

        Returns:
            Function value.
        """

    @abstractmethod
    def deriv(self, t: float) -> float:
        """Evaluate the first derivative.

        Args:
            t: Free parameter.

        Returns:
            First derivative.
        """

    @abstractmethod
    def second_deriv(self, t: float) -> float:
        """Evaluate the second derivative.

        Args:
            t: Free parameter.

        Returns:
            Second derivative.
        """

    @abstractmethod
    def third_deriv(self, t: float) -> float:
        """Evaluate the third derivative.

        Args:
            t: Free parameter.

        Returns:
            Third derivative.
        """


class VectorFunction(ABC):
    """Planar parametric function ``r(t)``, C2 continuous on ``t in [0, 1]``."""

    @abstractmethod
    def value(self, t: float) -> Vector2d:
        """Evaluate ``r(t)``.

        Args:
            t: Free parameter.

        Returns:
            Position.
        """

    @abstractmethod
    def deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'(t)``.

        Args:
            t: Free parameter.

        Returns:
            First derivative.
        """

    @abstractmethod
    def second_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Second derivative.
        """

    @abstractmethod
    def third_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Third derivative.
        """

    def curvature(self, t: float) -> float:
        """Signed curvature ``(r' x r'') / |r'|^3``.

        Args:
            t: Free parameter.

        Returns:
            Curvature [1/length]; NaN where the speed ``|r'|`` is zero.
        """
        velocity = self.deriv(t)
        speed = velocity.length
        if speed == 0.0:
            return math.nan
        return velocity.cross(self.second_deriv(t)) / speed**3

    def curvature_deriv(self, t: float) -> float:
        """Derivative of curvature with respect to ``t`` (not arc length).

        Args:
            t: Free parameter.

        Returns:
            ``dk/dt``; NaN where the speed ``|r'|`` is zero.
        """
        velocity = self.deriv(t)
        accel = self.second_deriv(t)
        speed = velocity.length
        if speed == 0.0:
            return math.nan
        return (
            velocity.cross(self.third_deriv(t)) / speed**3
            - 3.0 * velocity.cross(accel) * velocity.dot(accel) / speed**5
        )


@dataclass(frozen=True)
class QuinticPolynomial(MathFunction):
    """Quintic polynomial ``a t^5 + b t^4 + c t^3 + d t^2 + e t + f``.

    Args:
        a: Fifth-order coefficient.
        b: Fourth-order coefficient.
        c: Third-order coefficient.
        d: Second-order coefficient.
        e: First-order coefficient.
        f: Constant term.
    """

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def __call__(self, t: float) -> float:
        """Evaluate with Horner's scheme.

        Args:
            t: Free parameter.

        Returns:
            Polynomial value.
        """
        return ((((self.a * t + self.b) * t + self.c) * t + self.d) * t + self.e) * t + self.f

    def deriv(self, t: float) -> float:
        """Evaluate the first derivative.

        Args:
            t: Free parameter.

        Returns:
            First derivative.
        """
        return (((5 * self.a * t + 4 * self.b) * t + 3 * self.c) * t + 2 * self.d) * t + self.e

    def second_deriv(self, t: float) -> float:
        """Evaluate the second derivative.

        Args:
            t: Free parameter.

        Returns:
            Second derivative.
        """
        return ((20 * self.a * t + 12 * self.b) * t + 6 * self.c) * t + 2 * self.d

    def third_deriv(self, t: float) -> float:
        """Evaluate the third derivative.

        Args:
            t: Free parameter.

        Returns:
            Third derivative.
        """
        return (60 * self.a * t + 24 * self.b) * t + 6 * self.c

    @classmethod
    def from_derivatives(cls, start: Derivatives, end: Derivatives) -> QuinticPolynomial:
        """Fit the quintic matching value, first and second derivatives at both ends.

        Args:
            start: Value and derivatives at ``t = 0``.
            end: Value and derivatives at ``t = 1``.

        Returns:
            The unique matching quintic.
        """
        p0, v0, a0 = start.value, start.deriv, start.second_deriv
        p1, v1, a1 = end.value, end.deriv, end.second_deriv
        return cls(
            a=-6 * p0 - 3 * v0 - 0.5 * a0 + 6 * p1 - 3 * v1 + 0.5 * a1,
            b=15 * p0 + 8 * v0 + 1.5 * a0 - 15 * p1 + 7 * v1 - a1,
            c=-10 * p0 - 6 * v0 - 1.5 * a0 + 10 * p1 - 4 * v1 + 0.5 * a1,
            d=0.5 * a0,
            e=v0,
            f=p0,
        )


@dataclass(frozen=True)
class ComponentVectorFunction(VectorFunction):
    """Vector function assembled from independent x and y scalar functions.

    Args:
        x: Function for the x-component.
        y: Function for the y-component.
    """

    x: MathFunction
    y: MathFunction

    def value(self, t: float) -> Vector2d:
        """Evaluate ``r(t)``.

        Args:
            t: Free parameter.

        Returns:
            Position.
        """
        return Vector2d(self.x(t), self.y(t))

    def deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'(t)``.

        Args:
            t: Free parameter.

        Returns:
            First derivative.
        """
        return Vector2d(self.x.deriv(t), self.y.deriv(t))

    def second_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Second derivative.
        """
        return Vector2d(self.x.second_deriv(t), self.y.second_deriv(t))

    def third_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Third derivative.
        """
        return Vector2d(self.x.third_deriv(t), self.y.third_deriv(t))


class QuinticSpline(ComponentVectorFunction):
    """Planar quintic Hermite spline segment."""

    @classmethod
    def from_derivatives(cls, start: VectorDerivatives, end: VectorDerivatives) -> QuinticSpline:
        """Build a spline matching position and two derivatives at both ends.

        Args:
            start: Position and derivatives at ``t = 0``.
            end: Position and derivatives at ``t = 1``.

        Returns:
            Spline segment through both endpoints.
        """
        return cls(
            x=QuinticPolynomial.from_derivatives(start.x, end.x),
            y=QuinticPolynomial.from_derivatives(start.y, end.y),
        )
