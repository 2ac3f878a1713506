from __future__ import annotations

import math

from coherentnoise.core.constants import (
    DEG_TO_RAD,
    DEFAULT_ROTATE_X,
    DEFAULT_ROTATE_Y,
    DEFAULT_ROTATE_Z,
)

from .base import Module, register_module_type


class RotatePoint(Module):
    """Rotates the input point by Euler angles (degrees) before evaluating the source."""

    source_module_count = 1

    def __init__(self):
        super().__init__()
        self.set_angles(DEFAULT_ROTATE_X, DEFAULT_ROTATE_Y, DEFAULT_ROTATE_Z)

    @property
    def x_angle(self) -> float:
        return self._x_angle

    @x_angle.setter
    def x_angle(self, value: float) -> None:
        self.set_angles(value, self._y_angle, self._z_angle)

    @property
    def y_angle(self) -> float:
        return self._y_angle

    @y_angle.setter
    def y_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, value, self._z_angle)

    @property
    def z_angle(self) -> float:
        return self._z_angle

    @z_angle.setter
    def z_angle(self, value: float) -> None:
        self.set_angles(self._x_angle, self._y_angle, value)

    @property
    def angles(self) -> tuple[float, float, float]:
        return self._x_angle, self._y_angle, self._z_angle

    @angles.setter
    def angles(self, value) -> None:
        x_angle, y_angle, z_angle = value
        self.set_angles(x_angle, y_angle, z_angle)

    @property
    def matrix(self) -> tuple[tuple[float, float, float], ...]:
        return (
            (self._x1_matrix, self._y1_matrix, self._z1_matrix),
            (self._x2_matrix, self._y2_matrix, self._z2_matrix),
            (self._x3_matrix, self._y3_matrix, self._z3_matrix),
        )

    def set_angles(self, x_angle: float, y_angle: float, z_angle: float) -> None:
        x_cos = math.cos(x_angle * DEG_TO_RAD)
        y_cos = math.cos(y_angle * DEG_TO_RAD)
        z_cos = math.cos(z_angle * DEG_TO_RAD)
        x_sin = math.sin(x_angle * DEG_TO_RAD)
        y_sin = math.sin(y_angle * DEG_TO_RAD)
        z_sin = math.sin(z_angle * DEG_TO_RAD)

        self._x1_matrix = y_sin * x_sin * z_sin + y_cos * z_cos
        self._y1_matrix = x_cos * z_sin
        self._z1_matrix = y_sin * z_cos - y_cos * x_sin * z_sin
        self._x2_matrix = y_sin * x_sin * z_cos - y_cos * z_sin
        self._y2_matrix = x_cos * z_cos
        self._z2_matrix = -y_cos * x_sin * z_cos - y_sin * z_sin
        self._x3_matrix = -y_sin * x_cos
        self._y3_matrix = x_sin
        self._z3_matrix = y_cos * x_cos

        self._x_angle = float(x_angle)
        self._y_angle = float(y_angle)
        self._z_angle = float(z_angle)

    def get_value(self, x: float, y: float) -> float:
        source = self.get_source_module(0)
        nx = (self._x1_matrix * x) + (self._y1_matrix * y)
        ny = (self._x2_matrix * x) + (self._y2_matrix * y)
        return source.get_value(nx, ny)


register_module_type("rotate_point", RotatePoint)
