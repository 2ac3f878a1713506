import pytest

from coherentnoise.core.module.base import Module


class ConstModule(Module):
    """Returns a fixed value everywhere."""

    source_module_count = 0

    def __init__(self, value: float = 0.0):
        super().__init__()
        self.value = value

    def get_value(self, x: float, y: float) -> float:
        return self.value


class PlaneField(Module):
    """Linear field a*x + b*y, handy for checking coordinate transforms."""

    source_module_count = 0

    def __init__(self, a: float = 1.0, b: float = 0.0):
        super().__init__()
        self.a = a
        self.b = b

    def get_value(self, x: float, y: float) -> float:
        return self.a * x + self.b * y


@pytest.fixture
def const_module():
    return ConstModule


@pytest.fixture
def plane_field():
    return PlaneField
