import numpy as np
import pytest

from coherentnoise.core.exceptions import InvalidParameterError, NoiseOutOfMemoryError
from coherentnoise.raster import buffer as buffer_module
from coherentnoise.raster.buffer import Image, NoiseMap
from coherentnoise.raster.color import Color


def test_new_noise_map_is_empty():
    noise_map = NoiseMap()
    assert (noise_map.width, noise_map.height, noise_map.mem_used) == (0, 0, 0)
    assert noise_map.get_value(0, 0) == 0.0
    assert noise_map.as_array().shape == (0, 0)


def test_border_value_outside_bounds():
    noise_map = NoiseMap(4, 4)
    noise_map.border_value = -1.0
    assert noise_map.get_value(-1, 0) == -1.0
    assert noise_map.get_value(4, 0) == -1.0
    assert noise_map.get_value(0, 4) == -1.0


def test_set_and_get_value_row_major():
    noise_map = NoiseMap(3, 2)
    noise_map.set_value(2, 1, 0.5)
    noise_map.set_value(3, 1, 9.0)  # ignored
    noise_map.set_value(-1, 0, 9.0)  # ignored
    assert noise_map.get_value(2, 1) == 0.5
    assert noise_map.as_array().shape == (2, 3)
    assert noise_map.as_array()[1, 2] == np.float32(0.5)
    assert 9.0 not in noise_map.as_array()


def test_clear():
    noise_map = NoiseMap(5, 5)
    noise_map.clear(0.25)
    assert np.all(noise_map.as_array() == np.float32(0.25))


@pytest.mark.parametrize("size", [(-1, 4), (4, -1), (32768, 1), (1, 32768)])
def test_invalid_size(size):
    noise_map = NoiseMap(2, 2)
    with pytest.raises(InvalidParameterError):
        noise_map.set_size(*size)
    assert (noise_map.width, noise_map.height) == (2, 2)


def test_zero_size_releases_storage():
    noise_map = NoiseMap(8, 8)
    noise_map.set_size(0, 8)
    assert (noise_map.width, noise_map.height, noise_map.mem_used) == (0, 0, 0)


def test_shrinking_reuses_capacity_and_reclaim_releases_it():
    noise_map = NoiseMap(8, 8)
    noise_map.set_size(4, 4)
    assert noise_map.mem_used == 64
    noise_map.set_size(8, 8)
    assert noise_map.mem_used == 64
    noise_map.set_size(2, 3)
    noise_map.reclaim_mem()
    assert noise_map.mem_used == 6


def test_growing_reallocates():
    noise_map = NoiseMap(2, 2)
    noise_map.set_size(10, 10)
    assert noise_map.mem_used == 100


def test_allocation_failure_keeps_previous_contents(monkeypatch):
    noise_map = NoiseMap(2, 2)
    noise_map.set_value(1, 1, 3.0)

    def _fail(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(buffer_module.np, "zeros", _fail)
    with pytest.raises(NoiseOutOfMemoryError):
        noise_map.set_size(100, 100)
    monkeypatch.undo()

    assert (noise_map.width, noise_map.height) == (2, 2)
    assert noise_map.get_value(1, 1) == 3.0


def test_copy_is_independent():
    noise_map = NoiseMap(3, 3)
    noise_map.border_value = -7.0
    noise_map.set_value(0, 0, 1.5)
    duplicate = noise_map.copy()
    noise_map.set_value(0, 0, 2.5)
    assert duplicate.get_value(0, 0) == 1.5
    assert duplicate.border_value == -7.0
    assert (duplicate.width, duplicate.height) == (3, 3)


def test_take_ownership_moves_storage():
    source = NoiseMap(4, 2)
    source.set_value(3, 1, 0.75)
    dest = NoiseMap(10, 10)
    dest.take_ownership(source)
    assert (dest.width, dest.height, dest.mem_used) == (4, 2, 8)
    assert dest.get_value(3, 1) == 0.75
    assert (source.width, source.height, source.mem_used) == (0, 0, 0)
    assert source.get_value(3, 1) == source.border_value


def test_take_ownership_of_itself_keeps_storage():
    noise_map = NoiseMap(3, 2)
    noise_map.set_value(2, 1, 0.25)
    noise_map.take_ownership(noise_map)
    assert (noise_map.width, noise_map.height) == (3, 2)
    assert noise_map.get_value(2, 1) == 0.25


def test_image_cells_are_colors():
    image = Image(2, 2)
    assert image.border_value == Color(0, 0, 0, 0)
    assert image.get_value(5, 5) == Color(0, 0, 0, 0)
    image.clear(Color(1, 2, 3, 4))
    image.set_value(1, 0, Color(200, 100, 50))
    assert image.get_value(0, 0) == Color(1, 2, 3, 4)
    assert image.get_value(1, 0) == Color(200, 100, 50, 255)
    assert image.as_array().shape == (2, 2, 4)
    assert image.as_array().dtype == np.uint8


def test_image_accepts_plain_tuples():
    image = Image(2, 1)
    image.clear((5, 6, 7, 8))
    image.set_value(0, 0, (10, 20, 30, 40))
    assert image.get_value(0, 0) == Color(10, 20, 30, 40)
    assert image.get_value(1, 0) == Color(5, 6, 7, 8)
    with pytest.raises(ValueError):
        image.set_value(1, 0, (1, 2, 3))
