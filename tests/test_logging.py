import logging

import pytest

from coherentnoise.core.module.perlin import Perlin
from coherentnoise.raster.buffer import NoiseMap
from coherentnoise.raster.builder import NoiseMapBuilderPlane
from coherentnoise.utils.logging import (
    current_label,
    parse_log_level,
    resolve_log_level,
    set_command_context,
)


def test_resolve_log_level_precedence():
    assert resolve_log_level(False, False) == "warning"
    assert resolve_log_level(True, False) == "info"
    assert resolve_log_level(True, True) == "debug"
    assert resolve_log_level(False, True, "ERROR") == "error"


def test_parse_log_level_rejects_unknown_names():
    assert parse_log_level("Info") == logging.INFO
    with pytest.raises(ValueError):
        parse_log_level("chatty")


def test_command_context_includes_graph_root():
    set_command_context("render", root="terrain")
    assert current_label() == "render:terrain"
    set_command_context("modules")
    assert current_label() == "modules"


def test_build_emits_timed_record(caplog):
    builder = NoiseMapBuilderPlane()
    builder.set_source_module(Perlin())
    builder.set_dest_noise_map(NoiseMap())
    builder.set_dest_size(4, 3)
    with caplog.at_level(logging.INFO, logger="coherentnoise"):
        builder.build()
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert any(m.startswith("Built noise map 4x3 jobs=1 elapsed=") for m in messages)
