"""Tests for single-channel isolation."""

import pytest

from models.errors import InvalidChannel
from engines.color_space import convert
from engines.channel_isolator import isolate
from helpers import rgb_buffer, ycc_buffer


@pytest.mark.parametrize("channel", ['r', 'g', 'b'])
def test_rgb_keeps_only_channel(channel):
    """Other RGB components are zeroed, the chosen one untouched."""
    buffer = rgb_buffer([[(10, 20, 30), (200, 100, 50)], [(1, 2, 3), (255, 255, 255)]])
    isolated = isolate(buffer, channel)

    for before, after in zip(buffer, isolated):
        for component in ('r', 'g', 'b'):
            if component == channel:
                assert getattr(after, component) == getattr(before, component)
            else:
                assert getattr(after, component) == 0
        assert (after.row, after.col) == (before.row, before.col)


def test_ycc_luma_replicated():
    """Isolating y sets cb = cr = y."""
    buffer = ycc_buffer(2, 1, y=[50.5, 200.0], cb=[10.0, 20.0], cr=[30.0, 40.0])
    isolated = isolate(buffer, 'y')
    assert [p.components for p in isolated] == [(50.5, 50.5, 50.5), (200.0, 200.0, 200.0)]


def test_ycc_chroma_replicated():
    """Isolating cr copies Cr into every slot."""
    buffer = ycc_buffer(2, 1, y=[50.0, 200.0], cb=[10.0, 20.0], cr=[30.0, 40.0])
    isolated = isolate(buffer, 'cr')
    assert [p.components for p in isolated] == [(30.0, 30.0, 30.0), (40.0, 40.0, 40.0)]


def test_input_not_mutated():
    """Isolation emits new pixels."""
    buffer = rgb_buffer([[(10, 20, 30)]])
    isolate(buffer, 'g')
    assert buffer.pixels[0].components == (10, 20, 30)


@pytest.mark.parametrize("channel", ['y', 'cb', 'original', 'alpha'])
def test_rgb_rejects_foreign_channel(channel):
    buffer = rgb_buffer([[(10, 20, 30)]])
    with pytest.raises(InvalidChannel):
        isolate(buffer, channel)


@pytest.mark.parametrize("channel", ['r', 'g', 'b', 'original'])
def test_ycc_rejects_foreign_channel(channel):
    buffer = convert(rgb_buffer([[(10, 20, 30)]]), 'YCC')
    with pytest.raises(InvalidChannel):
        isolate(buffer, channel)
