"""Single-channel visualization transforms."""

from dataclasses import replace

from models.errors import InvalidChannel
from models.pixel import components_of
from models.pixel_buffer import PixelBuffer


def isolate(buffer: PixelBuffer, channel: str) -> PixelBuffer:
    """
    Keep only one component of every pixel.

    RGB buffers: the other two components are zeroed, giving a tinted image.
    YCC buffers: all three slots take the channel's value, so luma or a
    chroma plane displays as gray levels.
    """
    components = components_of(buffer.color_mode)
    if channel not in components:
        raise InvalidChannel(
            f"Channel {channel!r} not in {buffer.color_mode} components {components}"
        )

    if buffer.color_mode == 'RGB':
        zeroed = {c: 0 for c in components if c != channel}
        pixels = [replace(p, **zeroed) for p in buffer.pixels]
    else:
        pixels = []
        for p in buffer.pixels:
            value = getattr(p, channel)
            pixels.append(replace(p, **{c: value for c in components}))

    return buffer.with_pixels(pixels)
