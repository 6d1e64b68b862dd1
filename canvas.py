from __future__ import annotations
import numpy as np
from typing import Tuple, Union

Color = Union[int, Tuple[int, ...]]

MODE_CHANNELS = {
    'L': 1,
    'RGB': 3,
    'RGBA': 4,
}

class Canvas:
    def __init__(self, width: int, height: int, channels: int = 3, background: Color = 0):
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        if channels not in MODE_CHANNELS.values():
            raise ValueError(f"Unsupported channel count: {channels}")

        self.width = width
        self.height = height
        self.channels = channels

        self.buffer = np.zeros((height, width, channels), dtype=np.uint8)
        self.buffer[:, :] = background

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Canvas':
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        height, width, channels = array.shape
        canvas = cls(width, height, channels)
        canvas.buffer[:, :, :] = array
        return canvas

    @property
    def mode(self) -> str:
        for mode, channels in MODE_CHANNELS.items():
            if channels == self.channels:
                return mode
        return 'RGB'

    def get_pixel(self, x: int, y: int) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.buffer[y, x, :])

    def set_pixel(self, x: int, y: int, color: Color):
        # numpy would wrap negative indices around, so those are rejected here
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        self.buffer[y, x, :] = color

    def copy(self) -> 'Canvas':
        out = Canvas(self.width, self.height, self.channels)
        out.buffer[:, :, :] = self.buffer
        return out

    def to_image(self):
        from PIL import Image
        if self.channels == 1:
            return Image.fromarray(self.buffer[:, :, 0].copy())
        return Image.fromarray(self.buffer.copy())

    def save(self, path: str):
        self.to_image().save(path)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.buffer.shape == other.buffer.shape and bool(np.array_equal(self.buffer, other.buffer))

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height}, {self.mode})"

def draw_if_in_bounds(canvas, x: int, y: int, color: Color):
    """Write `color` at (x, y) when it lies on the canvas; anything else is clipped silently."""
    if x < 0 or x >= canvas.width or y < 0 or y >= canvas.height:
        return
    canvas.set_pixel(x, y, color)

def load_png(path: str) -> Canvas:
    from PIL import Image
    with Image.open(path) as image:
        if image.mode not in MODE_CHANNELS:
            image = image.convert('RGBA' if 'A' in image.getbands() else 'RGB')
        array = np.asarray(image, dtype=np.uint8)
    return Canvas.from_array(array)
