from __future__ import annotations
import re
from conics import (draw_filled_circle_mut, draw_filled_ellipse_mut,
                    draw_hollow_circle_mut, draw_hollow_ellipse_mut)

int_list_pattern = re.compile(r'^\s*[-+]?\d+(?:\s*[,\s]\s*[-+]?\d+)*\s*$')

def parse_int_list(value: str, count: int) -> list[int]:
    """Parse `count` integers separated by commas or whitespace, e.g. "200,200,40"."""
    if not value or not int_list_pattern.match(value):
        raise ValueError(f"Expected {count} integers, got {value!r}")

    numbers = [int(part) for part in re.split(r'[,\s]+', value.strip()) if part]
    if len(numbers) != count:
        raise ValueError(f"Expected {count} integers, got {len(numbers)} in {value!r}")
    return numbers

def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)

class Circle:
    def __init__(self, center: tuple[int, int], radius: int, color, filled: bool = False):
        self.center = center
        self.radius = radius
        self.color = color
        self.filled = filled

    @classmethod
    def parse(cls, value: str, color, filled: bool = False) -> 'Circle':
        x, y, r = parse_int_list(value, 3)
        if r < 0:
            raise ValueError(f"Circle radius must be non-negative, got {r}")
        return cls((x, y), r, color, filled)

    def draw_mut(self, canvas):
        if self.filled:
            draw_filled_circle_mut(canvas, self.center, self.radius, self.color)
        else:
            draw_hollow_circle_mut(canvas, self.center, self.radius, self.color)

    def __repr__(self) -> str:
        kind = "filled circle" if self.filled else "circle"
        return f"{kind} at {self.center} r={self.radius}"

class Ellipse:
    def __init__(self, center: tuple[int, int], width_radius: int, height_radius: int,
                 color, filled: bool = False):
        self.center = center
        self.width_radius = width_radius
        self.height_radius = height_radius
        self.color = color
        self.filled = filled

    @classmethod
    def parse(cls, value: str, color, filled: bool = False) -> 'Ellipse':
        x, y, rx, ry = parse_int_list(value, 4)
        if rx < 0 or ry < 0:
            raise ValueError(f"Ellipse radii must be non-negative, got {rx},{ry}")
        return cls((x, y), rx, ry, color, filled)

    def draw_mut(self, canvas):
        if self.filled:
            draw_filled_ellipse_mut(canvas, self.center, self.width_radius, self.height_radius, self.color)
        else:
            draw_hollow_ellipse_mut(canvas, self.center, self.width_radius, self.height_radius, self.color)

    def __repr__(self) -> str:
        kind = "filled ellipse" if self.filled else "ellipse"
        return f"{kind} at {self.center} rx={self.width_radius} ry={self.height_radius}"
