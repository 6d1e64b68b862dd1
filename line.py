from __future__ import annotations
from typing import Iterator, Tuple
from canvas import Canvas, Color, draw_if_in_bounds

def bresenham_points(start: Tuple[float, float], end: Tuple[float, float]) -> Iterator[Tuple[int, int]]:
    """Yield the pixels of the segment from `start` to `end`, both endpoints included.

    Endpoints are truncated toward zero. Points are produced in order of
    increasing x along the major axis, so the walk may run end to start.
    """
    x0, y0 = start
    x1, y1 = end

    is_steep = abs(y1 - y0) > abs(x1 - x0)
    if is_steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1

    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    error = dx / 2.0
    y_step = 1 if y0 < y1 else -1

    y = int(y0)
    x = int(x0)
    end_x = int(x1)

    while x <= end_x:
        if is_steep:
            yield (y, x)
        else:
            yield (x, y)
        x += 1
        error -= dy
        if error < 0:
            y += y_step
            error += dx

def _is_integral(value: float) -> bool:
    return float(value).is_integer()

def _draw_horizontal_span(canvas: Canvas, x_start: int, x_end: int, y: int, color: Color):
    if y < 0 or y >= canvas.height:
        return
    left = max(0, min(x_start, x_end))
    right = min(canvas.width - 1, max(x_start, x_end))
    if left > right:
        return
    canvas.buffer[y, left:right + 1, :] = color

def draw_line_segment_mut(canvas, start: Tuple[float, float], end: Tuple[float, float], color: Color):
    x0, y0 = start
    x1, y1 = end

    if (isinstance(canvas, Canvas) and y0 == y1
            and _is_integral(x0) and _is_integral(x1) and _is_integral(y0)):
        _draw_horizontal_span(canvas, int(x0), int(x1), int(y0), color)
        return

    for x, y in bresenham_points(start, end):
        draw_if_in_bounds(canvas, x, y, color)
