from __future__ import annotations
import numpy as np
from typing import Callable, Tuple
from canvas import Color, draw_if_in_bounds
from line import draw_line_segment_mut

Point = Tuple[int, int]

f32 = np.float32

# render callbacks receive the centre and one computed offset (x, y)
RenderFunc = Callable[[int, int, int, int], None]

def _step_circle(render_func: RenderFunc, center: Point, radius: int):
    x0, y0 = center
    x = radius
    y = 0
    err = 0

    while x >= y:
        render_func(x0, y0, x, y)

        y += 1
        err += 1 + 2 * y
        if 2 * (err - x) + 1 > 0:
            x -= 1
            err += 1 - 2 * x

def _step_ellipse(render_func: RenderFunc, center: Point, width_radius: int, height_radius: int):
    """Midpoint ellipse stepper over the first quadrant.

    Region 1 walks along x while the boundary slope is shallow, region 2
    walks down y once it gets steep. The decision parameter is a float since
    the region 2 start needs the half-pixel midpoint. It is kept in single
    precision, and the integer increments are rounded to float32 before they
    are added, which fixes the pixel choice at near-tie steps.
    """
    x0, y0 = center
    w2 = width_radius * width_radius
    h2 = height_radius * height_radius
    x = 0
    y = height_radius
    px = 0
    py = 2 * w2 * y

    render_func(x0, y0, x, y)

    # Top and bottom
    p = f32(h2 - w2 * height_radius) + f32(0.25) * f32(w2)
    while px < py:
        x += 1
        px += 2 * h2
        if p < 0.0:
            p += f32(h2 + px)
        else:
            y -= 1
            py -= 2 * w2
            p += f32(h2 + px - py)

        render_func(x0, y0, x, y)

    # Left and right
    half = f32(x) + f32(0.5)
    p = f32(h2) * (half * half) + f32(w2 * (y - 1) ** 2) - f32(w2 * h2)
    while y > 0:
        y -= 1
        py -= 2 * w2
        if p > 0.0:
            p += f32(w2 - py)
        else:
            x += 1
            px += 2 * h2
            p += f32(w2 - py + px)

        render_func(x0, y0, x, y)

def _span(canvas, x_start: int, x_end: int, y: int, color: Color):
    draw_line_segment_mut(canvas, (float(x_start), float(y)), (float(x_end), float(y)), color)

def draw_hollow_circle_mut(canvas, center: Point, radius: int, color: Color):
    """Draw as much of a circle outline as lies inside the canvas bounds."""
    def draw_octant_pixels(x0: int, y0: int, x: int, y: int):
        draw_if_in_bounds(canvas, x0 + x, y0 + y, color)
        draw_if_in_bounds(canvas, x0 + y, y0 + x, color)
        draw_if_in_bounds(canvas, x0 - y, y0 + x, color)
        draw_if_in_bounds(canvas, x0 - x, y0 + y, color)
        draw_if_in_bounds(canvas, x0 - x, y0 - y, color)
        draw_if_in_bounds(canvas, x0 - y, y0 - x, color)
        draw_if_in_bounds(canvas, x0 + y, y0 - x, color)
        draw_if_in_bounds(canvas, x0 + x, y0 - y, color)

    _step_circle(draw_octant_pixels, center, radius)

def draw_filled_circle_mut(canvas, center: Point, radius: int, color: Color):
    """Draw as much of a circle, including its contents, as lies inside the canvas bounds."""
    def draw_octant_spans(x0: int, y0: int, x: int, y: int):
        _span(canvas, x0 - x, x0 + x, y0 + y, color)
        _span(canvas, x0 - y, x0 + y, y0 + x, color)
        _span(canvas, x0 - x, x0 + x, y0 - y, color)
        _span(canvas, x0 - y, x0 + y, y0 - x, color)

    _step_circle(draw_octant_spans, center, radius)

def draw_hollow_ellipse_mut(canvas, center: Point, width_radius: int, height_radius: int, color: Color):
    """Draw as much of an axis-aligned ellipse outline as lies inside the canvas bounds.

    The ellipse satisfies `x^2 / width_radius^2 + y^2 / height_radius^2 = 1`
    relative to `center`. Equal radii go through the circle algorithm, which
    is faster and gives the same outline.
    """
    if width_radius == height_radius:
        draw_hollow_circle_mut(canvas, center, width_radius, color)
        return

    def draw_quad_pixels(x0: int, y0: int, x: int, y: int):
        draw_if_in_bounds(canvas, x0 + x, y0 + y, color)
        draw_if_in_bounds(canvas, x0 - x, y0 + y, color)
        draw_if_in_bounds(canvas, x0 + x, y0 - y, color)
        draw_if_in_bounds(canvas, x0 - x, y0 - y, color)

    _step_ellipse(draw_quad_pixels, center, width_radius, height_radius)

def draw_filled_ellipse_mut(canvas, center: Point, width_radius: int, height_radius: int, color: Color):
    """Draw as much of an axis-aligned ellipse, including its contents, as lies inside the canvas bounds.

    Covers `x^2 / width_radius^2 + y^2 / height_radius^2 <= 1` relative to
    `center`, rounded to whole pixels along the boundary.
    """
    if width_radius == height_radius:
        draw_filled_circle_mut(canvas, center, width_radius, color)
        return

    def draw_line_pairs(x0: int, y0: int, x: int, y: int):
        _span(canvas, x0 - x, x0 + x, y0 + y, color)
        _span(canvas, x0 - x, x0 + x, y0 - y, color)

    _step_ellipse(draw_line_pairs, center, width_radius, height_radius)

def draw_hollow_circle(canvas, center: Point, radius: int, color: Color):
    out = canvas.copy()
    draw_hollow_circle_mut(out, center, radius, color)
    return out

def draw_filled_circle(canvas, center: Point, radius: int, color: Color):
    out = canvas.copy()
    draw_filled_circle_mut(out, center, radius, color)
    return out

def draw_hollow_ellipse(canvas, center: Point, width_radius: int, height_radius: int, color: Color):
    out = canvas.copy()
    draw_hollow_ellipse_mut(out, center, width_radius, height_radius, color)
    return out

def draw_filled_ellipse(canvas, center: Point, width_radius: int, height_radius: int, color: Color):
    out = canvas.copy()
    draw_filled_ellipse_mut(out, center, width_radius, height_radius, color)
    return out
