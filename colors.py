from __future__ import annotations
import re
from geometry import clamp

NAMED_COLORS = {
    'black': (0, 0, 0),
    'blue': (0, 0, 255),
    'cyan': (0, 255, 255),
    'fuchsia': (255, 0, 255),
    'gray': (128, 128, 128),
    'green': (0, 128, 0),
    'grey': (128, 128, 128),
    'lime': (0, 255, 0),
    'magenta': (255, 0, 255),
    'maroon': (128, 0, 0),
    'navy': (0, 0, 128),
    'olive': (128, 128, 0),
    'orange': (255, 165, 0),
    'purple': (128, 0, 128),
    'red': (255, 0, 0),
    'silver': (192, 192, 192),
    'teal': (0, 128, 128),
    'white': (255, 255, 255),
    'yellow': (255, 255, 0),
}

gray_pattern = re.compile(r'^gr[ae]y[-(]\s*(\d+)\s*\)?$')

def parse_hex_color(hex_str: str) -> tuple[int, int, int]:
    hex_str = hex_str.strip().lstrip('#')

    try:
        if len(hex_str) == 3:
            return tuple(int(c, 16) * 17 for c in hex_str)
        if len(hex_str) in (6, 8):
            # alpha digits of #rrggbbaa are ignored
            return tuple(int(hex_str[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        pass

    return (0, 0, 0)

def parse_rgb_color(rgb_str: str) -> tuple[int, int, int]:
    rgb_str = rgb_str.strip().lower()

    match = re.match(r'rgba?\(([^)]+)\)', rgb_str)
    if not match:
        return (0, 0, 0)

    values = match.group(1).split(',')
    if len(values) < 3:
        return (0, 0, 0)

    try:
        return tuple(clamp(int(float(v.strip())), 0, 255) for v in values[:3])
    except ValueError:
        return (0, 0, 0)

def parse_gray_color(gray_str: str) -> tuple[int, int, int]:
    match = gray_pattern.match(gray_str.strip().lower())
    if match:
        level = clamp(int(match.group(1)), 0, 255)
    else:
        try:
            level = clamp(int(gray_str), 0, 255)
        except ValueError:
            return (0, 0, 0)
    return (level, level, level)

def parse_color(color_str: str) -> tuple[int, int, int] | None:
    if not color_str:
        return None

    color_str = color_str.strip().lower()

    if color_str == 'none':
        return None

    if color_str in NAMED_COLORS:
        return NAMED_COLORS[color_str]

    if color_str.startswith('#'):
        return parse_hex_color(color_str)

    if color_str.startswith('rgb'):
        return parse_rgb_color(color_str)

    if color_str.startswith('gr') or color_str.isdigit():
        return parse_gray_color(color_str)

    return (0, 0, 0)

def luma(color: tuple[int, int, int]) -> int:
    r, g, b = color
    return clamp(int(round(0.299 * r + 0.587 * g + 0.114 * b)), 0, 255)

def to_pixel(color: tuple[int, int, int], channels: int):
    if channels == 1:
        return luma(color)
    if channels == 4:
        r, g, b = color
        return (r, g, b, 255)
    return tuple(color)
