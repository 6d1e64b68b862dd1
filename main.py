from __future__ import annotations
import sys
import os
from canvas import Canvas, MODE_CHANNELS, load_png
from colors import parse_color, to_pixel
from geometry import Circle, Ellipse

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 500
DEFAULT_MODE = 'RGB'
DEFAULT_BACKGROUND = (255, 255, 255)
DEFAULT_COLOR = (0, 0, 0)

SHAPE_OPTIONS = {
    '--circle': (Circle, False),
    '--filled-circle': (Circle, True),
    '--ellipse': (Ellipse, False),
    '--filled-ellipse': (Ellipse, True),
}

def render_shapes(output_path: str, shapes: list, input_path: str = None,
                  width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                  mode: str = DEFAULT_MODE,
                  background: tuple[int, int, int] = DEFAULT_BACKGROUND,
                  verbose: bool = False) -> bool:
    if not output_path.lower().endswith('.png'):
        print(f"Warning: {output_path} does not have .png extension")

    try:
        if input_path is not None:
            if not os.path.exists(input_path):
                print(f"Error: File not found: {input_path}")
                return False
            canvas = load_png(input_path)
        else:
            canvas = Canvas(width, height, MODE_CHANNELS[mode], to_pixel(background, MODE_CHANNELS[mode]))

        if verbose:
            source = input_path if input_path else "blank"
            print(f"Canvas: {canvas.width}x{canvas.height} {canvas.mode} ({source})")

        for shape_cls, value, filled, rgb in shapes:
            shape = shape_cls.parse(value, to_pixel(rgb, canvas.channels), filled)
            shape.draw_mut(canvas)
            if verbose:
                print(f"  drew {shape} color={shape.color}")

        try:
            canvas.save(output_path)
        except Exception as e:
            print(f"Error saving PNG: {e}")
            return False

        print(f"[OK] {len(shapes)} shape(s) -> {output_path}")
        return True

    except Exception as e:
        print(f"Error during rendering: {e}")
        if verbose:
            import traceback
            traceback.print_exc()
        return False

def print_usage():
    print("Conic rasterizer")
    print("Usage: python main.py <output.png> [shapes] [options]")
    print("\nShapes (drawn in order, with the most recent --color):")
    print("  --circle X,Y,R                 Circle outline")
    print("  --filled-circle X,Y,R          Filled circle")
    print("  --ellipse X,Y,RX,RY            Axis-aligned ellipse outline")
    print("  --filled-ellipse X,Y,RX,RY     Filled axis-aligned ellipse")
    print("\nOptions:")
    print("  -c, --color COLOR      Color for the following shapes (name, #hex, rgb(), gray-N)")
    print("  -i, --input PATH       Draw onto an existing PNG instead of a blank canvas")
    print("  -w, --width WIDTH      Canvas width in pixels (default: 500)")
    print("  -h, --height HEIGHT    Canvas height in pixels (default: 500)")
    print("  -m, --mode MODE        L, RGB or RGBA (default: RGB)")
    print("  -b, --background COLOR Background color (default: white)")
    print("  -v, --verbose          Print detailed information")
    print("\nExamples:")
    print("  python main.py out.png --ellipse 200,200,40,100")
    print("  python main.py out.png -c red --filled-circle 10,10,5 -w 20 -h 20")
    print("  python main.py out.png -i photo.png -c gray-50 --circle 100,100,30")

def main(argv: list[str] = None) -> int:
    args = sys.argv[1:] if argv is None else argv

    if len(args) == 0:
        print_usage()
        return 0

    verbose = False
    output_path = None
    input_path = None
    width = DEFAULT_WIDTH
    height = DEFAULT_HEIGHT
    mode = DEFAULT_MODE
    background = DEFAULT_BACKGROUND
    color = DEFAULT_COLOR
    shapes = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['-v', '--verbose']:
            verbose = True
        elif arg in SHAPE_OPTIONS:
            if i + 1 < len(args):
                shape_cls, filled = SHAPE_OPTIONS[arg]
                try:
                    # validated now so bad input is reported before any drawing
                    shape_cls.parse(args[i + 1], color, filled)
                except ValueError as e:
                    print(f"Error: {arg}: {e}")
                    return 1
                shapes.append((shape_cls, args[i + 1], filled, color))
                i += 1
            else:
                print(f"Error: {arg} requires a value")
                return 1
        elif arg in ['-c', '--color', '-b', '--background']:
            if i + 1 < len(args):
                parsed = parse_color(args[i + 1])
                if parsed is None:
                    print(f"Error: {arg} requires a color, not '{args[i + 1]}'")
                    return 1
                if arg in ['-c', '--color']:
                    color = parsed
                else:
                    background = parsed
                i += 1
            else:
                print(f"Error: {arg} requires a color")
                return 1
        elif arg in ['-w', '--width', '-h', '--height']:
            if i + 1 < len(args):
                try:
                    size = int(args[i + 1])
                except ValueError:
                    print(f"Error: {arg} must be an integer")
                    return 1
                if size < 0:
                    print(f"Error: {arg} must not be negative")
                    return 1
                if arg in ['-w', '--width']:
                    width = size
                else:
                    height = size
                i += 1
            else:
                print(f"Error: {arg} requires a value")
                return 1
        elif arg in ['-m', '--mode']:
            if i + 1 < len(args):
                mode = args[i + 1].upper()
                if mode not in MODE_CHANNELS:
                    print(f"Error: -m/--mode must be one of {', '.join(MODE_CHANNELS)}")
                    return 1
                i += 1
            else:
                print("Error: -m/--mode requires a value")
                return 1
        elif arg in ['-i', '--input']:
            if i + 1 < len(args):
                input_path = args[i + 1]
                i += 1
            else:
                print("Error: -i/--input requires a path argument")
                return 1
        elif arg.startswith('-'):
            print(f"Unknown option: {arg}")
            return 1
        elif output_path is None:
            output_path = arg
        else:
            print(f"Error: Unexpected argument: {arg}")
            return 1
        i += 1

    if output_path is None:
        print("Error: No output file specified")
        return 1

    if len(shapes) == 0:
        print("Warning: No shapes specified, writing the bare canvas")

    if render_shapes(output_path, shapes, input_path, width, height, mode, background, verbose):
        return 0
    return 1

if __name__ == "__main__":
    sys.exit(main())
