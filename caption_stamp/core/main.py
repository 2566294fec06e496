"""Command-line entry point: stamp text overlays onto an image file."""

import argparse
import sys

from PIL import UnidentifiedImageError
import yaml
from pydantic import ValidationError

from ..overlay.errors import OverlayError
from ..overlay.spec import SpecParser
from .config import load_config
from .debug import debug_print
from .dependencies import check_external_dependencies
from .workflow import stamp_file

OVERLAY_HELP = """\
overlay descriptor, repeatable: comma-separated key=value pairs.
keys: x, y (pixels or N%%), fg, bg (transparent|black|gray1|gray2|white),
font (path:size), string|str|s (text). Example: -o "x=10,y=95%%,fg=white,bg=black,s=Hello"
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="caption-stamp",
        description="Render short text labels onto an image",
    )
    parser.add_argument("input", help="Source image file")
    parser.add_argument("output", help="Destination image file (format from extension)")
    parser.add_argument(
        "--overlay",
        "-o",
        action="append",
        default=[],
        metavar="SPEC",
        help=OVERLAY_HELP,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file (overrides CONFIG_PATH environment variable)",
    )
    parser.add_argument(
        "--default-font",
        type=str,
        default=None,
        metavar="PATH:SIZE",
        help="Font for overlays without a font key (overrides the config file)",
    )
    return parser


def run(
    input_path: str,
    output_path: str,
    overlays: list[str],
    config_path: str | None = None,
    default_font: str | None = None,
) -> int:
    """Stamp one image. Returns the process exit status."""
    try:
        config = load_config(config_path)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        print(f"Failed to load config: {e}", file=sys.stderr)
        return 1

    font_spec = default_font or config.default_font
    debug_print(f"Default font: {font_spec}")
    parser = SpecParser(default_font=font_spec)

    try:
        stamp_file(input_path, output_path, overlays, config=config, parser=parser)
    except OverlayError as e:
        print(f"Overlay failed: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError, UnidentifiedImageError) as e:
        print(f"Image failed: {e}", file=sys.stderr)
        return 1

    count = len(config.overlays) + len(overlays)
    print(f"Wrote {output_path} ({count} overlay{'s' if count != 1 else ''})")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    check_external_dependencies()
    sys.exit(
        run(
            args.input,
            args.output,
            args.overlay,
            config_path=args.config,
            default_font=args.default_font,
        )
    )


if __name__ == "__main__":
    main()
