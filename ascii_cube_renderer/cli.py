#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from blessed import Terminal

from .app import CubeApp
from .config import RenderConfig
from .framebuffer import BufferAllocationError
from .renderer import Renderer
from .terminal import terminal_session

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ALLOC_FAILED = 1
EXIT_BAD_CONFIG = 2

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def parse_args(argv=None):
    """CLI argument parser. Every flag overrides one RenderConfig default."""
    epilog = """\
keys:
  q          quit
  h / l      move left / right
  k / j      move up / down
  + / =      grow the cube
  - / _      shrink the cube

examples:
  %(prog)s                             160x44 frame, default cube
  %(prog)s --fit                       Size the frame to the terminal
  %(prog)s --cube-width 20 --k1 60     Bigger cube, stronger perspective
  %(prog)s --frames 300 --log-file cube.log -v
"""
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        description="Rotating ASCII cube renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=None,
                        help=f"Frame width in columns (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=None,
                        help=f"Frame height in rows (default: {defaults.height})")
    parser.add_argument("--fit", action="store_true",
                        help="Size the frame to the current terminal")
    parser.add_argument("--cube-width", type=float, default=defaults.cube_width,
                        help=f"Initial cube half-extent (default: {defaults.cube_width})")
    parser.add_argument("--distance", type=float, default=defaults.distance,
                        help=f"Camera distance (default: {defaults.distance})")
    parser.add_argument("--k1", type=float, default=defaults.k1,
                        help=f"Perspective scale (default: {defaults.k1})")
    parser.add_argument("--step", type=float, default=defaults.step,
                        help=f"Face sample spacing (default: {defaults.step})")
    parser.add_argument("--background", default=defaults.background,
                        help="Background fill character (default: space)")
    parser.add_argument("--frame-delay", type=float, default=defaults.frame_delay,
                        help=f"Seconds to sleep between frames (default: {defaults.frame_delay})")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: run until 'q')")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file instead of stderr")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")
    return parser.parse_args(argv)


def setup_logging(log_file=None, verbose=False):
    """
    Frames own the screen, so records only go to stderr at WARNING and
    above unless a log file is given.
    """
    if log_file:
        level = logging.DEBUG if verbose else logging.INFO
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def build_config(args) -> RenderConfig:
    overrides = dict(
        cube_width=args.cube_width,
        distance=args.distance,
        k1=args.k1,
        step=args.step,
        background=args.background,
        frame_delay=args.frame_delay,
    )
    if args.width is not None:
        overrides['width'] = args.width
    if args.height is not None:
        overrides['height'] = args.height
    if args.fit:
        return RenderConfig.detect_terminal(**overrides)
    return RenderConfig(**overrides)


def play(config, term, out, max_frames=None, **app_kwargs) -> int:
    """Run the frame loop inside a terminal session; returns an exit code."""
    try:
        with terminal_session(term, out) as keyboard:
            with Renderer(config) as renderer:
                app = CubeApp(renderer, keyboard, out,
                              frame_delay=config.frame_delay,
                              max_frames=max_frames, **app_kwargs)
                app.run()
    except BufferAllocationError as e:
        logger.error("failed to create renderer: %s", e)
        print(f"Error: failed to create renderer: {e}", file=sys.stderr)
        return EXIT_ALLOC_FAILED
    except KeyboardInterrupt:
        pass
    return EXIT_OK


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    term = Terminal(stream=sys.stdout)
    return play(config, term, sys.stdout.buffer, max_frames=args.frames)


def run():
    sys.exit(main())
