"""
Main entry point for GLYPHFIELD.

Runs the glyph grid either in a pygame simulator window or headless,
driving a scripted pointer sweep and optionally saving the final frame.
"""

import argparse
import asyncio
import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from glyphfield.settings import Settings, get_settings

if TYPE_CHECKING:
    from glyphfield.engine.engine import GlyphFieldEngine

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator(settings: Settings) -> None:
    """Run the simulator version."""
    from glyphfield.simulator.window import SimulatorWindow

    window = SimulatorWindow(settings=settings)
    await window.run()


def sweep_position(frame: int, frames: int, width: float, height: float) -> tuple[float, float]:
    """Pointer position for a frame of the headless sweep.

    The pointer crosses the surface left to right along a sine wave.
    """
    progress = frame / max(frames - 1, 1)
    x = progress * width
    y = height / 2 + math.sin(progress * math.pi * 4) * height / 3
    return x, y


def run_headless(
    settings: Settings,
    frames: int = 120,
    output: Optional[Path] = None,
) -> Optional["GlyphFieldEngine"]:
    """
    Run the engine against an offscreen buffer.

    Frame timestamps are synthetic (``1000 / fps`` ms apart) so runs are
    reproducible with a fixed seed.

    Args:
        settings: Application settings
        frames: Number of frames to simulate
        output: Optional image path for the final frame

    Returns:
        The engine, for inspection, or None if it could not start
    """
    from glyphfield.engine.engine import GlyphFieldEngine
    from glyphfield.surface.buffer import BufferSurface

    window = settings.window
    surface = BufferSurface(
        window.width,
        window.height,
        window.pixel_ratio,
        background=window.background,
    )
    frame_ms = 1000.0 / window.fps
    engine = GlyphFieldEngine.create(surface, settings, clock=lambda: 0.0)
    if engine is None:
        return None

    logger.info(f"Headless run: {frames} frames at {window.fps} fps")
    for i in range(frames):
        x, y = sweep_position(i, frames, surface.width, surface.height)
        engine.pointer_move(x, y)
        engine.scheduler.frame(i * frame_ms)

    engine.pointer_leave()
    logger.info(
        f"Headless run finished after {engine.scheduler.frame_count} frames: "
        f"{engine.active_count} cells still animating, "
        f"{engine.renderer.cells_drawn} cell draws"
    )

    if output is not None:
        surface.save(output)

    return engine


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Interactive glyph grid")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--frames", type=int, default=120, help="frames to simulate when headless")
    parser.add_argument("--output", type=Path, default=None, help="save the last headless frame")
    parser.add_argument("--debug", action="store_true", help="verbose logging and debug overlay")
    args = parser.parse_args(argv)

    # Load environment variables before settings are read
    from dotenv import load_dotenv
    load_dotenv()

    settings = get_settings()
    if args.debug:
        settings = settings.model_copy(update={"debug": True})
    setup_logging(settings.debug)

    try:
        if args.headless or settings.is_headless:
            run_headless(settings, frames=args.frames, output=args.output)
        else:
            asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
