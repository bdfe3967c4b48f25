"""Headless runner for the procedural orrery."""
from __future__ import annotations

import argparse
import cProfile
import io
import json
import pstats
from pathlib import Path
from typing import Any, Dict, List, Optional

from orrery.config import GeneratorConfig
from orrery.core.rng import Seed
from orrery.engine.logger import init_logger
from orrery.engine.loop import FixedTimestepLoop
from orrery.world.simulation import create_simulation


SETTINGS_PATH = Path("settings.json")


def load_settings() -> Dict[str, Any]:
    if not SETTINGS_PATH.exists():
        return {"simHz": 60}
    try:
        return json.loads(SETTINGS_PATH.read_text())
    except json.JSONDecodeError:
        return {"simHz": 60}


def _parse_seed(value: str) -> Seed:
    try:
        return int(value)
    except ValueError:
        return value


def _frame_count(value: str) -> int:
    frames = int(value)
    if frames < 0:
        raise argparse.ArgumentTypeError("frame count must be zero or more")
    return frames


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a planetary system and run its clock.")
    parser.add_argument("--seed", type=_parse_seed, default="sol", help="integer, text or preset name")
    parser.add_argument("--frames", type=_frame_count, default=600, help="ticks to simulate")
    parser.add_argument("--trails", action="store_true", help="record planet trails")
    parser.add_argument("--json", action="store_true", help="print the full system instead of a summary")
    parser.add_argument("--profile", action="store_true", help="print the top 25 cumulative calls")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    logger = init_logger(SETTINGS_PATH)
    config = GeneratorConfig.from_settings(SETTINGS_PATH)

    simulation = create_simulation(args.seed, config, logger)
    simulation.trails_enabled = args.trails

    loop = FixedTimestepLoop(
        lambda dt: simulation.tick(),
        fixed_hz=settings.get("simHz", 60),
    )

    profiler = cProfile.Profile() if args.profile else None
    try:
        if profiler is not None:
            profiler.enable()
        loop.run_steps(args.frames)
    finally:
        if profiler is not None:
            profiler.disable()

    system = simulation.system
    if args.json:
        print(system.to_json())
    else:
        summary = system.summary()
        summary["time"] = simulation.time
        summary["visitors"] = [obj.name for obj in simulation.events.objects()]
        summary["notifications"] = [item.message for item in simulation.events.notifications]
        print(json.dumps(summary, indent=2))

    if profiler is not None:
        stats_stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stats_stream)
        stats.strip_dirs().sort_stats("cumulative").print_stats(25)
        print("\nProfiler results (top 25 cumulative):")
        print(stats_stream.getvalue())


if __name__ == "__main__":
    main()
