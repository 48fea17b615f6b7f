"""
Main entry point for the aquarium.

Run with:
    python -m aquarium.main                       # Interactive window
    python -m aquarium.main --record 300          # Headless run
    python -m aquarium.main --record 300 --video aquarium.mp4
"""

import sys

from .core.config import AquariumConfig, ConfigError, load_config


def run_interactive(config: AquariumConfig) -> None:
    """Run the interactive aquarium window."""
    from .simulation.interactive import Aquarium

    print("=" * 60)
    print("Aquarium")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print(f"\nFish: {config.fishCount}  Weeds: {config.weedCount}")
    print("\nStarting aquarium...")

    Aquarium(config).run()


def run_recording(config: AquariumConfig, frames: int, fps: int = 30,
                  video: str = None, snapshot: str = None) -> dict:
    """
    Run the aquarium headless for a number of frames.

    Args:
        config: Aquarium configuration
        frames: Number of frames to simulate
        fps: Simulated frame rate
        video: Optional MP4 output path
        snapshot: Optional PNG path for the last frame

    Returns:
        Recorder summary
    """
    from .simulation.recording import HeadlessRecorder, set_headless

    set_headless()

    print("=" * 60)
    print("AQUARIUM RECORDING")
    print("=" * 60)
    print(f"Frames: {frames} at {fps} fps ({frames / fps:.1f}s simulated)")
    print()

    recorder = HeadlessRecorder(config, fps=fps, video_filename=video, snapshot_filename=snapshot)
    results = recorder.run(frames)

    print("\n" + "=" * 60)
    print("RECORDING SUMMARY")
    print("=" * 60)
    print(f"   Behavior ticks: {results['behavior_ticks']}")
    print(f"   Bubbles emitted: {results['bubbles_emitted']}")
    print(f"   Bubbles culled: {results['bubbles_culled']}")
    print(f"   Live bubbles: {results['live_bubbles']}")
    print(f"   Wall time: {results['elapsed_time_seconds']:.1f}s")

    return results


def build_config(args) -> AquariumConfig:
    """
    Build the config from an optional file plus command-line overrides.

    Raises:
        ConfigError: If the file is unreadable or a value is out of range
    """
    config = load_config(args.config) if args.config else AquariumConfig()

    overrides = {
        "screenWidth": args.width,
        "screenHeight": args.height,
        "fishCount": args.fish,
        "weedCount": args.weeds,
        "seed": args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)

    return config.validate()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Procedurally generated animated aquarium")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--width", type=int, help="Surface width (default: display width)")
    parser.add_argument("--height", type=int, help="Surface height (default: display height)")
    parser.add_argument("--fish", type=int, help="Number of fish")
    parser.add_argument("--weeds", type=int, help="Number of weeds")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--record", type=int, metavar="FRAMES", help="Run headless for FRAMES frames")
    parser.add_argument("--fps", type=int, default=30, help="Simulated frame rate when recording")
    parser.add_argument("--video", help="MP4 output path when recording")
    parser.add_argument("--snapshot", help="PNG path for the last recorded frame")

    args = parser.parse_args(argv)
    if args.record is not None and args.record < 0:
        parser.error(f"--record must not be negative, got {args.record}")

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(2)

    if args.record is not None:
        run_recording(config, args.record, fps=args.fps, video=args.video, snapshot=args.snapshot)
    else:
        run_interactive(config)


if __name__ == "__main__":
    main()
