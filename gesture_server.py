"""
Entry point for the hand-gesture recognition server.

Usage examples:
    python gesture_server.py                      # JSON events over TCP (default)
    python gesture_server.py --mode zmq           # label-only ZeroMQ publisher
    python gesture_server.py --sensitivity 0.5 --smoothing 0.6
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
PY_DIR = ROOT / "python"
if str(PY_DIR) not in sys.path:
    sys.path.insert(0, str(PY_DIR))


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Hand gesture recognition server")
    parser.add_argument(
        "--mode",
        choices=("tcp", "zmq"),
        default="tcp",
        help="'tcp' streams full JSON results, 'zmq' publishes only the gesture label.",
    )
    parser.add_argument(
        "--config",
        default=str(ROOT / "config.json"),
        help="Path to the JSON config file (watched for changes while running).",
    )
    parser.add_argument("--sensitivity", type=float, help="Confidence floor, 0.1-1.0.")
    parser.add_argument("--smoothing", type=float, help="Landmark smoothing factor, 0-0.95.")
    parser.add_argument("--camera", type=int, help="Camera index.")
    parser.add_argument(
        "--no-window", action="store_true", help="Run headless, without the preview window."
    )
    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> dict:
    overrides: dict = {}
    if args.sensitivity is not None:
        overrides.setdefault("gesture", {})["sensitivity"] = args.sensitivity
    if args.smoothing is not None:
        overrides.setdefault("gesture", {})["smoothing"] = args.smoothing
    if args.camera is not None:
        overrides.setdefault("camera", {})["index"] = args.camera
    if args.no_window:
        overrides.setdefault("debug", {})["show_window"] = False
    return overrides


def main(argv=None) -> None:
    args = parse_args(argv)
    from main_loop import main as run_main_loop

    run_main_loop(config_path=args.config, mode=args.mode, overrides=build_overrides(args))


if __name__ == "__main__":
    main()
