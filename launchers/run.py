import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from molegame.app.loop import run_game
from molegame.core.errors import MoleGameError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mole Platform Launcher")
    parser.add_argument("--game", default="whack-a-mole", help="Game folder name under games/")
    parser.add_argument("--screen", default="1280x720", help="Screen size WxH, e.g. 1280x720")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--difficulty", choices=["easy", "normal", "hard"], help="Override manifest difficulty")
    parser.add_argument("--duration", type=int, help="Override game length in seconds")
    parser.add_argument("--seed", type=int, help="Seed the mole placement for a repeatable game")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--debug", action="store_true", help="Shortcut for --log-level DEBUG")
    return parser


def parse_screen(value: str) -> tuple[int, int]:
    w, h = map(int, value.lower().split("x"))
    return w, h


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run_game(
            game_id=args.game,
            screen_size=parse_screen(args.screen),
            mirror=args.mirror,
            fps=args.fps,
            overrides={"difficulty": args.difficulty, "duration_sec": args.duration, "seed": args.seed},
        )
    except (FileNotFoundError, AttributeError, MoleGameError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
