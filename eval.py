#!/usr/bin/env python3
"""
Evaluate the perfect-play engine.

Usage:
    python eval.py
    python eval.py --games 1000 --seed 7 --no-audit
"""

import sys
import argparse
import logging
import time
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from xo import (
    EvalConfig,
    audit_all_positions,
    eval_self_play,
    eval_vs_random,
)

log = logging.getLogger("eval")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate the tic-tac-toe engine")
    parser.add_argument("--games", type=int, default=500, help="Number of games vs random")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--no-audit", action="store_true", help="Skip the all-positions audit")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level")
    return parser.parse_args(argv)


def run(cfg: EvalConfig) -> dict:
    """Run every evaluation in `cfg` and return the combined results."""
    results = {}

    state, moves = eval_self_play()
    log.info("self-play: %s after moves %s", state.value, moves)
    results["self_play"] = state.value

    print(f"\nvs Random ({cfg.games} games)...")
    r = eval_vs_random(games=cfg.games, seed=cfg.seed, progress=cfg.progress)
    print(f"  Wins:   {r['engine_w']:.2%}")
    print(f"  Draws:  {r['engine_d']:.2%}")
    print(f"  Losses: {r['engine_l']:.2%}")
    results["vs_random"] = r

    if cfg.audit:
        print("\nAudit (all legal positions)...")
        start = time.perf_counter()
        a = audit_all_positions(progress=cfg.progress)
        log.info("audit took %.2fs", time.perf_counter() - start)
        print(f"  Positions: {a['positions']}")
        print(f"  Won:       {a['wins']}")
        print(f"  Drawn:     {a['draws']}")
        print(f"  Lost:      {a['losses']}")
        results["audit"] = a

    return results


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    cfg = EvalConfig(
        games=args.games,
        seed=args.seed,
        audit=not args.no_audit,
        progress=not args.no_progress,
    )
    results = run(cfg)

    if results["vs_random"]["engine_l"] > 0:
        log.error("engine lost against a random opponent")
        sys.exit(1)


if __name__ == "__main__":
    main()
