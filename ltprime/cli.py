# ltprime/cli.py
# Usage: python -m ltprime.cli [--rank N] [--backend deterministic|sympy] [--verify] [--stats] [--plot PATH]

import argparse
import sys
import time

from ltprime.errors import LTPError
from ltprime.primes.backends import get_backend
from ltprime.search.ltp_search import DEFAULT_CAPACITY, MAX_RANK, SEED, LTPSearch

PROMPT = f"Please input a number between 1 and {MAX_RANK}: "

EXIT_USAGE = 2
EXIT_INTERNAL = 3


def _rank_arg(text: str) -> int:
    try:
        rank = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if not 1 <= rank <= MAX_RANK:
        raise argparse.ArgumentTypeError(f"rank must be between 1 and {MAX_RANK}")
    return rank


def _capacity_arg(text: str) -> int:
    value = int(text)
    if value < len(SEED):
        raise argparse.ArgumentTypeError(f"must be at least {len(SEED)} to hold the seed primes")
    return value


def prompt_rank(input_fn=None):
    """Ask until an integer in 1..MAX_RANK is entered; None on end of input."""
    input_fn = input_fn or input
    while True:
        try:
            line = input_fn(PROMPT)
        except EOFError:
            return None
        try:
            rank = int(line.strip())
        except ValueError:
            continue
        if 1 <= rank <= MAX_RANK:
            return rank


def print_stats(stats, out=None):
    out = out or sys.stdout
    print("order  found  kept", file=out)
    for level in stats.orders:
        print(f"{level.order:>5}  {level.found:>5}  {level.retained:>4}", file=out)
    print(f"primality tests: {stats.oracle_calls}", file=out)
    print(f"ring peak occupancy: {stats.peak_occupancy}", file=out)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find the N-th left-truncatable prime")
    parser.add_argument("--rank", type=_rank_arg, default=None,
                        help=f"Rank to look up (1..{MAX_RANK}); prompts when omitted")
    parser.add_argument(
        "--backend",
        type=str,
        default="deterministic",
        choices=["deterministic", "sympy"],
        help="Primality backend used by the search",
    )
    parser.add_argument("--capacity", type=_capacity_arg, default=DEFAULT_CAPACITY,
                        help="Frontier ring capacity")
    parser.add_argument("--verify", action="store_true",
                        help="Re-check every truncation of the answer with sympy")
    parser.add_argument("--stats", action="store_true", help="Print per-order search statistics")
    parser.add_argument("--plot", type=str, default=None, help="Write a frontier chart to this file")
    args = parser.parse_args(argv)

    backend = get_backend(args.backend)

    rank = args.rank if args.rank is not None else prompt_rank()
    if rank is None:
        print("Error: no rank given", file=sys.stderr)
        return EXIT_USAGE

    t0 = time.perf_counter()
    try:
        result = LTPSearch(rank, backend=backend, capacity=args.capacity).run()
    except LTPError as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL
    ms = (time.perf_counter() - t0) * 1000

    print(f"Time spent {ms:.2f} ms")
    print(f"Left-truncatable prime at the specified position is: {result.value}")

    if args.stats:
        print_stats(result.stats)

    if args.plot:
        from ltprime.visual.frontier_plot import plot_frontier
        plot_frontier(result.stats, args.plot, capacity=args.capacity)
        print(f"Wrote {args.plot}")

    if args.verify:
        from ltprime.primes.sympy_backend import SympyBackend
        from ltprime.primes.truncation import is_left_truncatable
        if not is_left_truncatable(result.value, SympyBackend()):
            print(f"Error: {result.value} is not left-truncatable", file=sys.stderr)
            return 1
        print("Verified with sympy: every truncation is prime")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
