# ltprime/visual/frontier_plot.py
# Bar chart of the search frontier: LTPs found per order next to how many of
# them were kept in the ring, with the ring's peak occupancy and capacity.
#
# Deps: numpy, matplotlib

import argparse
import os

import numpy as np

from matplotlib.figure import Figure

from ..search.ltp_search import DEFAULT_CAPACITY, SearchStats, frontier_profile


def plot_frontier(stats: SearchStats, path: str, capacity: int = DEFAULT_CAPACITY) -> str:
    orders = np.array([o.order for o in stats.orders], dtype=int)
    found = np.array([o.found for o in stats.orders], dtype=int)
    retained = np.array([o.retained for o in stats.orders], dtype=int)
    width = 0.4

    # Figure renders through its own Agg canvas and leaves pyplot state alone.
    fig = Figure(figsize=(9, 5))
    ax = fig.subplots()
    ax.bar(orders - width / 2, found, width, color="#3366cc", label="LTPs found")
    ax.bar(orders + width / 2, retained, width, color="#dd8833", label="kept in ring")
    ax.axhline(stats.peak_occupancy, color="#444444", lw=1.0, ls="--",
               label=f"peak occupancy = {stats.peak_occupancy}")
    ax.axhline(capacity, color="#cc3333", lw=1.0, label=f"capacity = {capacity}")
    ax.set_xticks(orders)
    ax.set_xlabel("order (digits prepended to the seed)")
    ax.set_ylabel("count")
    ax.set_title(f"LTP frontier ({int(found.sum()) + 4} LTPs, {stats.oracle_calls} primality tests)")
    ax.legend(loc="upper left", fontsize=9)
    fig.tight_layout()

    dirn = os.path.dirname(path)
    if dirn:
        os.makedirs(dirn, exist_ok=True)
    fig.savefig(path, dpi=120)
    return path


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Plot the LTP search frontier per order")
    p.add_argument("--output", type=str, default="ltp_frontier.png", help="Image file to write")
    p.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY, help="Ring capacity")
    args = p.parse_args(argv)

    stats = frontier_profile(capacity=args.capacity)
    plot_frontier(stats, args.output, capacity=args.capacity)
    print(f"Wrote {args.output} (peak occupancy {stats.peak_occupancy}/{args.capacity})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
