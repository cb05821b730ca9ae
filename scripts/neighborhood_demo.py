from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from moore_neighborhood import audit_neighborhood, dynamic, moore, neighbor_count  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--radius", type=int, default=1)
    ap.add_argument("--dimensions", type=int, default=2)
    ap.add_argument("--plot", type=str, default=None, help="write a scatter PNG to this path")
    args = ap.parse_args()

    offsets = dynamic.moore(args.radius, args.dimensions)
    audit_neighborhood(offsets, args.radius, args.dimensions)

    print({
        "radius": args.radius,
        "dimensions": args.dimensions,
        "neighbor_count": neighbor_count(args.radius, args.dimensions),
        "first": offsets[:3],
        "last": offsets[-3:],
    })
    print(moore())

    if args.plot:
        import matplotlib.pyplot as plt

        from moore_neighborhood.viz.plot import plot_offsets

        plot_offsets(offsets)
        plt.savefig(args.plot, dpi=150)
        print(f"Wrote: {args.plot}")


if __name__ == "__main__":
    main()
