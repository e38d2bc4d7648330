"""Print the max flow carried by each edge of a small network."""
from __future__ import annotations

from flowassign import solve_max_flow


def main() -> None:
    flow_edges, stats = solve_max_flow(
        [
            (3, 5, 5),
            (3, 0, 10),
            (0, 5, 5),
            (5, 4, 10),
            (0, 4, 3),
            (0, 1, 1),
            (4, 1, 20),
            (4, 2, 5),
            (1, 2, 7),
        ],
        6,
        return_stats=True,
    )
    for edge in flow_edges:
        print(f"{edge.tail} -> {edge.head} ({edge.weight})")
    print("max flow:", stats["flow_value"])


if __name__ == "__main__":
    main()
