#!/usr/bin/env python3
"""
Visualization script for gallery solutions.

Generates images of sample galleries with their triangulation, 3-coloring
and camera placements into ./build/

Usage:
    uv run python scripts/visualize.py
"""

from pathlib import Path

import matplotlib.pyplot as plt

from art_gallery import ArtGallery, Color, solution_summary

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"

COLOR_FILLS = {
    Color.RED: "#d94a4a",
    Color.YELLOW: "#e8c547",
    Color.BLUE: "#4a90d9",
}


def ensure_build_dir():
    """Create build directory if it doesn't exist."""
    BUILD_DIR.mkdir(exist_ok=True)


def edges_from_points(points):
    """Close a point sequence into a boundary edge list."""
    return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


def visualize(solution, title="Gallery", ax=None):
    """Draw a solved gallery on an axis."""
    boundary = solution.triangulation.boundary

    # Polygon
    xs = [p.x for p in boundary] + [boundary[0].x]
    ys = [p.y for p in boundary] + [boundary[0].y]
    ax.fill(xs, ys, color="#f2f2f2", zorder=1)
    ax.plot(xs, ys, color="#333333", linewidth=2, zorder=2)

    # Diagonals
    for p, q in solution.triangulation.diagonals:
        ax.plot([p.x, q.x], [p.y, q.y], color="gray", linestyle="--", linewidth=1, zorder=3)

    # Vertices by color
    for p in boundary:
        color = solution.coloring.get(p)
        ax.scatter(p.x, p.y, s=40, c=COLOR_FILLS.get(color, "white"), edgecolors="black", zorder=4)

    # Guards
    gx = [g.x for g in solution.guards]
    gy = [g.y for g in solution.guards]
    ax.scatter(gx, gy, s=220, facecolors="none", edgecolors="black", linewidth=2, zorder=5)

    summary = solution_summary(solution)
    ax.set_title(
        f"{title}\n{summary['guards']} guard(s), bound {summary['guard_bound']}",
        fontsize=12,
        fontweight="bold",
    )
    ax.set_aspect("equal")
    ax.axis("off")


def save_gallery(name, points, filename):
    """Solve and save a single gallery image."""
    solution = ArtGallery(edges_from_points(points)).solution()

    fig, ax = plt.subplots(figsize=(8, 8))
    visualize(solution, name, ax=ax)
    plt.tight_layout()

    filepath = BUILD_DIR / filename
    fig.savefig(filepath, dpi=150, bbox_inches="tight", facecolor="white")
    plt.close(fig)
    print(f"  Saved: {filepath}")


def create_comb(teeth=5):
    """Rectilinear comb gallery with the given number of teeth."""
    width = 4 * (teeth - 1) + 2
    points = [(0, 0), (width, 0)]
    for i in range(teeth - 1, -1, -1):
        points.append((4 * i + 2, 6))
        points.append((4 * i, 6))
        if i > 0:
            points.append((4 * i, 2))
            points.append((4 * i - 2, 2))
    return points


def create_star():
    """Six-pointed star gallery, vertices sorted by angle around the origin."""
    outer = [(10, 0), (5, 9), (-5, 9), (-10, 0), (-5, -9), (5, -9)]
    inner = [(4, 2), (0, 4), (-4, 2), (-4, -2), (0, -4), (4, -2)]
    points = []
    for out_pt, in_pt in zip(outer, inner):
        points.append(out_pt)
        points.append(in_pt)
    return points


def main():
    ensure_build_dir()
    print("Generating gallery images...")

    save_gallery("Square", [(0, 0), (4, 0), (4, 4), (0, 4)], "square.png")
    save_gallery("L-shaped room", [(0, 0), (6, 0), (6, 2), (2, 2), (2, 6), (0, 6)], "l_shape.png")
    save_gallery("Comb", create_comb(), "comb.png")
    save_gallery("Star", create_star(), "star.png")

    print("Done.")


if __name__ == "__main__":
    main()
