"""
Binary Search Tree Demo -- Replays the classic insert/remove check, then shows the
structural algorithms (copy, mirror, spine rotations, level printing) and how
insertion order drives the height of an unbalanced tree.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import io
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

import tree_algorithms
from binary_search_tree import BinarySearchTree
from tree_algorithms import RotationError
from tree_layout import layout

logger = logging.getLogger("demo")

SEED = 42
NUMS = 4000
GAP = 37

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def build(values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(value)
    return bst


def draw_tree(ax, root, title, color=COLORS["blue"]):
    """Draw a subtree with nodes placed by in-order rank and depth."""
    result = layout(root)
    for parent, child in result.edges:
        ax.plot([result.xs[parent], result.xs[child]], [result.ys[parent], result.ys[child]],
                color="gray", linewidth=1, zorder=1)
    ax.scatter(result.xs, result.ys, s=420, color=color, edgecolor="white", zorder=2)
    for x, y, label in zip(result.xs, result.ys, result.labels):
        ax.text(x, y, str(label), ha="center", va="center", fontsize=8,
                color="white", fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")
    if len(result) == 0:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)
    else:
        ax.set_xlim(result.xs.min() - 1, result.xs.max() + 1)
        ax.set_ylim(result.ys.min() - 0.7, 0.7)


# ---------------------------------------------------------------------------
# Example 1: Insert / Remove Check
# ---------------------------------------------------------------------------
def example_1_insert_remove_check():
    """Insert GAP multiples mod NUMS, remove the odd values and verify the rest."""
    print("=" * 60)
    print("Example 1: Insert / Remove Check")
    print("=" * 60)
    print("  Checking... (no error lines means success)")

    t = BinarySearchTree()
    i = GAP
    while i != 0:
        t.insert(i)
        i = (i + GAP) % NUMS
    height_after_insert = t.height()

    for i in range(1, NUMS, 2):
        t.remove(i)

    errors = 0
    if t.find_min() != 2 or t.find_max() != NUMS - 2:
        print("  FindMin or FindMax error!")
        errors += 1
    for i in range(2, NUMS, 2):
        if not t.contains(i):
            print(f"  Find error1! {i}")
            errors += 1
    for i in range(1, NUMS, 2):
        if t.contains(i):
            print(f"  Find error2! {i}")
            errors += 1

    print(f"\n  Height after {NUMS - 1} inserts: {height_after_insert}")
    print(f"  Height after removing odds:    {t.height()}")
    print(f"  Node count:                    {t.node_count()}")
    print(f"  Is full:                       {t.is_full()}")

    example = build(range(20))
    print(f"\n  Same structure as 0..19 chain: {t.same_structure(example)}")
    print(f"  Equal to 0..19 chain:          {t.equals(example)}")
    print(f"  Mirror of 0..19 chain:         {t.is_mirror(example)}")

    rotated = tree_algorithms.rotate_right(t.snapshot())
    print(f"\n  rotate_right: new root {rotated.value}, "
          f"{tree_algorithms.node_count(rotated)} nodes still reachable")
    rotated = tree_algorithms.rotate_left(t.snapshot())
    print(f"  rotate_left:  new root {rotated.value}, "
          f"{tree_algorithms.node_count(rotated)} nodes still reachable")

    levels = tree_algorithms.levels(t.snapshot())
    widths = [len(row) for row in levels]
    print(f"\n  print_levels emits {len(levels)} levels, widest has {max(widths)} nodes")

    if errors == 0:
        print("\n  All checks passed.")
    logger.info("insert/remove check finished with %d errors", errors)
    return errors


# ---------------------------------------------------------------------------
# Example 2: Copy and Mirror
# ---------------------------------------------------------------------------
def example_2_copy_and_mirror():
    """Draw a tree next to its copy, its mirror and the mirror of the mirror."""
    print("\n" + "=" * 60)
    print("Example 2: Copy and Mirror")
    print("=" * 60)

    bst = build([50, 30, 70, 20, 40, 60, 80, 35, 45, 65])
    root = bst.snapshot()
    clone = tree_algorithms.copy(root)
    reflected = tree_algorithms.mirror(root)
    round_trip = tree_algorithms.mirror(reflected)

    print(f"  In-order:            {tree_algorithms.in_order(root)}")
    print(f"  Mirror in-order:     {tree_algorithms.in_order(reflected)}")
    print(f"  equals(copy):        {tree_algorithms.equals(root, clone)}")
    print(f"  is_mirror(mirror):   {tree_algorithms.is_mirror(root, reflected)}")
    print(f"  mirror twice shape:  {tree_algorithms.compare_structure(round_trip, root)}")
    print(f"  is_full:             {tree_algorithms.is_full(root)}")

    fig, axes = plt.subplots(2, 2, figsize=(14, 9))
    draw_tree(axes[0, 0], root, "Original\nin-order is sorted")
    draw_tree(axes[0, 1], clone, "copy()\nsame shape, new nodes", COLORS["green"])
    draw_tree(axes[1, 0], reflected, "mirror()\nin-order is reversed", COLORS["orange"])
    draw_tree(axes[1, 1], round_trip, "mirror(mirror())\nshape round-trips", COLORS["purple"])
    fig.suptitle("Copy and Mirror Construction", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_copy_and_mirror.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Spine Rotations
# ---------------------------------------------------------------------------
def example_3_spine_rotations():
    """Show how rotate_right and rotate_left rewire one spine into a chain."""
    print("\n" + "=" * 60)
    print("Example 3: Spine Rotations")
    print("=" * 60)

    bst = build([8, 4, 12, 2, 6, 10, 14, 1, 5, 7])
    root = bst.snapshot()
    right = tree_algorithms.rotate_right(bst.snapshot())
    left = tree_algorithms.rotate_left(bst.snapshot())

    print(f"  Original nodes:           {tree_algorithms.node_count(root)}")
    print(f"  After rotate_right:       {tree_algorithms.node_count(right)} "
          f"(root {right.value})")
    print(f"  After rotate_left:        {tree_algorithms.node_count(left)} "
          f"(root {left.value})")

    leaf = BinarySearchTree.Node(5)
    print(f"  rotate_left(leaf) is leaf: {tree_algorithms.rotate_left(leaf) is leaf}")
    try:
        tree_algorithms.rotate_right(leaf)
    except RotationError as exc:
        print(f"  rotate_right(leaf):       RotationError({exc})")

    fig, axes = plt.subplots(1, 3, figsize=(18, 6))
    draw_tree(axes[0], root, "Original")
    draw_tree(axes[1], right, "rotate_right()\nleft spine becomes a right chain", COLORS["red"])
    draw_tree(axes[2], left, "rotate_left()\nright spine becomes a left chain", COLORS["green"])
    fig.suptitle("Spine Rewiring Transforms", fontsize=13, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_spine_rotations.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 4: Height vs Insertion Order
# ---------------------------------------------------------------------------
def example_4_height_vs_order():
    """Compare tree height for sorted, GAP-stepped and random insertion orders."""
    print("\n" + "=" * 60)
    print("Example 4: Height vs Insertion Order")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    sizes = np.array([16, 32, 64, 128, 256, 512])
    trials = 20

    sorted_heights = []
    random_means = []
    random_stds = []
    for n in sizes:
        sorted_heights.append(build(range(int(n))).height())
        heights = [build(rng.permutation(int(n)).tolist()).height() for _ in range(trials)]
        random_means.append(np.mean(heights))
        random_stds.append(np.std(heights))
        print(f"  n={n:>4}: sorted height {sorted_heights[-1]:>4}, "
              f"random height {random_means[-1]:6.2f} +/- {random_stds[-1]:.2f}")

    random_means = np.array(random_means)
    random_stds = np.array(random_stds)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))
    axes[0].plot(sizes, sorted_heights, "o-", color=COLORS["red"], linewidth=2, label="sorted")
    axes[0].plot(sizes, random_means, "o-", color=COLORS["blue"], linewidth=2, label="random")
    axes[0].fill_between(sizes, random_means - random_stds, random_means + random_stds,
                         color=COLORS["blue"], alpha=0.2)
    axes[0].plot(sizes, np.log2(sizes), "--", color=COLORS["dark"], label="log2(n)")
    axes[0].set_xscale("log", base=2)
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("Number of Elements")
    axes[0].set_ylabel("Height")
    axes[0].set_title("Height Depends on Insertion Order\nNo rebalancing: sorted input degenerates",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    small = build(rng.permutation(24).tolist())
    draw_tree(axes[1], small.snapshot(), f"Random order, n=24, height={small.height()}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_vs_order.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 5: Level Printing
# ---------------------------------------------------------------------------
def example_5_level_printing():
    """Print levels of a tree and show which depths the loop bound leaves out."""
    print("\n" + "=" * 60)
    print("Example 5: Level Printing")
    print("=" * 60)

    bst = build([50, 30, 70, 20, 40, 60, 80, 10, 90, 5])
    out = io.StringIO()
    bst.print_levels(file=out)
    print(f"  height: {bst.height()}")
    for line in out.getvalue().splitlines():
        print(f"    {line}")
    printed = sum(len(row) for row in tree_algorithms.levels(bst.snapshot()))
    print(f"  {printed} of {len(bst)} nodes appear in the level listing")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Collect the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Unbalanced Binary Search Tree",
                fontsize=24, fontweight="bold", ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Ordered-Set Operations and Structural Algorithms",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "This demo covers:\n"
            f"  1. Insert/remove check: {NUMS - 1} inserts in steps of {GAP}, odd values removed\n"
            "  2. Copy and mirror construction\n"
            "  3. Spine rewiring with rotate_right / rotate_left\n"
            "  4. Height versus insertion order\n"
            "  5. Level printing\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.35, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_copy_and_mirror.png": "Example 2: Copy and Mirror",
            "02_spine_rotations.png": "Example 3: Spine Rotations",
            "03_height_vs_order.png": "Example 4: Height vs Insertion Order",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    print("Binary Search Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    errors = example_1_insert_remove_check()
    example_2_copy_and_mirror()
    example_3_spine_rotations()
    example_4_height_vs_order()
    example_5_level_printing()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully." if errors == 0 else f"{errors} check(s) failed.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
