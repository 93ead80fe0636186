"""
OrderedTree Demo: walkthroughs, custom comparators, and benchmark plots.

Generates:
- viz/*.png: individual visualization files
- report.pdf: comprehensive PDF report
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

from ordered_tree import OrderedTree
from tree_benchmark import SEED, make_large_data, run_benchmark

np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

RANDOM_SIZES = [1_000, 5_000, 10_000, 50_000, 100_000]
SORTED_SIZES = [250, 500, 1_000, 2_000, 4_000]


def node_depths(tree):
    """Depth of every node, root at depth 1."""
    depths = []
    stack = [(tree.root, 1)] if tree.root is not None else []
    while stack:
        node, depth = stack.pop()
        depths.append(depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return np.array(depths)


def example_1_integer_walkthrough():
    """Insert, duplicate insert, and the three delete cases on integers."""
    print("=" * 60)
    print("Example 1: Integer Walkthrough")
    print("=" * 60)

    tree = OrderedTree()
    for value in [5, 11, 8, 9, 15, 2]:
        tree.insert(value)
    print(f"After inserting 5, 11, 8, 9, 15, 2: {tree.render()}")
    print(f"Pre-order (shape):                 {tree.pre_order()}")

    tree.insert(5)
    print(f"After inserting 5 again:           {tree.render()}")

    tree.delete(8)
    print(f"After deleting 8 (one child):      {tree.render()}")

    tree.delete(5)
    print(f"After deleting 5 (two children):   {tree.render()}")
    print(f"New root value: {tree.root.value}")
    print(f"find(5) = {tree.find(5)}, find(9) = {tree.find(9)}")

    return tree


def example_2_custom_comparators():
    """Strings, descending order, and records ordered by one field."""
    print("\n" + "=" * 60)
    print("Example 2: Custom Comparators")
    print("=" * 60)

    fruit = OrderedTree(lambda a, b: a < b)
    for name in ["banana", "apple", "cherry"]:
        fruit.insert(name)
    print(f"Lexicographic: {fruit.in_order()}")

    descending = OrderedTree(lambda a, b: a > b)
    for value in [5, 11, 8, 9, 15, 2]:
        descending.insert(value)
    print(f"Descending:    {descending.in_order()}")

    by_price = OrderedTree(lambda a, b: a[1] < b[1])
    for item in [("widget", 4.5), ("gadget", 2.0), ("doohickey", 4.5), ("gizmo", 9.9)]:
        by_price.insert(item)
    print(f"By price:      {by_price.in_order()}")
    print("  ('doohickey', 4.5) was dropped: same price as ('widget', 4.5)")
    print(f"  find(('widget', 4.5))    = {by_price.find(('widget', 4.5))}")
    print(f"  find(('doohickey', 4.5)) = {by_price.find(('doohickey', 4.5))}")

    return fruit, descending, by_price


def example_3_shape_random_vs_sorted():
    """Node depth distribution for random and sorted insertion order."""
    print("\n" + "=" * 60)
    print("Example 3: Tree Shape, Random vs Sorted Insertion")
    print("=" * 60)

    n = 2_000
    values = make_large_data(size=n, high=100_000, seed=SEED)

    random_tree = OrderedTree()
    for value in values:
        random_tree.insert(value)

    sorted_tree = OrderedTree()
    for value in sorted(values):
        sorted_tree.insert(value)

    random_depths = node_depths(random_tree)
    sorted_depths = node_depths(sorted_tree)

    print(f"{'Order':<10} {'Height':>8} {'Mean depth':>12} {'log2(n)':>10}")
    print(f"{'random':<10} {random_tree.height():>8} {random_depths.mean():>12.2f} {np.log2(n):>10.2f}")
    print(f"{'sorted':<10} {sorted_tree.height():>8} {sorted_depths.mean():>12.2f} {np.log2(n):>10.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].hist(random_depths, bins=np.arange(1, random_depths.max() + 2) - 0.5,
                 color="steelblue", alpha=0.8)
    axes[0].axvline(np.log2(n), color="red", linestyle="--", linewidth=2, label="log2(n)")
    axes[0].set_xlabel("Node depth")
    axes[0].set_ylabel("Count")
    axes[0].set_title(f"Random insertion (n={n}, height={random_tree.height()})")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(np.sort(sorted_depths), color="coral", linewidth=2)
    axes[1].set_xlabel("Node rank")
    axes[1].set_ylabel("Node depth")
    axes[1].set_title(f"Sorted insertion (n={n}, height={sorted_tree.height()})")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_shape.png", dpi=150)
    plt.close(fig)

    return fig, (random_tree, sorted_tree)


def example_4_build_and_delete_timing():
    """Build and single-delete timing across tree sizes."""
    print("\n" + "=" * 60)
    print("Example 4: Build and Delete Timing")
    print("=" * 60)

    random_result = run_benchmark(RANDOM_SIZES, repeats=3, seed=SEED)
    sorted_result = run_benchmark(SORTED_SIZES, repeats=1, seed=SEED, ordering="sorted")

    for label, result in (("random", random_result), ("sorted", sorted_result)):
        print(f"\n  {label} insertion")
        print(f"  {'Nodes':>10} {'Build (ms)':>12} {'Delete (us)':>12} {'Height':>8}")
        print(f"  {'-'*46}")
        for n, b, d, h in zip(result["sizes"], result["build_seconds"],
                              result["delete_seconds"], result["heights"]):
            print(f"  {n:>10} {b * 1000:>12.2f} {d * 1e6:>12.2f} {h:>8}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    axes[0].loglog(random_result["sizes"], random_result["build_seconds"] * 1000, "o-",
                   color="steelblue", linewidth=2, label="random")
    axes[0].loglog(sorted_result["sizes"], sorted_result["build_seconds"] * 1000, "s-",
                   color="coral", linewidth=2, label="sorted")
    axes[0].set_xlabel("Nodes")
    axes[0].set_ylabel("Build time (ms)")
    axes[0].set_title("Bulk Insertion")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].semilogx(random_result["sizes"], random_result["delete_seconds"] * 1e6, "o-",
                     color="steelblue", linewidth=2, label="random")
    axes[1].semilogx(sorted_result["sizes"], sorted_result["delete_seconds"] * 1e6, "s-",
                     color="coral", linewidth=2, label="sorted")
    axes[1].set_xlabel("Nodes")
    axes[1].set_ylabel("Delete time (us)")
    axes[1].set_title("Single Delete (midpoint value)")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    axes[2].semilogx(random_result["sizes"], random_result["heights"], "o-",
                     color="steelblue", linewidth=2, label="random")
    axes[2].semilogx(random_result["sizes"], 2 * np.log2(random_result["sizes"]), "g--",
                     linewidth=1.5, label="2 log2(n)")
    axes[2].set_xlabel("Nodes")
    axes[2].set_ylabel("Height")
    axes[2].set_title("Height Growth (random insertion)")
    axes[2].legend()
    axes[2].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_timing.png", dpi=150)
    plt.close(fig)

    return fig, (random_result, sorted_result)


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "OrderedTree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced Binary Search Tree", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Shape & Timing Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
OrderedTree is a binary search tree ordered by a caller-supplied
comparator less(a, b). It never rebalances.

• Operations:
  - insert: equivalent values are ignored, never overwritten
  - find: descends by less, confirms with ==
  - delete: leaf, single child, or two children via the
    in-order successor's value
  - in_order / render: ascending values under less

Key Findings:
  1. Random insertion keeps height within a small multiple of log2(n)
  2. Sorted insertion degrades the tree to a chain of height n
  3. Build time grows as n log n for random input, n^2 for sorted input
  4. A single delete costs O(height)
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, png_name in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / png_name))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "ORDERED TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}\n")

    example_1_integer_walkthrough()
    example_2_custom_comparators()

    figures = []

    example_3_shape_random_vs_sorted()
    figures.append(("Example 3: Tree Shape", "03_shape.png"))

    example_4_build_and_delete_timing()
    figures.append(("Example 4: Timing", "04_timing.png"))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
