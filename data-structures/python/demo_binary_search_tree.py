"""
Binary Search Tree Demo -- Deletion cases and insertion-order effects.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

SCENARIO = [3, 2, 11, 13, 12, 8, 9, 8.5, 2.5]

DELETION_CASES = [
    ("Root", 3),
    ("Leaf", 12),
    ("Single Child", 2),
    ("Two Children", 11),
]

NODE_COLOR = "#3498db"
HIGHLIGHT_COLOR = "#e74c3c"


def build_scenario():
    bst = BinarySearchTree(float)
    for value in SCENARIO:
        bst.insert(value)
    return bst


def _layout(shape, depth, positions, edges):
    """Place nodes at (in-order index, -depth); returns the subtree root's point."""
    if shape is None:
        return None
    value, left, right = shape
    left_point = _layout(left, depth + 1, positions, edges)
    point = (len(positions), -depth)
    positions.append((point[0], point[1], value))
    right_point = _layout(right, depth + 1, positions, edges)
    for child_point in (left_point, right_point):
        if child_point is not None:
            edges.append((point, child_point))
    return point


def draw_tree(ax, bst, title, highlight=None):
    positions, edges = [], []
    _layout(bst.shape(), 0, positions, edges)
    for (x0, y0), (x1, y1) in edges:
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1.5, zorder=1)
    for x, y, value in positions:
        color = HIGHLIGHT_COLOR if value == highlight else NODE_COLOR
        ax.scatter([x], [y], s=900, color=color, edgecolors="black", zorder=2)
        ax.text(x, y, f"{value:g}", ha="center", va="center",
                color="white", fontsize=10, fontweight="bold", zorder=3)
    ax.set_title(title, fontsize=13, fontweight="bold")
    ax.axis("off")
    if positions:
        xs = np.array([p[0] for p in positions])
        ys = np.array([p[1] for p in positions])
        ax.set_xlim(xs.min() - 1, xs.max() + 1)
        ax.set_ylim(ys.min() - 1, ys.max() + 1)


def example_1_build_tree():
    """Insert the scenario values and dump the tree."""
    print("=" * 60)
    print("Example 1: Building the Tree")
    print("=" * 60)

    bst = build_scenario()
    print(f"  Inserted:  {SCENARIO}")
    print(f"  In-order:  {bst.in_order()}")
    print(f"  Max:       {bst.max()}")
    print(f"  Height:    {bst.height()}")
    bst.print_tree()

    fig, ax = plt.subplots(figsize=(10, 6))
    draw_tree(ax, bst, "Scenario Tree After Insertion")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_scenario_tree.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "01_scenario_tree.png"]


def example_2_deletion_cases():
    """Delete one value per structural case, each on a fresh tree."""
    print("=" * 60)
    print("Example 2: Deletion Cases")
    print("=" * 60)

    fig, axes = plt.subplots(len(DELETION_CASES), 2, figsize=(14, 4.5 * len(DELETION_CASES)))

    for row, (name, value) in enumerate(DELETION_CASES):
        bst = build_scenario()
        draw_tree(axes[row][0], bst, f"{name}: before deleting {value:g}", highlight=value)
        bst.delete(value)
        root = bst.shape()[0]
        draw_tree(axes[row][1], bst, f"{name}: after deleting {value:g}", highlight=root)
        print(f"  {name:<13} delete {value:<4g} -> root {root:g}, in-order {bst.in_order()}")

    fig.suptitle("BST Deletion — Leaf, Single Child, Two Children, Root",
                 fontsize=15, fontweight="bold", y=0.995)
    fig.tight_layout(rect=[0, 0, 1, 0.98])
    fig.savefig(VIZ_DIR / "02_deletion_cases.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "02_deletion_cases.png"]


def example_3_drain_tree():
    """Delete every value in insertion order until the tree is empty."""
    print("=" * 60)
    print("Example 3: Draining the Tree")
    print("=" * 60)

    bst = build_scenario()
    sizes = [bst.size()]
    maxima = [bst.max()]
    for value in SCENARIO:
        bst.delete(value)
        sizes.append(bst.size())
        maxima.append(bst.max() if not bst.is_empty() else np.nan)
        print(f"  delete {value:<4g} size={bst.size()} max={bst.max()}")
    bst.delete(SCENARIO[0])
    print(f"  Empty: {bst.is_empty()}")

    fig, ax = plt.subplots(figsize=(10, 5))
    steps = np.arange(len(sizes))
    ax.step(steps, sizes, where="post", color=NODE_COLOR, linewidth=2, label="size")
    ax.plot(steps, maxima, "o--", color=HIGHLIGHT_COLOR, linewidth=1.5, label="max")
    ax.set_xlabel("Deletions")
    ax.set_title("Size and Max While Draining", fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_drain.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "03_drain.png"]


def example_4_insertion_order():
    """Compare height for sorted vs shuffled insertion (no rebalancing)."""
    print("=" * 60)
    print("Example 4: Height vs Insertion Order")
    print("=" * 60)

    sizes = np.arange(10, 401, 30)
    trials = 20
    sorted_heights = []
    shuffled_heights = []

    for n in sizes:
        bst = BinarySearchTree(int)
        for value in range(n):
            bst.insert(value)
        sorted_heights.append(bst.height())

        heights = []
        for _ in range(trials):
            bst = BinarySearchTree(int)
            for value in np.random.permutation(n):
                bst.insert(int(value))
            heights.append(bst.height())
        shuffled_heights.append(np.mean(heights))
        print(f"  n={n:<4d} sorted height={sorted_heights[-1]:<4d} "
              f"shuffled mean height={shuffled_heights[-1]:.1f}")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, sorted_heights, color=HIGHLIGHT_COLOR, linewidth=2, label="Sorted insertion")
    ax.plot(sizes, shuffled_heights, color=NODE_COLOR, linewidth=2, label="Shuffled insertion (mean)")
    ax.plot(sizes, 2 * np.log2(sizes), "k:", linewidth=1.5, label="2·log2(n)")
    ax.set_xlabel("Number of values", fontsize=12)
    ax.set_ylabel("Height", fontsize=12)
    ax.set_title("Unbalanced BST Height", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_height_vs_order.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "04_height_vs_order.png"]


def generate_pdf_report(all_figures):
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    titles = [
        "Example 1: Scenario Tree",
        "Example 2: Deletion Cases",
        "Example 3: Draining the Tree",
        "Example 4: Height vs Insertion Order",
    ]

    with PdfPages(REPORT_PATH) as pdf:
        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  BINARY SEARCH TREE — COMPREHENSIVE DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_build_tree())
    all_figures.extend(example_2_deletion_cases())
    all_figures.extend(example_3_drain_tree())
    all_figures.extend(example_4_insertion_order())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
