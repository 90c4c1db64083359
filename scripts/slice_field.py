"""Plot planar cross-sections of the menger prison distance field.

Shows one lattice period of the field on the three coordinate planes through
*--offset*, as signed-distance heatmaps with the zero contour traced.

Usage::

    python scripts/slice_field.py                      # saves menger_slices.png
    python scripts/slice_field.py --offset 20 --res 400
    python scripts/slice_field.py --iterations 2       # coarser carving

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

from mengerprison import MengerPrison3D, sample_slice
from mengerprison.cli import add_config_arguments, config_from_args, setup_logging


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------

def _slices(prison: MengerPrison3D, offset: float, res: int) -> list[tuple[str, np.ndarray]]:
    """Return ``(label, phi)`` for the xy, xz and yz planes through *offset*."""
    span = (0.0, prison.period)
    normals = {"xy": "z", "xz": "y", "yz": "x"}
    return [
        ("%s  (%s = %g)" % (plane, normals[plane], offset),
         sample_slice(prison, plane, offset, (span, span), (res, res)))
        for plane in ("xy", "xz", "yz")
    ]


def render_slices(prison: MengerPrison3D, out_path: str, offset: float, res: int) -> None:
    fig, axes = plt.subplots(1, 3, figsize=(3 * 4.0, 4.0), facecolor="#111111")
    extent = [0.0, prison.period, 0.0, prison.period]

    for ax, (label, phi) in zip(axes, _slices(prison, offset, res)):
        ax.set_facecolor("#111111")
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(label, color="white", fontsize=9, pad=3)
        lim = max(np.nanmax(np.abs(phi)), 1e-6)
        ax.imshow(phi, origin="lower", extent=extent,
                  cmap="seismic", vmin=-lim, vmax=lim, interpolation="bilinear")
        if phi.min() < 0.0 < phi.max():
            ax.contour(phi, levels=[0.0], colors="white", linewidths=0.6, extent=extent)

    fig.suptitle("menger prison — distance field slices", color="white", fontsize=12)
    plt.tight_layout(pad=0.4)
    fig.savefig(out_path, dpi=150, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot cross-sections of the menger prison field.")
    parser.add_argument("--out", default="menger_slices.png", help="Output PNG path")
    parser.add_argument("--offset", type=float, default=0.0,
                        help="Coordinate of each slicing plane along its normal")
    parser.add_argument("--res", type=int, default=300, help="Samples per slice axis")
    add_config_arguments(parser)
    args = parser.parse_args()

    setup_logging(args.verbose, args.log_file)
    try:
        prison = MengerPrison3D(config_from_args(args))
    except (ValueError, TypeError) as e:
        raise SystemExit(f"Invalid render settings: {e}")
    render_slices(prison, args.out, args.offset, args.res)


if __name__ == "__main__":
    main()
