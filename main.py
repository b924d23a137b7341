# -*- coding: utf-8 -*-
# Foilwise/main.py

"""
End-to-end driver:
  1) Load & normalize airfoil sections (.dat / .csv)
  2) Print descriptors
  3) Interpolate intermediate sections along the span
  4) Export sections (.dat + DUST layout)
  5) Overlay plot

Usage:
    python main.py root.dat mid.dat tip.dat --span 0 0.5 1 --n 10 --out out
"""

import argparse
import logging
import os
import sys

import numpy as np

from foilwise import api
from foilwise.core.errors import GeometryError


def _parse_args(argv):
    p = argparse.ArgumentParser(description="Airfoil geometry and span interpolation.")
    p.add_argument("files", nargs="+", help="Airfoil sections (.dat or .csv), root to tip.")
    p.add_argument("--span", nargs="+", type=float, default=None,
                   help="Span coordinate of each section (default: evenly spaced in [0, 1]).")
    p.add_argument("--n", type=int, default=10, help="Number of interpolated sections.")
    p.add_argument("--out", default="out", help="Output folder.")
    p.add_argument("--pairing", default="truncate", choices=["strict", "truncate"])
    p.add_argument("--plot", action="store_true", help="Save an overlay plot.")
    return p.parse_args(argv)


def main(argv=None):
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Foilwise")

    args = _parse_args(argv)
    settings = {"pairing": args.pairing}
    os.makedirs(args.out, exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Load & normalize
    # ------------------------------------------------------------------
    sections = [api.load_and_normalize(f, settings) for f in args.files]

    # ------------------------------------------------------------------
    # 2) Descriptors
    # ------------------------------------------------------------------
    for af in sections:
        try:
            desc = api.describe_airfoil(af, settings)
        except GeometryError as e:
            log.warning("Cannot describe '%s': %s", af.name, e)
            continue
        print(af.summary())
        print(" camber_length    {:9.4f}".format(desc["camber_length"]))

    # ------------------------------------------------------------------
    # 3) Span interpolation
    # ------------------------------------------------------------------
    if len(sections) < 2:
        log.info("Single section given; skipping span interpolation.")
        return 0
    span = args.span if args.span is not None else np.linspace(0.0, 1.0, len(sections))
    targets = np.linspace(float(np.min(span)), float(np.max(span)), args.n)
    interpolated = api.interpolate_span(sections, span, targets, settings)

    # ------------------------------------------------------------------
    # 4) Export
    # ------------------------------------------------------------------
    for af in interpolated:
        stem = af.name.replace(" ", "_")
        api.export(af, os.path.join(args.out, stem + ".dat"), settings=settings)
        api.export(af, os.path.join(args.out, stem + "_dust.dat"), dust=True, settings=settings)

    # ------------------------------------------------------------------
    # 5) Plot
    # ------------------------------------------------------------------
    if args.plot:
        from foilwise.post.plot_airfoil import plot_airfoils
        plot_airfoils(interpolated, show=False, save_path=os.path.join(args.out, "sections.png"))

    log.info("Done: %d sections written to %s", len(interpolated), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
