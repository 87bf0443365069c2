import argparse
import logging
import os
import sys
from typing import Iterable, Optional

import numpy as np

from gradnoise import noise_seed, random_seed, noise, fbm, noise_grid
from gradnoise.safe_parse import to_seed
import render
from settings import SETTINGS, load_settings

logger = logging.getLogger("gradnoise.cli")


def resolve_seed(raw: Optional[str]):
    if raw is None:
        seed = random_seed()
        logger.info("No --seed given, drew seed %d", seed.value)
        return seed
    return noise_seed(to_seed(raw))


def check_positive(name: str, value: int) -> bool:
    if value < 1:
        print(f"--{name} must be at least 1 (got {value})", file=sys.stderr)
        return False
    return True


def cmd_sample(args) -> int:
    seed = resolve_seed(args.seed)
    octaves = args.octaves if args.octaves is not None else 1
    if not check_positive("octaves", octaves):
        return 2
    if octaves == 1:
        value = noise(seed, args.x, args.y)
    else:
        falloff = args.falloff if args.falloff is not None else args.settings.falloff
        value = fbm(seed, args.x, args.y, octaves, falloff)
    print(repr(value))
    return 0


def cmd_tables(args) -> int:
    seed = resolve_seed(args.seed)
    count = max(0, min(args.count, len(seed.perm)))
    print(f"seed={seed.value}")
    print(" ".join(str(v) for v in seed.perm[:count]))
    return 0


def cmd_export(args) -> int:
    s = args.settings
    octaves = args.octaves if args.octaves is not None else s.octaves
    width = args.width if args.width is not None else s.width
    height = args.height if args.height is not None else s.height
    for name, value in (("octaves", octaves), ("width", width),
                        ("height", height), ("zoom", args.zoom)):
        if not check_positive(name, value):
            return 2
    seed = resolve_seed(args.seed)
    field = noise_grid(
        seed,
        width,
        height,
        args.scale if args.scale is not None else s.scale,
        octaves=octaves,
        falloff=args.falloff if args.falloff is not None else s.falloff,
        offset=tuple(args.offset),
    )

    os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
    if args.out.lower().endswith(".npz"):
        np.savez_compressed(args.out, field=field, seed=np.int64(seed.value))
    else:
        if args.gray:
            img = render.render_field(field, scale=args.zoom)
        else:
            low = tuple(args.color_low) if args.color_low else s.low_color
            high = tuple(args.color_high) if args.color_high else s.high_color
            img = render.render_field(field, low, high, scale=args.zoom)
        img.save(args.out)
    logger.info("Exported %dx%d field (seed=%d) to %s",
                field.shape[1], field.shape[0], seed.value, args.out)
    print(f"Saved {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Sample and export gradient noise fields")
    ap.add_argument("--config", default=None, help="JSON settings file")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers()

    ap_sample = sub.add_parser("sample", help="Print the noise value at a point")
    ap_sample.add_argument("x", type=float)
    ap_sample.add_argument("y", type=float)
    ap_sample.add_argument("--seed", default=None, help="Numeric seed, e.g. 42 or 0.5")
    ap_sample.add_argument("--octaves", type=int, default=None,
                           help="fBm octaves (default 1: plain noise)")
    ap_sample.add_argument("--falloff", type=float, default=None)
    ap_sample.set_defaults(func=cmd_sample)

    ap_tab = sub.add_parser("tables", help="Print the permutation table of a seed")
    ap_tab.add_argument("--seed", default=None)
    ap_tab.add_argument("--count", type=int, default=16)
    ap_tab.set_defaults(func=cmd_tables)

    ap_exp = sub.add_parser("export", help="Render a noise field to PNG or NPZ")
    ap_exp.add_argument("--out", required=True, help="Output path (.png or .npz)")
    ap_exp.add_argument("--seed", default=None)
    ap_exp.add_argument("--width", type=int, default=None)
    ap_exp.add_argument("--height", type=int, default=None)
    ap_exp.add_argument("--scale", type=float, default=None,
                        help="Noise-space units per pixel")
    ap_exp.add_argument("--octaves", type=int, default=None)
    ap_exp.add_argument("--falloff", type=float, default=None)
    ap_exp.add_argument("--offset", type=float, nargs=2, default=(0.0, 0.0),
                        metavar=("X", "Y"))
    ap_exp.add_argument("--zoom", type=int, default=1, help="Nearest-neighbour upscale")
    ap_exp.add_argument("--gray", action="store_true", help="Grayscale instead of colour ramp")
    ap_exp.add_argument("--color-low", type=int, nargs=3, metavar=("R", "G", "B"))
    ap_exp.add_argument("--color-high", type=int, nargs=3, metavar=("R", "G", "B"))
    ap_exp.set_defaults(func=cmd_export)
    return ap


def main(argv: Optional[Iterable[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    args.settings = load_settings(args.config) if args.config else SETTINGS
    if hasattr(args, "func"):
        return args.func(args)
    ap.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
