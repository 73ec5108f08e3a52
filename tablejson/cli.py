"""Command‑line interface: **tablejson roundtrip / bench**"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from random import randint, random

import xxhash
from tqdm import tqdm

from .convert import from_native
from .decoder import TableDecoder
from .encoder import TableEncoder
from .errors import TableJSONError
from .json_util import decode_backend, encode_backend
from .utils_profile import profile_section

LOGGER = logging.getLogger("tablejson.cli")
LOGGER.addHandler(logging.NullHandler())


def _digest(text: str) -> str:
    return xxhash.xxh3_64_hexdigest(text.encode("utf-8"))


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_roundtrip(ns) -> int:
    enc = TableEncoder(max_depth=ns.max_depth)
    dec = TableDecoder(max_depth=ns.max_depth)
    raw = ns.input.read_bytes()

    try:
        with profile_section("decode", enabled=ns.profile) as t_dec:
            value = dec.decode(raw)
        with profile_section("encode", enabled=ns.profile) as t_enc:
            text = enc.encode(value)
    except TableJSONError as e:
        print(f"❌ {ns.input}: {e}", file=sys.stderr)
        return 1

    ns.output.write_text(text, encoding="utf-8")
    print(f"✓ round-trip in {t_dec.ms + t_enc.ms:.2f} ms → {ns.output}")

    if ns.verify:
        again = enc.encode(dec.decode(text))
        d1, d2 = _digest(text), _digest(again)
        if d1 != d2:
            print(f"❌ unstable output: {d1} != {d2}", file=sys.stderr)
            return 1
        print(f"✓ stable (xxh3 {d1})")
    return 0


def _synthetic(n: int):
    return from_native(
        [
            {"id": i, "score": random(), "tags": [randint(0, 9) for _ in range(5)], "name": f"row{i}"}
            for i in range(n)
        ]
    )


def cmd_bench(ns) -> int:
    """Benchmark encode → decode with optional progress bar."""
    value = _synthetic(ns.n)
    enc = TableEncoder()
    dec = TableDecoder()

    timings = {}
    text = ""
    for step in tqdm(["encode", "decode"], desc="Benchmark", disable=not ns.progress):
        with profile_section(step, enabled=ns.profile) as timing:
            if step == "encode":
                text = enc.encode(value)
            else:
                dec.decode(text)
        timings[step] = timing.ms

    print(
        f"n={ns.n:,} | {len(text):,} bytes | "
        f"encode {timings['encode']:.2f} ms ({encode_backend()}) | "
        f"decode {timings['decode']:.2f} ms ({decode_backend()})"
    )
    return 0


# -----------------------------------------------------------------------------
# Argument parsing
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tablejson", description="host table ↔ JSON toolkit")
    ap.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    ap.add_argument("--profile", action="store_true", default=None,
                    help="cProfile each direction, logged to tablejson.profile (default: TABLEJSON_PROFILE)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    # roundtrip ------------------------------------------------------
    sp = sub.add_parser("roundtrip", help="JSON → table value → JSON")
    sp.add_argument("--input", "-i", type=Path, required=True)
    sp.add_argument("--output", "-o", type=Path, required=True)
    sp.add_argument("--max-depth", type=int, default=None, help="nesting limit (default: config)")
    sp.add_argument("--verify", action="store_true", help="re-encode output and compare digests")
    sp.set_defaults(func=cmd_roundtrip)

    # bench ----------------------------------------------------------
    sp = sub.add_parser("bench", help="quick encode/decode benchmark")
    sp.add_argument("--n", type=int, default=10000, help="synthetic record count")
    sp.add_argument("--progress", action="store_true", help="show progress bar with tqdm")
    sp.set_defaults(func=cmd_bench)

    return ap


def main(argv=None) -> int:
    ns = build_parser().parse_args(argv)
    if ns.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    elif ns.profile:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    return ns.func(ns)


if __name__ == "__main__":
    sys.exit(main())
