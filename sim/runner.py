from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
import argparse
import json

from dicerng.context import RNGContext
from dicerng.diagnostics import describe_context, report_counter, report_seed
from dicerng.errors import DiceError
from dicerng.logging_utils import configure_logging
from dicerng.settings import RNGSettings, build_context, load_settings
from dicerng.types import Variant
from sim.metrics import default_run_path, fairness_report, roll_record, write_jsonl


def run_rolls(ctx: RNGContext, n_rolls: int) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    for i in range(n_rolls):
        dice = ctx.roll()
        records.append(roll_record(i, ctx.variant, dice, ctx.counter))
    return records


def _settings_from_args(args: argparse.Namespace) -> RNGSettings:
    settings = load_settings(args.config) if args.config else RNGSettings()
    overrides = {
        "variant": args.variant,
        "seed": args.seed,
        "modulus": args.modulus,
        "factors": tuple(args.factors) if args.factors else None,
        "dice_file": args.dice_file,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(settings, key, value)
    return settings


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Roll dice pairs with a configurable generator")
    ap.add_argument("--config", type=str, default=None, help="YAML file with dice settings")
    ap.add_argument("--variant", type=str, default=None,
                    help="Generator: " + ", ".join(v.value for v in Variant))
    ap.add_argument("--seed", type=str, default=None, help="Decimal seed or 'system'")
    ap.add_argument("--modulus", type=str, default=None, help="Blum, Blum and Shub modulus")
    ap.add_argument("--factors", type=str, nargs=2, default=None, metavar=("P", "Q"),
                    help="Blum, Blum and Shub factors")
    ap.add_argument("--dice-file", type=str, default=None)
    ap.add_argument("--rolls", type=int, default=100)
    ap.add_argument("--out", type=str, default=None, help="JSONL output ('-' to skip)")
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        ctx = build_context(_settings_from_args(args))
    except DiceError as exc:
        print(f"ERROR: {exc}")
        return 2

    with ctx:
        try:
            records = run_rolls(ctx, args.rolls)
        except DiceError as exc:
            print(f"ERROR: {exc}")
            return 1
        print(report_seed(ctx))
        counter_text = report_counter(ctx)
        if counter_text:
            print(counter_text)
        if args.verbose:
            print(json.dumps(describe_context(ctx), indent=2))

    faces = [d for r in records for d in r["dice"]]
    report = fairness_report(faces)
    print(f"Rolled {len(records)} pairs, faces: {report['counts']}")

    if args.out != "-":
        out_path = args.out or default_run_path()
        write_jsonl(out_path, records)
        print(f"Saved rolls to: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
