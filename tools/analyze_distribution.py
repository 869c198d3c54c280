"""
Analiza la distribucion de caras en logs JSONL de tiradas (sim/runner.py).
"""
import glob
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sim.metrics import fairness_report, read_faces


def analyze_runs(pattern: str) -> bool:
    files = sorted(glob.glob(pattern))
    if not files:
        print(f"ERROR: No JSONL files match {pattern}")
        return False

    print(f"Analyzing {len(files)} files:\n")
    all_faces = []
    for run_file in files:
        faces = read_faces(run_file)
        all_faces.extend(faces)
        report = fairness_report(faces)
        print(f"  {Path(run_file).name:30s} -> {report['total']:6d} dice, counts: {report['counts']}")

    report = fairness_report(all_faces)
    if not report["total"]:
        print("ERROR: No dice found in files!")
        return False

    total = report["total"]
    expected = total / 6
    print(f"\n{'='*70}")
    print("GLOBAL STATISTICS")
    print(f"{'='*70}\n")
    print(f"Total dice: {total}")
    print(f"Chi-square statistic: {report['chi2']:.2f}")
    print(f"P-value: {report['p_value']:.6f}")
    if report["uniform"]:
        print("\nOK: Distribution is UNIFORM (p > 0.05)\n")
    else:
        print("\nWARN: Distribution is BIASED (p < 0.05)\n")

    print(f"{'d6':>3} | {'Count':>7} | {'%':>6} | {'Ratio':>6}")
    print(f"{'-'*3}-+-{'-'*7}-+-{'-'*6}-+-{'-'*6}")
    for face, count in enumerate(report["counts"], start=1):
        pct = count / total * 100
        print(f"{face:3d} | {count:7d} | {pct:5.1f}% | {count / expected:5.2f}x")
    return True


if __name__ == "__main__":
    pattern = sys.argv[1] if len(sys.argv) > 1 else "runs/rolls_*.jsonl"
    sys.exit(0 if analyze_runs(pattern) else 1)
