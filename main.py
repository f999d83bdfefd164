#!/usr/bin/env python3
"""
khcube: Khovanov cube of resolutions over GF(2)

Computes the differential maps of the cube of resolutions of a crossing
diagram in the unreduced, reduced and annular theories.

Usage:
    # Unreduced maps of a diagram in planar diagram notation
    python main.py maps --input trefoil.txt

    # Reduced maps, written to JSON
    python main.py maps --input trefoil.txt --reduced --output maps.json

    # Annular maps restricted to annular grading 0
    python main.py maps --input hopf_annular.txt --annular --grading 0

    # Run demos
    python main.py demo --example all

Input formats:
    plain PD     whitespace separated labels, four per crossing
    annular      "n f" ("n f g" with --grading-from-file), then 4n
                 labels, then f faces written as "count label label ..."
    JSON         {"crossings": [[...], ...], "faces": [[...], ...], "grading": g}
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

try:
    from khcube import (
        AnnularFaces,
        ComplexConfig,
        KhovanovError,
        PlanarDiagram,
        build_complex,
        is_chain_complex,
        __version__,
    )
except ImportError:
    sys.path.insert(0, str(Path(__file__).parent))
    from khcube import (
        AnnularFaces,
        ComplexConfig,
        KhovanovError,
        PlanarDiagram,
        build_complex,
        is_chain_complex,
        __version__,
    )

log = logging.getLogger("khcube.cli")

HOPF_PD = [[1, 2, 3, 4], [3, 4, 1, 2]]
# Bounded faces of the Hopf diagram with the unbounded face {4,1} left out;
# the puncture sits in the middle lens {2,3}.
HOPF_FACES = [[2, 3], [1, 2], [3, 4]]
TREFOIL_PD = [[1, 5, 2, 4], [3, 1, 4, 6], [5, 3, 6, 2]]


def parse_plain_pd(text: str) -> PlanarDiagram:
    """Whitespace separated labels read four at a time."""
    return PlanarDiagram.from_flat([int(tok) for tok in text.split()])


def parse_annular_text(text: str, with_grading: bool = False) -> Tuple[PlanarDiagram, AnnularFaces, Optional[int]]:
    """
    Parse the annular text format.

    Header "n f" (plus the grading when with_grading), then 4n crossing
    labels, then f faces each written as its edge count followed by labels.
    """
    tokens = [int(tok) for tok in text.split()]
    pos = 0

    def take(count: int) -> List[int]:
        nonlocal pos
        if pos + count > len(tokens):
            raise ValueError("annular input ended early")
        out = tokens[pos:pos + count]
        pos += count
        return out

    n, f = take(2)
    grading = take(1)[0] if with_grading else None
    diagram = PlanarDiagram.from_flat(take(4 * n))
    faces = []
    for _ in range(f):
        (count,) = take(1)
        faces.append(take(count))
    if pos != len(tokens):
        raise ValueError(f"{len(tokens) - pos} trailing tokens in annular input")
    return diagram, AnnularFaces.from_lists(faces), grading


def load_problem_from_json(filepath: str) -> Tuple[PlanarDiagram, Optional[AnnularFaces], Optional[int]]:
    """
    Load a diagram from JSON.

    Expected format:
    {
        "crossings": [[1, 2, 3, 4], [3, 4, 1, 2]],
        "faces": [[2, 3], [1, 2], [3, 4]],
        "grading": 0
    }
    "faces" and "grading" are optional.
    """
    with open(filepath, "r") as f:
        data = json.load(f)

    diagram = PlanarDiagram.from_pd_code(data["crossings"])
    faces = AnnularFaces.from_lists(data["faces"]) if data.get("faces") else None
    return diagram, faces, data.get("grading")


def load_problem(filepath: str, annular: bool, grading_from_file: bool):
    if filepath.endswith(".json"):
        return load_problem_from_json(filepath)
    text = Path(filepath).read_text()
    if annular:
        return parse_annular_text(text, with_grading=grading_from_file)
    return parse_plain_pd(text), None, None


def save_result_to_json(filepath: str, result) -> None:
    """Save the differentials to JSON."""
    output = {
        "variant": result.config.variant,
        "dimensions": list(result.dimensions),
        "maps": [M.tolist() for M in result.maps],
    }
    with open(filepath, "w") as f:
        json.dump(output, f)


def print_result(result, show: bool) -> None:
    print(f"\nVariant: {result.config.variant}")
    print(f"  Degree dimensions: {list(result.dimensions)}")
    for k, M in enumerate(result.maps):
        print(f"  d_{k}: {M.shape[0]} x {M.shape[1]}, {int(M.sum())} nonzero entries")
        if show:
            for row in M:
                print("    " + "".join(str(int(x)) for x in row))
    print(f"  d^2 = 0: {is_chain_complex(result.maps)}")


def cmd_maps(args):
    """Execute the maps command."""
    results = []
    for path in args.input:
        print(f"Loading diagram from: {path}")
        try:
            diagram, faces, file_grading = load_problem(path, args.annular, args.grading_from_file)
        except (OSError, ValueError, KeyError) as e:
            print(f"Error reading {path}: {e}")
            return 1

        grading = args.grading if args.grading is not None else file_grading
        annular = args.annular or faces is not None
        try:
            config = ComplexConfig(
                reduced=args.reduced,
                annular=annular,
                grading=grading if annular else None,
                marked_label=args.marked_label,
            )
            print(f"  {diagram}")
            result = build_complex(diagram, config, faces)
        except (KhovanovError, ValueError) as e:
            # One bad diagram does not stop the batch
            log.debug("%s failed", path, exc_info=True)
            print(f"  Error: {e}")
            results.append((path, None))
            continue

        print_result(result, args.show)
        results.append((path, result))

    if args.output:
        done = [r for _, r in results if r is not None]
        if len(done) == 1:
            save_result_to_json(args.output, done[0])
            print(f"\nResults saved to: {args.output}")
        elif done:
            print("\n--output needs exactly one successful diagram; nothing written")

    return 0 if all(r is not None for _, r in results) else 1


def _demo(name: str, diagram: PlanarDiagram, configs, faces=None) -> bool:
    print("=" * 60)
    print(f"Demo: {name}")
    print("=" * 60)
    ok = True
    for config in configs:
        result = build_complex(diagram, config, faces)
        print_result(result, show=False)
        ok = ok and is_chain_complex(result.maps)
    return ok


def demo_hopf():
    return _demo(
        "Hopf link, 2 crossings",
        PlanarDiagram.from_pd_code(HOPF_PD),
        [ComplexConfig(), ComplexConfig(reduced=True)],
    )


def demo_trefoil():
    return _demo(
        "Trefoil, 3 crossings",
        PlanarDiagram.from_pd_code(TREFOIL_PD),
        [ComplexConfig(), ComplexConfig(reduced=True)],
    )


def demo_annular():
    return _demo(
        "Annular Hopf link, puncture in the middle lens",
        PlanarDiagram.from_pd_code(HOPF_PD),
        [ComplexConfig(annular=True)] + [ComplexConfig(annular=True, grading=g) for g in (-2, 0, 2)],
        faces=HOPF_FACES,
    )


def cmd_demo(args):
    """Execute the demo command."""
    demos = {
        "hopf": demo_hopf,
        "trefoil": demo_trefoil,
        "annular": demo_annular,
    }

    names = list(demos) if args.example == "all" else [args.example]
    results = []
    for name in names:
        try:
            passed = demos[name]()
        except KhovanovError as e:
            print(f"Error in {name}: {e}")
            passed = False
        results.append((name, passed))
        print()

    print("=" * 60)
    print("Summary")
    print("=" * 60)
    for name, passed in results:
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
    return 0 if all(p for _, p in results) else 1


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=khcube", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args):
    """Display system information."""
    print(f"khcube v{__version__}")
    print("Khovanov cube of resolutions over GF(2)")
    print()
    print("Variants:")
    print("  regular  - unreduced theory, 2^c basis elements per resolution")
    print("  reduced  - circle through the marked label fixed, 2^(c-1)")
    print("  annular  - circles around the puncture face distinguished")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)

    import scipy
    import networkx
    print("SciPy:", scipy.__version__)
    print("NetworkX:", networkx.__version__)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="khcube",
        description="khcube: Khovanov cube of resolutions over GF(2)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  khcube maps --input trefoil.txt
  khcube maps --input trefoil.txt --reduced --output maps.json
  khcube maps --input hopf_annular.txt --annular --grading 0
  khcube demo --example all
  khcube test -v
  khcube info
""",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"khcube {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Maps command
    maps_parser = subparsers.add_parser("maps", help="Compute differential maps of diagrams")
    maps_parser.add_argument("--input", "-i", nargs="+", required=True, help="Input file(s)")
    maps_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    maps_parser.add_argument("--reduced", "-r", action="store_true", help="Reduced theory")
    maps_parser.add_argument("--marked-label", type=int, default=1, help="Marked label (default: 1)")
    maps_parser.add_argument("--annular", "-a", action="store_true", help="Annular theory (input lists faces)")
    maps_parser.add_argument("--grading", "-g", type=int, default=None, help="Restrict to an annular grading")
    maps_parser.add_argument(
        "--grading-from-file",
        action="store_true",
        help="Annular text header carries the grading as a third number",
    )
    maps_parser.add_argument("--show", action="store_true", help="Print the matrices")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demonstration examples")
    demo_parser.add_argument(
        "--example", "-e",
        choices=["hopf", "trefoil", "annular", "all"],
        default="all",
        help="Which example to run (default: all)",
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    # Info command
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "maps":
        return cmd_maps(args)
    elif args.command == "demo":
        return cmd_demo(args)
    elif args.command == "test":
        return cmd_test(args)
    elif args.command == "info":
        return cmd_info(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
