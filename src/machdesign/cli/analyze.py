"""
Command-line interface for design case analysis.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from ..io.loaders import load_case_json
from ..calculator.validation import evaluate_case
from ..calculator.output import to_json, to_markdown, to_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_DESIGN = 1
EXIT_BAD_INPUT = 2


def _print_messages(validation) -> None:
    for m in validation.messages:
        print(f"  [{m.severity.value.upper()}] {m.code}: {m.message}")
        if m.suggestion:
            print(f"      → {m.suggestion}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="machdesign-analyze",
        description="Evaluate gear train, four-bar linkage and bearing life from a JSON case file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Case file sections (each optional, at least one required):

  {
    "name": "Conveyor drive",
    "gear_train": {"stages": [
      {"kind": "external", "module_mm": 2, "teeth_driver": 20, "teeth_driven": 60},
      {"kind": "planetary", "module_mm": 1.5, "sun_teeth": 24, "planet_teeth": 18,
       "ring_teeth": 60, "fixed_member": "ring"}
    ]},
    "linkage": {"link_lengths": [50, 15, 50, 45]},
    "bearing": {"radial_force_n": 5000, "dynamic_capacity_n": 10000},
    "speed_rpm": 1500,
    "required_life_hours": 50
  }

Examples:
  machdesign-analyze drive.json
  machdesign-analyze drive.json --format markdown -o report.md
  machdesign-analyze drive.json --format json -v

Exit status: 0 valid design, 1 design has errors, 2 unreadable input.
        """
    )

    parser.add_argument(
        'case_file',
        type=Path,
        help='JSON case file'
    )

    parser.add_argument(
        '--format',
        choices=['summary', 'json', 'markdown'],
        default='summary',
        help='Output format (default: summary)'
    )

    parser.add_argument(
        '-o', '--output',
        type=Path,
        default=None,
        help='Write the report to this file instead of stdout'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log intermediate values'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        case = load_case_json(args.case_file)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except json.JSONDecodeError as e:
        print(f"Error: {args.case_file} is not valid JSON: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except ValueError as e:
        print(f"Error: invalid case file {args.case_file}:\n{e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logger.info(f"Loaded case {case.name or args.case_file}")
    report, validation = evaluate_case(case)

    if args.format == 'json':
        text = to_json(report, validation)
    elif args.format == 'markdown':
        text = to_markdown(report, validation)
    else:
        text = to_summary(report)

    if args.output is not None:
        args.output.write_text(text + "\n")
        print(f"Saved {args.format} report: {args.output}")
    else:
        print(text)

    if args.format == 'summary' and validation.messages:
        print("\nValidation:")
        _print_messages(validation)

    if not validation.valid:
        print(f"\n{len(validation.errors)} error(s) found", file=sys.stderr)
        return EXIT_INVALID_DESIGN

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
