"""Command-line interface for SRX rule validation and text segmentation."""

import argparse
import sys
from pathlib import Path

from srxsegmenter.core.util import safe_json
from srxsegmenter.rules.loader import load_rule_table, RuleTableLoadError
from srxsegmenter.runtime.engine import build_engine
from srxsegmenter.runtime.errors import SegmentationError


def validate_command(args):
    """Validate a rule file and report rules that failed to compile."""
    try:
        rules_path = Path(args.rules_file)
        if not rules_path.exists():
            print(f"Error: Rule file not found: {rules_path}")
            return 1

        table = load_rule_table(rules_path)
        engine = build_engine(table)
        errors = engine.errors()

        if args.json:
            print(safe_json({
                "cascade": table.cascade,
                "languages": {name: len(engine.bucket(name)) for name in engine.languages},
                "errors": errors,
            }))
            return 0

        print(f"Validating rules: {rules_path}")
        dropped = sum(len(reasons) for reasons in errors.values())
        status = "✅ Rule table is valid!" if not dropped else "⚠️  Rule table loaded with dropped rules"
        print(status)
        print(f"   Cascade: {table.cascade}")
        print(f"   Languages: {len(engine.languages)}")
        print(f"   Map entries: {len(table.language_map)}")
        print(f"   Dropped rules: {dropped}")

        if args.verbose:
            print("\nLanguages:")
            for name in engine.languages:
                print(f"   {name}: {len(engine.bucket(name))} rules, {len(errors[name])} dropped")

        if dropped:
            print("\nDropped rules:")
            for name, reasons in errors.items():
                for reason in reasons:
                    print(f"   {name}: {reason}")

        return 0

    except (RuleTableLoadError, SegmentationError) as e:
        print(f"❌ Rule validation failed: {e}")
        return 1


def split_command(args):
    """Segment every line of an input file and write one segment per line."""
    try:
        table = load_rule_table(args.rules_file)
        rules = build_engine(table).language_rules(args.language)
    except (RuleTableLoadError, SegmentationError) as e:
        print(f"❌ Cannot load rules: {e}", file=sys.stderr)
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    output = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            for line in f:
                for segment in rules.split(line.rstrip("\r\n")):
                    output.write(segment)
                    output.write("\n")
    except (UnicodeDecodeError, OSError) as e:
        print(f"❌ Cannot read input {input_path}: {e}", file=sys.stderr)
        return 1
    finally:
        if output is not sys.stdout:
            output.close()

    return 0


def info_command(args):
    """Display srx-segmenter version and library information."""
    print("srx-segmenter CLI")
    print("=" * 50)

    # Try to get version from package
    try:
        import importlib.metadata
        version = importlib.metadata.version("srx-segmenter")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nLibraries:")

    import regex
    import numpy
    import pydantic
    import yaml
    print(f"   regex: {regex.__version__}")
    print(f"   numpy: {numpy.__version__}")
    print(f"   pydantic: {pydantic.VERSION}")
    print(f"   pyyaml: {yaml.__version__}")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="srx-segment",
        description="SRX rule validation and text segmentation CLI"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a rule file (YAML or SRX)"
    )
    validate_parser.add_argument(
        "rules_file",
        help="Path to the rule file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-language rule counts"
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the summary and diagnostics as JSON"
    )

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Segment a text file line by line"
    )
    split_parser.add_argument(
        "rules_file",
        help="Path to the rule file"
    )
    split_parser.add_argument(
        "-i", "--input",
        required=True,
        help="Text file to segment; each line is segmented on its own"
    )
    split_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)"
    )
    split_parser.add_argument(
        "-l", "--language",
        default="en",
        help="Language code used to select rules (default: en)"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and library information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "validate":
        return validate_command(args)
    elif args.command == "split":
        return split_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
