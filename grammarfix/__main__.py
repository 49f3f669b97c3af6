"""
GrammarFix command line.

    python -m grammarfix essay.txt
    echo "He dont know." | python -m grammarfix --no-ai --json
"""

import sys
import json
import argparse
from typing import List, Optional

from config_logging import GrammarFixError

from .service import GrammarService


def _read_input(source: str) -> str:
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8') as f:
        return f.read()


def _print_report(report):
    print(report.corrected)
    print()
    summary = report.summary
    print(f"Errors: {summary.error_count}  Corrections: {summary.correction_count}  "
          f"Reading level: {summary.reading_level}  "
          f"Confidence: {summary.confidence_percent}%")
    print(f"AI: {report.ai_message}")
    if report.rule_result.applied_rules:
        print()
        for description in report.rule_result.applied_rules:
            print(f"  - {description}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='grammarfix',
                                     description='GrammarFix grammar correction')
    parser.add_argument('input', nargs='?', default='-',
                        help='Text file to check, or - for stdin (default)')
    parser.add_argument('--text', type=str, help='Check this text instead of reading input')
    parser.add_argument('--no-ai', action='store_true', help='Rule-based correction only')
    parser.add_argument('--json', action='store_true', help='Print the full report as JSON')

    args = parser.parse_args(argv)

    try:
        text = args.text if args.text is not None else _read_input(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 2

    service = GrammarService()
    try:
        report = service.check(text, use_ai=not args.no_ai)
    except GrammarFixError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2 if e.status_code == 400 else 1
    finally:
        service.shutdown()

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_report(report)
    return 0


if __name__ == '__main__':
    sys.exit(main())
