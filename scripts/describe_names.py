#!/usr/bin/env python3
"""Print the parse of every name in a text file.

Reads one name per line (blank lines and lines starting with "##" are
skipped), parses each in the given language and prints its description:

    python scripts/describe_names.py names.txt --language de
"""
import argparse
import logging
import sys
from pathlib import Path

from name_ml.classifier import NameClassifier
from name_ml.errors import LexiconLoadError
from name_ml.lexicon import load_lines
from name_ml.names import describe


def describe_file(path: Path, classifier: NameClassifier, language: str) -> int:
    """Print the description of each name in path.

    Args:
        path: File with one name per line
        classifier: Classifier to parse with
        language: Language of the names

    Returns:
        Number of names described
    """
    names = load_lines(path, classifier.config.encoding, classifier.config.comment_marker)
    for name in names:
        print(describe(classifier.parse(name, language)))
        print()
    return len(names)


def main():
    """Main execution."""
    parser = argparse.ArgumentParser(
        description="Parse names from a file and print their components"
    )
    parser.add_argument(
        'input',
        type=Path,
        help='Text file with one name per line'
    )
    parser.add_argument(
        '--language',
        type=str,
        default='en',
        help='Language of the names: en, de, fr, es or it (default: en)'
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Parser configuration file (default: packaged configuration)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    classifier = NameClassifier.from_config(args.config)
    try:
        count = describe_file(args.input, classifier, args.language)
    except LexiconLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Described {count} names")


if __name__ == "__main__":
    main()
