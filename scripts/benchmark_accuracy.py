#!/usr/bin/env python3
"""Benchmark script to assess classification accuracy on labelled names.

The input is a CSV file with a 'name' column and a 'label' column holding
one of GenericName, Abbreviation, CompanyName or PersonName. Reports
per-category precision/recall and the most frequent confusions.
"""
import argparse
import logging
import time
from pathlib import Path
from typing import Dict, Optional

import pandas as pd
from sklearn.metrics import accuracy_score, classification_report, confusion_matrix

from name_ml.batch import classify_frame
from name_ml.classifier import NameClassifier
from name_ml.config import EVAL_DATA_DIR
from name_ml.names import Category

LABELS = [category.value for category in Category]


def load_test_data(path: Optional[Path] = None, limit: Optional[int] = None) -> pd.DataFrame:
    """Load labelled names.

    Args:
        path: CSV file to read. Defaults to EVAL_DATA_DIR / "names.csv".
        limit: Optional limit on number of samples to load

    Returns:
        DataFrame with 'name' and 'label' columns
    """
    test_path = Path(path) if path is not None else EVAL_DATA_DIR / "names.csv"

    if not test_path.exists():
        raise FileNotFoundError(
            f"Test data not found at {test_path}."
        )

    df = pd.read_csv(test_path, dtype=str, keep_default_na=False)
    missing = {'name', 'label'} - set(df.columns)
    if missing:
        raise ValueError(f"Test data is missing columns: {sorted(missing)}")

    unknown = set(df['label']) - set(LABELS)
    if unknown:
        raise ValueError(f"Unknown labels in test data: {sorted(unknown)}")

    if limit:
        df = df.head(limit)

    return df


def run_accuracy_benchmark(
    classifier: NameClassifier,
    df: pd.DataFrame,
    language: str = 'en',
) -> Dict:
    """Classify the labelled names and compute metrics.

    Args:
        classifier: Classifier to evaluate
        df: DataFrame with 'name' and 'label' columns
        language: Language of the names

    Returns:
        Dictionary with accuracy, the classification report and timing
    """
    start = time.time()
    classified = classify_frame(df, 'name', classifier, language)
    elapsed = time.time() - start

    y_true = classified['label'].tolist()
    y_pred = classified['category'].tolist()

    return {
        'samples': len(classified),
        'seconds': elapsed,
        'accuracy': accuracy_score(y_true, y_pred),
        'report': classification_report(y_true, y_pred, labels=LABELS, zero_division=0),
        'confusion': pd.DataFrame(
            confusion_matrix(y_true, y_pred, labels=LABELS),
            index=LABELS,
            columns=LABELS,
        ),
    }


def main():
    """Main benchmark execution."""
    parser = argparse.ArgumentParser(
        description="Benchmark name classification accuracy on labelled data"
    )
    parser.add_argument(
        '--data',
        type=Path,
        default=None,
        help='Labelled CSV file (default: names.csv in the evaluation data directory)'
    )
    parser.add_argument(
        '--size',
        type=int,
        default=None,
        help='Sample size to test (default: all)'
    )
    parser.add_argument(
        '--language',
        type=str,
        default='en',
        help='Language of the names (default: en)'
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

    print("\n" + "="*80)
    print("ACCURACY BENCHMARK: name categories")
    print("="*80)

    print("\nLoading test data...")
    df = load_test_data(args.data, limit=args.size)
    print(f"Loaded {len(df):,} test samples")

    classifier = NameClassifier()
    results = run_accuracy_benchmark(classifier, df, args.language)

    print(f"\nOverall Accuracy: {results['accuracy']:.4f} ({results['accuracy']*100:.2f}%)")
    print(f"Throughput: {results['samples'] / max(results['seconds'], 1e-9):,.0f} names/sec")
    print("\n" + "-"*80)
    print("Classification report")
    print("-"*80)
    print(results['report'])
    print("-"*80)
    print("Confusion matrix (rows: true label, columns: predicted)")
    print("-"*80)
    print(results['confusion'].to_string())


if __name__ == "__main__":
    main()
