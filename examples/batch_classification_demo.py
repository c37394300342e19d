#!/usr/bin/env python3
"""
Demonstration of batch name classification.

This script shows how to use classify_list, parse_list and the pandas
helpers to classify many names in one call.
"""
import time

import pandas as pd

from name_ml import NameClassifier, describe
from name_ml.batch import classify_frame, summarize_categories


def main():
    """Demonstrate batch classification."""
    print("Name ML - Batch Classification Demo")
    print("=" * 50)
    print()

    classifier = NameClassifier()

    print("Example 1: Mixed names")
    print("-" * 50)
    names = [
        "Acme & Co.",
        "John Miller Jr.",
        "PMM",
        "Queen Elizabeth",
        "Microsoft Corporation",
        "Mickey Mouse",
        "the weather",
    ]
    results = classifier.classify_list(names)

    print(f"{'Name':<30} {'Category':<15}")
    print("-" * 45)
    for name, result in zip(names, results):
        print(f"{name:<30} {result.value:<15}")
    print()

    print("Example 2: Person name components")
    print("-" * 50)
    for parsed in classifier.parse_list(["Prof. Dr. Fabian the Great III of Saarbruecken"]):
        print(describe(parsed))
    print()

    print("Example 3: German names in a DataFrame")
    print("-" * 50)
    df = pd.DataFrame({"name": ["Herr Hans von Müller", "Siemens AG", "Dr. Angela Merkel", "BMW"]})
    classified = classify_frame(df, "name", classifier, language="de")
    print(classified.to_string(index=False))
    print()
    print(summarize_categories(classified).to_string())
    print()

    print("Example 4: Sequential vs parallel")
    print("-" * 50)
    test_names = [f"Person Name {i}" for i in range(1000)]

    start = time.time()
    classifier.classify_list(test_names)
    sequential_time = time.time() - start

    start = time.time()
    classifier.classify_list(test_names, n_jobs=2)
    parallel_time = time.time() - start

    print("Classifying 1000 names:")
    print(f"  Sequential:    {sequential_time:.3f}s")
    print(f"  2 workers:     {parallel_time:.3f}s")
    print()


if __name__ == "__main__":
    main()
