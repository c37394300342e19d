"""Helpers for classifying names held in pandas DataFrames."""
import logging
from typing import Optional

import pandas as pd

from name_ml.classifier import NameClassifier
from name_ml.languages import LanguageLike

logger = logging.getLogger(__name__)


def classify_frame(
    df: pd.DataFrame,
    column: str,
    classifier: NameClassifier,
    language: Optional[LanguageLike] = None,
) -> pd.DataFrame:
    """
    Parse every name in a DataFrame column.

    Args:
        df: DataFrame holding the names
        column: Name of the column to classify
        classifier: Classifier to use
        language: Language of the names; defaults to the classifier's

    Returns:
        Copy of df with added 'category' and 'normalized' columns

    Raises:
        ValueError: If the column is missing or holds missing values
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in DataFrame")

    if df[column].isna().any():
        raise ValueError(f"Column '{column}' contains missing values")

    result = df.copy()
    if result.empty:
        result["category"] = pd.Series(dtype=object)
        result["normalized"] = pd.Series(dtype=object)
        return result

    parsed = classifier.parse_list(result[column].astype(str).tolist(), language)
    result["category"] = [p.category.value for p in parsed]
    result["normalized"] = [p.normalized for p in parsed]

    logger.info("Classified %d names from column '%s'", len(result), column)
    return result


def summarize_categories(df: pd.DataFrame, column: str = "category") -> pd.Series:
    """
    Count names per category.

    Args:
        df: Output of classify_frame
        column: Column holding the categories

    Returns:
        Series of counts indexed by category, largest first
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in DataFrame")
    return df[column].value_counts()
