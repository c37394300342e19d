"""Configuration settings for the name_ml package."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from name_ml.languages import Language

# Package directory
PACKAGE_DIR = Path(__file__).parent

# Packaged resources
DATA_DIR = PACKAGE_DIR / "data"
CONFIG_PATH = DATA_DIR / "parser_config.yaml"

# Lexicon resources (titles.en, stopwords.de, ...)
LEXICON_DIR = Path(os.environ.get("NAME_ML_LEXICON_DIR", DATA_DIR / "lexicon"))

# Labelled data for the evaluation scripts
EVAL_DATA_DIR = Path(os.environ.get("NAME_ML_DATA_DIR", PACKAGE_DIR.parent / "data"))

# Lexicon resource defaults
DEFAULT_COMMENT_MARKER = "##"
DEFAULT_ENCODING = "utf-8"


@dataclass
class ParserConfig:
    """Settings used to initialize a NameClassifier.

    Attributes:
        lexicon_dir: Directory holding the <kind>.<language-code> resources
        default_language: Language used when a caller passes none
        comment_marker: Lines starting with this marker are skipped
        encoding: Text encoding of the lexicon resources
    """
    lexicon_dir: Path = field(default_factory=lambda: LEXICON_DIR)
    default_language: Language = Language.ENGLISH
    comment_marker: str = DEFAULT_COMMENT_MARKER
    encoding: str = DEFAULT_ENCODING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lexicon_dir": str(self.lexicon_dir),
            "default_language": self.default_language.code,
            "comment_marker": self.comment_marker,
            "encoding": self.encoding,
        }


def load_parser_config(path: Optional[Path] = None) -> ParserConfig:
    """Load parser configuration from a YAML file.

    Relative lexicon directories are resolved against the directory of the
    configuration file.

    Args:
        path: Config file to read. Defaults to CONFIG_PATH.

    Returns:
        ParserConfig built from the file contents.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config file is empty or names an unsupported language.
        yaml.YAMLError: If config file is malformed.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(
            f"Parser configuration not found at {config_path}. "
            f"Please ensure the config file exists."
        )

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"Config file {config_path} is empty or invalid")

    lexicon_dir = Path(data.get("lexicon_dir", LEXICON_DIR))
    if not lexicon_dir.is_absolute():
        lexicon_dir = config_path.parent / lexicon_dir

    # UnsupportedLanguageError is a ValueError
    default_language = Language.from_value(data.get("default_language", Language.ENGLISH.code))

    return ParserConfig(
        lexicon_dir=lexicon_dir,
        default_language=default_language,
        comment_marker=data.get("comment_marker", DEFAULT_COMMENT_MARKER),
        encoding=data.get("encoding", DEFAULT_ENCODING),
    )


def save_parser_config(config: ParserConfig, path: Optional[Path] = None) -> None:
    """Save parser configuration to a YAML file.

    Args:
        config: Configuration to save.
        path: Destination file. Defaults to CONFIG_PATH.
    """
    config_path = Path(path) if path is not None else CONFIG_PATH
    # Ensure the parent directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
