"""Input word list loading."""

from pathlib import Path

from loguru import logger

from lexifetch.core.errors import SetupError
from lexifetch.utils.constants import Constants
from lexifetch.utils.helpers import expand_file_path


def normalize_words(lines: list[str]) -> list[str]:
    """Trim, lower-case and deduplicate words, keeping first-occurrence order.

    Empty lines and comment lines are discarded.
    """
    seen: set[str] = set()
    words = []
    for line in lines:
        word = line.strip().lower()
        if not word or word.startswith(Constants.COMMENT_PREFIX):
            continue
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_words(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load the input word list.

    Args:
        filepath: Path to a .txt file with one word per line
        verbose: Whether to log what was loaded

    Returns:
        Normalized, deduplicated words in first-occurrence order

    Raises:
        SetupError: If the path is missing, has the wrong extension or cannot be read
    """
    expanded = expand_file_path(filepath)
    if not expanded:
        raise SetupError("No input file given")

    path = Path(expanded)
    if path.suffix != Constants.INPUT_EXTENSION:
        raise SetupError(f"Input file must have {Constants.INPUT_EXTENSION} extension: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SetupError(f"Could not read input file {path}: {e}") from e

    lines = text.splitlines()
    words = normalize_words(lines)

    if verbose:
        logger.info(f"  Loaded {len(words)} unique words from {path}")
        duplicates = sum(1 for line in lines if line.strip()) - len(words)
        if duplicates > 0:
            logger.info(f"  Skipped {duplicates} duplicate or comment lines")

    return words
