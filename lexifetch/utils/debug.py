"""Debug tracing for selected words."""

from loguru import logger


def is_debug_word(word: str, debug_words: frozenset[str] | set[str]) -> bool:
    """Check whether ``word`` was selected with --debug-words."""
    return word.lower() in debug_words


def log_debug_word(word: str, message: str, stage: str = "") -> None:
    """Log a message for a word selected with --debug-words."""
    stage_str = f" [{stage}]" if stage else ""
    logger.debug(f"[DEBUG WORD: '{word}']{stage_str} {message}")


def log_if_debug_word(
    word: str,
    message: str,
    debug_words: frozenset[str] | set[str],
    stage: str = "",
) -> None:
    """Log ``message`` only when ``word`` is being debugged."""
    if is_debug_word(word, debug_words):
        log_debug_word(word, message, stage)
