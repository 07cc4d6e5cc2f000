"""Constants used throughout the lexifetch codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Scheduling
    DEFAULT_MAX_IN_FLIGHT = 10
    """Maximum number of words resolved concurrently."""

    # Remote dictionary
    DEFAULT_BASE_URL = "https://www.websters1913.com"
    """Root of the dictionary site; entries live under /words/<term>."""

    DEFAULT_TIMEOUT = 10.0
    """Per-request timeout in seconds."""

    DEFAULT_RETRIES = 2
    """Extra attempts after a throttled, failed or 5xx request."""

    BACKOFF_BASE = 0.15
    """Base delay in seconds for exponential backoff between retries."""

    BACKOFF_MAX = 1.5
    """Upper bound in seconds for a single backoff delay."""

    USER_AGENT = "lexifetch/0.3 (+https://github.com/lexifetch/lexifetch)"
    """User-Agent sent with dictionary requests."""

    NOT_FOUND_STATUS_TEXT = "404"
    """Text of the site's h1.http-status element on a missing entry."""

    # Input and output
    INPUT_EXTENSION = ".txt"
    """Required extension of the input word list."""

    OUTPUT_EXTENSION = ".md"
    """Extension that marks the output argument as a file rather than a directory."""

    COMMENT_PREFIX = "#"
    """Lines starting with this prefix in the input are ignored."""

    # Reporting
    NO_DEFINITION_REASON = "no definition found"
    """Failure reason when every candidate in a word's chain was absent."""

    RUN_REPORT_FILENAME = "run_report.txt"
    """Name of the report written under --reports."""

    INTERRUPTED_EXIT_CODE = 130
    """Exit status when the run is interrupted by the user."""
