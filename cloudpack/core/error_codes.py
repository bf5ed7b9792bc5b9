"""
Structured error codes for layout runs.
Use these keys in return values; map to user-facing messages in the CLI.
"""

WORD_LIST_EMPTY = "word_list_empty"
WORDS_DROPPED = "words_dropped"
INVALID_WORD_FILE = "invalid_word_file"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    WORD_LIST_EMPTY: "No words to lay out. Check the input file and its text/value columns.",
    WORDS_DROPPED: "Some words did not fit. Try a larger canvas, smaller fonts or more attempts.",
    INVALID_WORD_FILE: "Word file could not be read. Use JSON or CSV with text and value.",
    RUN_FAILED: "Run failed. Check inputs and configuration.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
