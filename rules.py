import logging

logger = logging.getLogger(__name__)

# Trivially guessable passwords, compared lowercased
COMMON_PASSWORDS = frozenset([
    "password", "password1", "password123", "123456", "12345678",
    "qwerty", "qwerty123", "abc123", "iloveyou", "admin", "letmein",
    "welcome", "monkey", "dragon", "master", "sunshine", "princess",
    "football", "shadow", "superman", "batman", "111111", "000000",
    "pass1234", "pass@123", "test1234",
])

# Keyboard rows, columns and plain runs; matched on any 4-char window
KEYBOARD_WALKS = (
    "qwerty", "qwertyuiop", "asdfgh", "asdfghjkl", "zxcvbn", "zxcvbnm",
    "1234567890", "0987654321", "abcdef", "abcdefgh", "zyxwvut",
    "qazwsx", "wsxedc", "edcrfv", "rfvtgb", "tgbyhn", "yhnujm",
)

# Characters that are easy to misread on screen or aloud
AMBIGUOUS_CHARS = frozenset("0O1lI|")


def load_blocklist(path):
    """Read extra disallowed passwords, one per line. Missing file -> empty set."""
    entries = set()
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as file:
            for line in file:
                word = line.strip().lower()
                if word:
                    entries.add(word)
    except FileNotFoundError:
        logger.warning("Blocklist file %s not found, using built-in list only", path)
    return entries


def build_blocklist(path=None):
    if not path:
        return COMMON_PASSWORDS
    extra = load_blocklist(path)
    logger.info("Loaded %d extra blocklist entries from %s", len(extra), path)
    return COMMON_PASSWORDS | frozenset(extra)
