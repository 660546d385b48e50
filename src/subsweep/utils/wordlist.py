from ..config import logger
from ..errors import WordlistError

def load_wordlist(path):
    """Reads subdomain prefixes, skipping blank lines and '#' comments."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = [line.strip() for line in f if line.strip() and not line.strip().startswith('#')]
    except FileNotFoundError:
        raise WordlistError(f"Wordlist not found at {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise WordlistError(f"Could not read wordlist {path}: {e}")

    if not words:
        raise WordlistError(f"Wordlist {path} is empty")

    logger.info(f"Loaded {len(words)} prefixes from {path}.")
    return words

def build_candidates(words, domain):
    return [f"{word}.{domain}" for word in words]
