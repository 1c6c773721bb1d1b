"""Input sanitization utilities."""
import re
from typing import Optional


# Maximum length constraints for security
MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254
MAX_STARTUP_NAME_LENGTH = 200
MAX_URL_LENGTH = 500
MAX_UPDATE_LENGTH = 2000
MAX_QUESTION_LENGTH = 300
MAX_OPTION_LENGTH = 200

EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')

# Tags and comments only; a bare "<" or ">" is ordinary text ("a < b", "<3")
TAG_PATTERN = re.compile(r'<!--.*?-->|</?[A-Za-z][^<>]*>', re.DOTALL)


def sanitize_text(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Strips HTML tags and normalizes whitespace but does not escape HTML
    entities; the frontend escapes on render, so escaping here would show
    entities literally.

    Args:
        text: The input text to sanitize
        max_length: Optional maximum length to enforce
        strip_html: Whether to strip HTML tags (default True)

    Returns:
        Sanitized text with HTML tags removed and whitespace normalized

    Raises:
        ValueError: If text is not a string or exceeds max_length
    """
    if not isinstance(text, str):
        raise ValueError("Input must be a string")

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    if strip_html:
        sanitized = TAG_PATTERN.sub('', sanitized)

    sanitized = re.sub(r'[ \t]+', ' ', sanitized)

    return sanitized.strip()


def sanitize_update_content(content: str) -> str:
    """Sanitize the body of an update. Line breaks are kept."""
    sanitized = sanitize_text(content, max_length=MAX_UPDATE_LENGTH)

    if not sanitized:
        raise ValueError("Content is required")

    return sanitized


def sanitize_poll_question(question: str) -> str:
    """Sanitize a poll question."""
    sanitized = sanitize_text(question, max_length=MAX_QUESTION_LENGTH)

    if not sanitized:
        raise ValueError("Question is required")

    return re.sub(r'\s+', ' ', sanitized)


def sanitize_option_text(option: str) -> str:
    """
    Sanitize a single poll option.

    Returns an empty string for blank options so callers can drop them.
    """
    sanitized = sanitize_text(option, max_length=MAX_OPTION_LENGTH)
    return re.sub(r'\s+', ' ', sanitized)


def normalize_email(email: str) -> str:
    """
    Normalize an email address for storage and lookup.

    Raises:
        ValueError: If the address is too long or obviously malformed
    """
    if not isinstance(email, str):
        raise ValueError("Email must be a string")

    normalized = email.strip().lower()

    if len(normalized) > MAX_EMAIL_LENGTH:
        raise ValueError(f"Email exceeds maximum length of {MAX_EMAIL_LENGTH} characters")

    if normalized and not EMAIL_PATTERN.match(normalized):
        raise ValueError("Email address is invalid")

    return normalized
