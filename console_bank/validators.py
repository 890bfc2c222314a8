"""Input predicates for customer details."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# UK numbers: +44 / 0044 / 01144 / 0 prefixes, 2-5 digit area codes,
# optional extension (x, ext, ext., #) of 3-4 digits.
UK_PHONE_PATTERN = re.compile(
    r"^(?:(?:\(?(?:0(?:0|11)\)?[\s-]?\(?|\+)44\)?[\s-]?(?:\(?0\)?[\s-]?)?)|(?:\(?0))"
    r"(?:(?:\d{5}\)?[\s-]?\d{4,5})"
    r"|(?:\d{4}\)?[\s-]?(?:\d{5}|\d{3}[\s-]?\d{3}))"
    r"|(?:\d{3}\)?[\s-]?\d{3}[\s-]?\d{3,4})"
    r"|(?:\d{2}\)?[\s-]?\d{4}[\s-]?\d{4}))"
    r"(?:[\s-]?(?:x|ext\.?|\#)\d{3,4})?$"
)


def is_blank(text) -> bool:
    return text is None or not text.strip()


def is_valid_email(email: str) -> bool:
    """Check that email has a local@domain.tld shape."""
    if email is None:
        return False
    return EMAIL_PATTERN.match(email) is not None


def is_valid_phone_number(phone_number: str) -> bool:
    """Check that phone_number looks like a UK national or international number."""
    if phone_number is None:
        return False
    return UK_PHONE_PATTERN.match(phone_number) is not None
