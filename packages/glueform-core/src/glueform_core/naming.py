"""Logical id normalization for CloudFormation resources.

CloudFormation logical ids must be alphanumeric. Glue resource names in
serverless.yml are free text ("etl-job", "nightly load"), so every emitted
resource is keyed by the PascalCase form of its name.
"""

from __future__ import annotations

import re

from glueform_core.errors import ValidationError

# Words are runs of letters/digits, further split on case boundaries:
# "HTTPServer" -> HTTP, Server; "etlJob2" -> etl, Job, 2
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")

LOGICAL_ID_PATTERN = r"^[A-Za-z0-9]+$"
"""Pattern every logical id produced by to_logical_id() satisfies."""


def split_words(name: str) -> list[str]:
    """Split a name into words on separators and case boundaries.

    Args:
        name: Free-text resource name.

    Returns:
        Words in order of appearance. Empty if the name has no letters or digits.

    Example:
        >>> split_words("my_glue-JobV2")
        ['my', 'glue', 'Job', 'V', '2']
    """
    return _WORD_PATTERN.findall(name)


def to_logical_id(name: str | None) -> str:
    """Convert a resource name into a template-safe logical id.

    Each word gets an upper-case first letter (the rest is kept as written)
    and the words are joined without separators.
    The result is deterministic and idempotent:
    ``to_logical_id(to_logical_id(x)) == to_logical_id(x)``.

    Args:
        name: Free-text resource name.

    Returns:
        PascalCase logical id containing only letters and digits.

    Raises:
        ValidationError: If name is empty, None, has no letters or digits,
            or contains non-ASCII letters or digits.

    Example:
        >>> to_logical_id("etl-job")
        'EtlJob'
        >>> to_logical_id("nightly load")
        'NightlyLoad'
    """
    if not name:
        raise ValidationError("Resource name must not be empty")

    # Non-ASCII letters and digits would vanish from the id ("café" -> "Caf")
    unsupported = "".join(dict.fromkeys(ch for ch in name if ch.isalnum() and not ch.isascii()))
    if unsupported:
        raise ValidationError(
            f"Resource name {name!r} contains characters that cannot appear "
            f"in a logical id: {unsupported!r}"
        )

    words = split_words(name)
    if not words:
        raise ValidationError(
            "Resource name must contain at least one letter or digit",
            internal_details=f"name={name!r}",
        )

    return "".join(word[0].upper() + word[1:] for word in words)
