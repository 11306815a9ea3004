"""Cell text normalization."""

import html


def clean_text(text: str) -> str:
    """Decode HTML character entities (like ``&eacute;``) and trim whitespace.

    Entities are decoded until none are left, so ``&amp;eacute;`` becomes
    ``é`` and cleaning already cleaned text changes nothing.
    """
    decoded = html.unescape(text)
    while decoded != text:
        text = decoded
        decoded = html.unescape(text)
    return decoded.strip()
