"""Entity substitution for label text carried in string nodes."""

from rpcwire.config import EscapePolicy


def escape(text: str, policy: EscapePolicy = EscapePolicy.SUBSTITUTE) -> str:
    """Escape ``&`` and ``<`` in text bound for the wire.

    Args:
        text: Raw text
        policy: SUBSTITUTE to replace entities, IDENTITY to pass through

    Returns:
        The escaped text

    Example:
        >>> escape("a & b < c")
        'a &amp; b &lt; c'
    """
    if policy is EscapePolicy.IDENTITY:
        return text
    # Ampersand first, otherwise the "&" of "&lt;" would be escaped again
    return text.replace("&", "&amp;").replace("<", "&lt;")


def unescape(text: str, policy: EscapePolicy = EscapePolicy.SUBSTITUTE) -> str:
    """Reverse :func:`escape`.

    Example:
        >>> unescape("a &amp; b &lt; c")
        'a & b < c'
    """
    if policy is EscapePolicy.IDENTITY:
        return text
    return text.replace("&lt;", "<").replace("&amp;", "&")
