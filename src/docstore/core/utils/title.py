"""Title generation for newly created documents"""

DEFAULT_TITLE_LENGTH = 20


def generate_title(content: str, max_length: int = DEFAULT_TITLE_LENGTH) -> str:
    """Return the stripped first line of content, cut to at most max_length characters."""
    first_line = content.split("\n", 1)[0].strip()
    return first_line[:max_length]
