import re

ANNOTATION_REGEX = re.compile(r'^\s*#\s*uptag\s+--pattern\s+"(?P<pattern>[^"]*)"\s*$')


def find_annotation(line: str | None) -> str | None:
    """Return the pattern of an `# uptag --pattern "..."` comment line."""
    if line is None:
        return None
    match = ANNOTATION_REGEX.match(line)
    return match["pattern"] if match else None
