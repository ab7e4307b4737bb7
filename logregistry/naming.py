"""logregistry.naming
=====================
Mini-README: String helpers used when rendering source locations. The only export,
``shorten_qualified_name``, turns a dotted identifier such as ``com.example.Foo`` into
``c.e.Foo`` so console lines stay narrow.
"""


def shorten_qualified_name(name: str) -> str:
    """Compress every namespace segment to one character, keeping the final name."""

    if not name:
        return ""

    segments = [segment for segment in name.split(".") if segment]
    if len(segments) <= 1:
        return segments[0] if segments else ""

    prefix = [segment[0] for segment in segments[:-1]]
    return ".".join(prefix + [segments[-1]])
