"""Content negotiation: pick one media type entry out of a content map."""


def negotiate(content: dict) -> tuple[str, dict] | None:
    """Return (media_type, entry) preferring JSON, then XML, then the first key.

    Returns None for an empty or non-mapping content map.
    """
    if not isinstance(content, dict) or not content:
        return None

    media_types = list(content)
    for marker in ("json", "xml"):
        for media_type in media_types:
            if marker in str(media_type).lower():
                return media_type, content[media_type]

    first = media_types[0]
    return first, content[first]
