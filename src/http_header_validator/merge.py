from .models import HeaderMap


def merge_headers(*maps: HeaderMap | None) -> dict[str, list[str]]:
    """Merge header maps, lowest priority first.

    A header present in a later map replaces the whole value list of earlier
    maps. Headers that are missing or ``None`` leave earlier values in place.
    """
    result: dict[str, list[str]] = {}
    for header_map in maps:
        if not header_map:
            continue
        for name, values in header_map.items():
            if values is not None:
                result[name] = list(values)
    return result
