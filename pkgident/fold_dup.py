"""Detection of import paths that collide on case-insensitive filesystems."""


def _simple_fold(path: str) -> str:
    """Fold each character on its own, keeping its length.

    Full folding expands characters such as 'ß' to 'ss', which case-insensitive
    filesystems do not do, so multi-character foldings are left alone.
    """
    folded = []
    for char in path:
        for candidate in (char.casefold(), char.lower()):
            if len(candidate) == 1:
                folded.append(candidate)
                break
        else:
            folded.append(char)
    return "".join(folded)


def fold_dup(paths: list[str]) -> tuple[str, str]:
    """Return the first two entries of paths that are equal under case folding.

    The pair is returned in list order. ("", "") means there is no collision.
    Later members of an already reported collision group are not reported.
    Empty entries name nothing and are skipped.
    """
    seen: dict[str, str] = {}  # folded -> first entry with that folding
    for path in paths:
        if not path:
            continue
        key = _simple_fold(path)
        first = seen.get(key)
        if first is not None:
            return first, path
        seen[key] = path
    return "", ""
