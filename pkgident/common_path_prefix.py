"""Utility for the longest common prefix of slash-separated import paths."""


def common_path_prefix(paths: list[str]) -> str:
    """Return the longest prefix shared by all paths, compared by path element.

    "gopkg.in/lib1" and "gopkg.in/lib2" share "gopkg.in"; "lib1" and "lib2"
    share nothing, even though they share characters.
    """
    if not paths:
        return ""
    prefix = paths[0].split("/")
    for path in paths[1:]:
        parts = path.split("/")
        n = 0
        while n < min(len(prefix), len(parts)) and prefix[n] == parts[n]:
            n += 1
        prefix = prefix[:n]
        if not prefix:
            break
    return "/".join(prefix)
