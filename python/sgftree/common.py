"""Domain-dependent utility functions for sgftree.

This is for Go-specific utilities. Nothing in the parser uses them: Point and
Move values are left as raw text in the parse tree, and interpreting them is
the job of whatever board representation reads the tree.

"""

__all__ = ["coordinate_offset"]


def coordinate_offset(c):
    """Return the offset represented by one letter of an SGF Point.

    c -- single character: 'a'-'z' or 'A'-'Z'

    Returns an int: 0-25 for 'a'-'z', 26-51 for 'A'-'Z' (FF[4] uses the
    upper-case letters for boards larger than 26).

    Raises ValueError for any other character.

    """
    if len(c) == 1:
        if "a" <= c <= "z":
            return ord(c) - ord("a")
        if "A" <= c <= "Z":
            return ord(c) - ord("A") + 26
    raise ValueError(f"invalid coordinate letter: {c!r}")
