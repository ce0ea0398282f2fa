# =============================================================================
# core/formatting.py  —  Small text helpers shared by the tools
# =============================================================================


def capitalize_first(text: str) -> str:
    """Upper-case only the first character ("mr-mime" -> "Mr-mime").

    Unlike str.capitalize(), the rest of the string is left untouched.
    """
    return text[:1].upper() + text[1:]


def format_number(value: float) -> str:
    """Render a number the way a person would write it.

    Integral floats drop the trailing ".0" (3.0 -> "3"); everything else
    uses Python's shortest round-tripping repr (0.1 + 0.2 -> "0.30000000000000004").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def numbered(items: list[str], start: int = 1) -> list[str]:
    """Prefix each item with its 1-based position: ["1. a", "2. b"]."""
    return [f"{index}. {item}" for index, item in enumerate(items, start=start)]
