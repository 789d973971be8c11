"""Maps TypeScript type text onto the editor's small port-type vocabulary."""

# Checked in order; the first rule with a matching substring wins.
_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("number", ("number",)),
    ("string", ("string",)),
    ("boolean", ("boolean",)),
    ("array", ("[]", "Array")),
    ("object", ("{", "Record", "object")),
)


def classify_type(type_text: str) -> str:
    """Classify raw type text as number, string, boolean, array, object or any.

    Plain substring matching, so composite types land on whichever primitive
    name appears first in rule order: ``Record<string, number>`` is "number"
    and ``string[]`` is "string".
    """
    for category, needles in _RULES:
        if any(needle in type_text for needle in needles):
            return category
    return "any"
