"""Turn hits into edits (prepend / append / replace) and apply them to a text."""

from collections.abc import Iterable

from seek.data_models.edit import Edit
from seek.data_models.hit import Hit


def make_edits(
    hits: Iterable[Hit],
    *,
    prepend: str | None = None,
    append: str | None = None,
    replace_with: str | None = None,
) -> list[Edit]:
    chosen = [v for v in (prepend, append, replace_with) if v is not None]
    if len(chosen) != 1:
        raise ValueError("Exactly one of prepend, append or replace_with is required")

    edits = []
    for hit in hits:
        if prepend is not None:
            edits.append(Edit(position=hit.position, length=0, new_value=prepend))
        elif append is not None:
            edits.append(
                Edit(position=hit.position + hit.length, length=0, new_value=append)
            )
        else:
            assert replace_with is not None
            edits.append(
                Edit(position=hit.position, length=hit.length, new_value=replace_with)
            )
    return edits


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """Apply non-overlapping edits right to left so earlier offsets stay valid."""
    result = text
    for edit in sorted(edits, key=lambda e: e.position, reverse=True):
        result = (
            result[: edit.position]
            + edit.new_value
            + result[edit.position + edit.length :]
        )
    return result
