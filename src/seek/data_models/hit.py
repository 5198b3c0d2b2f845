from pydantic import BaseModel, ConfigDict


class Hit(BaseModel):
    """One accepted match: the matched text and its character offset."""

    model_config = ConfigDict(frozen=True)

    value: str
    position: int

    @property
    def length(self) -> int:
        return len(self.value)

    @property
    def end_position(self) -> int:
        """Inclusive index of the last matched character.

        For an empty value this is position - 1, which callers must not treat as a span.
        """
        return self.position + self.length - 1
