from pydantic import BaseModel, ConfigDict


class Edit(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int
    length: int  # chars replaced at position; 0 = pure insertion
    new_value: str
