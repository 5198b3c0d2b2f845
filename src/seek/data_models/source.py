from enum import Enum

from pydantic import BaseModel, ConfigDict

TEXT_SOURCE_NAME = "text"
PIPE_SOURCE_NAME = "stdin"


class SourceKind(str, Enum):
    text = "text"
    pipe = "pipe"
    file = "file"


class Source(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str  # file path, or "text" / "stdin"
    text: str
    kind: SourceKind = SourceKind.file

    @property
    def is_file(self) -> bool:
        return self.kind == SourceKind.file
