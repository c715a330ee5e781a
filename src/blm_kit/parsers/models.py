# parsers/models.py

from dataclasses import dataclass, field

Record = dict[str, str]


@dataclass(frozen=True)
class BlmDocument:
    header: dict[str, str]
    definitions: list[str]
    records: list[Record]
    metadata: dict = field(default_factory=dict)
