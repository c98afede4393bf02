from dataclasses import dataclass, field


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]] = field(default_factory=list)
