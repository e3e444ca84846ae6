from dataclasses import dataclass
from typing import Optional


@dataclass
class TableModel:
    title: str
    columns: list[str]
    rows: list[list[str]]
    caption: Optional[str] = None
