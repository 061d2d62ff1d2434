from dataclasses import dataclass
from typing import Optional


@dataclass
class GeneratedDocument:
    content: bytes
    content_type: str
    filename: str
    error: Optional[str] = None

    @property
    def is_pdf(self) -> bool:
        return self.content_type == "application/pdf"
