from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class ByteEntry(BaseModel):
    value: int = Field(ge=0, le=127)
    char: str = Field(min_length=1, max_length=1)


class ReportItem(BaseModel):
    position: Optional[int] = None
    issue: str
    value: Optional[str] = None
    action: str


class EncodingReport(BaseModel):
    input_chars: int = 0
    output_bytes: int = 0
    replaced: int = 0
    warnings: List[ReportItem] = Field(default_factory=list)


class EncodeRequest(BaseModel):
    text: str = ""


class EncodeResponse(BaseModel):
    text: str
    encoding: str = Field(default="ascii")
    entries: List[ByteEntry] = Field(default_factory=list)
    lines: List[str] = Field(default_factory=list)
    report: EncodingReport

class HealthResponse(BaseModel):
    ok: bool = True
