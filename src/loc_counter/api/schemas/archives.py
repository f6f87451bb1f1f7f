"""Pydantic schemas for archive analysis API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

from loc_counter.models.archive import CountResult


class ScanExtensionsResponse(BaseModel):
    """Response schema for extension discovery."""

    extensions: list[str] = Field(description="Lowercase extensions of text files, sorted")


class TopFile(BaseModel):
    """A single entry in the largest-files ranking."""

    path: str = Field(description="Path relative to the archive root, '/' separated")
    lines: int = Field(ge=0)


class CountLinesResponse(BaseModel):
    """Response schema for line counting."""

    total_files: int = Field(ge=0)
    total_lines: int = Field(ge=0)
    line_counts_by_ext: dict[str, int] = Field(description="Lines per extension, descending")
    file_counts_by_ext: dict[str, int] = Field(description="Files per extension, descending")
    top_files: list[TopFile] = Field(description="Largest files by line count, at most 200")

    @classmethod
    def from_result(cls, result: CountResult) -> CountLinesResponse:
        return cls(**result.to_dict())


class ErrorResponse(BaseModel):
    """Error payload returned for rejected requests."""

    detail: str
