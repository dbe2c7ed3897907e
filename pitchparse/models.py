"""
Core data models for pitchparse.

Defines the slide/parse-result JSON schema using Pydantic for validation.
Python attributes are snake_case; serialized output uses camelCase keys.
"""

from typing import List, Optional, Literal, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


SlideType = Literal[
    "title",
    "problem",
    "solution",
    "market",
    "business-model",
    "traction",
    "team",
    "financials",
    "funding",
    "competition",
    "other",
]


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Export to dict for JSON serialization."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SlideMetadata(CamelModel):
    """Per-slide statistics and extraction confidence."""

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0, default=0)
    has_images: bool = False
    has_charts: bool = False
    confidence: int = Field(ge=0, le=100, default=0)


class Slide(CamelModel):
    """A single slide recovered from the document text."""

    model_config = ConfigDict(frozen=True)

    id: str
    slide_number: int = Field(ge=1)
    type: SlideType = "other"
    title: Optional[str] = None
    content: str
    bullet_points: Optional[List[str]] = None
    metadata: SlideMetadata = Field(default_factory=SlideMetadata)

    @field_validator("bullet_points")
    @classmethod
    def drop_empty_bullets(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return v or None

    @model_validator(mode="after")
    def check_id(self) -> "Slide":
        if self.id != f"slide-{self.slide_number}":
            raise ValueError(
                f"Slide id {self.id!r} does not match slide number {self.slide_number}"
            )
        return self


class ParseMetadata(CamelModel):
    """Document-level totals for a parse."""

    total_pages: int = Field(ge=0, default=0)
    total_slides: int = Field(ge=0, default=0)
    processing_time: float = Field(ge=0.0, default=0.0, description="Wall-clock milliseconds")
    confidence: int = Field(ge=0, le=100, default=0)
    file_size: int = Field(ge=0, default=0)
    total_words: int = Field(ge=0, default=0)
    title: Optional[str] = None
    author: Optional[str] = None


class ParseResult(CamelModel):
    """
    Outcome of parsing one document.

    Failures are data: success=False carries an error message and no slides,
    but still a complete metadata block.
    """

    success: bool
    slides: List[Slide] = Field(default_factory=list)
    metadata: ParseMetadata = Field(default_factory=ParseMetadata)
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_consistency(self) -> "ParseResult":
        if len(self.slides) != self.metadata.total_slides:
            raise ValueError(
                f"total_slides={self.metadata.total_slides} but {len(self.slides)} slides given"
            )
        for index, slide in enumerate(self.slides, start=1):
            if slide.slide_number != index:
                raise ValueError(
                    f"Slide at position {index} has slide_number {slide.slide_number}"
                )
        if self.success and self.error is not None:
            raise ValueError("Successful result cannot carry an error")
        if not self.success:
            if self.slides:
                raise ValueError("Failed result cannot carry slides")
            if not self.error:
                raise ValueError("Failed result requires an error message")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParseResult":
        """Load from dict."""
        return cls.model_validate(data)

    @classmethod
    def failure(
        cls,
        error: str,
        total_pages: int = 0,
        processing_time: float = 0.0,
        file_size: int = 0,
    ) -> "ParseResult":
        """Build a failed result with zeroed totals."""
        return cls(
            success=False,
            slides=[],
            metadata=ParseMetadata(
                total_pages=max(total_pages, 0),
                total_slides=0,
                processing_time=processing_time,
                confidence=0,
                file_size=max(file_size, 0),
            ),
            error=error,
        )


class ExtractedText(BaseModel):
    """Raw text handed over by a text-extraction engine."""

    text: str
    page_count: int = Field(ge=0)
    file_size: int = Field(ge=0, default=0)
    title: Optional[str] = None
    author: Optional[str] = None
