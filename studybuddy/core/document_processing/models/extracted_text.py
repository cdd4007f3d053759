"""
Extraction result model.

Dependencies: pydantic
System role: Return type for ParsingTask.extract()
"""

from pydantic import BaseModel, Field


class ExtractedText(BaseModel):
    """Plain text and page count extracted from a source file."""

    text: str = Field(description="Whole-document text, pages joined in order")
    page_count: int = Field(ge=0, description="Number of pages in the source")
