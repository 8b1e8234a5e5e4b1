"""
Normalized intake data.

Built from a raw payload only after it passed validation, so every field
here is already trimmed, typed and consistent.
"""

from datetime import date
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


class EducationInput(BaseModel):
    institution: str
    degree: str
    field_of_study: str
    start_date: date
    end_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class ExperienceInput(BaseModel):
    company: str
    position: str
    start_date: date
    end_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None


class CandidateInput(BaseModel):
    first_name: str
    last_name: str
    email: str  # lower-cased identity key
    phone: str
    address: Optional[str] = None
    linked_in: Optional[str] = None
    portfolio: Optional[str] = None
    educations: List[EducationInput] = Field(default_factory=list)
    experiences: List[ExperienceInput] = Field(default_factory=list)


class StoredFile(BaseModel):
    """A file already written to upload storage for the current request."""
    file_name: str  # generated, collision-resistant
    original_name: str  # client supplied, display only
    media_type: str
    size: int
    path: Path
