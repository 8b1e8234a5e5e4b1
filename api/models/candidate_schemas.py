from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Reads ORM rows, serializes with camelCase keys."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class EducationResponse(CamelModel):
    id: int
    candidate_id: int
    institution: str
    degree: str
    field_of_study: str
    start_date: date
    end_date: Optional[date] = None
    current: bool
    description: Optional[str] = None


class ExperienceResponse(CamelModel):
    id: int
    candidate_id: int
    company: str
    position: str
    start_date: date
    end_date: Optional[date] = None
    current: bool
    description: Optional[str] = None


class DocumentResponse(CamelModel):
    id: int
    candidate_id: int
    file_name: str = Field(..., description="Generated storage name")
    original_name: str = Field(..., description="Client-supplied name, display only")
    file_type: str
    file_size: int
    document_type: str
    uploaded_at: datetime

    @computed_field
    @property
    def url(self) -> str:
        return f"/uploads/{self.file_name}"


class CandidateResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    address: Optional[str] = None
    linked_in: Optional[str] = None
    portfolio: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    educations: List[EducationResponse] = []
    experiences: List[ExperienceResponse] = []
    documents: List[DocumentResponse] = []


class CandidateListResponse(CamelModel):
    items: List[CandidateResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint"""
    detail: str = Field(..., description="Human-readable error summary")
    errors: Optional[Dict[str, List[str]]] = Field(None, description="Field path -> messages, on validation failure")

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Validation failed",
                "errors": {"education[0].endDate": ["End date must not be before start date"]}
            }
        }


CANDIDATE_DATA_EXAMPLE = {
    "firstName": "Ana",
    "lastName": "Ruiz",
    "email": "ana@example.com",
    "phone": "+34123456789",
    "educations": [
        {
            "institution": "MIT",
            "degree": "BSc",
            "fieldOfStudy": "CS",
            "startDate": "2018-09-01",
            "endDate": "2022-06-01",
            "current": False,
        }
    ],
    "experiences": [],
}
