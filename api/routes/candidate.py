import json
import logging
import math
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from sqlmodel import Session

from api.models.candidate_schemas import (
    CandidateResponse,
    CandidateListResponse,
    ErrorResponse,
    CANDIDATE_DATA_EXAMPLE,
)
from repositories.candidate_repository import CandidateRepository
from repositories.suggestion_repository import EducationRepository, ExperienceRepository
from services.candidate_intake_service import CandidateIntakeService
from utils.database import get_db
from utils.upload_storage import UploadStorage, get_upload_storage

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/candidates",
    tags=["Candidates"],
)


def _decode_candidate_data(raw: Optional[str]) -> Any:
    """Parse the multipart JSON field; undecodable input is left to validation."""
    try:
        return json.loads(raw or "{}")
    except json.JSONDecodeError:
        logger.info("Received undecodable candidateData field")
        return None


def _require_query(query: Optional[str]) -> str:
    if not query or not query.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Query parameter is required")
    return query.strip()


@router.post(
    "",
    response_model=CandidateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def create_candidate(
    candidate_data: Optional[str] = Form(
        None,
        alias="candidateData",
        description="Candidate JSON",
        examples=[json.dumps(CANDIDATE_DATA_EXAMPLE)],
    ),
    documents: Optional[List[UploadFile]] = File(None, description="Up to 3 PDF/DOC/DOCX files, 5MB each"),
    db: Session = Depends(get_db),
    storage: UploadStorage = Depends(get_upload_storage),
):
    """
    Create a candidate with education, experience and documents.

    Multipart body: `candidateData` holds the candidate JSON, `documents`
    holds the files. Either everything is stored or nothing is: on any
    failure the uploaded files are removed again.

    **Errors:** 400 validation/file rejection, 409 duplicate email, 500 storage failure.
    """
    pending = storage.save_all(documents or [])
    payload = _decode_candidate_data(candidate_data)

    service = CandidateIntakeService(db)
    candidate = service.create_candidate(payload, pending)
    return CandidateResponse.model_validate(candidate)


@router.get("", response_model=CandidateListResponse)
def list_candidates(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
):
    """List candidates newest first, with their education, experience and documents."""
    repo = CandidateRepository(db)
    candidates, total = repo.get_paginated(page=page, limit=limit)
    return CandidateListResponse(
        items=[CandidateResponse.model_validate(c) for c in candidates],
        total=total,
        page=page,
        limit=limit,
        total_pages=math.ceil(total / limit),
    )


@router.get("/autocomplete/institutions", response_model=List[str], responses={400: {"model": ErrorResponse}})
def suggest_institutions(query: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Up to 10 distinct institution names containing `query`."""
    return EducationRepository(db).suggest_institutions(_require_query(query))


@router.get("/autocomplete/companies", response_model=List[str], responses={400: {"model": ErrorResponse}})
def suggest_companies(query: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Up to 10 distinct company names containing `query`."""
    return ExperienceRepository(db).suggest_companies(_require_query(query))


@router.get("/{candidate_id}", response_model=CandidateResponse, responses={404: {"model": ErrorResponse}})
def get_candidate(candidate_id: int, db: Session = Depends(get_db)):
    repo = CandidateRepository(db)
    candidate = repo.get_with_relations(candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail="Candidate not found")
    return CandidateResponse.model_validate(candidate)
