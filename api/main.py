import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.routes.candidate import router as candidate_router
from config.settings import settings
from services.exceptions import ValidationFailed, ConflictExists, PersistenceFailed, FileRejected
from utils.database import get_engine, init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

DESCRIPTION = """
Applicant tracking API for recording job candidates with their education,
work experience and uploaded documents.

## Creating a candidate

`POST /api/candidates` as `multipart/form-data`:

| Part | Content |
|------|---------|
| `candidateData` | JSON with personal fields, `educations` and `experiences` arrays |
| `documents` | up to 3 PDF/DOC/DOCX files, 5MB each |

A submission is stored completely or not at all. Rejected submissions
leave no uploaded files behind.

## Errors

| Status | Meaning |
|--------|---------|
| 400 | Validation failed (`errors` maps field path to messages) or file rejected |
| 409 | A candidate with this email already exists |
| 500 | The candidate could not be stored |
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints.",
    },
    {
        "name": "Candidates",
        "description": "Candidate intake, listing and autocomplete suggestions.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    init_db(get_engine())
    logger.info(f"Serving uploads from {settings.UPLOAD_DIR}")
    yield


app = FastAPI(
    title="Candidate Intake API",
    description=DESCRIPTION,
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Configure CORS
ALLOWED_ORIGINS = settings.ALLOWED_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": exc.errors},
    )


@app.exception_handler(FileRejected)
async def file_rejected_handler(request: Request, exc: FileRejected):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(ConflictExists)
async def conflict_handler(request: Request, exc: ConflictExists):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "A candidate with this email already exists"},
    )


@app.exception_handler(PersistenceFailed)
async def persistence_failed_handler(request: Request, exc: PersistenceFailed):
    # Details were logged where the failure happened; keep storage internals out of the response
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An error occurred while creating the candidate"},
    )


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information and documentation links"""
    return {
        "message": "Candidate Intake API",
        "version": "1.0.0",
        "documentation": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "endpoints": {
            "health": "/health",
            "ping": "/ping",
            "candidates": "/api/candidates",
            "uploads": "/uploads"
        }
    }


# Health check endpoints
@app.get("/ping", tags=["Health"])
def ping():
    """Simple ping endpoint to check if API is responding."""
    return {"message": "pong"}


@app.get("/health", tags=["Health"])
def health():
    """Health check endpoint with basic status information."""
    return {
        "status": "healthy",
        "service": "Candidate Intake API",
        "version": "1.0.0"
    }


# Register routers
app.include_router(candidate_router)

# Stored documents, addressed by their generated file name
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
