from models.candidate import Candidate
from models.education import Education
from models.experience import Experience
from models.document import Document, RESUME_DOCUMENT_TYPE

__all__ = [
    "Candidate",
    "Education",
    "Experience",
    "Document",
    "RESUME_DOCUMENT_TYPE",
]
