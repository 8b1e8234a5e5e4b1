"""
Unit tests for UploadStorage: naming, type checks and size limits.

Run: pytest tests/unit/test_upload_storage.py -v
"""

import io
import re

import pytest

from services.exceptions import FileRejected
from utils.upload_storage import UploadStorage, generate_file_name

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class FakeUpload:
    """Minimal stand-in for FastAPI's UploadFile."""

    def __init__(self, filename, content=b"%PDF-1.4 fake", content_type=PDF):
        self.filename = filename
        self.content_type = content_type
        self.file = io.BytesIO(content)


def _stored_names(directory):
    return sorted(path.name for path in directory.iterdir())


class TestGenerateFileName:

    def test_shape_and_lowercase_extension(self):
        name = generate_file_name("My CV.PDF")
        assert re.fullmatch(r"resume-\d+-[0-9a-f]{32}\.pdf", name)

    def test_names_do_not_collide(self):
        assert len({generate_file_name("cv.pdf") for _ in range(100)}) == 100


class TestUploadStorage:

    def test_saves_files_under_generated_names(self, storage, upload_dir):
        pending = storage.save_all([
            FakeUpload("cv.pdf", b"%PDF-1.4 content"),
            FakeUpload("letter.docx", b"PK docx", DOCX),
        ])

        stored = list(pending)
        assert len(stored) == 2
        assert stored[0].original_name == "cv.pdf"
        assert stored[0].media_type == PDF
        assert stored[0].size == len(b"%PDF-1.4 content")
        assert stored[0].file_name != "cv.pdf"
        assert stored[0].path == upload_dir / stored[0].file_name
        assert stored[0].path.read_bytes() == b"%PDF-1.4 content"
        assert stored[1].file_name.endswith(".docx")
        assert len(_stored_names(upload_dir)) == 2

    def test_skips_entries_without_filename(self, storage, upload_dir):
        pending = storage.save_all([FakeUpload(""), None])
        assert len(pending) == 0
        assert _stored_names(upload_dir) == []

    def test_rejects_too_many_files(self, storage, upload_dir):
        uploads = [FakeUpload(f"cv{i}.pdf") for i in range(4)]
        with pytest.raises(FileRejected, match="Maximum is 3 files"):
            storage.save_all(uploads)
        assert _stored_names(upload_dir) == []

    @pytest.mark.parametrize("filename, content_type", [
        ("cv.txt", "text/plain"),
        ("cv.exe", PDF),
        ("cv.pdf", "image/png"),
    ])
    def test_rejects_disallowed_type_or_extension(self, storage, upload_dir, filename, content_type):
        with pytest.raises(FileRejected, match="Invalid file type"):
            storage.save_all([FakeUpload(filename, content_type=content_type)])
        assert _stored_names(upload_dir) == []

    def test_rejection_removes_files_already_written(self, storage, upload_dir):
        with pytest.raises(FileRejected):
            storage.save_all([FakeUpload("cv.pdf"), FakeUpload("photo.png", content_type="image/png")])
        assert _stored_names(upload_dir) == []

    def test_rejects_oversized_file_and_cleans_up(self, upload_dir):
        storage = UploadStorage(upload_dir, max_files=3, max_size=1024 * 1024)
        with pytest.raises(FileRejected, match="File size too large"):
            storage.save_all([
                FakeUpload("small.pdf", b"x" * 10),
                FakeUpload("big.pdf", b"x" * (1024 * 1024 + 1)),
            ])
        assert _stored_names(upload_dir) == []

    def test_file_at_exact_limit_is_accepted(self, upload_dir):
        storage = UploadStorage(upload_dir, max_files=3, max_size=100)
        pending = storage.save_all([FakeUpload("cv.pdf", b"x" * 100)])
        assert [stored.size for stored in pending] == [100]

    def test_creates_missing_directory(self, tmp_path):
        storage = UploadStorage(tmp_path / "nested" / "uploads")
        pending = storage.save_all([FakeUpload("cv.doc", content_type="application/msword")])
        assert next(iter(pending)).path.exists()
