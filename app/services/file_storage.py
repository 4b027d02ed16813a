# app/services/file_storage.py
import os
import uuid
import logging
import mimetypes
from pathlib import Path
from typing import Optional

from fastapi import File, UploadFile

from app.config.security import SecurityConfig
from app.utils.errors import ValidationError

logger = logging.getLogger(__name__)

class FileStorageService:
    """Service for handling attachment uploads, storage, and retrieval"""

    def __init__(
        self,
        upload_dir: str = SecurityConfig.STORAGE['upload_dir'],
        max_file_size: int = SecurityConfig.FILE_UPLOAD['max_file_size'],
    ):
        self.upload_dir = Path(upload_dir)
        self.max_file_size = max_file_size
        self.chunk_size = SecurityConfig.FILE_UPLOAD['chunk_size']
        self.field_name = SecurityConfig.STORAGE['field_name']

    def validate_file(self, file: UploadFile):
        """
        Reject uploads without a filename or with a MIME type outside JPEG/PNG/PDF

        Raises:
            ValidationError: if the file is not acceptable
        """
        if not file.filename:
            raise ValidationError("File must have a filename")

        if not SecurityConfig.is_mime_type_allowed(file.content_type):
            raise ValidationError("Invalid file type. Only JPG, PNG, and PDF files are allowed.")

    def generate_unique_filename(self, original_filename: str, mime_type: str) -> str:
        """
        Generate a unique filename to prevent conflicts

        The original extension is kept when it is one of the allowed ones,
        otherwise the extension is derived from the MIME type.
        """
        file_ext = Path(original_filename).suffix.lower()
        if not SecurityConfig.is_extension_allowed(file_ext):
            file_ext = mimetypes.guess_extension(mime_type) or ""
        return f"{self.field_name}-{uuid.uuid4()}{file_ext}"

    def save_file(self, file: UploadFile) -> str:
        """
        Validate and write an uploaded file to disk

        Args:
            file: FastAPI UploadFile object

        Returns:
            Path of the stored file
        """
        self.validate_file(file)

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        file_path = self.upload_dir / self.generate_unique_filename(file.filename, file.content_type)

        written = 0
        too_large = False
        with open(file_path, "wb") as buffer:
            while True:
                chunk = file.file.read(self.chunk_size)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_file_size:
                    too_large = True
                    break
                buffer.write(chunk)

        if too_large:
            # Remove the partial file
            self.delete_file(str(file_path))
            raise ValidationError(
                f"File too large. Maximum allowed size is {self.max_file_size / (1024*1024):.0f}MB."
            )

        logger.info(f"File saved successfully: {file_path} ({written} bytes)")
        return str(file_path)

    def delete_file(self, file_path: str) -> bool:
        """
        Delete file from disk

        Returns:
            True if file was deleted successfully, False otherwise
        """
        try:
            path = Path(file_path)
            if path.exists():
                path.unlink()
                logger.info(f"File deleted successfully: {file_path}")
                return True
            logger.warning(f"File not found for deletion: {file_path}")
            return False
        except OSError as e:
            logger.error(f"Error deleting file {file_path}: {str(e)}")
            return False

    def resolve(self, file_path: Optional[str]) -> Optional[str]:
        """Return the stored file path if it exists inside the upload directory"""
        if not file_path:
            return None
        path = Path(file_path)
        upload_root = os.path.realpath(self.upload_dir)
        if os.path.commonpath([os.path.realpath(path), upload_root]) != upload_root:
            logger.warning(f"Refusing to serve file outside upload directory: {file_path}")
            return None
        return str(path) if path.is_file() else None

    @staticmethod
    def guess_mime_type(file_path: str) -> str:
        mime_type, _ = mimetypes.guess_type(file_path)
        return mime_type or "application/octet-stream"

# Global instance
file_storage = FileStorageService()

def store_attachment(attachment: Optional[UploadFile] = File(None)) -> Optional[str]:
    """Upload dependency: stores the optional `attachment` field and returns its path"""
    if attachment is None or not attachment.filename:
        return None
    return file_storage.save_file(attachment)
