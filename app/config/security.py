# app/config/security.py
# Upload policy for suggestion attachments

import os


class SecurityConfig:
    """Security configuration for the application"""

    # File upload security settings
    FILE_UPLOAD = {
        'max_file_size': int(os.getenv('MAX_FILE_SIZE', 5 * 1024 * 1024)),  # 5MB
        'allowed_mime_types': {
            'image/jpeg',
            'image/png',
            'application/pdf',
        },
        'allowed_extensions': {'.jpg', '.jpeg', '.png', '.pdf'},
        'chunk_size': 1024 * 1024,
    }

    # File storage
    STORAGE = {
        'upload_dir': os.getenv('UPLOAD_DIR', 'uploads'),
        'field_name': 'attachment',
    }

    @classmethod
    def is_mime_type_allowed(cls, mime_type: str) -> bool:
        """Check if a MIME type is allowed"""
        return (mime_type or '').lower() in cls.FILE_UPLOAD['allowed_mime_types']

    @classmethod
    def is_extension_allowed(cls, extension: str) -> bool:
        """Check if file extension is allowed"""
        return extension.lower() in cls.FILE_UPLOAD['allowed_extensions']
