"""
Payment Evidence Store
Keeps uploaded payment screenshots on disk and hands back a public URL
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Iterable, Optional

from werkzeug.utils import secure_filename

from tours.services.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass
class StoredEvidence:
    path: str  # relative to the upload folder
    url: str


class PaymentEvidenceStore:
    """Durable storage for proof-of-payment images"""

    DIRECTORY = 'payment-screenshots'

    def __init__(self, upload_folder: str, public_url: str = '/uploads',
                 allowed_extensions: Optional[Iterable[str]] = None):
        """
        Args:
            upload_folder: Root directory files are written under
            public_url: URL prefix the upload folder is served from
            allowed_extensions: Lowercase extensions accepted by store()
        """
        self.upload_folder = upload_folder
        self.public_url = public_url.rstrip('/')
        self.allowed_extensions = set(allowed_extensions or ())

    @classmethod
    def from_config(cls, config) -> 'PaymentEvidenceStore':
        return cls(
            upload_folder=config['UPLOAD_FOLDER'],
            public_url=config.get('PUBLIC_UPLOAD_URL', '/uploads'),
            allowed_extensions=config.get('ALLOWED_PROOF_EXTENSIONS')
        )

    @staticmethod
    def normalize_extension(extension: str) -> str:
        return secure_filename(str(extension or '')).lstrip('.').lower()

    def is_allowed(self, extension: str) -> bool:
        ext = self.normalize_extension(extension)
        if not ext:
            return False
        return not self.allowed_extensions or ext in self.allowed_extensions

    def store(self, booking_id: str, file_bytes: bytes, extension: str) -> StoredEvidence:
        """
        Write a proof image as payment-screenshots/<booking>_<millis>.<ext>

        Raises:
            StorageError: empty file, unknown extension or the write failed
        """
        ext = self.normalize_extension(extension)
        if not file_bytes or not self.is_allowed(ext):
            raise StorageError('Payment screenshot could not be stored')

        filename = secure_filename(f"{booking_id}_{int(time.time() * 1000)}.{ext}")
        relative_path = f"{self.DIRECTORY}/{filename}"
        absolute_path = os.path.join(self.upload_folder, self.DIRECTORY, filename)

        try:
            os.makedirs(os.path.dirname(absolute_path), exist_ok=True)
            with open(absolute_path, 'wb') as f:
                f.write(file_bytes)
        except OSError as e:
            logger.error(f"Failed to store payment screenshot for booking {booking_id}: {str(e)}")
            raise StorageError('Failed to upload payment screenshot')

        logger.info(f"Stored payment screenshot: {relative_path}")
        return StoredEvidence(path=relative_path, url=f"{self.public_url}/{relative_path}")

    def delete(self, path: str) -> bool:
        """Remove a stored file; returns False if it was already gone"""
        absolute_path = os.path.join(self.upload_folder, path)
        try:
            os.remove(absolute_path)
            return True
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Failed to delete payment screenshot {path}: {str(e)}")
            return False
