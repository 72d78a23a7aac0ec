"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_ROLE_NAME_LENGTH = 100
MAX_URL_LENGTH = 2048
MAX_SHORT_TEXT_LENGTH = 64

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything past this
BCRYPT_ROUNDS = 12
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31

# Sessions
SESSION_ID_BYTES = 32
DEFAULT_SESSION_TTL_SECONDS = 60 * 60 * 24  # 1 day
SESSION_KEY_PREFIX = "session:"

# Uploads
MAX_UPLOAD_BYTES = 5 * 1024 * 1024  # 5 MiB
UPLOAD_FIELD_NAME = "img"
UPLOAD_CHUNK_BYTES = 64 * 1024
IMAGE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}
