"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_MAX_UPLOAD_MB = 10
DEFAULT_DB_POOL_SIZE = 5

ALLOWED_ATTACHMENT_TYPES = ("pdf", "doc", "docx", "jpg", "jpeg", "png")

UPLOADS_URL_PREFIX = "/uploads"
SESSION_ID_BYTES = 32
