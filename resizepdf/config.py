# resizepdf/config.py
import os


class Config:
    SITE_BASE_URL = os.environ.get("SITE_BASE_URL", "https://www.resizepdf.co")

    # Hard ceiling for any request body; Flask answers 413 above it
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_UPLOAD_MB", "100")) * 1024 * 1024

    ARTIFACT_TTL_SECONDS = int(os.environ.get("ARTIFACT_TTL_SECONDS", "600"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
