"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest")
GEMINI_API_URL: str = os.getenv(
    "GEMINI_API_URL",
    f"https://generativelanguage.googleapis.com/v1beta/models/{GEMINI_MODEL}:generateContent",
)
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")

# Which provider the analysis client talks to: "gemini" or "openai"
ANALYSIS_PROVIDER: str = os.getenv("ANALYSIS_PROVIDER", "gemini")

# HTTP settings (transport timeout only; no retries)
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "60"))

# Local persistence
STORAGE_DIR: Path = Path(
    os.getenv("RESUMETRICS_STORAGE_DIR", str(Path.home() / ".resumetrics"))
).expanduser()
METADATA_FILENAME: str = "metadata.json"
BLOB_DIRNAME: str = "blobs"
METADATA_COLLECTION: str = "resumes"

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Accepted upload types: MIME type -> file extension
PDF_MIME_TYPE: str = "application/pdf"
DOCX_MIME_TYPE: str = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
SUPPORTED_MIME_TYPES: dict = {
    PDF_MIME_TYPE: ".pdf",
    DOCX_MIME_TYPE: ".docx",
}
