"""Configuration management for the Page Corpus Explorer."""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Server Configuration
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"

# CORS Configuration
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:3001"
).split(",")

# Corpus Configuration
CORPUS_PATH = os.getenv("CORPUS_PATH", "corpus")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30.0"))  # seconds, for remote corpus files

# Display Configuration
DOCUMENT_COLOR_ALPHA = float(os.getenv("DOCUMENT_COLOR_ALPHA", "1.0"))

# Similarity Configuration
SIMILARITY_TOP_K = int(os.getenv("SIMILARITY_TOP_K", "5"))
SIMILARITY_MIN_SCORE = float(os.getenv("SIMILARITY_MIN_SCORE", "0.0"))

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
