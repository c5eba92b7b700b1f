# backend/student_records/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# Project layout
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))  # Path: .../backend/student_records
BACKEND_DIR = os.path.dirname(PACKAGE_DIR)                # Path: .../backend
ROOT_DIR = os.path.dirname(BACKEND_DIR)                   # Path: .../ (Project Root)

# Storage Configuration
DATA_FILE = os.getenv("DATA_FILE", os.path.join(ROOT_DIR, "data", "students.json"))

# Server Configuration
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
RELOAD = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Client Configuration
API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{PORT}")
SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", 500))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 10))

# Records
DEFAULT_PHONE = "N/A"
REQUIRED_FIELDS = ("name", "rollNumber", "age", "grade", "email", "course")
