from __future__ import annotations

import os
from pathlib import Path

from landing_composer.api import create_app
from landing_composer.content_repository import LocalContentRepository
from landing_composer.logging_config import setup_logging

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
CONTENT_BASE_PATH = os.getenv("CONTENT_BASE_PATH", "content")
ENFORCE_SECTION_ORDER = os.getenv("ENFORCE_SECTION_ORDER", "").strip().lower() in {"1", "true", "yes"}

setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)

repository = LocalContentRepository(base_path=Path(CONTENT_BASE_PATH).resolve())

app = create_app(repository=repository, enforce_section_order=ENFORCE_SECTION_ORDER)
