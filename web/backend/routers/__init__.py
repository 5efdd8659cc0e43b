"""API route handlers."""

from .verification import router as verification_router
from .resume import router as resume_router
