"""
Service modules for business logic.
"""

from .content_generator import ContentGenerator
from .content_request import build_request, build_response_schema
from .image_adapter import ImageAdapter, compute_crop_box
from .orchestrator import SubmissionOrchestrator
from .presentation import build_post_cards

__all__ = [
    "ContentGenerator",
    "build_request",
    "build_response_schema",
    "ImageAdapter",
    "compute_crop_box",
    "SubmissionOrchestrator",
    "build_post_cards"
]
