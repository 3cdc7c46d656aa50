"""
Operational endpoints: health and build info.
"""
import os
from fastapi import APIRouter

SERVICE_NAME = "customer-service"

router = APIRouter(tags=["support"])  # keep paths stable (no prefix)


@router.get("/health")
def health_check():
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/build-info")
def get_build_info():
    """Return build and deployment information for the running service."""
    build_sha = os.getenv("BUILD_SHA")
    build_timestamp = os.getenv("BUILD_TIMESTAMP")
    image_tag = os.getenv("IMAGE_TAG")
    version = os.getenv("VERSION", "unknown")

    return {
        "build_sha": build_sha if build_sha else None,
        "build_timestamp": build_timestamp if build_timestamp else None,
        "image_tag": image_tag if image_tag else None,
        "service_name": SERVICE_NAME,
        "version": version,
    }
