# relay/routes/fallback.py
"""Catch-all route: any unmatched method or path gets a bare 404."""

from fastapi import APIRouter
from fastapi import Response

router = APIRouter(include_in_schema=False)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS)
async def not_found(path: str) -> Response:
    """Return 404 with an empty body."""
    return Response(status_code=404)
