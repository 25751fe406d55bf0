"""
Route de sante du service.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """Indique que le service repond."""
    return {"status": "ok"}
