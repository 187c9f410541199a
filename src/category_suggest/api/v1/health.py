from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/ready")
async def health_ready(request: Request):
    """Readiness check: the search orchestrator is wired up."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    return {
        "status": "ready" if orchestrator is not None else "not ready",
        "cached_prefixes": len(orchestrator.cache) if orchestrator is not None else 0,
    }
