"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request, status

from adapter.mongodb.connection import ping
from api.response import send_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(request: Request):
    """Health check endpoint with dependency status."""
    state = request.app.state
    services = {}
    overall_healthy = True

    if getattr(state, 'user_repository', None) is None:
        services["repository"] = {"status": "unhealthy", "message": "Not configured"}
        overall_healthy = False
    else:
        services["repository"] = {"status": "healthy", "backend": getattr(state, 'repository_backend', 'custom')}

    mongo_client = getattr(state, 'mongo_client', None)
    if mongo_client is not None:
        if ping(mongo_client):
            services["mongodb"] = {"status": "healthy", "message": "Connection successful"}
        else:
            services["mongodb"] = {"status": "unhealthy", "message": "Ping failed"}
            overall_healthy = False

    data = {
        "status": "healthy" if overall_healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": services,
    }
    if overall_healthy:
        return send_response(status.HTTP_200_OK, True, "Service healthy", data)
    return send_response(status.HTTP_503_SERVICE_UNAVAILABLE, False, "Service degraded", data)
