"""Admin API routes for health, stats and config."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from onramp_mcp.admin.service import get_current_config, get_stats, update_config


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for container orchestration.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


async def api_stats(request: Request) -> JSONResponse:
    """Get server statistics and metrics as JSON."""
    return JSONResponse(get_stats())


async def api_config_get(request: Request) -> JSONResponse:
    """Get current runtime configuration."""
    return JSONResponse(get_current_config())


async def api_config_update(request: Request) -> JSONResponse:
    """Update runtime configuration.

    Returns:
        JSONResponse with operation status
    """
    try:
        body = await request.json()
        config_updates = body.get("config", {})
        result = update_config(config_updates)
        return JSONResponse(result)
    except Exception as e:
        return JSONResponse(
            {
                "status": "error",
                "message": str(e)
            },
            status_code=500
        )
