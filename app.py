"""
Journey Map API - FastAPI Entry Point

This is the main entry point for the journey map geo API.
All business logic is in the journeymap/ package - this file only handles:
- FastAPI app setup
- CORS middleware
- Response cache construction
- Route definitions (thin wrappers calling handler functions)
"""

import os
import time
import traceback
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables before the package resolves its paths
load_dotenv()

from journeymap import (
    # Errors
    DataUnavailable,
    InvalidParameter,
    # Cache
    ResponseCache,
    # Handlers
    build_countries_response,
    build_macroareas_response,
    get_globe_data,
    globe_cache_key,
    # Logging
    logger,
    log_api_query,
    log_error,
)
from journeymap import paths
from journeymap.constants import API_VERSION, LEVEL_COUNTRIES, LEVEL_MACROAREAS
from journeymap.logging_analytics import set_log_level
from journeymap.settings import get_cache_duration, get_default_limit, load_settings

settings = load_settings()
set_log_level(settings["log_level"])

# Create FastAPI app
app = FastAPI(
    title="Journey Map API",
    description="Country, macroarea and globe data for the themed globes",
    version=API_VERSION
)

# Enable CORS so browser frontend can communicate with backend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# One response cache per process, handed to every handler
app.state.response_cache = ResponseCache(ttl_seconds=get_cache_duration())
app.state.started_at = time.monotonic()


def _cache(req: Request) -> ResponseCache:
    return req.app.state.response_cache


def _invalid_parameter_response(e: InvalidParameter) -> JSONResponse:
    return JSONResponse(
        content={
            "error": f"Invalid {e.param} parameter",
            f"valid{e.param.capitalize()}s": e.valid,
        },
        status_code=400
    )


def _data_unavailable_response(e: DataUnavailable) -> JSONResponse:
    return JSONResponse(
        content={"error": "Internal server error", "message": str(e)},
        status_code=500
    )


def _unexpected_error_response(endpoint: str, e: Exception, params: dict) -> JSONResponse:
    log_error(endpoint, e, params)
    logger.debug(traceback.format_exc())
    return JSONResponse(
        content={"error": "Internal server error", "message": str(e)},
        status_code=500
    )


# === Startup Event ===

@app.on_event("startup")
async def startup_event():
    """Report the resolved data paths on startup."""
    logger.info("Starting journey map API...")
    for name, status in paths.validate_paths().items():
        if status["exists"]:
            logger.info(f"  {name}: {status['path']}")
        else:
            logger.warning(f"  {name} missing: {status['path']}")
    logger.info(f"Response cache window: {app.state.response_cache.ttl_seconds:g}s")


# === Health Check ===

@app.get("/health")
async def health_check(req: Request):
    """Health check with data directory and globe file status."""
    try:
        path_status = paths.validate_paths()
        all_paths_exist = all(p["exists"] for p in path_status.values())

        health_data = {
            "status": "healthy" if all_paths_exist else "degraded",
            "timestamp": datetime.now().isoformat(),
            "uptime": round(time.monotonic() - req.app.state.started_at, 3),
            "environment": os.environ.get("JOURNEYMAP_ENV", "development"),
            "version": API_VERSION,
            "services": {
                "database": "file-system",
                "cache": "memory",
                "cache_stats": _cache(req).stats(),
            },
            "checks": {
                "critical_paths": {name: p["exists"] for name, p in path_status.items()},
                "globe_files": paths.globe_file_status(),
                "all_systems": all_paths_exist,
            },
        }
        return JSONResponse(content=health_data, status_code=200 if all_paths_exist else 503)
    except Exception as e:
        logger.error(f"Health check error: {e}")
        return JSONResponse(
            content={
                "status": "unhealthy",
                "error": str(e),
                "timestamp": datetime.now().isoformat()
            },
            status_code=500
        )


# === Data Endpoints ===

@app.get("/api/countries")
async def countries_endpoint(
    req: Request,
    level: str = LEVEL_COUNTRIES,
    search: Optional[str] = None,
    macroarea: Optional[int] = None,
    limit: int = get_default_limit(),
    bounds: Optional[str] = None,
):
    """
    Countries or macroarea aggregates.
    Examples:
    - /api/countries?search=ita
    - /api/countries?macroarea=12&limit=10
    - /api/countries?level=macroareas&search=europe
    """
    params = {"level": level, "search": search, "macroarea": macroarea, "limit": limit, "bounds": bounds}
    try:
        result = build_countries_response(
            level, _cache(req),
            search=search, macroarea=macroarea, limit=limit, bounds_raw=bounds
        )
        log_api_query("countries", params, total=result["total"])
        return JSONResponse(content=result)
    except InvalidParameter as e:
        return _invalid_parameter_response(e)
    except DataUnavailable as e:
        logger.error(f"Error in /api/countries: {e}")
        return _data_unavailable_response(e)
    except Exception as e:
        return _unexpected_error_response("countries", e, params)


@app.get("/api/macroareas")
async def macroareas_endpoint(req: Request, continent_id: Optional[int] = None):
    """Macroarea aggregates with a metadata summary, optionally for one continent."""
    params = {"continent_id": continent_id}
    try:
        result = build_macroareas_response(_cache(req), continent_id=continent_id)
        log_api_query("macroareas", params, total=result["metadata"]["total_count"])
        return JSONResponse(content=result)
    except DataUnavailable as e:
        logger.error(f"API Error - Macroareas: {e}")
        return JSONResponse(
            content={
                "error": "Failed to load macroareas",
                "message": str(e),
                "timestamp": datetime.now().isoformat()
            },
            status_code=500
        )
    except Exception as e:
        return _unexpected_error_response("macroareas", e, params)


@app.get("/api/globe/{theme}")
async def globe_endpoint(
    req: Request,
    theme: str,
    level: str = LEVEL_MACROAREAS,
    bounds: Optional[str] = None,
):
    """
    Globe data for one theme.
    Examples:
    - /api/globe/borderscapes
    - /api/globe/nature?level=countries
    - /api/globe/mindscapes?bounds={"north":50,"south":30,"east":20,"west":-10}
    """
    params = {"theme": theme, "level": level, "bounds": bounds}
    cache = _cache(req)
    try:
        key = globe_cache_key(theme, level, bounds)
        cache_hit = cache.is_cached(key)
        result = get_globe_data(theme, cache, level=level, key=key)
        log_api_query("globe", params, total=len(result.get("points") or []),
                      cache_hit=cache_hit)
        return JSONResponse(content=result)
    except InvalidParameter as e:
        return _invalid_parameter_response(e)
    except DataUnavailable as e:
        logger.error(f"Error loading globe data for {theme}: {e}")
        return _data_unavailable_response(e)
    except Exception as e:
        return _unexpected_error_response("globe", e, params)


# === Cache Endpoints ===

@app.get("/api/cache/stats")
async def cache_stats_endpoint(req: Request):
    return JSONResponse(content=_cache(req).stats())


@app.post("/api/cache/clear")
async def clear_cache_endpoint(req: Request):
    """Clear the response cache. Useful after updating data files."""
    removed = _cache(req).clear()
    return JSONResponse(content={"message": "Response cache cleared", "removed": removed})


# === Main Entry Point ===

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 7000)))
