"""Main application module for Bandscope.

This module defines the FastAPI application that exposes the band lookup
engine over REST and mounts an MCP server for Model Context Protocol
clients. The app is built by ``create_app`` and exposed as a module-level
variable named ``app`` so that ASGI servers like Uvicorn can discover it.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi_mcp import FastApiMCP

from .adapters.bandplan import get_bandplan_adapter
from .engine import format_frequency, is_valid_frequency
from .engine.ranges import MAX_FREQUENCY_KHZ, MIN_FREQUENCY_KHZ
from .middleware import RequestLogMiddleware
from .models import FilterCriteria


def _check_frequency(frequency: int) -> None:
    if not is_valid_frequency(frequency):
        raise HTTPException(
            status_code=400,
            detail=(
                f"Frequency must be between {MIN_FREQUENCY_KHZ} and "
                f"{MAX_FREQUENCY_KHZ} kHz"
            ),
        )


def create_app() -> FastAPI:
    """Factory function for constructing the FastAPI application.

    The returned application includes CORS middleware, request logging and
    the band plan endpoints. Every endpoint carrying an operation
    identifier is also exposed as an MCP tool.
    """
    app = FastAPI(title="Bandscope")

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.get("/api")
    def api_root():
        """Return a simple service descriptor for programmatic clients."""
        return {
            "ok": True,
            "service": "Bandscope",
            "docs": "/docs",
            "health": "/health",
            "mcp": "/mcp",
        }

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"ok": True}

    @app.get(
        "/api/bands",
        operation_id="list_bands",
        tags=["Band Plan"],
    )
    async def rest_list_bands() -> JSONResponse:
        """List every band with its transmission verdict."""
        result = get_bandplan_adapter().search()
        return JSONResponse({"record": result.model_dump(mode="json")})

    @app.get(
        "/api/bands/frequency/{frequency}",
        operation_id="band_at_frequency",
        tags=["Band Plan"],
    )
    async def rest_band_at_frequency(frequency: int) -> JSONResponse:
        """Get every band containing a frequency given in kHz.

        Each band comes with its transmission verdict, the modes active at
        that frequency (segment modes when a segment matches) and, for
        channelized allocations such as CB, PMR446 and LPD, the channel.
        """
        _check_frequency(frequency)
        result = get_bandplan_adapter().lookup_frequency(frequency)
        return JSONResponse({"record": result.model_dump(mode="json")})

    @app.get(
        "/api/bands/search",
        operation_id="search_bands",
        tags=["Band Plan"],
    )
    async def rest_search_bands(
        frequency: Optional[int] = Query(None, description="Frequency in kHz (0-3000000)"),
        band_name: Optional[str] = Query(None, description="Exact band name (e.g., 20m, PMR446)"),
        usage: Optional[str] = Query(None, description="Usage category (libero, radioamatoriale, licenziato, riservato)"),
        country: Optional[str] = Query(None, description="Two-letter country code (e.g., IT)"),
        q: Optional[str] = Query(None, description="Free-text search"),
    ) -> JSONResponse:
        """Search bands, optionally scoped to a frequency.

        All parameters are optional. When a frequency is given, only bands
        containing it are considered before the other filters apply. A
        frequency outside 0-3000000 kHz is ignored.
        """
        criteria = FilterCriteria(
            bandName=band_name,
            usage=usage,
            country=country,
            searchText=q,
        )
        result = get_bandplan_adapter().search(frequency=frequency, criteria=criteria)
        return JSONResponse({"record": result.model_dump(mode="json")})

    @app.get(
        "/api/bands/filters",
        operation_id="band_filter_options",
        tags=["Band Plan"],
    )
    async def rest_filter_options() -> JSONResponse:
        """Get the distinct band names, usages and countries in the dataset."""
        options = get_bandplan_adapter().get_filter_options()
        return JSONResponse({"record": options.model_dump()})

    @app.get(
        "/api/bands/summary",
        operation_id="band_plan_summary",
        tags=["Band Plan"],
    )
    async def rest_band_plan_summary() -> JSONResponse:
        """Get summary information about the loaded dataset."""
        summary = get_bandplan_adapter().get_summary()

        if not summary:
            raise HTTPException(
                status_code=503,
                detail="Band data not loaded",
            )

        return JSONResponse({"record": summary.model_dump()})

    @app.get(
        "/api/frequency/format/{frequency}",
        operation_id="format_frequency",
        tags=["Band Plan"],
    )
    async def rest_format_frequency(frequency: int) -> JSONResponse:
        """Format a frequency in kHz as kHz, MHz or GHz."""
        _check_frequency(frequency)
        return JSONResponse({"frequency": frequency, "display": format_frequency(frequency)})

    # -----------------------------------------------------------------------
    # MCP server mount
    # -----------------------------------------------------------------------
    mcp = FastApiMCP(
        app,
        include_operations=[
            "list_bands",
            "band_at_frequency",
            "search_bands",
            "band_filter_options",
            "band_plan_summary",
            "format_frequency",
        ],
    )
    mcp.mount()

    return app


# ---------------------------------------------------------------------------
# FastAPI application instance
# ---------------------------------------------------------------------------
app = create_app()
