"""
DisasterWatch - REST API

FastAPI application exposing the organization dashboard: filtered reports,
analytics, map markers, basemap toggling and report selection.

Run with: uvicorn disasterwatch.api.main:app --reload
"""

from datetime import datetime, timezone
from typing import Optional, List

import httpx
from fastapi import FastAPI, HTTPException, Query, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from disasterwatch import __version__
from disasterwatch.core.logging import setup_logging
from disasterwatch.crowdsource.client import ReportClient
from disasterwatch.crowdsource.filters import FilterCriteria, filter_reports
from disasterwatch.crowdsource.report import Report
from disasterwatch.visualization.engine import ReportVisualizationEngine
from disasterwatch.visualization.map_view import MapViewController, create_file_storage

logger = setup_logging()

# FastAPI app
app = FastAPI(
    title="DisasterWatch",
    description="Live map and analytics for crowdsourced disaster-sighting reports",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Pydantic Models
# ============================================================================

class HealthResponse(BaseModel):
    """API health check response."""
    status: str
    version: str
    timestamp: str
    report_count: int


class ReportResponse(BaseModel):
    """Single disaster report."""
    id: str
    category: str
    display_category: str
    note: str
    location: str
    image_url: str
    created_at: Optional[str]
    confidence: Optional[float]


class ReportListResponse(BaseModel):
    """List of disaster reports."""
    count: int
    total: int
    reports: List[ReportResponse]


class FilterRequest(BaseModel):
    """Filter criteria set from the dashboard."""
    search_term: str = ""
    start_date: Optional[str] = Field(default=None, description="Date or timestamp, e.g. 2024-03-01")
    end_date: Optional[str] = Field(default=None, description="Date or timestamp, e.g. 2024-03-01")


class FilterResponse(BaseModel):
    """Current filter criteria."""
    search_term: str
    start_date: Optional[str]
    end_date: Optional[str]
    matching_reports: int


class CategoryCountResponse(BaseModel):
    name: str
    value: int


class TimeSeriesPointResponse(BaseModel):
    date: str
    count: int


class RegionCountResponse(BaseModel):
    region: str
    count: int


class AnalyticsResponse(BaseModel):
    """Dashboard analytics for the filtered reports."""
    total_reports: int
    category_counts: List[CategoryCountResponse]
    time_series: List[TimeSeriesPointResponse]
    most_common: str
    latest: str
    top_regions: List[RegionCountResponse]


class MarkerResponse(BaseModel):
    """Renderable map marker."""
    id: str
    center: List[float]
    radius: float
    color: str
    fill: str


class MarkerListResponse(BaseModel):
    count: int
    excluded: int
    markers: List[MarkerResponse]


class BasemapResponse(BaseModel):
    """Current basemap and its tile source."""
    basemap: str
    url: str
    attribution: str


class SelectionResponse(BaseModel):
    """Selected report and the camera move it triggered."""
    report: Optional[ReportResponse]
    camera: Optional[dict]


# ============================================================================
# Helper Functions
# ============================================================================

_engine: Optional[ReportVisualizationEngine] = None


def get_engine() -> ReportVisualizationEngine:
    """Get the dashboard engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = ReportVisualizationEngine(
            map_view=MapViewController(create_file_storage()),
        )
    return _engine


def get_report_client() -> ReportClient:
    return ReportClient()


def to_response(report: Report) -> ReportResponse:
    return ReportResponse(**report.to_dict())


def parse_criteria(
    search: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str]
) -> FilterCriteria:
    try:
        return FilterCriteria.from_strings(search, start_date, end_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def criteria_response(engine: ReportVisualizationEngine) -> FilterResponse:
    criteria = engine.criteria
    return FilterResponse(
        search_term=criteria.search_term,
        start_date=criteria.start_date.isoformat() if criteria.start_date else None,
        end_date=criteria.end_date.isoformat() if criteria.end_date else None,
        matching_reports=len(engine.filtered_reports),
    )


def basemap_response(engine: ReportVisualizationEngine) -> BasemapResponse:
    basemap = engine.map_view.basemap
    return BasemapResponse(basemap=basemap.value, url=basemap.url, attribution=basemap.attribution)


# ============================================================================
# System Routes
# ============================================================================

@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
        report_count=len(engine.reports),
    )


# ============================================================================
# Report Routes
# ============================================================================

@app.post("/api/v1/reports/refresh", response_model=ReportListResponse, tags=["Reports"])
async def refresh_reports(
    engine: ReportVisualizationEngine = Depends(get_engine),
    client: ReportClient = Depends(get_report_client),
):
    """Re-fetch the report collection from the backend."""
    try:
        with client:
            reports = client.get_reports()
    except httpx.HTTPError as e:
        logger.error(f"Failed to fetch reports: {e}")
        raise HTTPException(status_code=502, detail=f"Reports backend unavailable: {e}")
    except ValueError as e:
        raise HTTPException(status_code=502, detail=str(e))

    engine.set_reports(reports)
    filtered = engine.filtered_reports

    return ReportListResponse(
        count=len(filtered),
        total=len(reports),
        reports=[to_response(r) for r in filtered],
    )


@app.get("/api/v1/reports", response_model=ReportListResponse, tags=["Reports"])
async def list_reports(
    search: Optional[str] = Query(None, description="Match category or note"),
    start_date: Optional[str] = Query(None, description="Inclusive lower bound"),
    end_date: Optional[str] = Query(None, description="Inclusive upper bound"),
    engine: ReportVisualizationEngine = Depends(get_engine),
):
    """
    List reports.

    Without query parameters the dashboard's current filters apply.
    Query parameters filter this request only.
    """
    if search or start_date or end_date:
        criteria = parse_criteria(search, start_date, end_date)
        reports = filter_reports(engine.reports, criteria)
    else:
        reports = engine.filtered_reports

    return ReportListResponse(
        count=len(reports),
        total=len(engine.reports),
        reports=[to_response(r) for r in reports],
    )


@app.get("/api/v1/reports/{report_id}", response_model=ReportResponse, tags=["Reports"])
async def get_report(report_id: str, engine: ReportVisualizationEngine = Depends(get_engine)):
    """Get a specific report by ID."""
    report = engine.get_report(report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Report not found")
    return to_response(report)


# ============================================================================
# Filter Routes
# ============================================================================

@app.get("/api/v1/filters", response_model=FilterResponse, tags=["Filters"])
async def get_filters(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Get the current dashboard filters."""
    return criteria_response(engine)


@app.put("/api/v1/filters", response_model=FilterResponse, tags=["Filters"])
async def set_filters(request: FilterRequest, engine: ReportVisualizationEngine = Depends(get_engine)):
    """Set the dashboard search term and date range."""
    engine.set_criteria(parse_criteria(request.search_term, request.start_date, request.end_date))
    return criteria_response(engine)


@app.delete("/api/v1/filters", response_model=FilterResponse, tags=["Filters"])
async def clear_filters(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Clear all dashboard filters."""
    engine.clear_filters()
    return criteria_response(engine)


# ============================================================================
# Analytics Routes
# ============================================================================

@app.get("/api/v1/analytics", response_model=AnalyticsResponse, tags=["Analytics"])
async def get_analytics(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Category distribution, reports over time, latest report and top regions."""
    return AnalyticsResponse(**engine.analytics.to_dict())


# ============================================================================
# Selection Routes
# ============================================================================

@app.post("/api/v1/reports/{report_id}/select", response_model=SelectionResponse, tags=["Selection"])
async def select_report(report_id: str, engine: ReportVisualizationEngine = Depends(get_engine)):
    """Select a report and fly the map camera to it."""
    commands_before = engine.viewport.commands_received
    report = engine.select_by_id(report_id)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")

    moved = engine.viewport.commands_received > commands_before
    camera = engine.viewport.target.to_dict() if moved else None
    return SelectionResponse(report=to_response(report), camera=camera)


@app.delete("/api/v1/selection", response_model=SelectionResponse, tags=["Selection"])
async def clear_selection(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Clear the selected report."""
    engine.select(None)
    return SelectionResponse(report=None, camera=None)


# ============================================================================
# Map Routes
# ============================================================================

@app.get("/api/v1/map/markers", response_model=MarkerListResponse, tags=["Map"])
async def get_markers(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Markers for the filtered reports that have coordinates."""
    markers = engine.markers()
    return MarkerListResponse(
        count=len(markers),
        excluded=len(engine.filtered_reports) - len(markers),
        markers=[MarkerResponse(**m.to_dict()) for m in markers],
    )


@app.get("/api/v1/map/basemap", response_model=BasemapResponse, tags=["Map"])
async def get_basemap(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Current basemap tile source."""
    return basemap_response(engine)


@app.post("/api/v1/map/basemap/toggle", response_model=BasemapResponse, tags=["Map"])
async def toggle_basemap(engine: ReportVisualizationEngine = Depends(get_engine)):
    """Cycle satellite -> street -> dark and persist the choice."""
    engine.toggle_basemap()
    return basemap_response(engine)


@app.get("/api/v1/map", response_class=HTMLResponse, tags=["Map"])
async def get_map(engine: ReportVisualizationEngine = Depends(get_engine)):
    """
    Interactive report map.

    Returns an HTML page with a Leaflet map centered on the last selected
    report, or on the default center when nothing has been selected.
    """
    return engine.render_map()._repr_html_()


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    from disasterwatch.core.config import settings
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
