"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from datetime import date, datetime, timezone
from typing import Any

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.staticfiles import StaticFiles

from .api_models import (
    DashboardResponse,
    EntryResponse,
    GoalResponse,
    HeadlineResponse,
    MilestoneResponse,
    RenderResponse,
    SubmissionResponse,
)
from .config import settings
from .core.aggregation import build_dashboard, record_submission
from .core.catalog import MILESTONES
from .core.models import AggregateState, DashboardSummary
from .dashboard.renderer import DashboardRenderer
from .dashboard.ticker import Headline, headline_tickers
from .store.database import KeyValueStore, StorageWriteError
from .store.repository import StateRepository

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize components
repository = StateRepository(KeyValueStore(settings.db_path), settings.seed_sample_data)
renderer = DashboardRenderer(f"{settings.static_dir}/images")
headline = Headline()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the clock and quote tickers while the app is up."""
    tickers = headline_tickers(
        headline,
        settings.display_timezone,
        settings.clock_interval,
        settings.quote_interval,
    )
    for ticker in tickers:
        ticker.start()
    try:
        yield
    finally:
        for ticker in tickers:
            await ticker.stop()


# Initialize FastAPI app
app = FastAPI(
    title="Goal Tracker Dashboard",
    description="Daily goal tracking with completion scores and progress summaries",
    version="1.0.0",
    lifespan=lifespan,
)

# Mount static files
app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")


def get_repository() -> StateRepository:
    """Repository dependency."""
    return repository


def utc_today() -> date:
    """Date entries are recorded under."""
    return datetime.now(timezone.utc).date()


def get_base_url(request: Request) -> str:
    """Get base URL for serving images."""
    return f"{request.url.scheme}://{request.headers.get('host', 'localhost')}"


def summarize(state: AggregateState) -> DashboardSummary:
    """Dashboard figures for the current state."""
    return build_dashboard(
        state,
        utc_today(),
        settings.challenge_start,
        settings.challenge_end,
        settings.on_track_threshold,
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Goal Tracker Dashboard",
        "version": "1.0.0",
        "endpoints": {
            "dashboard": "/api/dashboard",
            "entries": "/api/entries",
            "goals": "/api/goals",
            "milestones": "/api/milestones",
            "headline": "/api/headline",
            "render": "/api/render",
            "status": "/status",
        },
    }


@app.get("/status")
async def status():
    """Server status endpoint."""
    return {
        "status": "running",
        "version": "1.0.0",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "db_path": settings.db_path,
        "earnings_rate": settings.earnings_rate,
        "correct_resubmitted_earnings": settings.correct_resubmitted_earnings,
    }


@app.get("/api/dashboard", response_model=DashboardResponse)
async def dashboard_endpoint(repo: StateRepository = Depends(get_repository)):
    """Overall progress, on-track count, days remaining and today's figures."""
    state = repo.load_state()
    return DashboardResponse.from_summary(summarize(state))


@app.post("/api/entries", response_model=SubmissionResponse)
async def submit_entry_endpoint(
    raw_input: dict[str, Any] = Body(...),
    repo: StateRepository = Depends(get_repository),
):
    """
    Record today's entry from raw form values.

    Invalid or missing fields are coerced, never rejected. If the entry
    cannot be saved the computed result is still returned with a warning.
    """
    today = utc_today()
    state = repo.load_state()
    state = record_submission(
        state,
        raw_input,
        today,
        settings.earnings_rate,
        settings.correct_resubmitted_earnings,
    )
    record = state.daily_data[today.isoformat()]

    response = SubmissionResponse(
        message="Daily progress saved successfully!",
        entry=EntryResponse.from_record(record),
        dashboard=DashboardResponse.from_summary(summarize(state)),
    )

    try:
        repo.save_state(state)
    except StorageWriteError as e:
        logger.error(f"Entry for {record.date} not saved: {e}")
        response.status = "warning"
        response.message = "Daily progress calculated but could not be saved"
        response.warning = str(e)

    return response


@app.get("/api/entries", response_model=list[EntryResponse])
async def list_entries_endpoint(repo: StateRepository = Depends(get_repository)):
    """All stored daily entries, oldest first."""
    state = repo.load_state()
    return [
        EntryResponse.from_record(state.daily_data[entry_date])
        for entry_date in sorted(state.daily_data)
    ]


@app.get("/api/entries/{entry_date}", response_model=EntryResponse)
async def get_entry_endpoint(entry_date: str, repo: StateRepository = Depends(get_repository)):
    """One stored daily entry."""
    state = repo.load_state()
    record = state.daily_data.get(entry_date)
    if record is None:
        raise HTTPException(status_code=404, detail=f"No entry for {entry_date}")
    return EntryResponse.from_record(record)


@app.get("/api/goals", response_model=list[GoalResponse])
async def list_goals_endpoint(repo: StateRepository = Depends(get_repository)):
    """The goal catalog."""
    state = repo.load_state()
    return [GoalResponse.from_goal(goal) for goal in state.goals.values()]


@app.get("/api/goals/{goal_id}", response_model=GoalResponse)
async def get_goal_endpoint(goal_id: str, repo: StateRepository = Depends(get_repository)):
    """Details for one goal."""
    state = repo.load_state()
    goal = state.goals.get(goal_id)
    if goal is None:
        raise HTTPException(status_code=404, detail=f"Unknown goal: {goal_id}")
    return GoalResponse.from_goal(goal)


@app.get("/api/milestones", response_model=list[MilestoneResponse])
async def milestones_endpoint():
    """Static milestone descriptors."""
    return [MilestoneResponse.from_milestone(milestone) for milestone in MILESTONES]


@app.get("/api/headline", response_model=HeadlineResponse)
async def headline_endpoint():
    """Current clock text and motivational quote."""
    return HeadlineResponse(clock_text=headline.clock_text, quote=headline.quote)


@app.post("/api/render", response_model=RenderResponse)
async def render_endpoint(request: Request, repo: StateRepository = Depends(get_repository)):
    """Render the dashboard image from the stored state."""
    logger.info("Render requested")
    state = repo.load_state()
    filename, _ = renderer.render(list(state.goals.values()), summarize(state), headline)

    image_url = f"{get_base_url(request)}/static/images/{filename}.png"
    return RenderResponse(filename=filename, image_url=image_url)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
