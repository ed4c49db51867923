"""
Analysis API routes.
"""

import asyncio
import logging
import random
from fastapi import APIRouter, HTTPException, status, BackgroundTasks
from fastapi.responses import PlainTextResponse

from ..schemas import (
    AnalysisRunRequest,
    AnalysisTaskResponse,
    AnalysisResultsResponse
)
from ..tasks import task_store
from ...core.season import today
from ...platforms import get_data_source, DataNotFoundError, DataSourceError
from ...report import MarkdownGenerator
from ...simulator import Analyzer


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyses", tags=["analyses"])


async def run_analysis_task(task_id: str, request: AnalysisRunRequest) -> None:
    """
    Background task to run an analysis.

    Simulations run in a worker thread to avoid blocking the API.

    Args:
        task_id: The analysis task ID
        request: The analysis request parameters
    """
    task = task_store.get_by_id(task_id)
    if task is None:
        return

    try:
        source = get_data_source("nhl")
        task_store.update_progress(task, 5)

        league = await source.load_league(request.day, target_id=request.team)
        task_store.update_progress(task, 25)

        analyzer = Analyzer(
            league,
            request.team,
            n_simulations=request.n_simulations,
            rng=random.Random(request.seed),
            workers=request.workers
        )

        def progress_callback(pct: float):
            # Map analysis progress (0-100) to task progress (25-95)
            task.progress = int(25 + pct * 0.70)

        analysis = await asyncio.to_thread(analyzer.perform, progress_callback)

        response_data = AnalysisResultsResponse(
            **analysis.to_dict(),
            day=league.day,
            n_simulations=request.n_simulations
        )
        markdown = str(MarkdownGenerator(league, analysis).markdown())

        task_store.complete(task, response_data.model_dump(mode="json"), markdown)

    except Exception as e:
        logger.exception("Analysis task %s failed", task_id)
        task_store.fail(task, str(e))


@router.post("/run", response_model=AnalysisTaskResponse, status_code=status.HTTP_202_ACCEPTED)
async def start_analysis(
    request: AnalysisRunRequest,
    background_tasks: BackgroundTasks
) -> AnalysisTaskResponse:
    """
    Start the game night analysis of a team.

    Returns a task ID that can be used to poll for status and results.
    The analysis runs in the background.
    """
    request.team = request.team.upper()

    # Validate the team against the standings of the day
    try:
        source = get_data_source("nhl")
        teams, _ = await source.fetch_standings(request.day or today())
    except DataNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except DataSourceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Error communicating with the NHL API: {str(e)}"
        )

    if request.team not in teams:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Team {request.team} not found"
        )

    task_store.cleanup_old_tasks()
    task = task_store.create(request.team)

    background_tasks.add_task(run_analysis_task, task.id, request)

    return AnalysisTaskResponse(
        task_id=task.id,
        team=task.team,
        status="pending",
        progress=0
    )


@router.get("/{task_id}/status", response_model=AnalysisTaskResponse)
async def get_analysis_status(task_id: str) -> AnalysisTaskResponse:
    """
    Get the status of a running analysis.
    """
    task = task_store.get_by_id(task_id)

    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    return AnalysisTaskResponse(
        task_id=task.id,
        team=task.team,
        status=task.status,
        progress=task.progress,
        error=task.error_message
    )


def _get_completed_task(task_id: str):
    task = task_store.get_by_id(task_id)

    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found"
        )

    if task.status == "pending" or task.status == "running":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Analysis is still running"
        )

    if task.status == "failed":
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {task.error_message}"
        )

    return task


@router.get("/{task_id}/results", response_model=AnalysisResultsResponse)
async def get_analysis_results(task_id: str) -> AnalysisResultsResponse:
    """
    Get the results of a completed analysis.
    """
    task = _get_completed_task(task_id)
    return AnalysisResultsResponse(**task.results)


@router.get("/{task_id}/markdown", response_class=PlainTextResponse)
async def get_analysis_markdown(task_id: str) -> PlainTextResponse:
    """
    Get the game night post of a completed analysis.
    """
    task = _get_completed_task(task_id)
    return PlainTextResponse(task.markdown, media_type="text/markdown")
