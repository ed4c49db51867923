"""
Team and standings API routes.
"""

from datetime import date
from typing import List, Optional
from fastapi import APIRouter, HTTPException, status

from ..schemas import TeamStandingResult, TeamResult, RecordResult
from ...core.season import today
from ...platforms import get_data_source, DataNotFoundError, DataSourceError


router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=List[TeamStandingResult])
async def list_teams(day: Optional[date] = None) -> List[TeamStandingResult]:
    """
    List the league's teams with their record, best league rank first.
    """
    try:
        source = get_data_source("nhl")
        teams, standings = await source.fetch_standings(day or today())
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

    records = sorted(standings.values(), key=lambda r: r.league_rank)
    return [
        TeamStandingResult(
            team=TeamResult(**teams[record.team_id].to_dict()),
            record=RecordResult(**record.to_dict())
        )
        for record in records
    ]
