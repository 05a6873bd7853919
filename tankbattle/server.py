"""FastAPI application exposing a tank battle over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from .config import GameConfig
from .entities import Direction, Position
from .game import Game
from .movement import IllegalMoveError, OccupiedError, TankNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


class MoveRequest(BaseModel):
    direction: Direction


class PlacementRequest(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)


def create_app(game: Optional[Game] = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(title="Tank Battle", description="Grid movement engine for tank battles")
    app.state.game = game or Game.from_config(GameConfig())
    app.state.lock = asyncio.Lock()
    app.include_router(router)
    return app


def _game(request: Request) -> Game:
    return request.app.state.game


def _lock(request: Request) -> asyncio.Lock:
    return request.app.state.lock


def _not_found(exc: TankNotFoundError) -> HTTPException:
    return HTTPException(status_code=404, detail=str(exc))


@router.get("/health")
async def healthcheck(request: Request) -> Dict[str, Any]:
    return {"status": "ok", "tanks": len(_game(request))}


@router.get("/state")
async def state(request: Request) -> Dict[str, Any]:
    async with _lock(request):
        return _game(request).snapshot()


@router.get("/tanks/{tank_id}")
async def get_tank(tank_id: int, request: Request) -> Dict[str, Any]:
    tank = _game(request).get_tank(tank_id)
    if tank is None:
        raise _not_found(TankNotFoundError(tank_id))
    return tank.serialise()


@router.post("/tanks/{tank_id}/move")
async def move_tank(tank_id: int, body: MoveRequest, request: Request) -> Dict[str, Any]:
    async with _lock(request):
        try:
            position = _game(request).make_move(tank_id, body.direction)
        except TankNotFoundError as exc:
            raise _not_found(exc) from exc
        except IllegalMoveError as exc:
            error = "occupied" if isinstance(exc, OccupiedError) else "out_of_bounds"
            raise HTTPException(status_code=409, detail={"error": error, "message": str(exc)}) from exc
    return {"position": position.to_dict()}


@router.put("/tanks/{tank_id}/position")
async def place_tank(tank_id: int, body: PlacementRequest, request: Request) -> Dict[str, Any]:
    game = _game(request)
    async with _lock(request):
        try:
            applied = game.force_set_position(tank_id, Position(body.x, body.y))
        except TankNotFoundError as exc:
            raise _not_found(exc) from exc
        tank = game.get_tank(tank_id)
    if not applied:
        logger.info("Placement of tank %s at %s,%s ignored", tank_id, body.x, body.y)
    return {"applied": applied, "position": tank.position.to_dict()}


app = create_app()


__all__ = ["app", "create_app"]
