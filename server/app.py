from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from cluedo.config import GameConfig
from cluedo.exceptions import CluedoError, ErrorKind
from cluedo.game import GameManager
from cluedo.snapshot import (
    serialize_accusation,
    serialize_event,
    serialize_player,
    serialize_refutation,
    serialize_state,
)

from .schemas import (
    AccuseRequest,
    AccusationResponse,
    ErrorResponse,
    GameEventsResponse,
    GameStateResponse,
    PlayerResponse,
    RefutationResponse,
    SnapshotResponse,
    SuggestRequest,
)
from .settings import ServerSettings, get_server_settings

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 400,
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown."""
    logger.info(f"Starting Cluedo server (seed={app.state.manager.config.seed})")
    yield
    logger.info("Shutting down Cluedo server")


# ---- Dependencies ----
def get_manager(request: Request) -> GameManager:
    return request.app.state.manager


router = APIRouter(responses=ERROR_RESPONSES)


# ---- Players ----

@router.post("/players/{name}", status_code=201, response_model=PlayerResponse)
def create_player(name: str, manager: GameManager = Depends(get_manager)):
    return serialize_player(manager.add_player(name))


@router.delete("/players/{name}", status_code=204)
def delete_player(name: str, manager: GameManager = Depends(get_manager)):
    manager.remove_player(name)
    return Response(status_code=204)


@router.get("/players", response_model=List[PlayerResponse])
def get_players(manager: GameManager = Depends(get_manager)):
    return [serialize_player(p) for p in manager.list_players()]


@router.get("/players/{name}", response_model=PlayerResponse)
def get_player(name: str, manager: GameManager = Depends(get_manager)):
    return serialize_player(manager.get_player(name))


# ---- Game ----

@router.post("/game", status_code=201, response_model=GameStateResponse)
def create_game(manager: GameManager = Depends(get_manager)):
    return serialize_state(manager.start_game())


@router.get("/game", response_model=SnapshotResponse)
def get_game(manager: GameManager = Depends(get_manager)):
    return manager.snapshot()


@router.delete("/game", status_code=204)
def delete_game(manager: GameManager = Depends(get_manager)):
    manager.reset_game()
    return Response(status_code=204)


@router.get("/game/events", response_model=GameEventsResponse)
def get_events(manager: GameManager = Depends(get_manager)):
    events = [serialize_event(e) for e in manager.events()]
    return {"events": events, "total_events": len(events)}


# ---- Suggestions ----

@router.post("/suggest", response_model=RefutationResponse)
def suggest(req: SuggestRequest, manager: GameManager = Depends(get_manager)):
    return serialize_refutation(manager.refute(req.to_suggestion(), req.player))


@router.post("/accuse", response_model=AccusationResponse)
def accuse(req: AccuseRequest, manager: GameManager = Depends(get_manager)):
    return serialize_accusation(manager.accuse(req.to_suggestion(), req.player))


async def cluedo_error_handler(request: Request, exc: CluedoError) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"error": exc.code, "detail": str(exc)},
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    """Build the app around a fresh GameManager owned by `app.state`."""
    settings = settings or get_server_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Cluedo Server", version="0.1.0", lifespan=lifespan)
    app.state.manager = GameManager(GameConfig(seed=settings.seed))
    app.add_exception_handler(CluedoError, cluedo_error_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_server_settings()
    uvicorn.run(
        "server.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )
