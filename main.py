from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Optional
import time

from catalog import load_categories, load_fun_facts, pick_fun_fact, CatalogError
from config import get_settings
from database import SqliteStore
from game_logic import GameSession
from logs import log_message, log_error
from models import GameMode
from progress import DailyProgressStore
from puzzle_generator import PuzzleGenerator, PuzzleGenerationError
from share import format_share_text
from streaks import StreakTracker

settings = get_settings()

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class StartRequest(BaseModel):
    seed: Optional[str] = None


class ToggleRequest(BaseModel):
    name: str


_game: Optional[GameSession] = None
_fun_facts: Optional[dict] = None


def celebrate(session: GameSession):
    log_message("GAME", f"🎉 Puzzle #{session.puzzle_id} solved!")


def build_game() -> GameSession:
    store = SqliteStore(settings.DB_PATH)
    generator = PuzzleGenerator(
        load_categories(settings.CATEGORIES_PATH),
        max_attempts=settings.GENERATOR_MAX_ATTEMPTS,
    )
    session = GameSession(
        generator,
        DailyProgressStore(store),
        StreakTracker(store),
        max_incorrect=settings.MAX_INCORRECT,
        max_hints=settings.MAX_HINTS,
        on_win=celebrate,
    )
    session.start(GameMode.DAILY)
    return session


def get_game() -> GameSession:
    global _game
    if _game is None:
        _game = build_game()
    return _game


def get_fun_facts() -> dict:
    global _fun_facts
    if _fun_facts is None:
        try:
            _fun_facts = load_fun_facts(settings.FUN_FACTS_PATH)
        except (OSError, ValueError) as e:
            log_error("API", "Error loading fun facts", e)
            _fun_facts = {}
    return _fun_facts


def game_response(game: GameSession, facts: dict):
    data = game.to_dict()
    for group in data["found"]:
        group["fun_fact"] = pick_fun_fact(facts, group["category"])
    data["stats"] = game.streaks.stats.to_dict()
    return data


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start_time = time.time()

    log_message("API", f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    log_message("API", f"← {request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


@app.exception_handler(CatalogError)
@app.exception_handler(PuzzleGenerationError)
async def configuration_error_handler(request: Request, exc: Exception):
    log_error("API", f"Configuration error in {request.url.path}", exc)
    return JSONResponse({"error": f"Internal server error: {str(exc)}"}, status_code=500)


@app.get("/")
async def root():
    return {"message": "Football Connections API is running", "docs": "/docs"}


@app.get("/api/game")
async def get_game_state(game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    return game_response(game, facts)


@app.post("/api/game/daily")
async def start_daily(game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    game.start(GameMode.DAILY)
    return game_response(game, facts)


@app.post("/api/game/random")
async def start_random(
    body: Optional[StartRequest] = None,
    game: GameSession = Depends(get_game),
    facts: dict = Depends(get_fun_facts),
):
    game.start(GameMode.RANDOM, body.seed if body else None)
    return game_response(game, facts)


@app.post("/api/toggle")
async def toggle(body: ToggleRequest, game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    game.toggle(body.name)
    return game_response(game, facts)


@app.post("/api/submit")
async def submit(game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    game.submit()
    return game_response(game, facts)


@app.post("/api/hint")
async def hint(game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    game.use_hint()
    return game_response(game, facts)


@app.post("/api/give_up")
async def give_up(game: GameSession = Depends(get_game), facts: dict = Depends(get_fun_facts)):
    game.give_up()
    return game_response(game, facts)


@app.get("/api/stats")
async def get_stats(game: GameSession = Depends(get_game)):
    return game.streaks.stats.to_dict()


@app.get("/api/share")
async def share(game: GameSession = Depends(get_game)):
    if not game.is_terminal:
        return JSONResponse({"error": "Game is not finished yet"}, status_code=409)
    text = format_share_text(
        game.puzzle,
        game.guesses,
        game.puzzle_id,
        title=settings.SHARE_TITLE,
        link=settings.SHARE_LINK,
    )
    return {"text": text}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_config=None
    )
