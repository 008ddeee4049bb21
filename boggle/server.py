import logging
from collections import OrderedDict

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from boggle.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")


def apply_log_level():
    """DEBUG turns on per-word scoring logs."""
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


def create_app(lexicon=None) -> FastAPI:
    """Build the API. Pass ``lexicon`` to skip loading the dictionary file at startup."""
    from contextlib import asynccontextmanager

    from boggle.board import BoardConfigError
    from boggle.game import GameSession, TurnOrderError
    from boggle.schemas import ComputerTurn, GuessRequest, GuessResult, NewRoundRequest, Player, RoundState

    rounds: "OrderedDict[str, GameSession]" = OrderedDict()

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        apply_log_level()
        if application.state.lexicon is None:
            from boggle.lexicon import load_lexicon
            logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
            application.state.lexicon = load_lexicon(
                str(settings.DICTIONARY_PATH), settings.MIN_DICTIONARY_WORD_LENGTH
            )
            logger.info("Lexicon loaded (%d words)", len(application.state.lexicon))
        yield
        rounds.clear()

    application = FastAPI(title="Boggle", lifespan=lifespan)
    application.state.lexicon = lexicon

    def get_round(round_id: str) -> GameSession:
        session = rounds.get(round_id)
        if session is None:
            raise HTTPException(404, f"Unknown round: {round_id}")
        return session

    @application.exception_handler(TurnOrderError)
    async def turn_order_error(request: Request, exc: TurnOrderError):
        return JSONResponse({"detail": str(exc)}, status_code=409)

    @application.get("/health")
    async def health():
        return {"status": "ok", "lexicon_loaded": application.state.lexicon is not None}

    @application.post("/rounds", response_model=RoundState, status_code=201)
    async def new_round(body: NewRoundRequest):
        big = settings.BIG_BOGGLE if body.big is None else body.big
        try:
            if body.letters is not None:
                session = GameSession.custom(application.state.lexicon, body.letters, big=big)
            else:
                session = GameSession.random(application.state.lexicon, big=big, seed=body.seed)
        except BoardConfigError as e:
            raise HTTPException(400, str(e))

        rounds[session.id] = session
        while len(rounds) > settings.MAX_ROUNDS:
            evicted, _ = rounds.popitem(last=False)
            logger.info("Evicted round %s", evicted)
        return session.state()

    @application.get("/rounds/{round_id}", response_model=RoundState)
    async def round_state(round_id: str):
        return get_round(round_id).state()

    @application.post("/rounds/{round_id}/guesses", response_model=GuessResult)
    async def guess(round_id: str, body: GuessRequest):
        return get_round(round_id).submit_guess(body.word)

    @application.post("/rounds/{round_id}/human-turn/end", response_model=RoundState)
    async def end_human_turn(round_id: str):
        session = get_round(round_id)
        session.end_human_turn()
        return session.state()

    @application.post("/rounds/{round_id}/computer", response_model=ComputerTurn)
    async def computer_turn(round_id: str):
        session = get_round(round_id)
        budget = settings.COMPUTER_TIME_BUDGET or None
        words = session.play_computer_turn(budget)
        return ComputerTurn(
            words=words,
            score=session.scores[Player.COMPUTER],
            stats=session.search.stats.summary(),
        )

    @application.get("/api/settings")
    async def api_get_settings():
        from boggle.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from boggle.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        apply_log_level()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
