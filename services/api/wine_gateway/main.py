import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .schemas import ErrorResponse, PredictResponse, WineFeatures
from .settings import settings
from .upstream import UpstreamError, forward_prediction

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Wine Quality Gateway")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # Report through the same "error" field the dashboard reads
    problems = "; ".join(
        f"{'.'.join(str(p) for p in e['loc'] if p != 'body')}: {e['msg']}"
        for e in exc.errors()
    )
    return JSONResponse(status_code=422, content={"error": f"Invalid input: {problems}"})


@app.get("/health")
def health():
    return {"status": "ok", "upstream_url": settings.upstream_prediction_url}


@app.post(
    "/predict_wine",
    response_model=PredictResponse,
    responses={502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
def predict_wine(req: WineFeatures):
    try:
        y = forward_prediction(req.model_dump())
    except UpstreamError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    return PredictResponse(predicted_quality=y)
