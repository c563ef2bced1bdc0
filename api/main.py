# api/main.py
# Run: uvicorn api.main:app --reload
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.config import get_settings
from api.errors import PredictionError, TransportFailure
from api.gateway import InferenceGateway
from api.schema import ErrorResponse, PredictionResponse
from api.validation import validate_request

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Odisha Crop Yield Advisor API")

# Enable CORS (so the dashboard can run on another origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_gateway() -> InferenceGateway:
    return InferenceGateway.from_settings(settings)


@app.exception_handler(PredictionError)
async def prediction_error_handler(request: Request, exc: PredictionError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # 404/405 etc. use the same {"message": ...} shape as prediction errors
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=TransportFailure(detail=str(exc)).to_body())


@app.get("/")
def home():
    return {"message": "Odisha Crop Yield Advisor API is running 🚀"}


ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 405, 500, 504)}


@app.post("/api/predict-yield", response_model=PredictionResponse, responses=ERROR_RESPONSES)
async def predict_yield(request: Request, gateway: InferenceGateway = Depends(get_gateway)):
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    data = validate_request(payload)

    try:
        # the Gradio call blocks, keep it off the event loop
        predicted = await run_in_threadpool(gateway.predict_yield, data)
    except PredictionError:
        raise
    except Exception as e:
        logger.exception("Prediction request failed")
        raise TransportFailure(detail=str(e)) from e

    logger.info(
        "Predicted %.4f t/ha for %s / %s / %s %s (%.2f ha)",
        predicted, data.district, data.crop, data.season, data.year, data.area,
    )
    return PredictionResponse(predictedYield=predicted)


@app.get("/health")
def health():
    return {"status": "ok"}
