from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from risk_api.config import settings
from risk_api.services.prediction_service import build_scorer, initialize_artifacts
from risk_api.api.routes import health, models, predict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*" if "*" in settings.CORS_ORIGINS else ", ".join(settings.CORS_ORIGINS),
    "Access-Control-Allow-Methods": ", ".join(settings.CORS_ALLOW_METHODS),
    "Access-Control-Allow-Headers": ", ".join(settings.CORS_ALLOW_HEADERS),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: read cutoffs once and build the shared scorer
    app.state.metadata = initialize_artifacts()
    app.state.scorer = build_scorer()
    yield


app = FastAPI(title="Loan Risk Scoring", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """Attach the fixed CORS headers to every response; answer OPTIONS with an empty 200."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(health.router, prefix="/api")
app.include_router(predict.router, prefix="/api")
app.include_router(models.router, prefix="/api")
