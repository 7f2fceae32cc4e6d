"""Site Analyzer API – FastAPI app exposing the page compliance report."""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from analyzer import analyze_url
from config import Settings, get_settings
from errors import AnalyzerError, MissingParameterError
from schemas import AnalysisResult, ErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(
    title="Site Analyzer API",
    description="Publishing checklist report for a single web page",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.exception_handler(AnalyzerError)
async def analyzer_error_handler(request: Request, exc: AnalyzerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get(
    "/api/analyze",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(url: str | None = None, config: Settings = Depends(get_settings)) -> AnalysisResult:
    """
    Pipeline: fetch page -> run checks -> score -> return report.
    """
    if not url:
        raise MissingParameterError()

    try:
        return analyze_url(
            url,
            use_fixture_data=config.use_fixture_data,
            timeout=config.fetch_timeout_seconds,
            user_agent=config.user_agent,
        )
    except AnalyzerError:
        raise
    except Exception as e:
        logger.exception("Analysis error for %s", url)
        raise AnalyzerError(str(e) or "Unknown error occurred") from e


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
