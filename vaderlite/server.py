import logging
from typing import Annotated, List

import uvicorn
from fastapi import Depends, FastAPI
from pydantic import BaseModel, Field

from vaderlite import __version__, config
from vaderlite.core.analyzer import SentimentIntensityAnalyzer, get_default_analyzer
from vaderlite.core.scoring import SentimentScores

logger = logging.getLogger(__name__)

app = FastAPI(
    title="vaderlite API",
    description="Rule-based sentiment intensity scoring (VADER lexicon and heuristics)",
    version=__version__,
)

BoundedText = Annotated[str, Field(max_length=config.MAX_TEXT_LENGTH)]


class PolarityRequest(BaseModel):
    text: BoundedText


class BatchPolarityRequest(BaseModel):
    texts: List[BoundedText] = Field(..., min_length=1, max_length=config.MAX_BATCH_SIZE)


class PolarityResult(BaseModel):
    neg: float
    neu: float
    pos: float
    compound: float
    label: str

    @classmethod
    def from_scores(cls, scores: SentimentScores) -> "PolarityResult":
        return cls(**scores.as_dict(), label=scores.label)


class BatchPolarityResponse(BaseModel):
    items: int
    results: List[PolarityResult]


def get_analyzer() -> SentimentIntensityAnalyzer:
    """Dependency hook; tests override it with a small-lexicon analyzer."""
    return get_default_analyzer()


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to vaderlite API"}


@app.post("/polarity", response_model=PolarityResult, tags=["Sentiment"])
def polarity(request: PolarityRequest,
             analyzer: SentimentIntensityAnalyzer = Depends(get_analyzer)):
    """Score one text."""
    return PolarityResult.from_scores(analyzer.polarity_scores(request.text))


@app.post("/polarity/batch", response_model=BatchPolarityResponse, tags=["Sentiment"])
def polarity_batch(request: BatchPolarityRequest,
                   analyzer: SentimentIntensityAnalyzer = Depends(get_analyzer)):
    """Score many texts; results keep request order."""
    results = [PolarityResult.from_scores(analyzer.polarity_scores(t)) for t in request.texts]
    logger.debug("Scored batch of %d texts", len(results))
    return BatchPolarityResponse(items=len(results), results=results)


def run(host: str = config.API_HOST, port: int = config.API_PORT) -> None:
    # Fail at startup, not on the first request, when lexicon data is broken
    get_default_analyzer()
    logger.info("Starting vaderlite API on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    run()
