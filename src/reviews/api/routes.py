"""FastAPI routes for the Reviews bounded context.

Each route translates between Pydantic schemas (external contract) and the
Review aggregate, delegating persistence to ``ReviewService``. Successful
single-review responses carry ``ETag`` (the quoted version) and ``Location``
headers; misses are empty-bodied 404s.
"""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse, Response
from starlette.routing import NoMatchFound

from reviews.api.schemas import ReviewEntryRequest, ReviewRequest, ReviewResponse
from reviews.review.review import Review, ReviewEntry
from reviews.review.service import ReviewService

logger = structlog.get_logger(__name__)

review_router = APIRouter(tags=["reviews"])


def _review_location(request: Request, review: Review) -> str:
    return str(request.app.url_path_for("get_review", review_id=str(review.id)))


def _review_response(request: Request, review: Review, status_code: int = 200) -> Response:
    """Render a review with its ETag and Location headers.

    A Location that cannot be built is an internal error: 500, empty body.
    """
    try:
        location = _review_location(request, review)
    except NoMatchFound:
        logger.exception("review_location_failed", review_id=review.id)
        return Response(status_code=500)

    return JSONResponse(
        content=ReviewResponse.from_review(review).to_json(),
        status_code=status_code,
        headers={"ETag": f'"{review.version}"', "Location": location},
    )


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
@review_router.get("/review/{review_id}", name="get_review")
async def get_review(review_id: str, request: Request) -> Response:
    """Fetch a single review by id."""
    review = ReviewService().find_by_id(review_id)
    if review is None:
        return Response(status_code=404)

    return _review_response(request, review)


@review_router.get("/reviews", response_model=list[ReviewResponse])
async def list_reviews(product_id: int | None = Query(default=None, alias="productId")) -> JSONResponse:
    """List all reviews, or the review for one product."""
    service = ReviewService()

    if product_id is not None:
        review = service.find_by_product_id(product_id)
        found = [review] if review is not None else []
    else:
        found = service.find_all()

    return JSONResponse(content=[ReviewResponse.from_review(review).to_json() for review in found])


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@review_router.post("/review", status_code=201)
async def create_review(body: ReviewRequest, request: Request) -> Response:
    """Create a review; every entry is stamped with the receipt time."""
    logger.info("creating_review", product_id=body.product_id)
    service = ReviewService()

    now = datetime.now(UTC)
    entries = [ReviewEntry(username=entry.username, review=entry.review, date=now) for entry in body.entries]

    review = service.find_by_id(body.id) if body.id else None
    if review is not None:
        review.replace_entries(body.product_id, entries)
    else:
        review = Review.for_product(body.product_id, entries, review_id=body.id)

    saved = service.save(review)
    logger.info("review_saved", review_id=saved.id, version=saved.version)

    return _review_response(request, saved, status_code=201)


@review_router.post("/review/{product_id}/entry")
async def add_review_entry(product_id: int, body: ReviewEntryRequest, request: Request) -> Response:
    """Append an entry to a product's review, creating the review if needed.

    Saving goes through the create path, so the version returns to 1.
    """
    logger.info("adding_review_entry", product_id=product_id)
    service = ReviewService()

    review = service.find_by_product_id(product_id)
    if review is None:
        review = Review.for_product(product_id)

    review.add_entry(username=body.username, review=body.review)

    saved = service.save(review)
    logger.info("review_updated", review_id=saved.id, entries=len(saved.entries))

    return _review_response(request, saved)


@review_router.delete("/review/{review_id}")
async def delete_review(review_id: str) -> Response:
    """Delete a review by id."""
    service = ReviewService()

    review = service.find_by_id(review_id)
    if review is None:
        return Response(status_code=404)

    logger.info("deleting_review", review_id=review_id)
    service.delete(review_id)
    return Response(status_code=200)
