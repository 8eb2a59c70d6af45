"""Repository for the Review aggregate.

Thin gateway over the configured document store. Lookups return ``None`` on a
miss instead of raising, and deletes of absent reviews are silently ignored.
"""

import structlog

from reviews.domain import reviews
from reviews.review.review import Review

logger = structlog.get_logger(__name__)


@reviews.repository(part_of=Review)
class ReviewRepository:
    """Document-store access for reviews."""

    def get(self, review_id: str) -> Review | None:
        """Find a review by its id."""
        return self.get_or_none(review_id)

    def get_by_product_id(self, product_id: int) -> Review | None:
        """Find the review for a product.

        Product ids are not unique. When more than one review matches, the
        first one the store yields is returned.
        """
        matches = self.query.filter(product_id=product_id).limit(None).all().items
        if not matches:
            return None

        if len(matches) > 1:
            logger.warning(
                "multiple_reviews_for_product",
                product_id=product_id,
                count=len(matches),
                chosen_id=matches[0].id,
            )

        return matches[0]

    def get_all(self) -> list[Review]:
        """Every stored review, unbounded."""
        return self.query.limit(None).all().items

    def put(self, review: Review) -> Review:
        """Insert or overwrite a review, keyed by its id.

        The last write wins: a copy read before someone else's write still
        replaces the stored document instead of failing the version check.
        """
        if review.state_.is_persisted:
            stored = self.get_or_none(review.id)
            if stored is None:
                # Deleted since it was read; store it again
                review.state_.mark_new()
            elif stored is not review:
                review._version = stored._version

        return self.add(review)

    def delete_by_id(self, review_id: str) -> None:
        """Remove a review. Absent ids are a no-op."""
        review = self.get_or_none(review_id)
        if review is None:
            return

        self._dao.delete(review)
