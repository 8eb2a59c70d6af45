"""Review application service: versioning rules over the review repository."""

from protean.core.application_service import use_case
from protean.utils.globals import current_domain

from reviews.domain import reviews
from reviews.review.review import Review


@reviews.application_service(part_of=Review)
class ReviewService:
    """Entry point for reading and writing reviews.

    ``save`` is the create path and always stamps ``version = 1``, even for a
    review that was stored before. ``update`` bumps the version by one. Neither
    checks the caller's version against the stored one.
    """

    @property
    def repository(self):
        return current_domain.repository_for(Review)

    def find_by_id(self, review_id: str) -> Review | None:
        return self.repository.get(review_id)

    def find_by_product_id(self, product_id: int) -> Review | None:
        return self.repository.get_by_product_id(product_id)

    def find_all(self) -> list[Review]:
        return self.repository.get_all()

    @use_case
    def save(self, review: Review) -> Review:
        review.version = 1
        return self.repository.put(review)

    @use_case
    def update(self, review: Review) -> Review:
        review.version = review.version + 1
        return self.repository.put(review)

    @use_case
    def delete(self, review_id: str) -> None:
        self.repository.delete_by_id(review_id)
