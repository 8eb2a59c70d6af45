"""Shared BDD fixtures and step definitions for the Reviews domain."""

import pytest
from fastapi.testclient import TestClient
from pytest_bdd import given, parsers, then
from reviews.review.service import ReviewService


@pytest.fixture()
def client():
    from app import app

    return TestClient(app)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the sample reviews are loaded")
def sample_loaded(sample_reviews):
    return sample_reviews


@given(parsers.cfparse("no review exists for product {product_id:d}"))
def no_review_for_product(product_id):
    assert ReviewService().find_by_product_id(product_id) is None


@given(parsers.cfparse('review "{review_id}" has been updated'))
def review_updated(review_id):
    service = ReviewService()
    service.update(service.find_by_id(review_id))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the response status is {status:d}"))
def response_status_is(response, status):
    assert response.status_code == status


@then(parsers.cfparse("the review for product {product_id:d} has {count:d} entries"))
def review_has_n_entries(product_id, count):
    review = ReviewService().find_by_product_id(product_id)
    assert review is not None
    assert len(review.entries) == count


@then(parsers.cfparse("the review version is {version:d}"))
def review_version_is(response, version):
    assert response.json()["version"] == version
    assert response.headers["ETag"] == f'"{version}"'


@then(parsers.cfparse('the last entry is by "{username}"'))
def last_entry_by(response, username):
    assert response.json()["entries"][-1]["username"] == username


@then(parsers.cfparse('review "{review_id}" is not found'))
def review_not_found(client, review_id):
    assert client.get(f"/review/{review_id}").status_code == 404
