"""BDD tests for adding and deleting review entries over HTTP."""

from pytest_bdd import parsers, scenarios, when

scenarios("features/review_entries.feature")


@when(
    parsers.cfparse('user "{username}" adds the entry "{text}" to product {product_id:d}'),
    target_fixture="response",
)
def add_entry(client, username, text, product_id):
    return client.post(f"/review/{product_id}/entry", json={"username": username, "review": text})


@when(parsers.cfparse('review "{review_id}" is deleted'), target_fixture="response")
def delete_review(client, review_id):
    return client.delete(f"/review/{review_id}")
