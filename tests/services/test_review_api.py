from __future__ import annotations

from bson import ObjectId

REVIEWS = "/v1/reviews"


def _seed(client):
    out = []
    for body in ({"movieInfoId": 1, "rating": 9.0, "comment": "Amazing"},
                 {"movieInfoId": 2, "rating": 6.7, "comment": "Boring"},
                 {"movieInfoId": 3, "rating": 8.0, "comment": "Fun"}):
        r = client.post(REVIEWS, json=body)
        assert r.status_code == 201, r.text
        out.append(r.json())
    return out


def test_create_review(review_client):
    r = review_client.post(REVIEWS, json={"movieInfoId": 4, "rating": 5.0, "comment": "BAD!"})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["reviewId"]
    assert (body["movieInfoId"], body["comment"], body["rating"]) == (4, "BAD!", 5.0)


def test_get_all_reviews(review_client):
    _seed(review_client)
    r = review_client.get(REVIEWS)
    assert r.status_code == 200, r.text
    assert len(r.json()) == 3


def test_get_reviews_by_movie_info_id(review_client):
    _seed(review_client)
    r = review_client.get(REVIEWS, params={"movieInfoId": 2})
    assert r.status_code == 200, r.text
    assert [x["comment"] for x in r.json()] == ["Boring"]
    assert review_client.get(REVIEWS, params={"movieInfoId": 42}).json() == []


def test_get_review_by_id(review_client):
    first = _seed(review_client)[0]
    r = review_client.get(f"{REVIEWS}/{first['reviewId']}")
    assert r.status_code == 200
    assert r.json() == first

    r = review_client.get(f"{REVIEWS}/{ObjectId()}")
    assert r.status_code == 404
    assert r.content == b""


def test_update_review_keeps_movie_info_id(review_client):
    first = _seed(review_client)[0]
    r = review_client.put(f"{REVIEWS}/{first['reviewId']}",
                          json={"movieInfoId": 99, "comment": "Not bad", "rating": 7.5})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["reviewId"] == first["reviewId"]
    assert body["movieInfoId"] == 1
    assert (body["comment"], body["rating"]) == ("Not bad", 7.5)


def test_update_unknown_review_is_404(review_client):
    r = review_client.put(f"{REVIEWS}/nope", json={"comment": "x", "rating": 1.0})
    assert r.status_code == 404
    assert r.content == b""


def test_delete_review_idempotent(review_client):
    first = _seed(review_client)[0]
    assert review_client.delete(f"{REVIEWS}/{first['reviewId']}").status_code == 204
    assert review_client.delete(f"{REVIEWS}/{first['reviewId']}").status_code == 204
    assert review_client.get(f"{REVIEWS}/{first['reviewId']}").status_code == 404
    assert len(review_client.get(REVIEWS).json()) == 2


def test_bad_rating_type_is_400(review_client):
    r = review_client.post(REVIEWS, json={"movieInfoId": 1, "rating": "great", "comment": "x"})
    assert r.status_code == 400
    assert r.text.startswith("rating: ")


def test_hello_world(review_client):
    r = review_client.get("/v1/helloworld")
    assert r.status_code == 200
    assert r.text == "Hello World"


def test_review_healthz(review_client):
    assert review_client.get("/healthz").json()["service"] == "review"


def test_movie_info_id_too_large_for_store_is_400(review_client):
    r = review_client.post(REVIEWS, json={"movieInfoId": 2**70, "rating": 1.0, "comment": "x"})
    assert r.status_code == 400
    assert r.text.startswith("movieInfoId: ")

    r = review_client.get(REVIEWS, params={"movieInfoId": 2**63})
    assert r.status_code == 400
    assert r.text.startswith("movieInfoId: ")


def test_largest_64_bit_movie_info_id_is_accepted(review_client):
    r = review_client.post(REVIEWS, json={"movieInfoId": 2**63 - 1, "rating": 1.0})
    assert r.status_code == 201, r.text
    assert r.json()["movieInfoId"] == 2**63 - 1


def test_non_finite_rating_is_400(review_client):
    for raw in (b'{"movieInfoId": 1, "rating": NaN}', b'{"movieInfoId": 1, "rating": Infinity}'):
        r = review_client.post(REVIEWS, content=raw, headers={"content-type": "application/json"})
        assert r.status_code == 400
        assert r.text.startswith("rating: ")
    assert review_client.get(REVIEWS).json() == []


def test_update_rejects_non_finite_rating(review_client):
    first = _seed(review_client)[0]
    r = review_client.put(f"{REVIEWS}/{first['reviewId']}", content=b'{"rating": NaN}',
                          headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert review_client.get(f"{REVIEWS}/{first['reviewId']}").json()["rating"] == 9.0


def test_update_review_keeps_fields_not_sent(review_client):
    first = _seed(review_client)[0]
    r = review_client.put(f"{REVIEWS}/{first['reviewId']}", json={"comment": "Still amazing"})
    assert r.status_code == 200, r.text
    assert (r.json()["comment"], r.json()["rating"]) == ("Still amazing", 9.0)

    r = review_client.put(f"{REVIEWS}/{first['reviewId']}", json={"rating": 9.5})
    assert r.status_code == 200, r.text
    assert (r.json()["comment"], r.json()["rating"]) == ("Still amazing", 9.5)
