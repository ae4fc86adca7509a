"""HTTP contract of the absence endpoints."""

ALERT = "X-supergooalrosApp-alert"
ERROR = "X-supergooalrosApp-error"
PARAMS = "X-supergooalrosApp-params"


def _create(client, payload):
    resp = client.post("/api/absences", json=payload)
    assert resp.status_code == 201
    return resp.json()


def test_create_assigns_id_and_sets_headers(client, absence_payload):
    resp = client.post("/api/absences", json=absence_payload)

    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["reason"] == "Grippe saisonniere"
    assert body["justified"] is True
    assert resp.headers["Location"] == f"/api/absences/{body['id']}"
    assert resp.headers[ALERT] == "supergooalrosApp.absence.created"
    assert resp.headers[PARAMS] == str(body["id"])


def test_created_absence_is_retrievable_and_searchable(client, absence_payload):
    created = _create(client, absence_payload)

    resp = client.get(f"/api/absences/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created

    resp = client.get("/api/_search/absences", params={"query": "grippe"})
    assert resp.status_code == 200
    assert [a["id"] for a in resp.json()] == [created["id"]]


def test_create_with_id_is_rejected_without_writing(client, absence_payload):
    resp = client.post("/api/absences", json=dict(absence_payload, id=7))

    assert resp.status_code == 400
    assert resp.json() == {"detail": "A new absence cannot already have an ID"}
    assert resp.headers[ERROR] == "error.idexists"
    assert resp.headers[PARAMS] == "absence"

    listing = client.get("/api/absences")
    assert listing.json() == []
    assert listing.headers["X-Total-Count"] == "0"
    assert client.get("/api/absences/7").status_code == 404
    assert client.get("/api/_search/absences", params={"query": "*"}).json() == []


def test_update_without_id_behaves_like_create(client, absence_payload):
    resp = client.put("/api/absences", json=absence_payload)

    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] is not None
    assert resp.headers["Location"] == f"/api/absences/{body['id']}"
    assert resp.headers[ALERT] == "supergooalrosApp.absence.created"
    search = client.get("/api/_search/absences", params={"query": "saisonniere"})
    assert [a["id"] for a in search.json()] == [body["id"]]


def test_update_overwrites_and_reindexes(client, absence_payload):
    created = _create(client, absence_payload)
    changed = dict(created, reason="Rendez-vous medical", justified=False)

    resp = client.put("/api/absences", json=changed)

    assert resp.status_code == 200
    assert resp.json() == changed
    assert resp.headers[ALERT] == "supergooalrosApp.absence.updated"
    assert resp.headers[PARAMS] == str(created["id"])
    assert client.get(f"/api/absences/{created['id']}").json() == changed
    assert client.get("/api/_search/absences", params={"query": "grippe"}).json() == []
    found = client.get("/api/_search/absences", params={"query": "medical"}).json()
    assert [a["id"] for a in found] == [created["id"]]


def test_get_unknown_id_returns_empty_404(client):
    resp = client.get("/api/absences/999")

    assert resp.status_code == 404
    assert resp.content == b""


def test_delete_removes_from_store_and_index(client, absence_payload):
    created = _create(client, absence_payload)

    resp = client.delete(f"/api/absences/{created['id']}")

    assert resp.status_code == 200
    assert resp.headers[ALERT] == "supergooalrosApp.absence.deleted"
    assert resp.headers[PARAMS] == str(created["id"])
    assert client.get(f"/api/absences/{created['id']}").status_code == 404
    assert client.get("/api/_search/absences", params={"query": "grippe"}).json() == []


def test_delete_unknown_id_succeeds_and_changes_nothing(client, absence_payload):
    created = _create(client, absence_payload)

    resp = client.delete("/api/absences/12345")

    assert resp.status_code == 200
    listing = client.get("/api/absences")
    assert listing.headers["X-Total-Count"] == "1"
    assert [a["id"] for a in listing.json()] == [created["id"]]
    assert len(client.get("/api/_search/absences", params={"query": "*"}).json()) == 1


def test_list_pages_and_headers(client, absence_payload):
    ids = [_create(client, dict(absence_payload, reason=f"motif {i}"))["id"] for i in range(5)]

    first = client.get("/api/absences", params={"page": 0, "size": 2})
    assert first.status_code == 200
    assert [a["id"] for a in first.json()] == ids[:2]
    assert first.headers["X-Total-Count"] == "5"
    link = first.headers["Link"]
    assert '</api/absences?page=1&size=2>; rel="next"' in link
    assert '</api/absences?page=2&size=2>; rel="last"' in link
    assert '</api/absences?page=0&size=2>; rel="first"' in link
    assert 'rel="prev"' not in link

    middle = client.get("/api/absences", params={"page": 1, "size": 2})
    assert [a["id"] for a in middle.json()] == ids[2:4]
    assert 'rel="prev"' in middle.headers["Link"]

    last = client.get("/api/absences", params={"page": 2, "size": 2})
    assert [a["id"] for a in last.json()] == ids[4:]
    assert 'rel="next"' not in last.headers["Link"]
    assert last.headers["X-Total-Count"] == "5"


def test_list_sort_descending(client, absence_payload):
    early = _create(client, dict(absence_payload, start_date="2016-01-04", end_date=None))
    late = _create(client, dict(absence_payload, start_date="2016-03-01", end_date=None))

    resp = client.get("/api/absences", params={"sort": "start_date,desc"})

    assert [a["id"] for a in resp.json()] == [late["id"], early["id"]]


def test_list_rejects_invalid_page_size(client):
    assert client.get("/api/absences", params={"size": 0}).status_code == 422
    assert client.get("/api/absences", params={"page": -1}).status_code == 422


def test_create_rejects_end_before_start(client, absence_payload):
    resp = client.post("/api/absences", json=dict(absence_payload, end_date="2016-05-01"))

    assert resp.status_code == 422
    assert client.get("/api/absences").headers["X-Total-Count"] == "0"


def test_search_pagination_headers_keep_query(client, absence_payload):
    for i in range(3):
        _create(client, dict(absence_payload, reason=f"grippe {i}"))

    resp = client.get("/api/_search/absences", params={"query": "grippe", "size": 2})

    assert len(resp.json()) == 2
    assert resp.headers["X-Total-Count"] == "3"
    assert '</api/_search/absences?query=grippe&page=1&size=2>; rel="next"' in resp.headers["Link"]


def test_search_requires_query(client):
    assert client.get("/api/_search/absences").status_code == 422


def test_search_without_usable_terms_matches_nothing(client, absence_payload):
    _create(client, absence_payload)

    resp = client.get("/api/_search/absences", params={"query": "!!! ()"})

    assert resp.status_code == 200
    assert resp.json() == []
    assert resp.headers["X-Total-Count"] == "0"


def test_body_ids_must_be_positive(client, absence_payload):
    for bad_id in (0, -5):
        assert client.put("/api/absences", json=dict(absence_payload, id=bad_id)).status_code == 422

    assert client.get("/api/absences").headers["X-Total-Count"] == "0"


def test_ids_beyond_sqlite_integer_range_are_rejected(client, absence_payload):
    too_big = 2**63

    assert client.get(f"/api/absences/{too_big}").status_code == 422
    assert client.get("/api/absences/99999999999999999999").status_code == 422
    assert client.delete(f"/api/absences/{too_big}").status_code == 422
    assert client.post("/api/absences", json=dict(absence_payload, id=too_big)).status_code == 422
    assert client.put("/api/absences", json=dict(absence_payload, id=too_big)).status_code == 422
    assert client.post("/api/absences", json=dict(absence_payload, employee_id=too_big)).status_code == 422


def test_ids_within_sqlite_integer_range_keep_not_found_contract(client):
    assert client.get(f"/api/absences/{2**63 - 1}").status_code == 404
    assert client.get("/api/absences/0").status_code == 404
    assert client.delete("/api/absences/-1").status_code == 200


def test_search_sort_orders_equally_relevant_matches(client, absence_payload):
    ids = [
        _create(client, dict(absence_payload, start_date=f"2016-0{m}-02", end_date=f"2016-0{m}-04"))["id"]
        for m in (5, 7, 6)
    ]

    resp = client.get("/api/_search/absences", params={"query": "grippe", "sort": "start_date,desc"})

    assert [a["id"] for a in resp.json()] == [ids[1], ids[2], ids[0]]
    assert resp.headers["X-Total-Count"] == "3"
