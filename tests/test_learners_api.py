def create_learner(client, number="2023001", name="Adi Nugraha", department="Teknik Informatika"):
    r = client.post(
        "/learners",
        json={"registration_number": number, "name": name, "department": department},
    )
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_get_learner(client):
    created = create_learner(client)
    assert created["id"]
    assert created["course_ids"] == []

    r = client.get(f"/learners/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_list_learners(client):
    a = create_learner(client, "1", "A")
    b = create_learner(client, "2", "B")

    r = client.get("/learners")
    assert r.status_code == 200
    assert {row["id"] for row in r.json()} == {a["id"], b["id"]}


def test_get_unknown_learner_is_404(client):
    r = client.get("/learners/does-not-exist")
    assert r.status_code == 404
    assert r.json()["code"] == "NOT_FOUND"
    assert "detail" in r.json()


def test_missing_field_is_rejected_by_schema(client):
    r = client.post("/learners", json={"name": "No Number"})
    assert r.status_code == 422


def test_blank_name_is_a_validation_error(client):
    r = client.post("/learners", json={"registration_number": "1", "name": "   "})
    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"


def test_update_replaces_fields_but_keeps_id(client, registry, course):
    created = create_learner(client)
    registry.enroll(created["id"], course.id)

    r = client.put(
        f"/learners/{created['id']}",
        json={"registration_number": "2023009", "name": "Adi N.", "department": None},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["id"] == created["id"]
    assert body["registration_number"] == "2023009"
    assert body["department"] is None
    assert body["course_ids"] == [course.id]


def test_update_unknown_learner_is_404(client):
    r = client.put("/learners/missing", json={"registration_number": "1", "name": "A"})
    assert r.status_code == 404


def test_delete_learner(client):
    created = create_learner(client)

    r = client.delete(f"/learners/{created['id']}")
    assert r.status_code == 200
    assert r.json() == {"message": "Learner deleted"}

    assert client.get(f"/learners/{created['id']}").status_code == 404
    assert client.delete(f"/learners/{created['id']}").status_code == 404


def test_health_reports_store_sizes(client, seeded_registry):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "learners": 2, "courses": 3}


def test_browser_preflight_is_allowed(client):
    for path in ("/learners", "/graphql"):
        r = client.options(
            path,
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == "*"


def test_cross_origin_response_carries_allow_origin(client):
    r = client.get("/learners", headers={"Origin": "http://localhost:5173"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
