def test_create_and_get_course(client):
    r = client.post("/courses", json={"code": "IF101", "title": "Dasar Pemrograman", "credit_weight": 3})
    assert r.status_code == 201, r.text
    course = r.json()
    assert course["code"] == "IF101"
    assert course["credit_weight"] == 3

    r = client.get(f"/courses/{course['id']}")
    assert r.status_code == 200
    assert r.json() == course


def test_list_courses(client, seeded_registry):
    r = client.get("/courses")
    assert r.status_code == 200
    assert sorted(c["code"] for c in r.json()) == ["IF101", "IF102", "UM101"]


def test_credit_weight_must_be_positive(client):
    r = client.post("/courses", json={"code": "IF101", "title": "Dasar Pemrograman", "credit_weight": 0})
    assert r.status_code == 422


def test_get_unknown_course_is_404(client):
    r = client.get("/courses/missing")
    assert r.status_code == 404
    assert r.json()["detail"] == "Course missing not found"
