import pytest

MISSING_ID = "0123456789abcdef01234567"


@pytest.mark.asyncio
async def test_register_university(client):
    payload = {
        "name": "Riverside Institute",
        "contactPerson": "Omar Siddiqui",
        "email": "info@riverside.edu",
        "password": "river-pass",
        "address": "5 River Lane",
    }

    res = await client.post("/api/universities/register", json=payload)

    assert res.status_code == 200
    data = res.json()
    assert data["message"] == "University registration successful"
    assert len(data["universityId"]) == 24
    assert data["name"] == "Riverside Institute"


@pytest.mark.asyncio
async def test_register_duplicate_email(client, university_id):
    payload = {
        "name": "Copycat College",
        "contactPerson": "Someone",
        "email": "admissions@northfield.edu",
        "password": "x",
        "address": "Elsewhere",
    }

    res = await client.post("/api/universities/register", json=payload)

    assert res.status_code == 400
    assert res.json() == {"error": "Email already in use"}


@pytest.mark.asyncio
async def test_register_missing_required_fields(client):
    res = await client.post("/api/universities/register", json={"name": "Half Done", "email": "half@done.edu"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert "contactPerson" in error and "password" in error and "address" in error


@pytest.mark.asyncio
async def test_get_university_strips_password(client, university_id):
    res = await client.get(f"/api/universities/{university_id}")

    assert res.status_code == 200
    data = res.json()
    assert data["id"] == university_id
    assert data["contactPerson"] == "Dana Reyes"
    assert data["website"] == "https://northfield.edu"
    assert data["description"] is None
    assert "password" not in data and "passwordHash" not in data


@pytest.mark.asyncio
async def test_get_university_malformed_and_missing(client):
    bad = await client.get("/api/universities/xyz")
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid university ID"}

    missing = await client.get(f"/api/universities/{MISSING_ID}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "University not found"}


@pytest.mark.asyncio
async def test_list_universities(client, university_id):
    res = await client.get("/api/universities")

    assert res.status_code == 200
    items = res.json()
    assert [u["id"] for u in items] == [university_id]
    assert "passwordHash" not in items[0]


@pytest.mark.asyncio
async def test_university_login(client, university_id):
    ok = await client.post("/api/universities/login", json={"email": "admissions@northfield.edu", "password": "campus-pass-1"})
    assert ok.status_code == 200
    assert ok.json() == {
        "message": "Login successful",
        "universityId": university_id,
        "name": "Northfield University",
    }

    wrong = await client.post("/api/universities/login", json={"email": "admissions@northfield.edu", "password": "bad"})
    assert wrong.status_code == 401

    unknown = await client.post("/api/universities/login", json={"email": "nobody@nowhere.edu", "password": "bad"})
    assert unknown.status_code == 404
    assert unknown.json() == {"error": "University not found"}
