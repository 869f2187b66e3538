import pytest

MISSING_ID = "0123456789abcdef01234567"


async def add_campus(client, university_id, name="Main Campus"):
    payload = {"universityId": university_id, "name": name, "address": "1 Main St", "contact": "042-111"}
    res = await client.post("/api/universities/campuses", json=payload)
    assert res.status_code == 201
    return res.json()["campus"]


# ------------------------------------------------------------------
# CAMPUS
# ------------------------------------------------------------------
@pytest.mark.asyncio
async def test_campus_lifecycle(client, university_id):
    res = await client.post(
        "/api/universities/campuses",
        json={"universityId": university_id, "name": "City Campus", "address": "9 Mall Rd", "contact": "042-222"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Campus added successfully"
    campus = body["campus"]
    assert campus["universityId"] == university_id
    campus_id = campus["id"]

    res = await client.get(f"/api/universities/campuses/{campus_id}")
    assert res.status_code == 200
    assert res.json()["name"] == "City Campus"

    res = await client.put(
        f"/api/universities/campuses/{campus_id}",
        json={"name": "City Campus II", "address": "10 Mall Rd", "contact": "042-333"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Campus updated successfully"
    assert res.json()["campus"]["address"] == "10 Mall Rd"
    assert res.json()["campus"]["createdAt"] == campus["createdAt"]

    res = await client.delete(f"/api/universities/campuses/{campus_id}")
    assert res.status_code == 200
    assert res.json()["message"] == "Campus deleted successfully"
    assert res.json()["campus"]["name"] == "City Campus II"

    res = await client.get(f"/api/universities/campuses/{campus_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Campus not found"}


@pytest.mark.asyncio
async def test_campus_update_is_full_replace(client, university_id):
    campus = await add_campus(client, university_id)

    res = await client.put(f"/api/universities/campuses/{campus['id']}", json={"name": "Renamed", "address": "2 Main St"})

    assert res.status_code == 400
    assert res.json() == {"error": "Required fields are missing: contact"}

    unchanged = (await client.get(f"/api/universities/campuses/{campus['id']}")).json()
    assert unchanged["name"] == "Main Campus"


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["get", "put", "delete"])
async def test_campus_malformed_id(client, method):
    kwargs = {"json": {"name": "n", "address": "a", "contact": "c"}} if method == "put" else {}

    res = await getattr(client, method)("/api/universities/campuses/not-valid", **kwargs)

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid campus ID"}


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["get", "put", "delete"])
async def test_campus_unknown_id(client, method):
    kwargs = {"json": {"name": "n", "address": "a", "contact": "c"}} if method == "put" else {}

    res = await getattr(client, method)(f"/api/universities/campuses/{MISSING_ID}", **kwargs)

    assert res.status_code == 404


@pytest.mark.asyncio
async def test_campus_requires_existing_university(client):
    payload = {"universityId": MISSING_ID, "name": "Ghost", "address": "Nowhere", "contact": "0"}

    res = await client.post("/api/universities/campuses", json=payload)

    assert res.status_code == 404
    assert res.json() == {"error": "University not found"}


@pytest.mark.asyncio
async def test_campus_rejects_malformed_university_id(client):
    payload = {"universityId": "abc", "name": "Bad", "address": "Nowhere", "contact": "0"}

    res = await client.post("/api/universities/campuses", json=payload)

    assert res.status_code == 400
    assert res.json() == {"error": "Invalid university ID"}


@pytest.mark.asyncio
async def test_campuses_listed_per_university(client, university_id):
    other = await client.post(
        "/api/universities/register",
        json={"name": "Other U", "contactPerson": "X", "email": "x@other.edu", "password": "p", "address": "A"},
    )
    other_id = other.json()["universityId"]

    await add_campus(client, university_id, "North")
    await add_campus(client, university_id, "South")
    await add_campus(client, other_id, "Elsewhere")

    res = await client.get(f"/api/universities/{university_id}/campuses")

    assert res.status_code == 200
    assert sorted(c["name"] for c in res.json()) == ["North", "South"]

    bad = await client.get("/api/universities/nope/campuses")
    assert bad.status_code == 400


# ------------------------------------------------------------------
# DEPARTMENT
# ------------------------------------------------------------------
@pytest.mark.asyncio
async def test_department_replace_clears_optional_description(client, university_id):
    res = await client.post(
        "/api/universities/departments",
        json={"universityId": university_id, "name": "Physics", "campus": "Main", "description": "Labs"},
    )
    assert res.status_code == 201
    assert res.json()["message"] == "Department added successfully"
    dept_id = res.json()["department"]["id"]

    res = await client.put(f"/api/universities/departments/{dept_id}", json={"name": "Physics", "campus": "North"})

    assert res.status_code == 200
    dept = res.json()["department"]
    assert dept["campus"] == "North"
    assert dept["description"] is None


@pytest.mark.asyncio
async def test_department_missing_campus(client, university_id):
    res = await client.post("/api/universities/departments", json={"universityId": university_id, "name": "Math"})

    assert res.status_code == 400
    assert res.json() == {"error": "Required fields are missing: campus"}


# ------------------------------------------------------------------
# FACULTY
# ------------------------------------------------------------------
@pytest.mark.asyncio
async def test_faculty_lifecycle(client, university_id):
    payload = {
        "universityId": university_id,
        "name": "Dr. Sara Malik",
        "designation": "Professor",
        "campus": "Main",
        "department": "Physics",
        "email": "sara@northfield.edu",
    }
    res = await client.post("/api/universities/faculty", json=payload)
    assert res.status_code == 201
    assert res.json()["message"] == "Faculty member added successfully"
    member_id = res.json()["faculty"]["id"]

    listed = await client.get(f"/api/universities/{university_id}/faculty")
    assert [m["id"] for m in listed.json()] == [member_id]

    update = {k: v for k, v in payload.items() if k != "universityId"}
    update["designation"] = "Dean"
    res = await client.put(f"/api/universities/faculty/{member_id}", json=update)
    assert res.status_code == 200
    assert res.json()["faculty"]["designation"] == "Dean"

    res = await client.delete(f"/api/universities/faculty/{member_id}")
    assert res.json()["message"] == "Faculty member deleted successfully"

    res = await client.get(f"/api/universities/faculty/{member_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Faculty member not found"}


# ------------------------------------------------------------------
# PROGRAM
# ------------------------------------------------------------------
@pytest.mark.asyncio
async def test_program_lifecycle(client, university_id):
    payload = {
        "universityId": university_id,
        "title": "BS Computer Science",
        "campus": "Main",
        "department": "Computing",
        "duration": "4 years",
        "fees": "PKR 150,000 / semester",
    }
    res = await client.post("/api/universities/programs", json=payload)
    assert res.status_code == 201
    program = res.json()["program"]
    assert program["fees"] == "PKR 150,000 / semester"
    assert program["description"] is None

    res = await client.put(
        f"/api/universities/programs/{program['id']}",
        json={"title": "BS CS", "campus": "Main", "department": "Computing", "duration": "4 years",
              "fees": "PKR 160,000 / semester", "description": "Accredited"},
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Program updated successfully"
    assert res.json()["program"]["description"] == "Accredited"

    res = await client.get(f"/api/universities/{university_id}/programs")
    assert [p["title"] for p in res.json()] == ["BS CS"]


@pytest.mark.asyncio
async def test_program_missing_fees(client, university_id):
    payload = {"universityId": university_id, "title": "MBA", "campus": "Main", "department": "Business", "duration": "2 years"}

    res = await client.post("/api/universities/programs", json=payload)

    assert res.status_code == 400
    assert "fees" in res.json()["error"]
