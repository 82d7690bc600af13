"""Resume API - experience, education and certification endpoints."""

import pytest


RESOURCES = [
    (
        "experience",
        {"company": "Acme", "position": "Dev", "description": "D", "startDate": "2020-01"},
        "Experience not found",
    ),
    (
        "education",
        {"institution": "Uni", "degree": "BSc", "startDate": "2012", "endDate": "2015"},
        "Education not found",
    ),
    (
        "certifications",
        {"title": "Cert", "issuer": "Org", "issueDate": "2021-05"},
        "Certification not found",
    ),
]


@pytest.mark.parametrize("path, body, _", RESOURCES)
async def test_create_get_list_delete(client, path, body, _):
    created = await client.post(f"/api/{path}", json=body)
    assert created.status_code == 201
    record = created.json()
    assert record["sortOrder"] == 0

    assert (await client.get(f"/api/{path}/{record['id']}")).json() == record
    assert [r["id"] for r in (await client.get(f"/api/{path}")).json()] == [record["id"]]
    assert (await client.delete(f"/api/{path}/{record['id']}")).status_code == 204
    assert (await client.get(f"/api/{path}")).json() == []


@pytest.mark.parametrize("path, _, message", RESOURCES)
async def test_unknown_id_returns_404(client, path, _, message):
    res = await client.get(f"/api/{path}/missing")
    assert res.status_code == 404
    assert res.json()["message"] == message


@pytest.mark.parametrize("path, _body, _message", RESOURCES)
async def test_empty_body_returns_400(client, path, _body, _message):
    assert (await client.post(f"/api/{path}", json={})).status_code == 400


async def test_experience_list_order(client):
    for company, start, order in (
        ("old", "2014-01", 0), ("new", "2023-01", 0), ("pinned", "2010-01", -1),
    ):
        await client.post("/api/experience", json={
            "company": company, "position": "Dev", "description": "D",
            "startDate": start, "sortOrder": order,
        })

    res = await client.get("/api/experience")

    assert [e["company"] for e in res.json()] == ["pinned", "new", "old"]


async def test_patch_certification(client):
    created = (await client.post("/api/certifications", json=RESOURCES[2][1])).json()

    res = await client.patch(
        f"/api/certifications/{created['id']}",
        json={"credentialUrl": "https://verify/1"},
    )

    assert res.status_code == 200
    assert res.json()["credentialUrl"] == "https://verify/1"
    assert res.json()["issuer"] == "Org"


@pytest.mark.parametrize("path, body, _", RESOURCES)
async def test_oversized_sort_order_returns_400(client, path, body, _):
    res = await client.post(f"/api/{path}", json={**body, "sortOrder": 2**70})
    assert res.status_code == 400
