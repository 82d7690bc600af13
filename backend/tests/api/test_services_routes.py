"""Services API - verifies active filter semantics and ordering."""


def _service(**fields) -> dict:
    return {
        "title": "S", "description": "D", "icon": "code", "color": "blue",
        **fields,
    }


async def test_active_true_returns_only_active_in_sort_order(client):
    await client.post("/api/services", json=_service(title="b", sortOrder=2))
    await client.post("/api/services", json=_service(title="off", sortOrder=0, active=False))
    await client.post("/api/services", json=_service(title="a", sortOrder=1))

    res = await client.get("/api/services", params={"active": "true"})

    assert res.status_code == 200
    body = res.json()
    assert [s["title"] for s in body] == ["a", "b"]
    assert all(s["active"] for s in body)


async def test_active_other_than_true_returns_all(client):
    await client.post("/api/services", json=_service(title="on", sortOrder=1))
    await client.post("/api/services", json=_service(title="off", sortOrder=2, active=False))

    for params in ({}, {"active": "false"}, {"active": "yes"}):
        res = await client.get("/api/services", params=params)
        assert [s["title"] for s in res.json()] == ["on", "off"]


async def test_create_service_defaults(client):
    res = await client.post("/api/services", json=_service(features=["x", "y"]))
    assert res.status_code == 201
    body = res.json()
    assert body["active"] is True
    assert body["features"] == ["x", "y"]


async def test_create_service_missing_icon_returns_400(client):
    body = _service()
    del body["icon"]
    assert (await client.post("/api/services", json=body)).status_code == 400


async def test_service_not_found(client):
    res = await client.get("/api/services/nope")
    assert res.status_code == 404
    assert res.json()["message"] == "Service not found"
