"""Contact API - verifies acknowledgement shape and request metadata stamping."""


def _form(**fields) -> dict:
    return {
        "firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com",
        "subject": "Hello", "message": "I'd like to work together",
        **fields,
    }


async def test_submit_returns_message_and_id_only(client):
    res = await client.post("/api/contact", json=_form())

    assert res.status_code == 201
    body = res.json()
    assert set(body) == {"message", "id"}
    assert body["message"] == "Contact form submitted successfully"
    assert body["id"]


async def test_submit_missing_email_returns_400(client):
    form = _form()
    del form["email"]
    res = await client.post("/api/contact", json=form)
    assert res.status_code == 400


async def test_submit_stamps_ip_and_user_agent(client):
    res = await client.post(
        "/api/contact", json=_form(), headers={"user-agent": "portfolio-tests/1.0"},
    )
    submission_id = res.json()["id"]

    stored = (await client.get(f"/api/contact/{submission_id}")).json()

    assert stored["userAgent"] == "portfolio-tests/1.0"
    assert stored["ipAddress"]
    assert stored["processed"] is False


async def test_client_cannot_spoof_ip_address(client):
    res = await client.post("/api/contact", json=_form(ipAddress="6.6.6.6"))
    assert res.status_code == 400


async def test_list_submissions_newest_first(client):
    first = (await client.post("/api/contact", json=_form(subject="first"))).json()
    second = (await client.post("/api/contact", json=_form(subject="second"))).json()

    res = await client.get("/api/contact")

    assert res.status_code == 200
    assert [s["id"] for s in res.json()] == [second["id"], first["id"]]


async def test_mark_processed(client):
    created = (await client.post("/api/contact", json=_form())).json()

    res = await client.patch(f"/api/contact/{created['id']}/processed")

    assert res.status_code == 204
    stored = (await client.get(f"/api/contact/{created['id']}")).json()
    assert stored["processed"] is True


async def test_mark_processed_unknown_returns_404(client):
    res = await client.patch("/api/contact/nope/processed")
    assert res.status_code == 404
    assert res.json()["message"] == "Contact submission not found"
