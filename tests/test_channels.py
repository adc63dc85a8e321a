def test_no_channels_before_any_message(client):
    res = client.get("/channels")

    assert res.status_code == 200
    assert res.json() == []


def test_channels_are_distinct(client, auth_headers):
    for channel in ("random", "general", "random", None):
        body = {"body": "x"}
        if channel:
            body["channel"] = channel
        assert client.post("/messages", json=body, headers=auth_headers).status_code == 201

    assert client.get("/channels").json() == ["general", "random"]


def test_channels_store_failure(client, messages):
    messages.fail = True

    res = client.get("/channels")

    assert res.status_code == 500
    assert res.text == "Server error retrieving channels"
