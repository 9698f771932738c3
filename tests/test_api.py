def register(client, username="bob", password="pass1"):
    return client.post("/register", json={"username": username, "password": password})


def post(client, account_id, text="hi", epoch=1000):
    return client.post(
        "/messages",
        json={"postedBy": account_id, "messageText": text, "timePostedEpoch": epoch},
    )


def test_register_and_login(client):
    response = register(client)
    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "bob"
    assert body["password"] == "pass1"
    assert isinstance(body["accountId"], int)

    response = client.post("/login", json={"username": "bob", "password": "pass1"})
    assert response.status_code == 200
    assert response.json() == body


def test_register_duplicate_is_conflict(client):
    register(client)
    response = register(client, password="x")
    assert response.status_code == 409
    assert response.json() is None


def test_register_invalid_details_is_bad_request(client):
    assert register(client, username="").status_code == 400
    assert register(client, password="abc").status_code == 400
    assert client.post("/register", json={"password": "pass1"}).status_code == 400


def test_login_failure_is_unauthorized(client):
    register(client)
    response = client.post("/login", json={"username": "bob", "password": "nope"})
    assert response.status_code == 401
    assert response.json() is None


def test_example_flow(client):
    account_id = register(client).json()["accountId"]

    response = post(client, account_id)
    assert response.status_code == 200
    message = response.json()
    assert message["postedBy"] == account_id
    assert message["messageText"] == "hi"
    assert message["timePostedEpoch"] == 1000
    message_id = message["messageId"]

    response = client.patch(f"/messages/{message_id}", json={"messageText": ""})
    assert response.status_code == 400

    response = client.delete(f"/messages/{message_id}")
    assert response.status_code == 200
    assert response.json() == 1

    response = client.delete(f"/messages/{message_id}")
    assert response.status_code == 200
    assert response.json() is None


def test_post_message_failures(client):
    account_id = register(client).json()["accountId"]
    assert post(client, account_id, text="").status_code == 400
    assert post(client, account_id, text="x" * 256).status_code == 400
    assert post(client, account_id + 1).status_code == 400
    assert post(client, "not-a-number").status_code == 400


def test_list_and_get_messages(client):
    account_id = register(client).json()["accountId"]
    first = post(client, account_id, text="one").json()
    second = post(client, account_id, text="two").json()

    response = client.get("/messages")
    assert response.status_code == 200
    assert response.json() == [first, second]

    response = client.get(f"/messages/{first['messageId']}")
    assert response.status_code == 200
    assert response.json() == first


def test_get_missing_message_is_null(client):
    response = client.get("/messages/999")
    assert response.status_code == 200
    assert response.json() is None


def test_patch_message(client):
    account_id = register(client).json()["accountId"]
    message = post(client, account_id).json()

    response = client.patch(f"/messages/{message['messageId']}", json={"messageText": "edited"})
    assert response.status_code == 200
    assert response.json() == 1

    updated = client.get(f"/messages/{message['messageId']}").json()
    assert updated == {**message, "messageText": "edited"}


def test_patch_unknown_or_too_long(client):
    account_id = register(client).json()["accountId"]
    message = post(client, account_id).json()
    assert client.patch("/messages/999", json={"messageText": "ok"}).status_code == 400
    response = client.patch(f"/messages/{message['messageId']}", json={"messageText": "x" * 256})
    assert response.status_code == 400


def test_account_messages(client):
    bob = register(client).json()["accountId"]
    alice = register(client, username="alice").json()["accountId"]
    mine = post(client, bob, text="bob's").json()
    post(client, alice, text="alice's")

    response = client.get(f"/accounts/{bob}/messages")
    assert response.status_code == 200
    assert response.json() == [mine]

    response = client.get("/accounts/999/messages")
    assert response.status_code == 200
    assert response.json() == []


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


TOO_BIG = 2**70


def test_out_of_range_ids_are_bad_requests(client):
    register(client)
    assert client.get(f"/messages/{TOO_BIG}").status_code == 400
    assert client.delete(f"/messages/{TOO_BIG}").status_code == 400
    assert client.patch(f"/messages/{TOO_BIG}", json={"messageText": "ok"}).status_code == 400
    assert client.get(f"/accounts/{TOO_BIG}/messages").status_code == 400
    assert client.get(f"/messages/{-TOO_BIG}").status_code == 400


def test_out_of_range_message_fields_are_bad_requests(client):
    account_id = register(client).json()["accountId"]
    response = post(client, TOO_BIG)
    assert response.status_code == 400
    assert response.json() is None
    assert post(client, account_id, epoch=TOO_BIG).status_code == 400
    assert client.get("/messages").json() == []


def test_largest_storable_epoch_is_accepted(client):
    account_id = register(client).json()["accountId"]
    response = post(client, account_id, epoch=2**63 - 1)
    assert response.status_code == 200
    assert response.json()["timePostedEpoch"] == 2**63 - 1


def test_out_of_range_account_id_on_register_is_bad_request(client):
    response = client.post(
        "/register", json={"accountId": TOO_BIG, "username": "bob", "password": "pass1"}
    )
    assert response.status_code == 400
