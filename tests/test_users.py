from datetime import datetime


def test_create_user(client, user_payload):
    response = client.post("/users", json=user_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    user = body["user"]
    assert isinstance(user["id"], str) and user["id"]
    assert user["name"] == "Ada"
    assert user["email"] == "ada@example.com"
    assert set(user) == {"id", "name", "email", "createdAt"}


def test_create_user_timestamp_after_request(client, user_payload):
    before = datetime.now().astimezone()
    response = client.post("/users", json=user_payload)

    created_at = datetime.fromisoformat(response.json()["user"]["createdAt"].replace("Z", "+00:00"))
    assert created_at >= before.replace(microsecond=0)


def test_create_user_missing_email(client):
    response = client.post("/users", json={"name": "Ada"})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Invalid input: Ensure 'name' and 'email' are provided and are strings."
    }
    assert client.get("/users").json()["users"] == []


def test_create_user_wrong_type(client):
    response = client.post("/users", json={"name": "Ada", "email": 12})
    assert response.status_code == 400


def test_identical_requests_create_distinct_users(client, user_payload):
    first = client.post("/users", json=user_payload).json()["user"]
    second = client.post("/users", json=user_payload).json()["user"]

    assert first["id"] != second["id"]
    assert len(client.get("/users").json()["users"]) == 2


def test_list_users(client):
    created_ids = set()
    for name in ["Ada", "Grace", "Edsger"]:
        response = client.post("/users", json={"name": name, "email": f"{name}@example.com"})
        created_ids.add(response.json()["user"]["id"])

    response = client.get("/users")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Users retrieved successfully"
    assert len(body["users"]) == 3
    assert {u["id"] for u in body["users"]} == created_ids


def test_list_users_is_a_pure_read(client, user_payload):
    client.post("/users", json=user_payload)

    assert client.get("/users").json() == client.get("/users").json()


def test_list_users_empty(client):
    response = client.get("/users")

    assert response.status_code == 200
    assert response.json() == {"message": "Users retrieved successfully", "users": []}
