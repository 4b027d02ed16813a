import pytest

def test_create_suggestion(client, employee):
    data = {
        "user_id": str(employee["user"]["user_id"]),
        "title": "Leak",
        "description": "Water on the floor near bay 3",
        "department": "Warehouse",
    }

    response = client.post("/api/suggestions", data=data, headers=employee["headers"])

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Leak"
    assert body["department"] == "Warehouse"
    assert body["status"] == "submitted"
    assert body["user_id"] == employee["user"]["user_id"]
    assert body["file_attachment_path"] is None
    assert body["created_at"] and body["updated_at"]

def test_create_suggestion_without_department(client, employee, submit):
    body = submit(employee, department="")

    assert body["department"] is None

def test_create_suggestion_requires_token(client, employee):
    data = {"user_id": str(employee["user"]["user_id"]), "title": "Leak", "description": "Drip"}

    assert client.post("/api/suggestions", data=data).status_code == 401

@pytest.mark.parametrize("data", [
    {"user_id": "abc", "title": "Leak", "description": "Drip"},
    {"user_id": "", "title": "Leak", "description": "Drip"},
    {"title": "Leak", "description": "Drip"},
    {"user_id": "1", "description": "Drip"},
    {"user_id": "1", "title": "Leak"},
    {"user_id": "1", "title": "   ", "description": "Drip"},
])
def test_create_suggestion_validates_fields(client, employee, data):
    response = client.post("/api/suggestions", data=data, headers=employee["headers"])

    assert response.status_code == 400
    assert "required fields" in response.json()["message"]

@pytest.mark.parametrize("user_id", ["9999", "99999999999999999999"])
def test_create_suggestion_for_unknown_user(client, employee, user_id):
    data = {"user_id": user_id, "title": "Leak", "description": "Drip"}

    response = client.post("/api/suggestions", data=data, headers=employee["headers"])

    assert response.status_code == 400
    assert response.json()["message"] == f"User with ID {user_id} does not exist."

def test_admin_lists_all_suggestions_newest_first(client, admin, make_user, submit):
    alice = make_user("alice")
    bob = make_user("bob")
    first = submit(alice, title="First")
    second = submit(bob, title="Second")
    third = submit(alice, title="Third")

    response = client.get("/api/suggestions", headers=admin["headers"])

    assert response.status_code == 200
    rows = response.json()
    assert [row["suggestion_id"] for row in rows] == [
        third["suggestion_id"], second["suggestion_id"], first["suggestion_id"]
    ]
    assert [row["submitted_by_username"] for row in rows] == ["alice", "bob", "alice"]

def test_my_suggestions_only_returns_own(client, make_user, submit):
    alice = make_user("alice")
    bob = make_user("bob")
    older = submit(alice, title="Older")
    submit(bob, title="Not mine")
    newer = submit(alice, title="Newer")

    response = client.get("/api/suggestions/my", headers=alice["headers"])

    assert response.status_code == 200
    assert [row["suggestion_id"] for row in response.json()] == [newer["suggestion_id"], older["suggestion_id"]]

def test_get_suggestion_by_id(client, employee, submit):
    created = submit(employee, department="Maintenance")

    response = client.get(f"/api/suggestions/{created['suggestion_id']}", headers=employee["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["suggestion_id"] == created["suggestion_id"]
    assert body["submitted_by_username"] == "alice"
    assert body["submitted_by_email"] == "alice@example.com"
    assert body["department"] == "Maintenance"

@pytest.mark.parametrize("missing_id", ["9999", "0", "-1", "123456789", "2147483648", "99999999999999999999"])
def test_get_missing_suggestion_is_not_found(client, employee, missing_id):
    response = client.get(f"/api/suggestions/{missing_id}", headers=employee["headers"])

    assert response.status_code == 404
    assert response.json()["message"] == "Suggestion not found."

@pytest.mark.parametrize("bad_id", ["abc", "1.5", "12abc", "one", "%20"])
def test_get_suggestion_with_non_numeric_id(client, employee, bad_id):
    response = client.get(f"/api/suggestions/{bad_id}", headers=employee["headers"])

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid suggestion ID provided."

@pytest.mark.parametrize("new_status", ["under_review", "approved", "rejected", "implemented", "submitted"])
def test_admin_updates_status(client, admin, employee, submit, new_status):
    created = submit(employee)

    response = client.put(
        f"/api/suggestions/{created['suggestion_id']}/status",
        json={"status": new_status},
        headers=admin["headers"],
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Suggestion status updated successfully"
    assert body["suggestion"]["status"] == new_status

    fetched = client.get(f"/api/suggestions/{created['suggestion_id']}", headers=employee["headers"])
    assert fetched.json()["status"] == new_status

@pytest.mark.parametrize("bad_status", [
    "Approved", "APPROVED", "approved ", " approved", "under review", "Under_Review", "pending", "closed",
])
def test_status_update_rejects_values_outside_the_set(client, admin, employee, submit, bad_status):
    created = submit(employee)

    response = client.put(
        f"/api/suggestions/{created['suggestion_id']}/status",
        json={"status": bad_status},
        headers=admin["headers"],
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid status value.")

@pytest.mark.parametrize("body", [{}, {"status": ""}, {"status": None}])
def test_status_update_requires_status(client, admin, employee, submit, body):
    created = submit(employee)

    response = client.put(f"/api/suggestions/{created['suggestion_id']}/status", json=body, headers=admin["headers"])

    assert response.status_code == 400

def test_status_update_with_non_string_status(client, admin, employee, submit):
    created = submit(employee)

    response = client.put(
        f"/api/suggestions/{created['suggestion_id']}/status", json={"status": 3}, headers=admin["headers"]
    )

    assert response.status_code == 400

@pytest.mark.parametrize("missing_id", ["9999", "0", "99999999999999999999"])
def test_status_update_for_missing_suggestion(client, admin, missing_id):
    response = client.put(f"/api/suggestions/{missing_id}/status", json={"status": "approved"}, headers=admin["headers"])

    assert response.status_code == 404
    assert response.json()["message"] == "Suggestion not found, cannot update status."

def test_status_update_with_non_numeric_id(client, admin):
    response = client.put("/api/suggestions/abc/status", json={"status": "approved"}, headers=admin["headers"])

    assert response.status_code == 400
