"""User management API tests."""

from eventsapp.models import Registration, User, UserRole


def test_list_users_as_admin(client, admin_headers, make_user):
    """Test admins can list users without password material."""
    make_user("someone@example.com")

    response = client.get("/users", headers=admin_headers)
    assert response.status_code == 200
    users = response.json()["data"]
    assert [user["email"] for user in users] == ["admin@example.com", "someone@example.com"]
    assert "password" not in response.text.lower()


def test_users_routes_are_admin_only(client, organizer_headers, attendee_headers):
    """Test organizers and attendees are forbidden with a descriptive message."""
    for headers, role in ((organizer_headers, "organizer"), (attendee_headers, "attendee")):
        response = client.get("/users", headers=headers)
        assert response.status_code == 403
        assert response.json()["message"] == (
            f"Access denied. Current role: {role}. Requires one of: admin"
        )


def test_users_require_authentication(client):
    """Test anonymous access is rejected before the role check."""
    response = client.get("/users")
    assert response.status_code == 401


def test_create_user(client, admin_headers, db):
    """Test admin creating a user hashes the password."""
    response = client.post(
        "/users",
        headers=admin_headers,
        json={
            "name": "Org",
            "email": "org2@example.com",
            "password": "pass1234",
            "role": "organizer",
        },
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["role"] == "organizer"
    assert "createdAt" in data

    user = db.query(User).filter(User.email == "org2@example.com").one()
    assert user.password_hash != "pass1234"


def test_create_user_duplicate_email(client, admin_headers):
    """Test creating a user with a taken email fails."""
    response = client.post(
        "/users",
        headers=admin_headers,
        json={"name": "Dup", "email": "admin@example.com", "password": "pass1234"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Email is already in use"


def test_get_user(client, admin_headers, make_user):
    """Test getting a specific user."""
    user = make_user("someone@example.com", name="Someone")

    response = client.get(f"/users/{user.id}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Someone"
    assert response.json()["data"]["role"] == "attendee"


def test_get_missing_user(client, admin_headers):
    """Test getting an unknown user is a 404."""
    response = client.get("/users/9999", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "User with ID 9999 not found"


def test_non_numeric_id_is_bad_request(client, admin_headers):
    """Test path ids must be integers."""
    response = client.get("/users/abc", headers=admin_headers)
    assert response.status_code == 400


def test_update_user(client, admin_headers, make_user):
    """Test updating name and role."""
    user = make_user("someone@example.com")

    response = client.put(
        f"/users/{user.id}",
        headers=admin_headers,
        json={"name": "Renamed", "role": "organizer"},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Renamed"
    assert data["role"] == "organizer"
    assert data["email"] == "someone@example.com"


def test_update_user_password_is_rehashed(client, admin_headers, make_user):
    """Test a changed password works for login and the old one does not."""
    user = make_user("someone@example.com")

    response = client.put(
        f"/users/{user.id}", headers=admin_headers, json={"password": "newpass1"}
    )
    assert response.status_code == 200

    new_login = client.post(
        "/auth/login", json={"email": "someone@example.com", "password": "newpass1"}
    )
    old_login = client.post(
        "/auth/login", json={"email": "someone@example.com", "password": "secret12"}
    )
    assert new_login.status_code == 200
    assert old_login.status_code == 401


def test_update_user_email_conflict(client, admin_headers, make_user):
    """Test changing email to a taken one fails."""
    user = make_user("someone@example.com")

    response = client.put(
        f"/users/{user.id}", headers=admin_headers, json={"email": "admin@example.com"}
    )
    assert response.status_code == 400


def test_update_user_same_email_is_not_a_conflict(client, admin_headers, make_user):
    """Test re-sending the current email is allowed."""
    user = make_user("someone@example.com")

    response = client.put(
        f"/users/{user.id}", headers=admin_headers, json={"email": "someone@example.com"}
    )
    assert response.status_code == 200


def test_update_user_requires_a_field(client, admin_headers, make_user):
    """Test an empty update is rejected."""
    user = make_user("someone@example.com")

    response = client.put(f"/users/{user.id}", headers=admin_headers, json={})
    assert response.status_code == 400
    assert response.json()["message"] == "You must supply at least one field to update"


def test_delete_user(client, admin_headers, make_user, db):
    """Test deleting removes exactly that user."""
    keep = make_user("keep@example.com")
    remove = make_user("remove@example.com")

    response = client.delete(f"/users/{remove.id}", headers=admin_headers)
    assert response.status_code == 200

    emails = {user.email for user in db.query(User).all()}
    assert emails == {"admin@example.com", keep.email}


def test_delete_missing_user(client, admin_headers):
    """Test deleting an unknown user is a 404."""
    response = client.delete("/users/9999", headers=admin_headers)
    assert response.status_code == 404


def test_delete_user_with_registrations_is_refused(
    client, admin_headers, make_user, make_event, db
):
    """Test a user with registrations cannot be deleted."""
    user = make_user("someone@example.com", UserRole.ATTENDEE)
    event = make_event()
    db.add(Registration(user_id=user.id, event_id=event.id))
    db.commit()

    response = client.delete(f"/users/{user.id}", headers=admin_headers)
    assert response.status_code == 400
    assert db.query(User).filter(User.id == user.id).count() == 1
    assert db.query(Registration).count() == 1
