# =============================================================================
# tests/test_routes.py - Greeting, Guard and Login Route Tests
# =============================================================================
# Integration tests for the plain-text and HTML routes:
# - Static and dynamic hello routes
# - Ranked /hello/{age} (adult vs child)
# - Ranked /admin (admin, user, redirect)
# - Login page and login form
# =============================================================================

import pytest


# =============================================================================
# Greetings
# =============================================================================

class TestGreetings:
    """Tests for the hello routes."""

    def test_hello(self, client):
        """Test the root route."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "Hello world!"

    def test_person(self, client):
        """Test name and age path parameters."""
        response = client.get("/hello/hugo/30")

        assert response.status_code == 200
        assert response.text == "Hello, 30 year old named hugo!"

    def test_person_non_integer_age(self, client):
        """Test that a non-integer age doesn't match the route."""
        response = client.get("/hello/hugo/thirty")

        assert response.status_code == 404
        assert response.json()["message"] == "Four, oh four!"

    def test_adult(self, client):
        """Test the first rank: an adult age."""
        response = client.get("/hello/30")

        assert response.status_code == 200
        assert response.text == "At 30, you are old enough: welcome!"

    def test_child(self, client):
        """Test the second rank: any other integer."""
        response = client.get("/hello/15")

        assert response.status_code == 200
        assert response.text == "Sorry, 15 is too young to enter, come back in a few years."

    @pytest.mark.parametrize("age, adult", [("18", True), ("17", False), ("-3", False)])
    def test_age_boundary(self, client, age, adult):
        """Test the adult age threshold."""
        response = client.get(f"/hello/{age}")

        assert response.status_code == 200
        assert response.text.startswith("At " if adult else "Sorry, ")

    @pytest.mark.parametrize("age", ["abc", "1.5", "99999999999"])
    def test_age_no_rank_matches(self, client, age):
        """Test that non-integers fall through every rank to 404."""
        response = client.get(f"/hello/{age}")

        assert response.status_code == 404


# =============================================================================
# Request Guards
# =============================================================================

class TestAdminDashboard:
    """Tests for the ranked /admin route."""

    def test_admin_token(self, client):
        """Test that an admin token reaches the first rank."""
        response = client.get("/admin", headers={"Authorization": "Bearer admin"})

        assert response.status_code == 200
        assert response.text == "Welcome, administrator!"

    def test_token_containing_admin(self, client):
        """Test that any token containing "admin" is an administrator."""
        response = client.get("/admin", headers={"Authorization": "Bearer superadmin42"})

        assert response.text == "Welcome, administrator!"

    def test_user_token(self, client):
        """Test that any other token reaches the second rank."""
        response = client.get("/admin", headers={"Authorization": "Bearer user"})

        assert response.status_code == 200
        assert response.text == "Welcome, simple user!"

    def test_no_token_redirects_to_login(self, client):
        """Test that anonymous callers are sent to the login page."""
        response = client.get("/admin", follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/login"

    def test_header_without_bearer_prefix(self, client):
        """Test that a bare admin token in the header is an administrator."""
        response = client.get(
            "/admin",
            headers={"Authorization": "admin"},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert response.text == "Welcome, administrator!"

    def test_empty_bearer_token_is_user(self, client):
        """Test that a header with an empty bearer token is still a user."""
        response = client.get(
            "/admin",
            headers={"Authorization": "Bearer "},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert response.text == "Welcome, simple user!"

    def test_other_scheme_is_user(self, client):
        """Test that any Authorization header counts, whatever its scheme."""
        response = client.get(
            "/admin",
            headers={"Authorization": "Basic dXNlcjpwYXNz"},
            follow_redirects=False,
        )

        assert response.status_code == 200
        assert response.text == "Welcome, simple user!"


# =============================================================================
# Login
# =============================================================================

class TestLogin:
    """Tests for the login page and form."""

    def test_login_page_renders_form(self, client):
        """Test that the login template is rendered."""
        response = client.get("/login")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<form" in response.text
        assert 'name="password"' in response.text

    def test_admin_password(self, client):
        """Test that the admin password yields the admin token."""
        response = client.post("/login", data={"email": "a@example.com", "password": "admin"})

        assert response.status_code == 200
        assert response.json() == {"token": "admin"}

    def test_other_password(self, client):
        """Test that any other password yields the guest token."""
        response = client.post("/login", data={"email": "a@example.com", "password": "secret"})

        assert response.status_code == 200
        assert response.json() == {"token": "hugo"}

    def test_missing_field(self, client):
        """Test that an incomplete form is answered by the 422 catcher."""
        response = client.post("/login", data={"email": "a@example.com"})

        assert response.status_code == 422
        assert response.json()["name"] == "Unprocessable Entity"

    def test_login_token_opens_dashboard(self, client):
        """Test the full flow: log in, then use the token."""
        token = client.post(
            "/login", data={"email": "a@example.com", "password": "admin"}
        ).json()["token"]

        response = client.get("/admin", headers={"Authorization": f"Bearer {token}"})

        assert response.text == "Welcome, administrator!"
