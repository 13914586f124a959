"""
Tests for the signup and login form handlers.
"""

from modules.users.passwords import verify_password
from shared.models import UserRole

from tests.fakes import ADMIN_EMAIL, ADMIN_PASSWORD, login, signup


class TestSignup:

    def test_signup_creates_user_and_redirects_to_members(self, client, user_repo):
        """A valid signup stores a normalized user and logs them in."""
        response = signup(client, "Ada", "Ada@X.com", "secret1")

        assert response.status_code == 303
        assert response.headers["location"] == "/members"

        stored = user_repo.get_by_email("ada@x.com")
        assert stored is not None
        assert stored.name == "Ada"
        assert stored.role == UserRole.USER
        assert stored.password_hash != "secret1"
        assert verify_password("secret1", stored.password_hash)

        members = client.get("/members")
        assert members.status_code == 200
        assert "Ada" in members.text

    def test_signup_sets_http_only_cookie_with_ttl(self, client, settings):
        """Session cookie is httpOnly and lives as long as the session."""
        response = signup(client, "Ada", "ada@example.com", "secret1")

        cookie = response.headers["set-cookie"]
        assert cookie.startswith(f"{settings.session_cookie_name}=")
        assert "HttpOnly" in cookie
        assert "Max-Age=3600" in cookie
        assert "Path=/" in cookie
        assert "samesite=lax" in cookie.lower()

    def test_signup_issues_session_with_user_snapshot(self, client, session_repo):
        signup(client, "Ada", "ada@example.com", "secret1")

        (session,) = session_repo.sessions.values()
        assert session.user.email == "ada@example.com"
        assert session.user.role == UserRole.USER
        assert (session.expires_at - session.created_at).total_seconds() == 3600

    def test_duplicate_email_is_rejected(self, client, user_repo):
        """Second signup with the same email (any case) gets a 409."""
        signup(client, "Ada", "ada@example.com", "secret1")
        client.cookies.clear()

        response = signup(client, "Impostor", "ADA@example.com", "other-secret")

        assert response.status_code == 409
        assert "Email already registered." in response.text
        assert 'href="/signup"' in response.text
        assert "set-cookie" not in response.headers
        assert len(user_repo.users) == 1

    def test_missing_name_is_rejected(self, client, user_repo):
        response = client.post(
            "/signupSubmit",
            data={"email": "ada@example.com", "password": "secret1"},
        )

        assert response.status_code == 400
        assert "name" in response.text
        assert 'href="/signup"' in response.text
        assert "set-cookie" not in response.headers
        assert user_repo.users == {}

    def test_blank_name_is_rejected(self, client, user_repo):
        response = signup(client, "   ", "ada@example.com", "secret1")

        assert response.status_code == 400
        assert user_repo.users == {}

    def test_name_longer_than_30_is_rejected(self, client, user_repo):
        response = signup(client, "A" * 31, "ada@example.com", "secret1")

        assert response.status_code == 400
        assert user_repo.users == {}

    def test_name_of_exactly_30_is_accepted(self, client, user_repo):
        response = signup(client, "A" * 30, "ada@example.com", "secret1")

        assert response.status_code == 303
        assert len(user_repo.users) == 1

    def test_short_password_is_rejected(self, client, user_repo):
        response = signup(client, "Ada", "ada@example.com", "12345")

        assert response.status_code == 400
        assert "password" in response.text
        assert user_repo.users == {}

    def test_invalid_email_is_rejected(self, client, user_repo):
        response = signup(client, "Ada", "not-an-email", "secret1")

        assert response.status_code == 400
        assert "email" in response.text
        assert user_repo.users == {}

    def test_json_body_is_accepted(self, client, user_repo):
        response = client.post(
            "/signupSubmit",
            json={"name": "Ada", "email": "ada@example.com", "password": "secret1"},
        )

        assert response.status_code == 303
        assert user_repo.get_by_email("ada@example.com") is not None

    def test_malformed_json_is_rejected(self, client, user_repo):
        response = client.post(
            "/signupSubmit",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert user_repo.users == {}


class TestLogin:

    def test_user_login_redirects_to_members(self, client, user_repo):
        user_repo.add("Ada", "ada@example.com", "secret1")

        response = login(client, "ada@example.com", "secret1")

        assert response.status_code == 303
        assert response.headers["location"] == "/members"
        assert "set-cookie" in response.headers
        assert client.get("/members").status_code == 200

    def test_admin_login_redirects_to_admin(self, client, admin_user):
        response = login(client, ADMIN_EMAIL, ADMIN_PASSWORD)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin"
        assert client.get("/admin").status_code == 200

    def test_login_email_is_case_insensitive(self, client, user_repo):
        user_repo.add("Ada", "ada@example.com", "secret1")

        response = login(client, "ADA@Example.com", "secret1")

        assert response.status_code == 303

    def test_wrong_password_is_rejected_without_session(self, client, user_repo, session_repo):
        """Wrong password gets the generic message and no cookie."""
        user_repo.add("Ada", "ada@x.com", "secret1")

        response = login(client, "ada@x.com", "wrong")

        assert response.status_code == 401
        assert "Invalid email/password combination" in response.text
        assert 'href="/login"' in response.text
        assert "set-cookie" not in response.headers
        assert session_repo.sessions == {}

    def test_unknown_email_looks_like_wrong_password(self, client, user_repo):
        """Unknown email and wrong password produce identical responses."""
        user_repo.add("Ada", "ada@example.com", "secret1")

        wrong_password = login(client, "ada@example.com", "wrong-password")
        unknown_email = login(client, "nobody@example.com", "wrong-password")

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.text == unknown_email.text

    def test_missing_password_is_rejected(self, client):
        response = client.post("/loginSubmit", data={"email": "ada@example.com"})

        assert response.status_code == 400
        assert "set-cookie" not in response.headers

    def test_each_login_issues_a_new_session(self, client, settings, user_repo, session_repo):
        user_repo.add("Ada", "ada@example.com", "secret1")

        first = login(client, "ada@example.com", "secret1")
        second = login(client, "ada@example.com", "secret1")

        name = settings.session_cookie_name
        assert len(session_repo.sessions) == 2
        assert first.cookies[name] != second.cookies[name]
