"""Integration tests for signup, login and logout."""

from unittest.mock import AsyncMock

from snipbox.presentation.api.dependencies import get_user_repository
from snipbox_identity.domain.user import EmailAlreadyExistsError, UserRepository
from snipbox_identity.exceptions import InvalidCredentialsError

SESSION_COOKIE = "session"


def _login(client, email, password):
    return client.post("/user/login", json={"email": email, "password": password})


class TestSignup:
    def test_signup_redirects_to_login_with_flash(self, test_client, registered_user_data):
        response = test_client.post("/user/signup", json=registered_user_data)

        assert response.status_code == 303
        assert response.headers["location"] == "/user/login"

        page = test_client.get("/user/login").json()
        assert page["flash"] == "Your signup was successful. Please log in."
        assert page["form"] == {"email": ""}

    def test_signup_form_page(self, test_client):
        response = test_client.get("/user/signup")

        assert response.status_code == 200
        assert response.json()["form"] == {"name": "", "email": ""}

    def test_duplicate_email(self, test_client, registered_user_data):
        test_client.post("/user/signup", json=registered_user_data)

        response = test_client.post(
            "/user/signup",
            json={**registered_user_data, "email": "ALICE@example.com"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["field_errors"] == {"email": ["Email address is already in use"]}
        assert "password" not in body["values"]

    def test_field_rules(self, test_client):
        response = test_client.post(
            "/user/signup",
            json={"name": "", "email": "not-an-email", "password": "short"},
        )

        assert response.status_code == 422
        assert response.json()["field_errors"] == {
            "name": ["This field cannot be blank"],
            "email": ["This field must be a valid email address"],
            "password": ["This field must be at least 8 characters long"],
        }


class TestLogin:
    def test_login_sets_fresh_http_only_cookie(self, test_client, registered_user_data):
        test_client.post("/user/signup", json=registered_user_data)
        anonymous_token = test_client.cookies.get(SESSION_COOKIE)

        response = _login(
            test_client,
            registered_user_data["email"],
            registered_user_data["password"],
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/snippet/create"
        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert "samesite=lax" in set_cookie
        assert test_client.cookies.get(SESSION_COOKIE) != anonymous_token
        assert test_client.get("/").json()["is_authenticated"] is True

    def test_old_token_is_dead_after_login(self, test_client, registered_user_data):
        test_client.post("/user/signup", json=registered_user_data)
        anonymous_token = test_client.cookies.get(SESSION_COOKIE)
        _login(test_client, registered_user_data["email"], registered_user_data["password"])

        test_client.cookies.clear()
        test_client.cookies.set(SESSION_COOKIE, anonymous_token)

        assert test_client.get("/").json()["is_authenticated"] is False

    def test_wrong_password(self, test_client, registered_user_data):
        test_client.post("/user/signup", json=registered_user_data)

        response = _login(test_client, registered_user_data["email"], "wrong-password")

        assert response.status_code == 422
        body = response.json()
        assert body["non_field_errors"] == ["Email or password is incorrect"]
        assert body["values"] == {"email": registered_user_data["email"]}

    def test_unknown_email_looks_like_wrong_password(self, test_client):
        response = _login(test_client, "nobody@example.com", "whatever-password")

        assert response.status_code == 422
        assert response.json()["non_field_errors"] == ["Email or password is incorrect"]

    def test_blank_fields(self, test_client):
        response = _login(test_client, "", "")

        assert response.status_code == 422
        body = response.json()
        assert body["field_errors"]["email"][0] == "This field cannot be blank"
        assert body["field_errors"]["password"] == ["This field cannot be blank"]
        assert body["non_field_errors"] == []


class TestLogout:
    def test_logout(self, logged_in_client):
        token_before = logged_in_client.cookies.get(SESSION_COOKIE)

        response = logged_in_client.post("/user/logout")

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert logged_in_client.cookies.get(SESSION_COOKIE) != token_before

        page = logged_in_client.get("/").json()
        assert page["is_authenticated"] is False
        assert page["flash"] == "You've been logged out successfully!"

    def test_gated_pages_need_login_again(self, logged_in_client):
        logged_in_client.post("/user/logout")

        response = logged_in_client.get("/account/view")

        assert response.status_code == 303
        assert response.headers["location"] == "/user/login"

    def test_anonymous_logout(self, test_client):
        response = test_client.post("/user/logout")

        assert response.status_code == 303
        assert test_client.cookies.get(SESSION_COOKIE) is not None


class TestCredentialErrorsAreFormErrors:
    def _override_users(self, client) -> AsyncMock:
        users = AsyncMock(spec=UserRepository)
        client.app.dependency_overrides[get_user_repository] = lambda: users
        return users

    def test_duplicate_email_is_422_not_409(self, test_client, registered_user_data):
        users = self._override_users(test_client)
        users.insert.side_effect = EmailAlreadyExistsError(registered_user_data["email"])

        response = test_client.post("/user/signup", json=registered_user_data)

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["field_errors"] == {"email": ["Email address is already in use"]}

    def test_rejected_credentials_are_422_not_401(self, test_client, registered_user_data):
        users = self._override_users(test_client)
        users.authenticate.side_effect = InvalidCredentialsError()

        response = _login(test_client, registered_user_data["email"], "wrong-password")

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["non_field_errors"] == ["Email or password is incorrect"]
