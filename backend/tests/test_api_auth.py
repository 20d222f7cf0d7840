"""
Tests d'intégration API pour l'authentification.
POST /auth/register, POST /auth/login, GET /users/me
"""

from unittest.mock import MagicMock, patch

from app.security import hash_password


def make_user(user_id=3, email="alice@school.be", password="motdepasse123"):
    user = MagicMock()
    user.id = user_id
    user.email = email
    user.password_hash = hash_password(password, rounds=4)
    return user


# ============================================================
# POST /auth/register
# ============================================================

def test_register_succes(client):
    with patch("app.routers.auth.auth_service.register_user") as mock:
        mock.return_value = MagicMock(id=5)
        response = client.post("/auth/register", json={"email": "a@b.com", "password": "motdepasse123"})

    assert response.status_code == 201
    assert response.json() == {"id": 5}


def test_register_email_invalide(client):
    """Email mal formé → 400 avec le format d'erreur commun."""
    with patch("app.routers.auth.auth_service.register_user") as mock:
        response = client.post("/auth/register", json={"email": "not-an-email", "password": "motdepasse123"})

    assert response.status_code == 400
    assert "email" in response.json()["error"]
    mock.assert_not_called()


def test_register_body_manquant(client):
    response = client.post("/auth/register")
    assert response.status_code == 400
    assert "error" in response.json()


def test_register_email_duplique(client):
    with patch("app.routers.auth.auth_service.register_user") as mock:
        mock.side_effect = ValueError("Un utilisateur avec cet email existe déjà.")
        response = client.post("/auth/register", json={"email": "a@b.com", "password": "motdepasse123"})

    assert response.status_code == 409
    assert "existe déjà" in response.json()["error"]


# ============================================================
# POST /auth/login
# ============================================================

def test_login_succes(client, mock_db):
    mock_db.execute.return_value.scalar_one_or_none.return_value = make_user()

    response = client.post("/auth/login", json={"email": "alice@school.be", "password": "motdepasse123"})

    assert response.status_code == 200
    assert response.json()["token"].count(".") == 2
    assert response.json()["token_type"] == "bearer"


def test_login_echecs_indistinguables(client, mock_db):
    """Mauvais mot de passe et email inconnu → même statut, même corps."""
    mock_db.execute.return_value.scalar_one_or_none.return_value = make_user()
    wrong_password = client.post("/auth/login", json={"email": "alice@school.be", "password": "mauvais"})

    mock_db.execute.return_value.scalar_one_or_none.return_value = None
    unknown_email = client.post("/auth/login", json={"email": "personne@school.be", "password": "mauvais"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert set(wrong_password.json()) == {"error"}


# ============================================================
# GET /users/me
# ============================================================

def test_me_sans_header(client, mock_db):
    response = client.get("/users/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert "error" in response.json()
    mock_db.get.assert_not_called()


def test_me_schema_incorrect(client, auth_headers):
    token = auth_headers["Authorization"].split(" ")[1]
    response = client.get("/users/me", headers={"Authorization": f"Token {token}"})
    assert response.status_code == 401


def test_me_header_en_trop_de_parties(client, auth_headers):
    response = client.get("/users/me", headers={"Authorization": auth_headers["Authorization"] + " extra"})
    assert response.status_code == 401


def test_me_jeton_invalide(client):
    response = client.get("/users/me", headers={"Authorization": "Bearer pas.un.jeton"})
    assert response.status_code == 401


def test_me_succes(client, mock_db, auth_headers):
    mock_db.get.return_value = make_user(user_id=1, email="moi@school.be")

    response = client.get("/users/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"id": 1, "email": "moi@school.be"}


def test_me_utilisateur_supprime(client, mock_db, auth_headers):
    mock_db.get.return_value = None

    response = client.get("/users/me", headers=auth_headers)

    assert response.status_code == 404
    assert "introuvable" in response.json()["error"].lower()
