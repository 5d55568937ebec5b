import pytest

from conftest import bearer

FILM = {
    "name": "Oppenheimer",
    "description": "A film about the bomb",
    "release_date": "2023-07-21",
    "rating": 8,
}

ACTOR = {"full_name": "Cillian Murphy", "gender": "male", "birthday": "1976-05-25"}


def create_film(client, headers, **overrides):
    response = client.post("/api/film", json={**FILM, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_actor(client, headers, **overrides):
    response = client.post("/api/actor", json={**ACTOR, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


class TestUsers:
    def test_register_then_login(self, client):
        response = client.post("/api/register", json={"login": "neo", "password": "matrix1"})
        assert response.status_code == 201
        assert response.json()["token"]

        response = client.post("/api/login", json={"login": "neo", "password": "matrix1"})
        assert response.status_code == 200

        me = client.get("/api/me", headers=bearer(response.json()["token"]))
        assert me.status_code == 200
        assert me.json()["login"] == "neo"
        assert me.json()["role"] == "viewer"

    def test_register_validation_errors(self, client):
        response = client.post("/api/register", json={"login": "ne", "password": "123", "role": "root"})

        assert response.status_code == 400
        assert response.json() == {
            "errors": ["invalid login length", "invalid password length", "invalid role"],
        }

    def test_register_taken_login(self, client):
        client.post("/api/register", json={"login": "neo", "password": "matrix1"})

        response = client.post("/api/register", json={"login": "neo", "password": "matrix2"})

        assert response.status_code == 409
        assert response.json() == {"error": "user already exists"}

    @pytest.mark.parametrize("credentials", [
        {"login": "neo", "password": "wrong-one"},
        {"login": "smith", "password": "matrix1"},
    ])
    def test_bad_credentials(self, client, credentials):
        client.post("/api/register", json={"login": "neo", "password": "matrix1"})

        response = client.post("/api/login", json=credentials)

        assert response.status_code == 401
        assert response.json() == {"error": "invalid login or password"}

    def test_admin_token_from_registration_can_write(self, client):
        token = client.post("/api/register", json={"login": "architect", "password": "matrix1", "role": "admin"}) \
            .json()["token"]

        assert client.post("/api/film", json=FILM, headers=bearer(token)).status_code == 201


class TestAccess:
    def test_reads_require_a_token(self, client):
        assert client.get("/api/films").status_code == 401
        assert client.get("/api/actors").status_code == 401

    def test_viewer_reads(self, client, viewer_headers):
        assert client.get("/api/films", headers=viewer_headers).json() == []
        assert client.get("/api/actors", headers=viewer_headers).json() == []

    def test_viewer_cannot_write(self, client, viewer_headers, admin_headers):
        response = client.post("/api/film", json=FILM, headers=viewer_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "forbidden"}
        assert client.get("/api/films", headers=admin_headers).json() == []

    def test_write_without_token(self, client):
        assert client.delete("/api/film/1").status_code == 401


class TestFilms:
    def test_create_and_list(self, client, admin_headers, viewer_headers):
        film_id = create_film(client, admin_headers)

        films = client.get("/api/films", headers=viewer_headers).json()

        assert films == [{**FILM, "id": film_id}]

    def test_validation_errors_envelope(self, client, admin_headers):
        response = client.post("/api/film", json={**FILM, "name": "X", "rating": 11}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"errors": ["invalid film name", "invalid film rating"]}

    def test_duplicate_name(self, client, admin_headers):
        create_film(client, admin_headers)

        response = client.post("/api/film", json=FILM, headers=admin_headers)

        assert response.status_code == 409
        assert response.json() == {"error": "film already exists"}

    def test_create_with_actors(self, client, admin_headers):
        actor_id = create_actor(client, admin_headers)

        film_id = create_film(client, admin_headers, actor_ids=[actor_id])

        actors = client.get("/api/actors", headers=admin_headers).json()
        assert [film["id"] for film in actors[0]["films"]] == [film_id]

    def test_filters_and_sorting(self, client, admin_headers):
        create_film(client, admin_headers)
        create_film(client, admin_headers, name="Inception", rating=9, release_date="2010-07-16")
        create_film(client, admin_headers, name="Dunkirk", rating=7, release_date="2017-07-21")

        def names(**params):
            response = client.get("/api/films", params=params, headers=admin_headers)
            return [film["name"] for film in response.json()]

        assert names() == ["Inception", "Oppenheimer", "Dunkirk"]
        assert names(sort="name", direct="asc") == ["Dunkirk", "Inception", "Oppenheimer"]
        assert names(sort="budget", direct="asc") == ["Inception", "Oppenheimer", "Dunkirk"]
        assert names(film="k") == ["Dunkirk"]
        assert names(page=2, size=2) == ["Dunkirk"]
        assert names(page=0, size=0) == ["Inception", "Oppenheimer", "Dunkirk"]
        assert names(page="abc", size="many") == ["Inception", "Oppenheimer", "Dunkirk"]

    def test_targeted_updates(self, client, admin_headers):
        film_id = create_film(client, admin_headers)

        assert client.put(f"/api/film/name/{film_id}/Tenet", headers=admin_headers).status_code == 200
        assert client.put(f"/api/film/{film_id}/10", headers=admin_headers).status_code == 200
        assert client.put(f"/api/film/date/{film_id}/2020-08-26", headers=admin_headers).status_code == 200
        response = client.put(f"/api/film/description/{film_id}", json={"description": "Time runs backwards"},
                              headers=admin_headers)
        assert response.status_code == 200

        film = client.get("/api/films", headers=admin_headers).json()[0]
        assert film == {
            "id": film_id,
            "name": "Tenet",
            "description": "Time runs backwards",
            "release_date": "2020-08-26",
            "rating": 10,
        }

    def test_invalid_targeted_value(self, client, admin_headers):
        film_id = create_film(client, admin_headers)

        response = client.put(f"/api/film/{film_id}/11", headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid film rating"}

    def test_full_update(self, client, admin_headers):
        film_id = create_film(client, admin_headers)

        response = client.put(f"/api/film/{film_id}", json={**FILM, "name": "Tenet"}, headers=admin_headers)

        assert response.status_code == 200
        assert client.get("/api/films", headers=admin_headers).json()[0]["name"] == "Tenet"

    def test_missing_film(self, client, admin_headers):
        assert client.delete("/api/film/404", headers=admin_headers).json() == {"error": "film not found"}
        assert client.delete("/api/film/404", headers=admin_headers).status_code == 404
        assert client.put("/api/film/404/5", headers=admin_headers).status_code == 404

    def test_delete(self, client, admin_headers):
        film_id = create_film(client, admin_headers)

        assert client.delete(f"/api/film/{film_id}", headers=admin_headers).status_code == 200
        assert client.get("/api/films", headers=admin_headers).json() == []


class TestActors:
    def test_cast_management(self, client, admin_headers, viewer_headers):
        film_id = create_film(client, admin_headers)
        murphy = create_actor(client, admin_headers)
        blunt = create_actor(client, admin_headers, full_name="Emily Blunt", gender="female", birthday="1983-02-23")

        response = client.post(f"/api/actors/{film_id}", json=[murphy, blunt], headers=admin_headers)
        assert response.status_code == 200

        actors = client.get("/api/actors", params={"actor": "blunt"}, headers=viewer_headers).json()
        assert len(actors) == 1
        assert actors[0]["films"][0]["name"] == "Oppenheimer"

        by_actor = client.get("/api/films", params={"actor": "emily"}, headers=viewer_headers).json()
        assert [film["id"] for film in by_actor] == [film_id]

        response = client.delete(f"/api/actor/{blunt}/{film_id}", headers=admin_headers)
        assert response.status_code == 200
        assert client.get("/api/films", params={"actor": "emily"}, headers=viewer_headers).json() == []

    def test_duplicate_actor_ids(self, client, admin_headers):
        film_id = create_film(client, admin_headers)
        actor_id = create_actor(client, admin_headers)

        response = client.post(f"/api/actors/{film_id}", json=[actor_id, actor_id], headers=admin_headers)

        assert response.status_code == 409
        assert response.json() == {"error": "actors must be unique"}

    def test_unknown_actor_in_new_film(self, client, admin_headers):
        response = client.post("/api/film", json={**FILM, "actor_ids": [404]}, headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "actor not found"}

    def test_invalid_actor(self, client, admin_headers):
        response = client.post("/api/actor", json={**ACTOR, "full_name": "", "gender": "robot"},
                               headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {
            "errors": ["full name must be at least 1 letter long", "gender must be male or female"],
        }

    def test_actor_updates(self, client, admin_headers):
        actor_id = create_actor(client, admin_headers)

        assert client.put(f"/api/actor/name/{actor_id}/Cillian", headers=admin_headers).status_code == 200
        assert client.put(f"/api/actor/gender/{actor_id}/robot", headers=admin_headers).status_code == 400
        assert client.put(f"/api/actor/birthday/{actor_id}/1976-05-26", headers=admin_headers).status_code == 200

        actor = client.get("/api/actors", headers=admin_headers).json()[0]
        assert actor["full_name"] == "Cillian"
        assert actor["birthday"] == "1976-05-26"

        response = client.put(f"/api/actor/{actor_id}", json={**ACTOR, "gender": "female"}, headers=admin_headers)
        assert response.status_code == 200
        assert client.get("/api/actors", headers=admin_headers).json()[0]["gender"] == "female"

    def test_delete_actor(self, client, admin_headers):
        actor_id = create_actor(client, admin_headers)

        assert client.delete(f"/api/actor/{actor_id}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/actor/{actor_id}", headers=admin_headers).status_code == 404
