"""API tests for /api/games: public catalog, search and admin-only CRUD."""

import unittest

from helpers import ApiTestCase


def _game_body(**overrides: object) -> dict:
    body = {
        "title": "Hollow Knight",
        "description": "Descend into the ruined kingdom of Hallownest.",
        "price": 14.99,
        "genre": "Platformer",
        "stock": 5,
    }
    body.update(overrides)
    return body


class TestCreateGame(ApiTestCase):
    def test_non_admin_gets_403(self) -> None:
        user_id = self.make_user()
        resp = self.client.post("/api/games", json=_game_body(), headers=self.auth(user_id))
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.json()["message"], "Access denied. Admin privileges required.")

    def test_anonymous_gets_401(self) -> None:
        resp = self.client.post("/api/games", json=_game_body())
        self.assertEqual(resp.status_code, 401)

    def test_admin_creates_game_queryable_by_id(self) -> None:
        admin_id = self.make_admin()
        resp = self.client.post("/api/games", json=_game_body(), headers=self.auth(admin_id))
        self.assertEqual(resp.status_code, 201)
        created = resp.json()["data"]
        self.assertEqual(created["title"], "Hollow Knight")
        self.assertEqual(created["creator"]["id"], admin_id)
        self.assertEqual(created["rating"], 0)

        fetched = self.client.get(f"/api/games/{created['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["data"]["title"], "Hollow Knight")
        self.assertEqual(fetched.json()["data"]["stock"], 5)

    def test_defaults_for_image_and_stock(self) -> None:
        admin_id = self.make_admin()
        body = _game_body()
        body.pop("stock")
        resp = self.client.post("/api/games", json=body, headers=self.auth(admin_id))
        data = resp.json()["data"]
        self.assertEqual(data["stock"], 999)
        self.assertIn("placeholder", data["image"])

    def test_unknown_genre_returns_400(self) -> None:
        admin_id = self.make_admin()
        resp = self.client.post(
            "/api/games", json=_game_body(genre="Karaoke"), headers=self.auth(admin_id)
        )
        self.assertEqual(resp.status_code, 400)

    def test_missing_title_and_negative_price_return_400(self) -> None:
        admin_id = self.make_admin()
        body = _game_body()
        body.pop("title")
        self.assertEqual(
            self.client.post("/api/games", json=body, headers=self.auth(admin_id)).status_code,
            400,
        )
        self.assertEqual(
            self.client.post(
                "/api/games", json=_game_body(price=-1), headers=self.auth(admin_id)
            ).status_code,
            400,
        )


class TestReadGames(ApiTestCase):
    def test_list_is_public_and_newest_first(self) -> None:
        first = self.make_game(title="First")
        second = self.make_game(title="Second")
        resp = self.client.get("/api/games")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["count"], 2)
        self.assertEqual([g["id"] for g in body["data"]], [second, first])

    def test_genre_filter(self) -> None:
        self.make_game(title="Doom", genre="Shooter")
        self.make_game(title="Tetris", genre="Puzzle")
        resp = self.client.get("/api/games", params={"genre": "Puzzle"})
        self.assertEqual([g["title"] for g in resp.json()["data"]], ["Tetris"])

    def test_malformed_and_missing_ids_return_404(self) -> None:
        for path in ("/api/games/not-an-id", "/api/games/99999", "/api/games/0"):
            resp = self.client.get(path)
            self.assertEqual(resp.status_code, 404, path)
            self.assertEqual(resp.json()["message"], "Game not found")


class TestSearchGames(ApiTestCase):
    def test_matches_title_or_description_case_insensitively(self) -> None:
        self.make_game(title="The Legend of ZELDA", description="Adventure in Hyrule.")
        self.make_game(title="Hyrule Warriors", description="Musou spin-off of Zelda.")
        self.make_game(title="Metroid Dread", description="Samus returns.")
        resp = self.client.get("/api/games/search/zelda")
        self.assertEqual(resp.status_code, 200)
        titles = sorted(g["title"] for g in resp.json()["data"])
        self.assertEqual(titles, ["Hyrule Warriors", "The Legend of ZELDA"])
        self.assertEqual(resp.json()["count"], 2)

    def test_wildcards_are_matched_literally(self) -> None:
        self.make_game(title="100% Orange Juice")
        self.make_game(title="Orange Box")
        resp = self.client.get("/api/games/search/100%25")
        self.assertEqual([g["title"] for g in resp.json()["data"]], ["100% Orange Juice"])


class TestUpdateAndDeleteGame(ApiTestCase):
    def test_partial_update(self) -> None:
        admin_id = self.make_admin()
        game_id = self.make_game(title="Old", price=10)
        resp = self.client.put(
            f"/api/games/{game_id}", json={"price": 5.5}, headers=self.auth(admin_id)
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()["data"]
        self.assertEqual(data["price"], 5.5)
        self.assertEqual(data["title"], "Old")

    def test_update_rejects_null_required_field(self) -> None:
        admin_id = self.make_admin()
        game_id = self.make_game()
        resp = self.client.put(
            f"/api/games/{game_id}", json={"title": None}, headers=self.auth(admin_id)
        )
        self.assertEqual(resp.status_code, 400)

    def test_update_missing_game_returns_404(self) -> None:
        admin_id = self.make_admin()
        resp = self.client.put("/api/games/424242", json={"price": 1}, headers=self.auth(admin_id))
        self.assertEqual(resp.status_code, 404)

    def test_delete_then_get_returns_404(self) -> None:
        admin_id = self.make_admin()
        game_id = self.make_game()
        resp = self.client.delete(f"/api/games/{game_id}", headers=self.auth(admin_id))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Game deleted successfully")
        self.assertEqual(self.client.get(f"/api/games/{game_id}").status_code, 404)

    def test_delete_requires_admin(self) -> None:
        user_id = self.make_user()
        game_id = self.make_game()
        resp = self.client.delete(f"/api/games/{game_id}", headers=self.auth(user_id))
        self.assertEqual(resp.status_code, 403)


if __name__ == "__main__":
    unittest.main()
