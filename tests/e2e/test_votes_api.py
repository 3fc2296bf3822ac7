"""End-to-end tests for voting endpoints."""

from uuid import uuid4


def _thread(api):
    response = api.client.post(
        "/threads",
        json={"title": "Vote on me", "content": "Ten characters at least."},
    )
    return response.json()["thread_id"]


class TestVoteEndpoints:
    """Casting, flipping and removing votes over HTTP."""

    def test_vote_toggle_and_flip(self, api):
        # Arrange
        api.login(api.add_user())
        thread_id = _thread(api)
        path = f"/threads/{thread_id}/vote"

        # Act
        up = api.client.post(path, json={"vote_type": "upvote"}).json()
        down = api.client.post(path, json={"vote_type": "downvote"}).json()
        off = api.client.post(path, json={"vote_type": "downvote"}).json()

        # Assert
        assert (up["action"], up["upvotes"], up["downvotes"]) == ("vote_added", 1, 0)
        assert (down["action"], down["upvotes"], down["downvotes"]) == (
            "vote_changed",
            0,
            1,
        )
        assert down["score"] == -1
        assert (off["action"], off["user_vote"], off["score"]) == (
            "vote_removed",
            None,
            0,
        )

    def test_votes_from_many_users(self, api):
        author = api.add_user("Author")
        api.login(author)
        thread_id = _thread(api)
        for i in range(3):
            api.login(api.add_user(f"Fan {i}"))
            api.client.post(f"/threads/{thread_id}/vote", json={"vote_type": "upvote"})

        api.login(author)
        thread = api.client.get(f"/threads/{thread_id}").json()["thread"]

        assert thread["upvotes"] == 3
        assert thread["score"] == 3
        assert thread["user_vote"] is None

    def test_comment_vote_and_my_votes(self, api):
        api.login(api.add_user())
        thread_id = _thread(api)
        comment = api.client.post(
            f"/threads/{thread_id}/comments", json={"content": "Nice"}
        ).json()

        api.client.post(f"/threads/{thread_id}/vote", json={"vote_type": "upvote"})
        voted = api.client.post(
            f"/comments/{comment['comment_id']}/vote", json={"vote_type": "upvote"}
        )
        mine = api.client.get("/users/me/votes").json()

        assert voted.status_code == 200
        assert voted.json()["votable_type"] == "comment"
        assert mine["summary"] == {
            "total_thread_votes": 1,
            "total_comment_votes": 1,
            "total_votes": 2,
        }
        assert mine["comment_votes"][0]["votable_id"] == comment["comment_id"]

    def test_vote_errors(self, api):
        api.login(api.add_user())
        thread_id = _thread(api)

        bad_type = api.client.post(
            f"/threads/{thread_id}/vote", json={"vote_type": "meh"}
        )
        missing = api.client.post(
            f"/threads/{uuid4()}/vote", json={"vote_type": "upvote"}
        )
        api.logout()
        anonymous = api.client.post(
            f"/threads/{thread_id}/vote", json={"vote_type": "upvote"}
        )
        my_votes = api.client.get("/users/me/votes")

        assert bad_type.status_code == 400
        assert bad_type.json()["code"] == "INVALID_VOTE_TYPE"
        assert missing.status_code == 404
        assert missing.json()["code"] == "THREAD_NOT_FOUND"
        assert anonymous.status_code == 401
        assert my_votes.status_code == 401
