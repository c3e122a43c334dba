"""API tests through FastAPI's TestClient."""

import pytest

from app.models import RecommendationType
from app.services.matchmaking_service import create_recommendation

API = "/api/v1"


def _profile_payload(id, interests, department=None, major=None, **extra):
    payload = {
        "id": id,
        "name": id.title(),
        "age": 21,
        "gender": "Female",
        "interested_in": "Everyone",
        "department": department,
        "major": major,
        "interests": interests,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def students(client):
    for payload in (
        _profile_payload("me", ["Serious relationship", "Introvert", "Gaming"], "B.Tech", "Civil"),
        _profile_payload("twin", ["Serious relationship", "Introvert", "Gaming"], "B.Tech", "Civil"),
        _profile_payload("gamer", ["Gaming"]),
    ):
        response = client.post(f"{API}/profiles", json=payload)
        assert response.status_code == 201


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    health = client.get("/health").json()
    assert health["status"] == "healthy"
    assert health["components"]["database"] == "healthy"


def test_config_exposes_scoring_constants(client):
    config = client.get("/config").json()

    assert config["matchmaking"]["suggestion_limit"] == 3
    assert config["scoring"]["weights"]["intent_mismatch_penalty"] == -30
    assert config["scoring"]["soul_mate_threshold"] == 90


def test_vocabulary(client):
    data = client.get(f"{API}/vocabulary").json()

    assert set(data["interests"]) == {"Lifestyle", "Personality", "DatingIntent", "Hobbies"}
    assert "Friendship first" in data["interests"]["DatingIntent"]
    assert data["departments"] == ["B.Tech", "M.Tech", "MCA", "MBA", "B.Arch"]
    assert data["majors"]["MCA"] == ["Computer Applications"]
    assert data["years"][0] == "1st Year"


def test_create_and_get_profile(client, students):
    response = client.get(f"{API}/profiles/me")

    assert response.status_code == 200
    data = response.json()
    assert data["course"] == "B.Tech - Civil"
    assert data["interests"] == ["Serious relationship", "Introvert", "Gaming"]
    assert data["gender"] == "Female"


def test_create_duplicate_profile_conflicts(client, students):
    response = client.post(f"{API}/profiles", json=_profile_payload("me", []))
    assert response.status_code == 409


def test_create_profile_validates_body(client):
    response = client.post(f"{API}/profiles", json={"name": "No Age", "gender": "Female"})
    assert response.status_code == 422


def test_list_profiles_by_department(client, students):
    data = client.get(f"{API}/profiles", params={"department": "B.Tech"}).json()

    assert data["total"] == 2
    assert {p["id"] for p in data["profiles"]} == {"me", "twin"}


def test_update_interests_drops_duplicates(client, students):
    response = client.put(
        f"{API}/profiles/gamer/interests",
        json={"interests": ["Music", "Music", "Chill"]},
    )

    assert response.status_code == 200
    assert response.json()["interests"] == ["Music", "Chill"]


def test_unknown_profile_404(client):
    assert client.get(f"{API}/profiles/ghost").status_code == 404
    assert client.get(f"{API}/compatibility/ghost/other").status_code == 404


def test_stored_compatibility(client, students):
    data = client.get(f"{API}/compatibility/me/twin").json()

    assert data["score"] == 80
    assert data["percentage"] == 80
    assert data["match_type"] == "study_buddy"
    assert data["academic_synergy"] == "Study Buddies 📚"
    assert data["rules"]["academic"]["score"] == 25


def test_analyze_ad_hoc_profiles(client):
    response = client.post(
        f"{API}/compatibility/analyze",
        json={
            "subject": {"interests": ["Serious relationship"]},
            "other": {"interests": ["Casual dating"]},
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == -30
    assert data["percentage"] == 0
    assert data["match_type"] == "standard"


def test_discover_feed(client, students):
    data = client.get(f"{API}/discover/me").json()

    assert data["total"] == 2
    assert [e["profile"]["id"] for e in data["entries"]] == ["twin", "gamer"]
    assert data["entries"][0]["compatibility"]["percentage"] == 80
    assert data["entries"][0]["is_admin_recommended"] is False


def test_swipe_flow_creates_match(client, students):
    first = client.post(f"{API}/swipes", json={"swiper_id": "twin", "swiped_id": "me", "liked": True})
    assert first.status_code == 201
    assert first.json()["matched"] is False

    second = client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "twin", "liked": True})
    data = second.json()
    assert data["matched"] is True
    assert data["match"]["compatibility_score"] == 80
    assert data["match"]["profile"]["id"] == "twin"
    assert data["compatibility"]["vibe_tags"] == ["Looking for the same thing"]

    matches = client.get(f"{API}/matches", params={"user_id": "me"}).json()
    assert matches["total"] == 1
    assert matches["matches"][0]["profile"]["name"] == "Twin"

    match_id = matches["matches"][0]["id"]
    detail = client.get(f"{API}/matches/{match_id}").json()
    assert detail["match_details"]["academic_synergy"] == "Study Buddies 📚"

    feed = client.get(f"{API}/discover/me").json()
    assert [e["profile"]["id"] for e in feed["entries"]] == ["gamer"]


def test_swipe_errors(client, students):
    assert client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "me", "liked": True}).status_code == 400
    assert client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "ghost", "liked": True}).status_code == 404


def test_undo_and_reset(client, students):
    client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "gamer", "liked": False})

    assert client.delete(f"{API}/swipes/me/gamer").status_code == 204
    assert client.delete(f"{API}/swipes/me/gamer").status_code == 404

    client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "gamer", "liked": False})
    reset = client.post(f"{API}/discover/me/reset").json()
    assert reset["swipes_deleted"] == 1
    assert reset["matches_deleted"] == 0


def test_matches_invalid_type(client):
    assert client.get(f"{API}/matches", params={"match_type": "nope"}).status_code == 400


def test_match_not_found(client):
    assert client.get(f"{API}/matches/999").status_code == 404


def test_admin_suggestions(client, students):
    data = client.get(f"{API}/admin/matchmaking/me/suggestions").json()

    assert data["target_user_id"] == "me"
    assert [(s["profile"]["id"], s["score"], s["percentage"]) for s in data["suggestions"]] == [
        ("twin", 80, 80),
        ("gamer", 5, 5),
    ]


def test_admin_recommendation_flow(client, students):
    response = client.post(
        f"{API}/admin/recommendations",
        json={"admin_id": "admin", "target_user_id": "me", "recommended_user_id": "gamer"},
    )
    assert response.status_code == 201
    assert response.json()["type"] == "soulmate"

    feed = client.get(f"{API}/discover/me").json()
    assert feed["entries"][0]["profile"]["id"] == "gamer"
    assert feed["entries"][0]["is_soulmate"] is True

    swipe = client.post(f"{API}/swipes", json={"swiper_id": "me", "swiped_id": "gamer", "liked": True}).json()
    assert swipe["matched"] is True
    assert swipe["match"]["compatibility_score"] == 100
    assert swipe["match"]["source"] == "soulmate"
    assert swipe["match"]["match_type"] == "soul_mate"
    soulmates = client.get(f"{API}/matches", params={"match_type": "soul_mate"}).json()
    assert soulmates["total"] == 1

    listed = client.get(f"{API}/admin/recommendations", params={"target_user_id": "me"}).json()
    assert listed["total"] == 1


def test_admin_recommend_self_rejected(client, students):
    response = client.post(
        f"{API}/admin/recommendations",
        json={"admin_id": "admin", "target_user_id": "me", "recommended_user_id": "me"},
    )
    assert response.status_code == 400


def test_admin_user_search(client, students):
    data = client.get(f"{API}/admin/users", params={"search": "twn"}).json()

    assert data["results"][0]["profile"]["id"] == "twin"


def test_recommendation_listing_uses_service(client, db, students):
    from app.models import Profile

    me = db.get(Profile, "me")
    twin = db.get(Profile, "twin")
    create_recommendation(db, "admin", twin, me, RecommendationType.FRIEND)

    data = client.get(f"{API}/admin/recommendations").json()

    assert data["total"] == 1
    assert data["recommendations"][0]["type"] == "friend"


def test_report_hides_profile_and_reaches_admins(client, students):
    response = client.post(f"{API}/profiles/twin/report", json={"reporter_id": "me", "reason": "Spam links"})

    assert response.status_code == 201
    assert response.json()["reported_user_id"] == "twin"

    feed = client.get(f"{API}/discover/me").json()
    assert [e["profile"]["id"] for e in feed["entries"]] == ["gamer"]

    reports = client.get(f"{API}/admin/reports", params={"reported_user_id": "twin"}).json()
    assert reports["total"] == 1
    assert reports["reports"][0]["reason"] == "Spam links"


def test_block_profile(client, students):
    response = client.post(f"{API}/profiles/gamer/block", json={"blocker_id": "me"})

    assert response.status_code == 201
    data = response.json()
    assert (data["blocker_id"], data["blocked_id"]) == ("me", "gamer")
    feed = client.get(f"{API}/discover/gamer").json()
    assert "me" not in {e["profile"]["id"] for e in feed["entries"]}


def test_block_and_report_errors(client, students):
    assert client.post(f"{API}/profiles/me/block", json={"blocker_id": "me"}).status_code == 400
    assert client.post(f"{API}/profiles/ghost/block", json={"blocker_id": "me"}).status_code == 404
    assert client.post(f"{API}/profiles/twin/report", json={"reporter_id": "me", "reason": ""}).status_code == 422
