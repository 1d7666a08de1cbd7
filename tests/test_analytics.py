"""
Tests for analytics endpoints.
"""
import pytest


def _record(client, schedule_id, platform="facebook", **counters):
    return client.post("/api/analytics", json={"schedule_id": schedule_id, "platform": platform, **counters})


class TestAnalyticsEndpoints:
    """Test analytics endpoints."""

    def test_create_analytics(self, client, schedule):
        """Test recording counters computes the engagement rate."""
        response = _record(client, schedule["id"], likes=10, shares=5, comments=5, views=100)
        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["schedule_id"] == schedule["id"]
        assert data["platform"] == "facebook"
        assert data["clicks"] == 0
        assert data["engagement_rate"] == 20.0
        assert data["recorded_at"]

    def test_create_analytics_defaults_counters(self, client, schedule):
        """Test absent counters default to zero."""
        response = _record(client, schedule["id"])
        assert response.status_code == 201
        data = response.json()
        for name in ("likes", "shares", "comments", "views", "clicks"):
            assert data[name] == 0
        assert data["engagement_rate"] == 0

    def test_create_analytics_zero_views(self, client, schedule):
        """Test the rate is zero when there are no views."""
        response = _record(client, schedule["id"], likes=50, shares=20, comments=30, views=0)
        assert response.json()["engagement_rate"] == 0

    def test_create_analytics_uses_schedule_platform(self, client, schedule):
        """Test the stored platform comes from the schedule, not the request."""
        response = _record(client, schedule["id"], platform="Instagram", likes=1, views=1)
        assert response.status_code == 201
        assert response.json()["platform"] == "facebook"

    @pytest.mark.parametrize("missing", ["schedule_id", "platform"])
    def test_create_analytics_missing_field(self, client, schedule, missing):
        """Test schedule_id and platform are required."""
        body = {"schedule_id": schedule["id"], "platform": "facebook"}
        del body[missing]
        response = client.post("/api/analytics", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "schedule_id and platform are required"

    def test_create_analytics_unknown_schedule(self, client):
        """Test recording against a schedule that does not exist."""
        response = _record(client, "missing-schedule", likes=1)
        assert response.status_code == 404
        assert response.json()["error"] == "Schedule not found"

    def test_create_analytics_negative_counter(self, client, schedule):
        """Test counters cannot be negative."""
        response = _record(client, schedule["id"], likes=-1)
        assert response.status_code == 400

    def test_update_analytics_partial(self, client, schedule):
        """Test omitted counters keep their values and the rate is recomputed."""
        created = _record(client, schedule["id"], likes=10, shares=5, comments=5, views=100, clicks=7).json()

        response = client.put(f"/api/analytics/{created['id']}", json={"views": 50})
        assert response.status_code == 200
        data = response.json()
        assert data["likes"] == 10
        assert data["shares"] == 5
        assert data["comments"] == 5
        assert data["clicks"] == 7
        assert data["views"] == 50
        assert data["engagement_rate"] == 40.0

    def test_update_analytics_to_zero_views(self, client, schedule):
        """Test dropping views to zero resets the rate."""
        created = _record(client, schedule["id"], likes=10, views=100).json()

        response = client.put(f"/api/analytics/{created['id']}", json={"views": 0})
        assert response.json()["engagement_rate"] == 0

    def test_update_analytics_not_found(self, client):
        """Test updating a non-existent record."""
        response = client.put("/api/analytics/missing", json={"likes": 1})
        assert response.status_code == 404
        assert response.json()["error"] == "Analytics record not found"

    def test_get_analytics_joined(self, client, schedule):
        """Test listing includes schedule and post details."""
        _record(client, schedule["id"], likes=1, views=10)

        response = client.get("/api/analytics")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["platform"] == "facebook"
        assert data[0]["status"] == "pending"
        assert data[0]["scheduled_time"] == "2025-01-01T10:00:00+00:00"
        assert data[0]["content"] == "Hello world"

    def test_get_analytics_by_schedule(self, client, post, schedule):
        """Test filtering analytics by schedule."""
        other = client.post(
            "/api/schedules",
            json={"post_id": post["id"], "platform": "twitter", "scheduled_time": "2025-01-02T10:00:00"},
        ).json()
        _record(client, schedule["id"], likes=1)
        _record(client, other["id"], likes=2)

        response = client.get(f"/api/analytics/schedule/{schedule['id']}")
        assert response.status_code == 200
        assert [a["likes"] for a in response.json()] == [1]

        assert client.get("/api/analytics/schedule/missing").json() == []

    def test_get_analytics_by_platform(self, client, post, schedule):
        """Test filtering analytics by platform is case-insensitive."""
        other = client.post(
            "/api/schedules",
            json={"post_id": post["id"], "platform": "twitter", "scheduled_time": "2025-01-02T10:00:00"},
        ).json()
        _record(client, schedule["id"], likes=1)
        _record(client, other["id"], platform="twitter", likes=2)

        response = client.get("/api/analytics/platform/Twitter")
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["platform"] == "twitter"
        assert data[0]["likes"] == 2

    def test_delete_analytics(self, client, schedule):
        """Test deleting a single analytics record."""
        created = _record(client, schedule["id"], likes=1).json()

        response = client.delete(f"/api/analytics/{created['id']}")
        assert response.status_code == 200
        assert client.get(f"/api/analytics/{created['id']}").status_code == 404
        assert client.get(f"/api/schedules/{schedule['id']}").status_code == 200


class TestDashboardSummary:
    """Test the dashboard summary endpoint."""

    def test_empty_summary_is_zero_filled(self, client):
        """Test every engagement total is zero, not null, with no data."""
        response = client.get("/api/analytics/dashboard/summary")
        assert response.status_code == 200
        data = response.json()
        assert data["total_posts"] == 0
        assert data["total_schedules"] == 0
        assert data["schedules_by_status"] == []
        assert data["schedules_by_platform"] == []
        assert data["engagement_by_platform"] == []
        assert data["total_engagement"] == {
            "total_likes": 0,
            "total_shares": 0,
            "total_comments": 0,
            "total_views": 0,
            "total_clicks": 0,
            "avg_engagement_rate": 0.0,
        }

    def test_summary_without_analytics(self, client, post, schedule):
        """Test counts are reported while engagement stays zero-filled."""
        data = client.get("/api/analytics/dashboard/summary").json()
        assert data["total_posts"] == 1
        assert data["total_schedules"] == 1
        assert data["schedules_by_status"] == [{"status": "pending", "count": 1}]
        assert data["schedules_by_platform"] == [{"platform": "facebook", "count": 1}]
        assert data["total_engagement"]["total_likes"] == 0
        assert data["total_engagement"]["avg_engagement_rate"] == 0.0

    def test_summary_aggregates(self, client, post, schedule):
        """Test totals, averages and per-platform breakdown."""
        twitter = client.post(
            "/api/schedules",
            json={"post_id": post["id"], "platform": "twitter", "scheduled_time": "2025-01-02T10:00:00"},
        ).json()
        client.put(f"/api/schedules/{twitter['id']}", json={"status": "published"})

        _record(client, schedule["id"], likes=10, shares=5, comments=5, views=100, clicks=1)
        _record(client, schedule["id"], likes=0, shares=0, comments=0, views=0, clicks=2)
        _record(client, twitter["id"], platform="twitter", likes=3, shares=1, comments=1, views=50, clicks=4)

        data = client.get("/api/analytics/dashboard/summary").json()
        assert data["total_posts"] == 1
        assert data["total_schedules"] == 2
        assert sorted(data["schedules_by_status"], key=lambda s: s["status"]) == [
            {"status": "pending", "count": 1},
            {"status": "published", "count": 1},
        ]

        totals = data["total_engagement"]
        assert totals["total_likes"] == 13
        assert totals["total_shares"] == 6
        assert totals["total_comments"] == 6
        assert totals["total_views"] == 150
        assert totals["total_clicks"] == 7
        assert totals["avg_engagement_rate"] == pytest.approx((20.0 + 0.0 + 10.0) / 3)

        by_platform = {p["platform"]: p for p in data["engagement_by_platform"]}
        assert set(by_platform) == {"facebook", "twitter"}
        assert by_platform["facebook"]["total_likes"] == 10
        assert by_platform["facebook"]["total_clicks"] == 3
        assert by_platform["facebook"]["avg_engagement_rate"] == pytest.approx(10.0)
        assert by_platform["twitter"]["total_views"] == 50
        assert by_platform["twitter"]["avg_engagement_rate"] == pytest.approx(10.0)


def test_full_scenario(client):
    """Create, schedule, publish, measure, then delete everything via the post."""
    post = client.post("/api/posts", json={"content": "Hello world"})
    assert post.status_code == 201
    post = post.json()
    assert post["created_at"] == post["updated_at"]

    schedule = client.post(
        "/api/schedules",
        json={"post_id": post["id"], "platform": "Facebook", "scheduled_time": "2025-01-01T10:00:00"},
    )
    assert schedule.status_code == 201
    schedule = schedule.json()
    assert schedule["platform"] == "facebook"
    assert schedule["status"] == "pending"

    published = client.put(f"/api/schedules/{schedule['id']}", json={"status": "published"})
    assert published.status_code == 200
    assert published.json()["published_at"] is not None

    analytics = client.post(
        "/api/analytics",
        json={"schedule_id": schedule["id"], "platform": "facebook",
              "likes": 10, "shares": 5, "comments": 5, "views": 100},
    )
    assert analytics.status_code == 201
    analytics = analytics.json()
    assert analytics["engagement_rate"] == 20.0

    assert client.delete(f"/api/posts/{post['id']}").status_code == 200
    assert client.get(f"/api/schedules/{schedule['id']}").status_code == 404
    assert client.get(f"/api/analytics/{analytics['id']}").status_code == 404
