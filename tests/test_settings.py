"""Tests for the sitemap settings toggles."""


class TestSitemapSettings:
    def test_defaults(self, client):
        data = client.get("/api/v1/settings/sitemap").json()
        assert data == {
            "enabled": True,
            "notification_enabled": False,
            "use_show_in_search": True,
            "extra_types": [],
        }

    def test_disable_and_enable(self, client):
        assert client.post("/api/v1/settings/sitemap/disable").json()["enabled"] is False
        assert client.post("/api/v1/settings/sitemap/disable").json()["enabled"] is False
        assert client.post("/api/v1/settings/sitemap/enable").json()["enabled"] is True

    def test_notification_toggle(self, client):
        data = client.post("/api/v1/settings/sitemap/notification/enable").json()
        assert data["notification_enabled"] is True
        data = client.post("/api/v1/settings/sitemap/notification/disable").json()
        assert data["notification_enabled"] is False

    def test_lists_registered_types(self, make_client):
        with make_client(SITEMAP_EXTRA_TYPES="Event:yearly") as c:
            data = c.get("/api/v1/settings/sitemap").json()
        assert data["extra_types"] == [{"type": "Event", "changefreq": "yearly"}]

    def test_toggles_are_per_app(self, make_client):
        with make_client() as first, make_client() as second:
            first.post("/api/v1/settings/sitemap/disable")
            assert second.get("/sitemap.xml").status_code == 200
            assert first.get("/sitemap.xml").status_code == 405
