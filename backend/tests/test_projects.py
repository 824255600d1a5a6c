"""
Integration Tests for Core Business Flow (Projects)

Verifies:
- Project creation with template defaults and build enqueueing
- Plan quota enforcement
- Ownership checks on reads and edits
- Public landing lookups and download counting
"""

import pytest
from sqlalchemy import select

from app.domain.models import UserRole
from app.domain.subscription import SubscriptionTier
from app.infrastructure.db.models import ActivityLog, BuildQueueEntry, Project, Template, User


async def _fetch_project(session_factory, project_id):
    async with session_factory() as s:
        return await s.get(Project, project_id)


async def _entries_for(session_factory, project_id):
    async with session_factory() as s:
        result = await s.execute(
            select(BuildQueueEntry).where(BuildQueueEntry.project_id == project_id)
        )
        return list(result.scalars().all())


class TestCreateProject:

    @pytest.mark.asyncio
    async def test_create_minimal_project(self, async_client, auth_headers, make_user, session_factory):
        user = await make_user("owner-1")

        resp = await async_client.post(
            "/api/projects",
            json={"name": "My Shop"},
            headers=auth_headers("owner-1"),
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["slug"].startswith("my-shop-")
        assert len(body["slug"]) == len("my-shop-") + 8

        project = await _fetch_project(session_factory, body["id"])
        assert project.user_id == user.id
        assert project.status == "pending"
        assert project.build_progress == 0
        assert project.app_type == "hybrid"
        assert project.primary_color == "#6366f1"
        assert project.secondary_color == "#8b5cf6"
        assert project.features == []
        assert project.package_name == "com.clickngoai." + body["slug"].replace("-", "_")

    @pytest.mark.asyncio
    async def test_create_enqueues_build(self, async_client, auth_headers, make_user, session_factory):
        await make_user("owner-1")

        resp = await async_client.post(
            "/api/projects", json={"name": "Queue Me"}, headers=auth_headers("owner-1")
        )

        entries = await _entries_for(session_factory, resp.json()["id"])
        assert len(entries) == 1
        assert entries[0].status == "queued"
        assert entries[0].priority == 0
        assert entries[0].progress == 0
        assert entries[0].estimated_time == 120

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier,limit,priority", [
        (SubscriptionTier.MULTIPLE, 15, 5),
        (SubscriptionTier.UNLIMITED, 9999, 10),
        (SubscriptionTier.SINGLE, 1, 0),
    ])
    async def test_build_priority_follows_tier(
        self, async_client, auth_headers, make_user, session_factory, tier, limit, priority
    ):
        await make_user("owner-1", tier=tier, app_limit=limit)

        resp = await async_client.post(
            "/api/projects", json={"name": "Priority"}, headers=auth_headers("owner-1")
        )

        entries = await _entries_for(session_factory, resp.json()["id"])
        assert entries[0].priority == priority

    @pytest.mark.asyncio
    async def test_template_fills_unset_fields(
        self, async_client, auth_headers, make_user, make_template, session_factory
    ):
        await make_user("owner-1")
        template = await make_template()

        resp = await async_client.post(
            "/api/projects",
            json={"name": "Foodie", "template_id": template.id},
            headers=auth_headers("owner-1"),
        )

        project = await _fetch_project(session_factory, resp.json()["id"])
        assert project.description == "Order food from restaurants"
        assert project.prompt == "Build a food delivery app"
        assert project.primary_color == "#ef4444"
        assert project.secondary_color == "#f97316"
        assert project.features == ["Restaurant Listings", "Order Tracking"]
        assert project.template_id == template.id

        async with session_factory() as s:
            refreshed = await s.get(Template, template.id)
        assert refreshed.usage_count == 1

    @pytest.mark.asyncio
    async def test_explicit_values_override_template(
        self, async_client, auth_headers, make_user, make_template, session_factory
    ):
        await make_user("owner-1")
        template = await make_template()

        resp = await async_client.post(
            "/api/projects",
            json={
                "name": "Custom",
                "template_id": template.id,
                "description": "Mine",
                "primary_color": "#000000",
                "features": ["Chat"],
            },
            headers=auth_headers("owner-1"),
        )

        project = await _fetch_project(session_factory, resp.json()["id"])
        assert project.description == "Mine"
        assert project.primary_color == "#000000"
        assert project.secondary_color == "#f97316"
        assert project.features == ["Chat"]

    @pytest.mark.asyncio
    async def test_unknown_template_is_ignored(
        self, async_client, auth_headers, make_user, session_factory
    ):
        await make_user("owner-1")

        resp = await async_client.post(
            "/api/projects",
            json={"name": "Orphan", "template_id": 999},
            headers=auth_headers("owner-1"),
        )

        assert resp.status_code == 200
        project = await _fetch_project(session_factory, resp.json()["id"])
        assert project.template_id == 999
        assert project.primary_color == "#6366f1"

    @pytest.mark.asyncio
    async def test_create_counts_and_logs(self, async_client, auth_headers, make_user, session_factory):
        user = await make_user("owner-1", tier=SubscriptionTier.MULTIPLE, app_limit=15)

        resp = await async_client.post(
            "/api/projects",
            json={"name": "Logged", "app_type": "android"},
            headers=auth_headers("owner-1"),
        )
        project_id = resp.json()["id"]

        async with session_factory() as s:
            refreshed = await s.get(User, user.id)
            logs = (await s.execute(select(ActivityLog))).scalars().all()

        assert refreshed.apps_created == 1
        assert len(logs) == 1
        assert logs[0].action == "project_created"
        assert logs[0].entity_type == "project"
        assert logs[0].entity_id == project_id
        assert logs[0].details == {"name": "Logged", "app_type": "android"}

    @pytest.mark.asyncio
    async def test_invalid_app_type_rejected(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        resp = await async_client.post(
            "/api/projects",
            json={"name": "Bad", "app_type": "smartwatch"},
            headers=auth_headers("owner-1"),
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_name_rejected(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        resp = await async_client.post(
            "/api/projects", json={"name": ""}, headers=auth_headers("owner-1")
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, async_client):
        resp = await async_client.post("/api/projects", json={"name": "Nope"})
        assert resp.status_code == 401


class TestQuota:

    @pytest.mark.asyncio
    async def test_free_user_limited_to_one(self, async_client, auth_headers, make_user, session_factory):
        user = await make_user("owner-1")
        headers = auth_headers("owner-1")

        first = await async_client.post("/api/projects", json={"name": "One"}, headers=headers)
        second = await async_client.post("/api/projects", json={"name": "Two"}, headers=headers)

        assert first.status_code == 200
        assert second.status_code == 403
        assert second.json()["message"] == (
            "App limit reached. You can create up to 1 apps with your current plan."
        )

        async with session_factory() as s:
            count = len((await s.execute(select(Project))).scalars().all())
            refreshed = await s.get(User, user.id)
        assert count == 1
        assert refreshed.apps_created == 1

    @pytest.mark.asyncio
    async def test_single_tier_second_project_blocked(self, async_client, auth_headers, make_user):
        await make_user("owner-1", tier=SubscriptionTier.SINGLE, app_limit=1)
        headers = auth_headers("owner-1")

        first = await async_client.post("/api/projects", json={"name": "One"}, headers=headers)
        second = await async_client.post("/api/projects", json={"name": "Two"}, headers=headers)

        assert first.status_code == 200
        assert second.status_code == 403
        assert "1" in second.json()["message"]
        assert second.json()["details"] == {"limit": 1}

    @pytest.mark.asyncio
    async def test_unlimited_tier_ignores_limit(self, async_client, auth_headers, make_user):
        await make_user("owner-1", tier=SubscriptionTier.UNLIMITED, app_limit=0)
        headers = auth_headers("owner-1")

        for name in ("One", "Two", "Three"):
            resp = await async_client.post("/api/projects", json={"name": name}, headers=headers)
            assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_deleting_frees_a_slot(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        headers = auth_headers("owner-1")

        created = await async_client.post("/api/projects", json={"name": "One"}, headers=headers)
        await async_client.delete(f"/api/projects/{created.json()['id']}", headers=headers)
        again = await async_client.post("/api/projects", json={"name": "Two"}, headers=headers)

        assert again.status_code == 200

    @pytest.mark.asyncio
    async def test_admin_role_does_not_bypass_quota(self, async_client, auth_headers, make_user):
        await make_user("admin-1", role=UserRole.ADMIN)
        headers = auth_headers("admin-1")

        await async_client.post("/api/projects", json={"name": "One"}, headers=headers)
        resp = await async_client.post("/api/projects", json={"name": "Two"}, headers=headers)

        assert resp.status_code == 403


class TestOwnership:

    async def _create(self, async_client, auth_headers, open_id, name="Owned"):
        resp = await async_client.post(
            "/api/projects", json={"name": name}, headers=auth_headers(open_id)
        )
        return resp.json()["id"]

    @pytest.mark.asyncio
    async def test_owner_can_read(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        project_id = await self._create(async_client, auth_headers, "owner-1")

        resp = await async_client.get(f"/api/projects/{project_id}", headers=auth_headers("owner-1"))

        assert resp.status_code == 200
        assert resp.json()["name"] == "Owned"

    @pytest.mark.asyncio
    async def test_other_user_denied(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        await make_user("intruder")
        project_id = await self._create(async_client, auth_headers, "owner-1")
        headers = auth_headers("intruder")

        assert (await async_client.get(f"/api/projects/{project_id}", headers=headers)).status_code == 403
        assert (await async_client.patch(
            f"/api/projects/{project_id}", json={"name": "Mine now"}, headers=headers
        )).status_code == 403
        assert (await async_client.delete(f"/api/projects/{project_id}", headers=headers)).status_code == 403

    @pytest.mark.asyncio
    async def test_admin_can_read_any(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        await make_user("admin-1", role=UserRole.ADMIN)
        project_id = await self._create(async_client, auth_headers, "owner-1")

        resp = await async_client.get(f"/api/projects/{project_id}", headers=auth_headers("admin-1"))

        assert resp.status_code == 200

    @pytest.mark.asyncio
    async def test_unknown_project_is_404(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        resp = await async_client.get("/api/projects/4242", headers=auth_headers("owner-1"))
        assert resp.status_code == 404
        assert resp.json()["message"] == "Project not found"

    @pytest.mark.asyncio
    async def test_list_only_own_projects(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        await make_user("owner-2")
        await self._create(async_client, auth_headers, "owner-1", name="Mine")
        await self._create(async_client, auth_headers, "owner-2", name="Theirs")

        resp = await async_client.get("/api/projects", headers=auth_headers("owner-1"))

        assert [p["name"] for p in resp.json()] == ["Mine"]


class TestUpdateDelete:

    @pytest.mark.asyncio
    async def test_update_fields(self, async_client, auth_headers, make_user, session_factory):
        await make_user("owner-1")
        headers = auth_headers("owner-1")
        created = (await async_client.post("/api/projects", json={"name": "Old"}, headers=headers)).json()

        resp = await async_client.patch(
            f"/api/projects/{created['id']}",
            json={"name": "New", "landing_page_enabled": False},
            headers=headers,
        )

        assert resp.json() == {"success": True}
        project = await _fetch_project(session_factory, created["id"])
        assert project.name == "New"
        assert project.landing_page_enabled is False
        assert project.slug == created["slug"]
        assert project.status == "pending"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "landing_page_enabled"])
    async def test_null_for_required_field_rejected(
        self, async_client, auth_headers, make_user, session_factory, field
    ):
        await make_user("owner-1")
        headers = auth_headers("owner-1")
        created = (await async_client.post("/api/projects", json={"name": "Keep"}, headers=headers)).json()

        resp = await async_client.patch(
            f"/api/projects/{created['id']}", json={field: None}, headers=headers
        )

        assert resp.status_code == 422
        project = await _fetch_project(session_factory, created["id"])
        assert project.name == "Keep"
        assert project.landing_page_enabled is True

    @pytest.mark.asyncio
    async def test_null_for_optional_field_clears_it(
        self, async_client, auth_headers, make_user, session_factory
    ):
        await make_user("owner-1")
        headers = auth_headers("owner-1")
        created = (await async_client.post(
            "/api/projects", json={"name": "Keep", "description": "Old"}, headers=headers
        )).json()

        resp = await async_client.patch(
            f"/api/projects/{created['id']}", json={"description": None}, headers=headers
        )

        assert resp.status_code == 200
        project = await _fetch_project(session_factory, created["id"])
        assert project.description is None

    @pytest.mark.asyncio
    async def test_delete_keeps_build_history(self, async_client, auth_headers, make_user, session_factory):
        await make_user("owner-1")
        headers = auth_headers("owner-1")
        created = (await async_client.post("/api/projects", json={"name": "Gone"}, headers=headers)).json()

        resp = await async_client.delete(f"/api/projects/{created['id']}", headers=headers)

        assert resp.json() == {"success": True}
        assert await _fetch_project(session_factory, created["id"]) is None
        assert len(await _entries_for(session_factory, created["id"])) == 1

        async with session_factory() as s:
            actions = [log.action for log in (await s.execute(select(ActivityLog))).scalars().all()]
        assert "project_deleted" in actions


class TestPublicLanding:

    @pytest.mark.asyncio
    async def test_slug_lookup_counts_views(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        created = (await async_client.post(
            "/api/projects", json={"name": "Landing"}, headers=auth_headers("owner-1")
        )).json()

        first = await async_client.get(f"/api/projects/slug/{created['slug']}")
        second = await async_client.get(f"/api/projects/slug/{created['slug']}")

        assert first.status_code == 200
        assert first.json()["landing_page_views"] == 1
        assert second.json()["landing_page_views"] == 2

    @pytest.mark.asyncio
    async def test_disabled_landing_page_is_404(self, async_client, auth_headers, make_user):
        await make_user("owner-1")
        headers = auth_headers("owner-1")
        created = (await async_client.post("/api/projects", json={"name": "Hidden"}, headers=headers)).json()
        await async_client.patch(
            f"/api/projects/{created['id']}", json={"landing_page_enabled": False}, headers=headers
        )

        resp = await async_client.get(f"/api/projects/slug/{created['slug']}")

        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_slug_is_404(self, async_client):
        resp = await async_client.get("/api/projects/slug/no-such-app")
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_download_tracking(self, async_client, auth_headers, make_user, session_factory):
        await make_user("owner-1")
        created = (await async_client.post(
            "/api/projects", json={"name": "Downloads"}, headers=auth_headers("owner-1")
        )).json()

        await async_client.post(f"/api/projects/{created['id']}/downloads")
        await async_client.post(f"/api/projects/{created['id']}/downloads")

        project = await _fetch_project(session_factory, created["id"])
        assert project.download_count == 2

    @pytest.mark.asyncio
    async def test_download_unknown_project_succeeds(self, async_client):
        resp = await async_client.post("/api/projects/4242/downloads")
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
