"""
Integration Tests for Subscriptions and Pricing

Verifies:
- Plan purchase prices, limits and period
- Cancellation downgrades the caller
- Pricing catalog fallback and stored plans
"""

from datetime import timedelta

import pytest
from sqlalchemy import select

from app.domain.subscription import SubscriptionTier
from app.infrastructure.db.models import ActivityLog, PricingPlan, SubscriptionModel, User


class TestCreateSubscription:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier,price_inr,price_usd,limit", [
        ("single", 3999, 49, 1),
        ("multiple", 24999, 79, 15),
        ("unlimited", 34999, 199, 9999),
    ])
    async def test_tier_table_applied(
        self, async_client, auth_headers, make_user, session_factory,
        tier, price_inr, price_usd, limit,
    ):
        user = await make_user("buyer")

        resp = await async_client.post(
            "/api/subscriptions",
            json={"tier": tier, "currency": "USD"},
            headers=auth_headers("buyer"),
        )

        assert resp.status_code == 200
        async with session_factory() as s:
            subscription = await s.get(SubscriptionModel, resp.json()["id"])
            refreshed = await s.get(User, user.id)

        assert subscription.user_id == user.id
        assert subscription.tier == tier
        assert subscription.price_inr == price_inr
        assert subscription.price_usd == price_usd
        assert subscription.currency == "USD"
        assert subscription.status == "active"
        assert subscription.end_date - subscription.start_date == timedelta(days=30)

        assert refreshed.subscription_tier == tier
        assert refreshed.app_limit == limit

    @pytest.mark.asyncio
    async def test_free_tier_not_purchasable(self, async_client, auth_headers, make_user):
        await make_user("buyer")
        resp = await async_client.post(
            "/api/subscriptions",
            json={"tier": "free", "currency": "INR"},
            headers=auth_headers("buyer"),
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_currency_rejected(self, async_client, auth_headers, make_user):
        await make_user("buyer")
        resp = await async_client.post(
            "/api/subscriptions",
            json={"tier": "single", "currency": "EUR"},
            headers=auth_headers("buyer"),
        )
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_purchase_raises_quota(self, async_client, auth_headers, make_user):
        await make_user("buyer")
        headers = auth_headers("buyer")
        await async_client.post("/api/projects", json={"name": "First"}, headers=headers)

        blocked = await async_client.post("/api/projects", json={"name": "Second"}, headers=headers)
        await async_client.post(
            "/api/subscriptions", json={"tier": "multiple", "currency": "INR"}, headers=headers
        )
        allowed = await async_client.post("/api/projects", json={"name": "Second"}, headers=headers)

        assert blocked.status_code == 403
        assert allowed.status_code == 200

    @pytest.mark.asyncio
    async def test_purchase_is_logged(self, async_client, auth_headers, make_user, session_factory):
        await make_user("buyer")
        await async_client.post(
            "/api/subscriptions",
            json={"tier": "single", "currency": "INR"},
            headers=auth_headers("buyer"),
        )

        async with session_factory() as s:
            log = (await s.execute(select(ActivityLog))).scalar_one()
        assert log.action == "subscription_created"
        assert log.details == {"tier": "single", "currency": "INR"}


class TestMySubscription:

    @pytest.mark.asyncio
    async def test_none_before_purchase(self, async_client, auth_headers, make_user):
        await make_user("buyer")
        resp = await async_client.get("/api/subscriptions/me", headers=auth_headers("buyer"))
        assert resp.status_code == 200
        assert resp.json() is None

    @pytest.mark.asyncio
    async def test_newest_active_wins(self, async_client, auth_headers, make_user):
        await make_user("buyer")
        headers = auth_headers("buyer")
        await async_client.post(
            "/api/subscriptions", json={"tier": "single", "currency": "INR"}, headers=headers
        )
        await async_client.post(
            "/api/subscriptions", json={"tier": "unlimited", "currency": "INR"}, headers=headers
        )

        resp = await async_client.get("/api/subscriptions/me", headers=headers)

        assert resp.json()["tier"] == "unlimited"


class TestCancelSubscription:

    @pytest.mark.asyncio
    async def test_cancel_resets_caller(self, async_client, auth_headers, make_user, session_factory):
        user = await make_user("buyer")
        headers = auth_headers("buyer")
        created = await async_client.post(
            "/api/subscriptions", json={"tier": "multiple", "currency": "INR"}, headers=headers
        )
        subscription_id = created.json()["id"]

        resp = await async_client.post(f"/api/subscriptions/{subscription_id}/cancel", headers=headers)

        assert resp.json() == {"success": True}
        async with session_factory() as s:
            subscription = await s.get(SubscriptionModel, subscription_id)
            refreshed = await s.get(User, user.id)
        assert subscription.status == "cancelled"
        assert refreshed.subscription_tier == "free"
        assert refreshed.app_limit == 1

        me = await async_client.get("/api/subscriptions/me", headers=headers)
        assert me.json() is None

    @pytest.mark.asyncio
    async def test_cancel_unknown_id_still_downgrades_caller(
        self, async_client, auth_headers, make_user, session_factory
    ):
        user = await make_user("buyer", tier=SubscriptionTier.MULTIPLE, app_limit=15)

        resp = await async_client.post("/api/subscriptions/999/cancel", headers=auth_headers("buyer"))

        assert resp.status_code == 200
        async with session_factory() as s:
            refreshed = await s.get(User, user.id)
        assert refreshed.subscription_tier == "free"
        assert refreshed.app_limit == 1

    @pytest.mark.asyncio
    async def test_cancel_other_users_subscription_downgrades_caller_only(
        self, async_client, auth_headers, make_user, session_factory
    ):
        owner = await make_user("owner")
        caller = await make_user("caller", tier=SubscriptionTier.SINGLE)
        created = await async_client.post(
            "/api/subscriptions",
            json={"tier": "unlimited", "currency": "INR"},
            headers=auth_headers("owner"),
        )

        await async_client.post(
            f"/api/subscriptions/{created.json()['id']}/cancel", headers=auth_headers("caller")
        )

        async with session_factory() as s:
            refreshed_owner = await s.get(User, owner.id)
            refreshed_caller = await s.get(User, caller.id)
            subscription = await s.get(SubscriptionModel, created.json()["id"])
        assert subscription.status == "cancelled"
        assert refreshed_owner.subscription_tier == "unlimited"
        assert refreshed_caller.subscription_tier == "free"


class TestPricing:

    @pytest.mark.asyncio
    async def test_builtin_catalog_when_none_stored(self, async_client):
        resp = await async_client.get("/api/subscriptions/pricing")

        plans = resp.json()
        assert resp.status_code == 200
        assert [p["tier"] for p in plans] == ["free", "single", "multiple", "unlimited"]
        assert [p["price_inr"] for p in plans] == [0, 3999, 24999, 34999]
        assert plans[2]["is_popular"] is True

    @pytest.mark.asyncio
    async def test_stored_plans_cheapest_first(self, async_client, session_factory):
        async with session_factory() as s:
            s.add(PricingPlan(tier="unlimited", name_en="All", price_inr=50000, price_usd=500, app_limit=9999))
            s.add(PricingPlan(tier="single", name_en="One", price_inr=1000, price_usd=10, app_limit=1))
            s.add(PricingPlan(
                tier="multiple", name_en="Hidden", price_inr=2000, price_usd=20,
                app_limit=15, is_active=False,
            ))
            await s.commit()

        resp = await async_client.get("/api/subscriptions/pricing")

        plans = resp.json()
        assert [p["name_en"] for p in plans] == ["One", "All"]
        assert plans[0]["features"] == []
