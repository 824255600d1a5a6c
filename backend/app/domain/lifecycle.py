"""
Project Lifecycle & Build State Machine

Slug generation, build priority and the field updates applied on each
build transition. Services apply these updates to the project and its
build queue entry; nothing here touches storage.

Transitions:
    queued -> processing -> completed    (process next)
    <any>  -> completed                  (simulate build)

``failed`` is part of the schema but no transition produces it.
"""

import re
import secrets
import string
from datetime import datetime
from typing import Any, Dict

from app.domain.models import BuildStatus, ProjectStatus
from app.domain.subscription import SubscriptionTier


SLUG_SUFFIX_LENGTH = 8
SLUG_SUFFIX_ALPHABET = string.ascii_letters + string.digits + "_-"
PACKAGE_PREFIX = "com.clickngoai"

BUILD_START_PROGRESS = 10
BUILD_DONE_PROGRESS = 100

STEP_INITIALIZING = "Initializing build environment"
STEP_COMPLETED = "Build completed"

TIER_PRIORITY = {
    SubscriptionTier.UNLIMITED.value: 10,
    SubscriptionTier.MULTIPLE.value: 5,
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Kebab-case a name: lowercase, collapse non-alphanumeric runs, trim."""
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


def random_suffix(length: int = SLUG_SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(SLUG_SUFFIX_ALPHABET) for _ in range(length))


def generate_slug(name: str) -> str:
    """
    Build a URL slug from ``name`` plus a random suffix.

    Collisions are not re-checked.
    """
    base = slugify(name) or "app"
    return f"{base}-{random_suffix()}"


def package_name_for(slug: str) -> str:
    return f"{PACKAGE_PREFIX}.{slug.replace('-', '_')}"


def build_priority(tier: str) -> int:
    """Queue priority granted by a subscription tier."""
    return TIER_PRIORITY.get(tier, 0)


# =============================================================================
# Transition updates
# =============================================================================

def entry_processing(now: datetime) -> Dict[str, Any]:
    return {
        "status": BuildStatus.PROCESSING.value,
        "started_at": now,
        "current_step": STEP_INITIALIZING,
    }


def entry_completed(now: datetime) -> Dict[str, Any]:
    return {
        "status": BuildStatus.COMPLETED.value,
        "progress": BUILD_DONE_PROGRESS,
        "current_step": STEP_COMPLETED,
        "completed_at": now,
    }


def project_building() -> Dict[str, Any]:
    return {
        "status": ProjectStatus.BUILDING.value,
        "build_progress": BUILD_START_PROGRESS,
    }


def download_urls(project_id: int, slug: str, include_web: bool) -> Dict[str, str]:
    """Placeholder artifact URLs for a finished build."""
    urls = {
        "apk_url": f"/api/downloads/{project_id}/app.apk",
        "ipa_url": f"/api/downloads/{project_id}/app.ipa",
        "pwa_url": f"/landing/app/{slug}",
    }
    if include_web:
        urls["web_url"] = f"/landing/app/{slug}"
    return urls


def project_completed(
    project_id: int,
    slug: str,
    now: datetime,
    include_web: bool = False,
) -> Dict[str, Any]:
    return {
        "status": ProjectStatus.COMPLETED.value,
        "build_progress": BUILD_DONE_PROGRESS,
        "completed_at": now,
        **download_urls(project_id, slug, include_web),
    }
