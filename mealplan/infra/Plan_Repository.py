"""Plan persistence in local key-value storage.

Stored plans come in two shapes. The batch format has per-week 'lunches' and
'dinners' lists; the older day-by-day format has a 'days' list per week with
leftover meals. The shape is classified once, here, and only batch plans get
past the load boundary.
"""
import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from mealplan.domain.Plan import Plan
from mealplan.infra.Local_Storage import LocalStorage
from mealplan.utilities.constants import PLAN_KEY, PLAN_DATE_KEY

logger = logging.getLogger(__name__)


class PlanFormat(Enum):
    BATCH = "batch"
    LEGACY_DAILY = "legacy_daily"
    INVALID = "invalid"


def classify_plan_payload(data: Any) -> PlanFormat:
    if not isinstance(data, dict):
        return PlanFormat.INVALID
    weeks = data.get("weeks")
    if not isinstance(weeks, list) or not weeks or not isinstance(weeks[0], dict):
        return PlanFormat.INVALID
    first = weeks[0]
    if isinstance(first.get("lunches"), list) and isinstance(first.get("dinners"), list):
        return PlanFormat.BATCH
    if isinstance(first.get("days"), list):
        return PlanFormat.LEGACY_DAILY
    return PlanFormat.INVALID


def migrate_plan_payload(data: Any) -> Optional[Plan]:
    """Turn a stored payload into a Plan, or None if it cannot be used.

    Day-by-day plans reference leftovers rather than batches and carry no
    portion information, so they are rejected rather than converted.
    """
    fmt = classify_plan_payload(data)
    if fmt is PlanFormat.LEGACY_DAILY:
        logger.info("Old day-by-day meal plan format detected, discarding")
        return None
    if fmt is PlanFormat.INVALID:
        logger.info("Invalid meal plan structure, discarding")
        return None
    try:
        return Plan.from_dict(data)
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        logger.warning(f"Saved meal plan could not be read, discarding: {e}")
        return None


class PlanRepository:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load_plan(self) -> Optional[Plan]:
        raw = self.storage.get_item(PLAN_KEY)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning(f"Saved meal plan is not valid JSON, discarding: {e}")
            self.clear()
            return None
        plan = migrate_plan_payload(data)
        if plan is None:
            self.clear()
        else:
            logger.info(f"Loaded saved meal plan ({len(plan.weeks)} weeks)")
        return plan

    def save_plan(self, plan: Plan) -> None:
        self.storage.set_item(PLAN_KEY, json.dumps(plan.to_dict(), ensure_ascii=False))
        self.storage.set_item(PLAN_DATE_KEY, datetime.now().isoformat())

    def saved_at(self) -> Optional[str]:
        return self.storage.get_item(PLAN_DATE_KEY)

    def clear(self) -> None:
        self.storage.remove_item(PLAN_KEY)
        self.storage.remove_item(PLAN_DATE_KEY)


__all__ = ['PlanFormat', 'classify_plan_payload', 'migrate_plan_payload', 'PlanRepository']
