"""Storage-facing observers for plan and config events.

Subscribes to an EventBus for:
  - plan.generated / plan.updated -> save the whole plan
  - config.updated -> save the config

so the orchestrator never calls the repositories directly after a change.
"""
from __future__ import annotations
import logging
from typing import Any

from .Event_Bus import EventBus, PLAN_GENERATED, PLAN_UPDATED, CONFIG_UPDATED
from mealplan.infra.Config_Repository import ConfigRepository
from mealplan.infra.Plan_Repository import PlanRepository

logger = logging.getLogger(__name__)


class StorageObserver:
    def __init__(self, plan_repository: PlanRepository, config_repository: ConfigRepository):
        self.plan_repository = plan_repository
        self.config_repository = config_repository

    def save_plan(self, event_name: str, payload: Any):
        plan = payload.get('plan') if isinstance(payload, dict) else None
        if plan is None:
            return
        self.plan_repository.save_plan(plan)
        logger.debug(f"Plan saved after {event_name}")

    def save_config(self, event_name: str, payload: Any):
        config = payload.get('config') if isinstance(payload, dict) else None
        if config is None:
            return
        self.config_repository.save_config(config)
        logger.debug(f"Config saved after {event_name}")

    def start(self, bus: EventBus) -> "StorageObserver":
        """Idempotent: EventBus ignores repeated subscriptions of the same callback."""
        bus.subscribe(PLAN_GENERATED, self.save_plan)
        bus.subscribe(PLAN_UPDATED, self.save_plan)
        bus.subscribe(CONFIG_UPDATED, self.save_config)
        return self


__all__ = ['StorageObserver']
