"""Multi-week plan generation."""
import logging
from datetime import datetime, timedelta
from typing import List, Optional

from mealplan.domain.Plan import Plan
from mealplan.domain.Recipe import Recipe
from mealplan.logic.planning.week_planner import plan_week
from mealplan.utilities.validators import PlannerConfig

logger = logging.getLogger(__name__)


def next_generation_timestamp(previous: Optional[str] = None) -> str:
    """ISO timestamp strictly later than previous; an unreadable previous is ignored."""
    now = datetime.now()
    if previous:
        try:
            last = datetime.fromisoformat(previous)
        except ValueError:
            logger.debug(f"Ignoring unreadable previous timestamp '{previous}'")
        else:
            if now <= last:
                now = last + timedelta(microseconds=1)
    return now.isoformat(timespec='microseconds')


def generate_plan(recipes: List[Recipe], config: PlannerConfig, rng=None,
                  previous_generated_at: Optional[str] = None) -> Plan:
    """Run the week planner for weeks 1..number_of_weeks.

    Weeks share no state, so the same recipes may come up in several weeks.
    The plan's generated_at is later than previous_generated_at when given.
    """
    week_count = max(1, config.number_of_weeks)
    weeks = [plan_week(recipes, n, config, rng=rng) for n in range(1, week_count + 1)]
    plan = Plan(weeks, config=config.model_dump(),
                generated_at=next_generation_timestamp(previous_generated_at))
    logger.info(f"Generated {week_count}-week plan from {len(recipes)} recipes")
    return plan


__all__ = ['generate_plan', 'next_generation_timestamp']
