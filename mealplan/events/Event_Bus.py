"""Simple Event Bus / Observer implementation for plan changes.

Event names used so far:
  plan.generated -> payload {"plan": Plan}
  plan.updated -> payload {"plan": Plan, "week_number": int, "action": str}
  config.updated -> payload {"config": PlannerConfig}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_GENERATED = "plan.generated"
PLAN_UPDATED = "plan.updated"
CONFIG_UPDATED = "config.updated"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception as e:  # pragma: no cover
				logger.error(f"[EventBus] Error delivering {event_name} to {cb}: {e}")


__all__ = ['EventBus', 'PLAN_GENERATED', 'PLAN_UPDATED', 'CONFIG_UPDATED']
