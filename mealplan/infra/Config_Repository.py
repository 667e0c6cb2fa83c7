"""Household config persistence in local key-value storage."""
import json
import logging

from pydantic import ValidationError

from mealplan.infra.Local_Storage import LocalStorage
from mealplan.utilities.constants import CONFIG_KEY
from mealplan.utilities.validators import PlannerConfig

logger = logging.getLogger(__name__)


class ConfigRepository:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def load_config(self) -> PlannerConfig:
        """Saved config merged over the defaults; defaults if missing or corrupt."""
        raw = self.storage.get_item(CONFIG_KEY)
        if raw is None:
            return PlannerConfig()
        try:
            saved = json.loads(raw)
            if not isinstance(saved, dict):
                raise ValueError("config is not an object")
            config = PlannerConfig.model_validate(saved)
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Saved config discarded, using defaults: {e}")
            self.storage.remove_item(CONFIG_KEY)
            return PlannerConfig()
        logger.debug(f"Loaded config: {config.model_dump()}")
        return config

    def save_config(self, config: PlannerConfig) -> None:
        self.storage.set_item(CONFIG_KEY, json.dumps(config.model_dump()))


__all__ = ['ConfigRepository']
