"""Exceptions raised by the planner core and surfaced to the front end."""


class CatalogLoadError(RuntimeError):
    """The recipe catalog could not be read or validated."""


class PlanGenerationError(RuntimeError):
    """Unexpected failure while generating a plan; the previous plan is kept."""


class PlanEditError(ValueError):
    """A batch edit referenced a week, meal type or item that does not exist."""


__all__ = ['CatalogLoadError', 'PlanGenerationError', 'PlanEditError']
