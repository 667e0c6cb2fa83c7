"""Recipe selection under variety rules.

Protein exclusion is a hard rule; tag matching is a soft preference that is
dropped when nothing in the catalog satisfies it.
"""
import logging
import random
from typing import Iterable, List, Optional

from mealplan.domain.Recipe import Recipe

logger = logging.getLogger(__name__)


def select_recipe(recipes: List[Recipe], required_tags: Iterable[str] = (),
                  excluded_proteins: Iterable[str] = (), preferred_protein: Optional[str] = None,
                  rng=None) -> Optional[Recipe]:
    """Pick one recipe at random.

    Args:
        recipes: catalog to choose from.
        required_tags: recipe must carry at least one of these (OR), if any are given.
        excluded_proteins: protein categories that may not be chosen.
        preferred_protein: if any remaining candidate has it, choose among those only.
        rng: object with a ``choice`` method; defaults to the ``random`` module.

    Returns:
        The chosen recipe, or None when the protein exclusion leaves nothing.
    """
    rng = rng or random
    tags = list(required_tags)
    excluded = set(excluded_proteins)

    allowed = [r for r in recipes if r.protein not in excluded]
    candidates = [r for r in allowed if r.has_any_tag(tags)] if tags else allowed

    # Relax the tag requirement, never the protein exclusion
    if not candidates and tags:
        logger.debug(f"No recipe tagged {tags}; falling back to any allowed protein")
        candidates = allowed

    if not candidates:
        return None

    if preferred_protein:
        preferred = [r for r in candidates if r.protein == preferred_protein]
        if preferred:
            return rng.choice(preferred)

    return rng.choice(candidates)


def filter_by_protein(recipes: List[Recipe], protein: Optional[str] = None) -> List[Recipe]:
    """Catalog browsing filter; 'all' or empty returns every recipe."""
    if not protein or protein == 'all':
        return list(recipes)
    return [r for r in recipes if r.protein == protein]


__all__ = ['select_recipe', 'filter_by_protein']
