import json
import logging
from typing import Iterable, List, Tuple
from grocery.domain.Recipe import RecipeRef
from grocery.infra import paths

logger = logging.getLogger(__name__)


def reading_from_recipes() -> List[RecipeRef]:
    """Read recipes from JSON file with proper error handling."""
    try:
        with open(paths.RECIPES_FILE, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
        if not isinstance(recipes_data, list):
            logger.warning("Recipes file does not hold a list; ignoring it")
            return []
        recipes = [RecipeRef.from_dict(entry) for entry in recipes_data]
        return recipes
    except FileNotFoundError:
        logger.warning("Recipes file not found: %s. Returning empty list.", paths.RECIPES_FILE)
        return []
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in recipes file: %s", e)
        return []


def find_recipes(recipe_ids: Iterable[str]) -> Tuple[List[RecipeRef], List[str]]:
    """Resolve recipe ids in request order.

    Returns (found, missing_ids). Duplicate ids are resolved once.
    """
    index = {r.id: r for r in reading_from_recipes()}
    found: List[RecipeRef] = []
    missing: List[str] = []
    seen = set()
    for raw_id in recipe_ids:
        rid = str(raw_id)
        if rid in seen:
            continue
        seen.add(rid)
        recipe = index.get(rid)
        if recipe is None:
            missing.append(rid)
        else:
            found.append(recipe)
    return found, missing
