from fastapi import APIRouter
from grocery.infra.Recipe_Repository import reading_from_recipes

router = APIRouter()


@router.get("/api/recipes")
def list_recipes():
    """Return stored recipes (id, name, servings, ingredient lines)."""
    recipes = reading_from_recipes()
    return {
        'count': len(recipes),
        'recipes': [r.to_dict() for r in recipes],
    }
