import logging
from fastapi import APIRouter, HTTPException
from grocery.events.event_helpers import (
    publish_list_generated, publish_recipes_missing, publish_item_added
)
from grocery.infra.GroceryList_Repository import LOCK, load_grocery_list, save_grocery_list
from grocery.infra.Recipe_Repository import find_recipes
from grocery.logic.shopping.errors import PartialResultWarning
from grocery.logic.shopping.list_builder import generate_grocery_list
from grocery.utilities.constants import (
    ERR_MISSING_RECIPE_IDS, ERR_RECIPES_NOT_FOUND, ERR_MISSING_ITEM_NAME, ERR_ITEM_NOT_FOUND
)
from grocery.utilities.validators import GenerateGroceryListInput, GroceryItemInput, GroceryItemUpdate

router = APIRouter(prefix="/api/grocery-list")
logger = logging.getLogger(__name__)


def _not_found(item_id: str):
    return HTTPException(status_code=404, detail={
        'success': False,
        'message': 'Item not found in grocery list',
        'error': ERR_ITEM_NOT_FOUND,
        'itemId': item_id,
    })


# -------------------- Generated list --------------------
@router.post("/generate")
def generate(payload: GenerateGroceryListInput):
    """Aggregate the requested recipes into a categorized grocery list."""
    if not payload.recipeIds:
        raise HTTPException(status_code=400, detail={
            'message': 'Recipe IDs array is required and cannot be empty',
            'error': ERR_MISSING_RECIPE_IDS,
        })

    recipes, missing = find_recipes(payload.recipeIds)
    if not recipes:
        raise HTTPException(status_code=404, detail={
            'message': 'No recipes found for the provided IDs',
            'error': ERR_RECIPES_NOT_FOUND,
        })
    if missing:
        warning = PartialResultWarning(missing)
        logger.warning("%s", warning)
        publish_recipes_missing(warning.missing_ids, found=len(recipes))

    report = generate_grocery_list(recipes, payload.servingsMultiplier)
    publish_list_generated(report)
    body = {'message': 'Grocery list generated successfully'}
    body.update(report.to_dict())
    body['missingRecipeIds'] = missing
    return body


# -------------------- Standing list --------------------
@router.get("")
@router.get("/")
def get_grocery_list():
    grocery_list = load_grocery_list()
    return {
        'success': True,
        'groceryList': grocery_list.to_dict(),
        'itemCount': len(grocery_list),
    }


@router.post("/item", status_code=201)
def add_item(payload: GroceryItemInput):
    if not payload.name:
        raise HTTPException(status_code=400, detail={
            'success': False,
            'message': 'Item name is required',
            'error': ERR_MISSING_ITEM_NAME,
        })
    with LOCK:
        grocery_list = load_grocery_list()
        item = grocery_list.add_item(payload.name, payload.amount, payload.unit,
                                     payload.category, payload.checked)
        save_grocery_list(grocery_list)
    logger.info("Grocery item added: %s (%s)", item.name, item.category)
    publish_item_added(item)
    return {
        'success': True,
        'message': 'Item added to grocery list',
        'item': item.to_dict(),
        'groceryList': grocery_list.to_dict(),
    }


@router.put("/item/{item_id}")
def update_item(item_id: str, payload: GroceryItemUpdate):
    with LOCK:
        grocery_list = load_grocery_list()
        try:
            item = grocery_list.update_item(item_id, **payload.model_dump())
        except KeyError:
            raise _not_found(item_id)
        except ValueError as e:
            raise HTTPException(status_code=400, detail={
                'success': False, 'message': str(e), 'error': ERR_MISSING_ITEM_NAME,
            })
        save_grocery_list(grocery_list)
    return {
        'success': True,
        'message': 'Item updated successfully',
        'item': item.to_dict(),
        'groceryList': grocery_list.to_dict(),
    }


@router.delete("/checked")
def clear_checked():
    with LOCK:
        grocery_list = load_grocery_list()
        deleted = grocery_list.clear_checked()
        save_grocery_list(grocery_list)
    return {
        'success': True,
        'message': f'{deleted} checked item(s) removed',
        'groceryList': grocery_list.to_dict(),
        'deletedCount': deleted,
    }


@router.delete("/clear")
def clear():
    with LOCK:
        grocery_list = load_grocery_list()
        deleted = grocery_list.clear()
        save_grocery_list(grocery_list)
    return {
        'success': True,
        'message': 'Grocery list cleared',
        'deletedCount': deleted,
        'groceryList': [],
    }


@router.delete("/item/{item_id}")
def delete_item(item_id: str):
    with LOCK:
        grocery_list = load_grocery_list()
        try:
            grocery_list.delete_item(item_id)
        except KeyError:
            raise _not_found(item_id)
        save_grocery_list(grocery_list)
    return {
        'success': True,
        'message': 'Item deleted successfully',
        'groceryList': grocery_list.to_dict(),
    }
