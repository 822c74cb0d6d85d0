from grocery.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIG_DATA_DIR.resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
GROCERY_LIST_FILE = DATA_DIR / 'grocery_list.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'GROCERY_LIST_FILE']
