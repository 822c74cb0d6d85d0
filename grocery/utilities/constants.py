from typing import Final

DEFAULT_MULTIPLIER: Final[float] = 1.0
OTHER_CATEGORY: Final[str] = "Other"

# Shopping time estimate: MINUTES_PER_BATCH for every started batch of ITEMS_PER_BATCH
ITEMS_PER_BATCH: Final[int] = 10
MINUTES_PER_BATCH: Final[int] = 5

# Tip thresholds (strictly greater than)
PRODUCE_TIP_THRESHOLD: Final[int] = 5
MEAT_TIP_THRESHOLD: Final[int] = 0
DAIRY_TIP_THRESHOLD: Final[int] = 3

PRODUCE_TIP: Final[str] = "You have many fresh produce items. Shop for these last to keep them fresh."
MEAT_TIP: Final[str] = "Don't forget to bring a cooler bag for meat and seafood items."
DAIRY_TIP: Final[str] = "Check expiration dates on dairy products before purchasing."
GENERAL_TIPS: Final[tuple[str, ...]] = (
    "Organize your list by store layout to save time.",
    "Check your pantry before shopping to avoid duplicate purchases.",
)

# Standing list defaults
DEFAULT_ITEM_AMOUNT: Final[str] = "1"

# Error codes returned by the HTTP layer
ERR_MISSING_RECIPE_IDS: Final[str] = "MISSING_RECIPE_IDS"
ERR_INVALID_INPUT: Final[str] = "INVALID_INPUT"
ERR_RECIPES_NOT_FOUND: Final[str] = "RECIPES_NOT_FOUND"
ERR_MISSING_ITEM_NAME: Final[str] = "MISSING_ITEM_NAME"
ERR_ITEM_NOT_FOUND: Final[str] = "ITEM_NOT_FOUND"
