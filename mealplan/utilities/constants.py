from typing import Final

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
WEEKDAYS: Final[tuple[str, ...]] = DAYS[:5]
WEEKEND: Final[frozenset[str]] = frozenset({"Saturday", "Sunday"})

PROTEINS: Final[tuple[str, ...]] = ("chicken", "beef", "pork", "lamb", "fish", "other")
PREFERRED_FIRST_DINNER_PROTEIN: Final[str] = "fish"

LUNCH_TAGS: Final[tuple[str, ...]] = ("batch-cooking", "freezer-friendly")
FAMILY_DINNER_TAGS: Final[tuple[str, ...]] = ("sunday-special", "family-favorite")
WEEKNIGHT_DINNER_TAGS: Final[tuple[str, ...]] = ("batch-cooking", "weeknight")

MEAL_TYPES: Final[tuple[str, ...]] = ("lunch", "dinner")

# Fallback yield when a recipe's servings text has no number in it
DEFAULT_BASE_SERVINGS: Final[int] = 4

# Portion weight of one child when editing batch days
CHILD_PORTION: Final[float] = 0.5

# Storage keys
PLAN_KEY: Final[str] = "mealPlan"
PLAN_DATE_KEY: Final[str] = "mealPlanDate"
CONFIG_KEY: Final[str] = "mealPlanConfig"

# Supermarket sections, tested in declaration order (first keyword hit wins)
SHOPPING_CATEGORIES: Final[dict[str, tuple[str, ...]]] = {
    "Meat & Fish": (
        "chicken", "beef", "pork", "lamb", "fish", "salmon", "cod", "haddock", "tuna",
        "prawns", "mince", "sausage", "chop", "thigh", "breast", "fillet",
    ),
    "Fresh Produce": (
        "onion", "garlic", "carrot", "potato", "tomato", "pepper", "lettuce", "broccoli",
        "celery", "apple", "lemon", "vegetable", "salad", "herbs", "parsley", "dill",
    ),
    "Dairy & Eggs": (
        "milk", "butter", "cheese", "egg", "cream", "crème fraîche", "sour cream", "yogurt",
    ),
    "Pantry": (
        "pasta", "rice", "flour", "oil", "stock", "sauce", "seasoning", "herbs", "spices",
        "salt", "pepper", "vinegar", "honey", "chutney", "ketchup", "breadcrumbs", "tin",
        "tomato purée", "beans", "chickpeas", "coconut milk", "soy sauce", "worcestershire",
    ),
    "Bakery": ("bread", "tortilla", "naan", "taco shells"),
    "Frozen": ("frozen", "peas", "sweetcorn", "stir-fry"),
    "Other": (),
}
FALLBACK_CATEGORY: Final[str] = "Other"

# Order used when printing a shopping list (common aisles first)
CATEGORY_DISPLAY_ORDER: Final[tuple[str, ...]] = (
    "Fresh Produce", "Meat & Fish", "Dairy & Eggs", "Bakery", "Pantry", "Frozen", "Other"
)
