"""
Combo suggestions shown after a successful purchase
"""

from typing import List

from .inventory import Category

COMBO_SUGGESTIONS = {
    Category.DRINK: "How about a snack or chocolate as well?",
    Category.SNACK: "Snacks go well with a drink!",
    Category.CHOCOLATE: "Chocolate and drink would make a great combo!",
}

KEEP_BUYING = "You can keep buying while you have credit available."


def suggest(category: Category) -> List[str]:
    """Lines suggesting a complementary item for the given category"""
    return [COMBO_SUGGESTIONS[category], KEEP_BUYING]
