"""Wedding-level budget allocation templates"""

from types import MappingProxyType
from typing import Dict, Tuple

from wedding_planner.domain.models import AllocationCheck, AllocationPlan, WeddingLevel, WeddingLevelId
from wedding_planner.domain.numeric import round_half_up

DEFAULT_CATEGORIES: Tuple[str, ...] = (
    "Venue",
    "Catering",
    "Bar",
    "Floral",
    "Rentals",
    "Planner Fee",
    "Entertainment",
    "Photography",
    "Misc",
)


# Percentages per level sum to 100. Breakpoints are inclusive lower bounds.
WEDDING_LEVELS: Tuple[WeddingLevel, ...] = (
    WeddingLevel(
        id=WeddingLevelId.DIY,
        display_name="DIY",
        budget_range_label="Up to $50k",
        min_budget=0,
        category_allocations=MappingProxyType({
            "Venue": 30,
            "Catering": 25,
            "Bar": 8,
            "Floral": 5,
            "Rentals": 5,
            "Planner Fee": 2,
            "Entertainment": 8,
            "Photography": 12,
            "Misc": 5,
        }),
    ),
    WeddingLevel(
        id=WeddingLevelId.LOVELY,
        display_name="Lovely",
        budget_range_label="$50k – $100k",
        min_budget=50_000,
        category_allocations=MappingProxyType({
            "Venue": 28,
            "Catering": 23,
            "Bar": 8,
            "Floral": 8,
            "Rentals": 5,
            "Planner Fee": 5,
            "Entertainment": 8,
            "Photography": 10,
            "Misc": 5,
        }),
    ),
    WeddingLevel(
        id=WeddingLevelId.LUXURY,
        display_name="Luxury",
        budget_range_label="$100k – $500k",
        min_budget=100_000,
        category_allocations=MappingProxyType({
            "Venue": 25,
            "Catering": 20,
            "Bar": 7,
            "Floral": 12,
            "Rentals": 6,
            "Planner Fee": 8,
            "Entertainment": 8,
            "Photography": 9,
            "Misc": 5,
        }),
    ),
    WeddingLevel(
        id=WeddingLevelId.SUPER_LUXURY,
        display_name="Super Luxury",
        budget_range_label="$500k – $1M",
        min_budget=500_000,
        category_allocations=MappingProxyType({
            "Venue": 22,
            "Catering": 18,
            "Bar": 7,
            "Floral": 15,
            "Rentals": 7,
            "Planner Fee": 10,
            "Entertainment": 8,
            "Photography": 8,
            "Misc": 5,
        }),
    ),
    WeddingLevel(
        id=WeddingLevelId.ULTRA_LUXURY,
        display_name="Ultra Luxury",
        budget_range_label="$1M+",
        min_budget=1_000_000,
        category_allocations=MappingProxyType({
            "Venue": 20,
            "Catering": 15,
            "Bar": 6,
            "Floral": 18,
            "Rentals": 8,
            "Planner Fee": 12,
            "Entertainment": 8,
            "Photography": 8,
            "Misc": 5,
        }),
    ),
)


def get_wedding_level_by_id(level_id: str | WeddingLevelId | None) -> WeddingLevel | None:
    """Look up a wedding level by id, None when unknown"""
    parsed = WeddingLevelId.parse(level_id)
    if parsed is None:
        return None
    return WEDDING_LEVELS[parsed.rank]


def get_wedding_level_for_budget(total_budget: float) -> WeddingLevel:
    """
    Suggest a wedding level for a total budget.

    Breakpoints ($50k, $100k, $500k, $1M) include their lower bound:
    49,999 -> DIY, 50,000 -> Lovely. Anything below $50k, including zero
    and negative budgets, is DIY.
    """
    for level in reversed(WEDDING_LEVELS):
        if total_budget >= level.min_budget:
            return level
    return WEDDING_LEVELS[0]


def calculate_allocations(level: WeddingLevel | None, total_budget: float) -> Dict[str, int]:
    """
    Convert a level's percentages into whole-dollar amounts per category.

    Every default category is present in the result; categories missing from
    the level's table get 0%. A missing level or a non-positive budget yields
    all-zero allocations rather than an error.
    """
    if level is None or total_budget <= 0:
        return {category: 0 for category in DEFAULT_CATEGORIES}

    return {
        category: round_half_up(level.category_allocations.get(category, 0) / 100 * total_budget)
        for category in DEFAULT_CATEGORIES
    }


def check_allocations(
    allocations: Dict[str, int],
    total_budget: float,
    tolerance_per_category: int = 1,
) -> AllocationCheck:
    """
    Measure rounding drift between allocated dollars and the budget.

    Each category can be off by up to one rounding unit, so the allowed drift
    scales with the number of categories.
    """
    expected = round_half_up(total_budget) if total_budget > 0 else 0
    allocated = sum(allocations.values())
    return AllocationCheck(
        allocated_total=allocated,
        expected_total=expected,
        drift=allocated - expected,
        tolerance=tolerance_per_category * len(allocations),
    )


def allocate_budget(
    level_id: str | WeddingLevelId | None,
    total_budget: float,
    tolerance_per_category: int = 1,
) -> AllocationPlan:
    """
    Main entry point: resolve a level and allocate the budget across categories.

    A None level id is inferred from the budget. An unknown id falls back to
    all-zero allocations and is reported through plan.unknown_level and
    plan.warnings instead of raising.
    """
    if level_id is None:
        level = get_wedding_level_for_budget(total_budget)
        requested = level.id.value
    else:
        level = get_wedding_level_by_id(level_id)
        requested = level_id.value if isinstance(level_id, WeddingLevelId) else str(level_id)

    allocations = calculate_allocations(level, total_budget)
    check = None
    if level is not None:
        check = check_allocations(allocations, total_budget, tolerance_per_category)

    return AllocationPlan(
        requested_level_id=requested,
        level=level,
        total_budget=total_budget,
        allocations=allocations,
        check=check,
    )
