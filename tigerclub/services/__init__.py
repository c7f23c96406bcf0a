from tigerclub.services.pricing_service import (
    calculate_player_cost, apply_group_discount, grand_total,
    KIDS_BASE_COST, ADULT_BASE_COST, JERSEY_COST, GROUP_DISCOUNT_RATE,
)
from tigerclub.services.prompt_service import (
    prompt_until_valid,
    read_player_count, read_name, read_registration_type, read_jersey_choice,
)
from tigerclub.services.display_service import (
    format_money, format_player_cost, format_summary,
    display_welcome_header, display_section, display_player_cost,
    display_summary, display_farewell, display_error,
)

__all__ = [
    # pricing engine
    "calculate_player_cost", "apply_group_discount", "grand_total",
    "KIDS_BASE_COST", "ADULT_BASE_COST", "JERSEY_COST", "GROUP_DISCOUNT_RATE",
    # prompts
    "prompt_until_valid",
    "read_player_count", "read_name", "read_registration_type", "read_jersey_choice",
    # display
    "format_money", "format_player_cost", "format_summary",
    "display_welcome_header", "display_section", "display_player_cost",
    "display_summary", "display_farewell", "display_error",
]
