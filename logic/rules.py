"""
Game rules text, shown by `main.py --rules` and in the UI.
"""

from typing import List, Tuple

# (title, description)
RULES: List[Tuple[str, str]] = [
    ("WIN", "Get 3 marks in a row, Player wins. Game ends."),
    ("DEFEAT", "Opponent gets 3 in a row, Player loses, game ends."),
    ("DRAW", "Board full, no 3 in a row, No winner, game ends."),
]

VANISH_RULE = (
    "VANISH",
    "Each player keeps at most 3 marks. Placing a 4th removes your oldest mark.",
)


def rules_for(variant_name: str) -> List[Tuple[str, str]]:
    """Rules that apply to a variant ("classic" or "vanish")."""
    if variant_name == "vanish":
        return RULES + [VANISH_RULE]
    return list(RULES)


def format_rules(variant_name: str) -> str:
    lines = [f"{title}: {description}" for title, description in rules_for(variant_name)]
    return "\n".join(lines)
