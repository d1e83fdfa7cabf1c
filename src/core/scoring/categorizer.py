"""Impact categorization - did the player's performance deserve the outcome?"""

from src.contracts.impact import GameResult, ImpactCategory


def categorize(
    outcome: GameResult | str, your_impact: float, team_impact: float
) -> ImpactCategory:
    """Map (outcome, your impact vs team impact) onto the 2x2 verdict table.

    "Higher" is strict: a tie counts as not higher, so Victory+tie is a
    guaranteed win and Defeat+tie an impact loss.
    """
    victory = GameResult(outcome) == GameResult.VICTORY
    higher = your_impact > team_impact

    if victory and higher:
        return ImpactCategory.IMPACT_WINS
    if not victory and not higher:
        return ImpactCategory.IMPACT_LOSSES
    if victory:
        return ImpactCategory.GUARANTEED_WINS
    return ImpactCategory.GUARANTEED_LOSSES
