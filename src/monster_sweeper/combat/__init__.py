from .resolver import CombatOutcome, CombatResolver, CombatResult, win_chance

__all__ = ["CombatOutcome", "CombatResolver", "CombatResult", "win_chance"]
