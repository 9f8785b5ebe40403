from .resolver import AttackOutcome, attack, attack_by_id, compute_damage, take_damage

__all__ = ["AttackOutcome", "attack", "attack_by_id", "compute_damage", "take_damage"]
