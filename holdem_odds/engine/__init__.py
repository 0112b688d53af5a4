from .holdem_round import (
    Street,
    Act,
    RoundState,
    deal_round,
    visible_community,
    legal_actions,
    apply_action,
    advance_street,
    fold,
    is_terminal,
    street_probability,
    player_strength,
    showdown,
)

__all__ = [
    "Street",
    "Act",
    "RoundState",
    "deal_round",
    "visible_community",
    "legal_actions",
    "apply_action",
    "advance_street",
    "fold",
    "is_terminal",
    "street_probability",
    "player_strength",
    "showdown",
]
