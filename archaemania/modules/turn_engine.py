"""Turn sequencing for a two-player match.

Each turn expires the active player's stale effects, resolves exactly one
action, then advances the clock and hands the turn to the other player.
Action failures (``ActionError``) are reported in the outcome and still use
up the turn; they never escape ``take_turn``.
"""

from __future__ import annotations

import random

from archaemania.constants import (
    ACTION_ATTACK,
    ACTION_BUY,
    ACTION_KINDS,
    ACTION_TRAIN,
    ACTION_USE,
    ACTION_WORK,
    TURN_ADVANCE_ACTION,
    TURN_ADVANCE_MODES,
)
from archaemania.models import ActionError, GameState, TurnAction, TurnOutcome
from archaemania.modules.combat_engine import attack
from archaemania.modules.consumable_engine import expire_effects, use_item
from archaemania.modules.shop import buy
from archaemania.modules.training_engine import train
from archaemania.modules.work_engine import work

_TARGETED_ACTIONS = {ACTION_BUY, ACTION_USE, ACTION_TRAIN}


def _validate_action(action: TurnAction) -> None:
    if action.kind not in ACTION_KINDS:
        raise ValueError(f"Unknown action: {action.kind}")
    if action.kind in _TARGETED_ACTIONS and not action.target:
        raise ValueError(f"Action '{action.kind}' needs a target.")


def begin_turn(state: GameState) -> list[str]:
    """Expire the active player's due effects; safe to call more than once."""
    return expire_effects(state.active_player)


def advance_clock(state: GameState) -> None:
    """Pass the turn to the other player and bump both turn counters.

    In ``action`` mode counters move after every action; in ``round`` mode
    only after the second player has acted.
    """
    if state.turn_advance not in TURN_ADVANCE_MODES:
        raise ValueError(f"Unknown turn advance mode: {state.turn_advance}")
    finished_round = state.active_index == len(state.players) - 1
    if state.turn_advance == TURN_ADVANCE_ACTION or finished_round:
        for player in state.players:
            player.turn += 1
    state.active_index = 1 - state.active_index


def take_turn(
    state: GameState,
    action: TurnAction,
    *,
    rng: random.Random | None = None,
) -> TurnOutcome:
    """Resolve one action for the active player and return the outcome."""
    if state.is_over:
        raise ValueError("Game is already over.")
    _validate_action(action)

    randomizer = rng or random.Random()
    actor = state.active_player
    opponent = state.waiting_player
    outcome = TurnOutcome(player=actor.name, action=action, turn=actor.turn)
    outcome.messages.extend(begin_turn(state))

    try:
        if action.kind == ACTION_ATTACK:
            details = attack(actor, opponent, rng=randomizer)
            if details["defeated"]:
                state.winner = actor.name
        elif action.kind == ACTION_BUY:
            details = buy(actor, str(action.target))
        elif action.kind == ACTION_WORK:
            details = work(actor, rng=randomizer)
        elif action.kind == ACTION_USE:
            details = use_item(actor, str(action.target))
        elif action.kind == ACTION_TRAIN:
            details = train(actor, str(action.target))
        else:  # exit
            state.exited_by = actor.name
            state.winner = opponent.name
            details = {
                "messages": [
                    f"{actor.name} has exited the game",
                    f"{opponent.name} has won the game!",
                ]
            }
        outcome.messages.extend(details["messages"])
    except ActionError as exc:
        outcome.succeeded = False
        outcome.messages.append(str(exc))

    state.log.extend(outcome.messages)
    if state.is_over:
        outcome.game_over = True
        return outcome

    advance_clock(state)
    return outcome
