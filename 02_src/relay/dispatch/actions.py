"""Action table mapping dialog action tags to side effects."""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ..lookup import QueryParams


class ActionKind(str, Enum):
    """What the dispatcher does for a resolved action tag."""

    LOOKUP = "lookup"
    SHOW_BALANCE = "show_balance"
    END_CONVERSATION = "end_conversation"


@dataclass(frozen=True)
class ActionSpec:
    """Declarative entry of the action table."""

    kind: ActionKind
    query: QueryParams = ()


CURRENT_ACCOUNT = ("filter[where][type][regexp]", "/Current Account/i")
SINGLE_RESULT = ("filter[limit]", "1")

DEFAULT_ACTIONS: dict[str, ActionSpec] = {
    "mobile_insurance": ActionSpec(
        ActionKind.LOOKUP,
        (CURRENT_ACCOUNT, ("filter[where][mobile_insurance]", "true"), SINGLE_RESULT),
    ),
    "interest": ActionSpec(
        ActionKind.LOOKUP,
        (CURRENT_ACCOUNT, ("filter[where][interest rate][gt]", "1"), SINGLE_RESULT),
    ),
    "cashback": ActionSpec(
        ActionKind.LOOKUP,
        (CURRENT_ACCOUNT, ("filter[where][cashback]", "true"), SINGLE_RESULT),
    ),
    "check_balance": ActionSpec(ActionKind.SHOW_BALANCE),
    "end_conversation": ActionSpec(ActionKind.END_CONVERSATION),
}


class ActionTable:
    """Resolves action tags; unknown tags resolve to None."""

    def __init__(self, actions: Mapping[str, ActionSpec] | None = None):
        self._actions = dict(DEFAULT_ACTIONS if actions is None else actions)

    def resolve(self, tag: str | None) -> ActionSpec | None:
        if not tag:
            return None
        return self._actions.get(tag)

    def register(self, tag: str, action: ActionSpec) -> None:
        self._actions[tag] = action

    def __contains__(self, tag: str) -> bool:
        return tag in self._actions
