"""Goal operations beyond plain CRUD."""
from typing import Optional
from fintrack.models.goal import Goal
from fintrack.storage.base import LedgerStore
from fintrack.utils.money import add_amounts


def fund_goal(store: LedgerStore, goal_id: str, amount: str) -> Optional[Goal]:
    """
    Add ``amount`` to a goal's current savings.

    Read-modify-write without locking: two concurrent fundings of the same
    goal can lose an update.

    Returns:
        The updated goal, or None if it does not exist
    """
    goal = store.get_goal(goal_id)
    if not goal:
        return None
    return store.update_goal(goal_id, {"current": add_amounts(goal.current, amount)})
