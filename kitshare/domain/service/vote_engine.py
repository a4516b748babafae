"""Like/dislike state transitions.

A user may appear in at most one of a post's ``likes`` and ``dislikes``.
Voting the same way twice toggles the vote off; voting the other way moves
the user across.
"""

from typing import Iterable, NamedTuple

from kitshare.domain.value import UserId, VoteAction, VoteOutcome


class VoteResult(NamedTuple):
    """Vote sets after a transition, and what the transition did."""

    likes: tuple[UserId, ...]
    dislikes: tuple[UserId, ...]
    outcome: VoteOutcome


def apply_vote(
    likes: Iterable[UserId],
    dislikes: Iterable[UserId],
    user_id: UserId,
    action: VoteAction,
) -> VoteResult:
    """Compute the vote sets after ``user_id`` casts ``action``.

    Order of the other members is preserved and repeated ids are collapsed,
    so the result is always two disjoint ordered sets, even when the input
    listed the user on both sides.

    Args:
        likes: Current likers
        dislikes: Current dislikers
        user_id: Voting user
        action: Requested vote

    Returns:
        New likes, new dislikes, and whether the vote was added or removed
    """
    if action is VoteAction.LIKE:
        same, other = likes, dislikes
    else:
        same, other = dislikes, likes

    same_ids = list(dict.fromkeys(same))
    other_ids = [uid for uid in dict.fromkeys(other) if uid != user_id]

    if user_id in same_ids:
        same_ids.remove(user_id)
        outcome = VoteOutcome.REMOVED
    else:
        same_ids.append(user_id)
        outcome = VoteOutcome.ADDED

    if action is VoteAction.LIKE:
        return VoteResult(tuple(same_ids), tuple(other_ids), outcome)
    return VoteResult(tuple(other_ids), tuple(same_ids), outcome)


_MESSAGES = {
    (VoteAction.LIKE, VoteOutcome.ADDED): "Post liked",
    (VoteAction.LIKE, VoteOutcome.REMOVED): "Like removed",
    (VoteAction.DISLIKE, VoteOutcome.ADDED): "Post disliked",
    (VoteAction.DISLIKE, VoteOutcome.REMOVED): "Dislike removed",
}


def describe_vote(action: VoteAction, outcome: VoteOutcome) -> str:
    """Human-readable message for a vote transition."""
    return _MESSAGES[(action, outcome)]
