"""Exceptions raised by the game layer.

Recoverable problems (illegal moves, empty selections, input after the
game has ended) are reported through outcomes and status messages.  Only
inconsistencies between the rules authority and the turn controller are
raised.
"""


class InternalInvariantError(RuntimeError):
    """The game layer reached a state that should be impossible."""
