"""Shared fixtures."""

import pytest

from tests.helpers import build_store


LADY_IN_THE_WATER = 0
SNAKES_ON_A_PLANE = 1
JUST_MY_LUCK = 2
SUPERMAN_RETURNS = 3
YOU_ME_AND_DUPREE = 4
THE_NIGHT_LISTENER = 5

CRITICS = [
    # Lisa Rose
    [(LADY_IN_THE_WATER, 2.5), (SNAKES_ON_A_PLANE, 3.5), (JUST_MY_LUCK, 3.0),
     (SUPERMAN_RETURNS, 3.5), (YOU_ME_AND_DUPREE, 2.5), (THE_NIGHT_LISTENER, 3.0)],
    # Gene Seymour
    [(LADY_IN_THE_WATER, 3.0), (SNAKES_ON_A_PLANE, 3.5), (JUST_MY_LUCK, 1.5),
     (SUPERMAN_RETURNS, 5.0), (YOU_ME_AND_DUPREE, 3.5), (THE_NIGHT_LISTENER, 3.0)],
    # Michael Phillips
    [(LADY_IN_THE_WATER, 2.5), (SNAKES_ON_A_PLANE, 3.0), (SUPERMAN_RETURNS, 3.5),
     (THE_NIGHT_LISTENER, 4.0)],
    # Claudia Puig
    [(SNAKES_ON_A_PLANE, 3.5), (JUST_MY_LUCK, 3.0), (SUPERMAN_RETURNS, 4.0),
     (YOU_ME_AND_DUPREE, 2.5), (THE_NIGHT_LISTENER, 4.5)],
    # Mick LaSalle
    [(LADY_IN_THE_WATER, 3.0), (SNAKES_ON_A_PLANE, 4.0), (JUST_MY_LUCK, 2.0),
     (SUPERMAN_RETURNS, 3.0), (YOU_ME_AND_DUPREE, 2.0), (THE_NIGHT_LISTENER, 3.0)],
    # Jack Matthews
    [(LADY_IN_THE_WATER, 3.0), (SNAKES_ON_A_PLANE, 4.0), (SUPERMAN_RETURNS, 5.0),
     (YOU_ME_AND_DUPREE, 3.5), (THE_NIGHT_LISTENER, 3.0)],
    # Toby
    [(SNAKES_ON_A_PLANE, 4.5), (SUPERMAN_RETURNS, 4.0), (YOU_ME_AND_DUPREE, 1.0)],
    # Unknown listener
    [(THE_NIGHT_LISTENER, 4.5)],
]


@pytest.fixture
def critics():
    """Movie ratings of eight critics over six films."""
    return build_store(CRITICS, column_count_hint=6)


@pytest.fixture
def opposed():
    """Four rising profiles followed by four falling ones."""
    rising = [[1.0, 2.0, 3.0, 4.0], [2.0, 4.0, 6.0, 8.0], [0.5, 1.0, 1.5, 2.0], [3.0, 4.0, 5.0, 6.0]]
    falling = [[5.0 - v for v in r] for r in rising]
    return build_store([list(enumerate(r)) for r in rising + falling])
