# Betting board template (index, label, payout, is_special), top to bottom
SLOT_DEFINITIONS = [
    (0, "Lower than all guesses (pays 6 to 1)", 6, True),
    (1, "Pays 5 to 1", 5, False),
    (2, "Pays 4 to 1", 4, False),
    (3, "Pays 3 to 1", 3, False),
    (4, "Pays 2 to 1", 2, False),
    (5, "Pays 3 to 1", 3, False),
    (6, "Pays 4 to 1", 4, False),
    (7, "Pays 5 to 1", 5, False),
]

SPECIAL_SLOT_INDEX = 0
MIDDLE_SLOT_INDEX = 4
LOWEST_ANSWER_SLOT_INDEX = 1
HIGHEST_ANSWER_SLOT_INDEX = 7

# Scoring rules
ANSWER_BONUS_POINTS = 3
MAX_BETS_PER_PLAYER = 2

# Game settings
MIN_PLAYERS = 2
DEFAULT_ROUNDS_TO_PLAY = 7
