"""
Game constants for the grid snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Unit offsets on (x, y); y grows downwards, row 0 is the top of the board
OFFSETS = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DEFAULT_HEADING = LEFT

# Turn outcomes returned by GridEngine.move()
CONTINUE = "continue"
WON = "won"
LOST = "lost"

# Engine states
PLAYING = "playing"
TERMINAL_STATES = {WON, LOST}

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"

# Board and counter limits (8-bit coordinates and food, 16-bit score)
MIN_BOARD_SIZE = 9
MAX_BOARD_SIZE = 255
MAX_FOOD_TARGET = 255
MAX_SCORE = 65535

# Food placement
MAX_PLACEMENT_ATTEMPTS = 256
DENSE_BOARD_RATIO = 0.5

# Rendering glyphs, two characters per logical cell
CELL_WIDTH = 2
BORDER_GLYPH = "▒"
BODY_GLYPH = "█"
FOOD_GLYPH = "●"
BLANK = " "
NEWLINE = "\n"

BORDER_CELL = BORDER_GLYPH * CELL_WIDTH
BODY_CELL = BODY_GLYPH * CELL_WIDTH
FOOD_CELL = FOOD_GLYPH + BLANK
EMPTY_CELL = BLANK * CELL_WIDTH
