#!/usr/bin/env python3
"""
Pac Go -- terminal maze chase using Python curses.
Eat every dot in the maze while the ghosts wander after you. Swallow a
power pill and the ghosts turn blue for a while: run into one and it's gone.
Features:
- Arrow keys to move, Esc to quit
- Wrap-around tunnels at the maze edges
- Ghosts that wander at random, one step per tick
- Power pills on a restartable timer (a second pill resets the clock)
- Maze loaded from a text file, glyphs from a JSON config (ASCII or emoji)
"""

import argparse
import curses
import json
import logging
import os
import queue
import random
import sys
import threading
import time

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Maze cells
WALL = "#"
DOT = "."
POWER_PILL = "X"
PLAYER_START = "P"
GHOST_START = "G"
EMPTY = " "
MAZE_ALPHABET = {WALL, DOT, POWER_PILL, PLAYER_START, GHOST_START, EMPTY}

# Directions and their (drow, dcol) deltas
UP = "UP"
DOWN = "DOWN"
RIGHT = "RIGHT"
LEFT = "LEFT"
DIRECTIONS = (UP, DOWN, RIGHT, LEFT)
DELTAS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    RIGHT: (0, 1),
    LEFT: (0, -1),
}

# Input signals besides directions
QUIT = "QUIT"
INPUT_ERROR = "INPUT_ERROR"

# Raw key decoding: a lone ESC quits, ESC [ A..D are the arrow keys
ESC = 0x1b
ARROW_KEYS = {
    ord("A"): UP,
    ord("B"): DOWN,
    ord("C"): RIGHT,
    ord("D"): LEFT,
}
READ_SIZE = 100

# Threat modes, shared with the pill timer thread
MODE_NORMAL = "Normal"
MODE_EMPOWERED = "Empowered"

# Why a game ended
END_QUIT = "quit"
END_INPUT_ERROR = "input error"
END_WIN = "win"
END_OUT_OF_LIVES = "out of lives"

END_MESSAGES = {
    END_QUIT: "Quit.",
    END_INPUT_ERROR: "Stopped: keyboard input failed.",
    END_WIN: "You win!",
    END_OUT_OF_LIVES: "Game over: out of lives.",
}

# Collision outcomes for a tick
COLLISION_DEATH = "death"
COLLISION_GHOST_EATEN = "ghost eaten"

DOT_POINTS = 1
PILL_POINTS = 10
STARTING_LIVES = 3
DEFAULT_PILL_DURATION = 10.0  # seconds

TICK_DELAY = 0.2
DEATH_PAUSE = 1.0

DEFAULT_MAZE = [
    "############################",
    "#X...........##...........X#",
    "#.####.#####.##.#####.####.#",
    "#..........................#",
    "#.####.##.########.##.####.#",
    "#......##....##....##......#",
    "######.#####.##.#####.######",
    "     #.##..........##.#     ",
    "######.##.###GG###.##.######",
    "..........#G    G#..........",
    "######.##.########.##.######",
    "     #.##..........##.#     ",
    "######.##.########.##.######",
    "#............##............#",
    "#.####.#####.##.#####.####.#",
    "#X..##.......P........##..X#",
    "###.##.##.########.##.##.###",
    "#......##....##....##......#",
    "#.##########.##.##########.#",
    "#..........................#",
    "############################",
]

LOG_DIR = os.path.expanduser("~/.shelly-ops")
DEFAULT_LOG_FILE = os.path.join(LOG_DIR, "pacgo.log")

# Glyph names double as render kinds
DEFAULT_GLYPHS = {
    "player": "P",
    "player_eat": "@",
    "ghost": "G",
    "ghost_blue": "g",
    "wall": "#",
    "dot": ".",
    "pill": "X",
    "death": "*",
    "space": " ",
}

CELL_KINDS = {
    WALL: "wall",
    DOT: "dot",
    POWER_PILL: "pill",
}

# Color pair IDs
COLOR_WALL = 1
COLOR_DOT = 2
COLOR_PILL = 3
COLOR_PLAYER = 4
COLOR_GHOST = 5
COLOR_GHOST_BLUE = 6
COLOR_DEATH = 7
COLOR_HUD = 8

KIND_COLORS = {
    "wall": COLOR_WALL,
    "dot": COLOR_DOT,
    "pill": COLOR_PILL,
    "player": COLOR_PLAYER,
    "player_eat": COLOR_PLAYER,
    "ghost": COLOR_GHOST,
    "ghost_blue": COLOR_GHOST_BLUE,
    "death": COLOR_DEATH,
    "hud": COLOR_HUD,
}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class PacGoError(Exception):
    """Base class for errors that stop the game before it starts."""


class MazeError(PacGoError):
    """The maze file is missing or malformed."""


class ConfigError(PacGoError):
    """The config file is missing or malformed."""


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class Config:
    """Glyphs, display flags and timings read from the JSON config."""

    def __init__(self, glyphs=None, use_emoji=False,
                 pill_duration=DEFAULT_PILL_DURATION, lives=STARTING_LIVES):
        self.glyphs = dict(DEFAULT_GLYPHS)
        if glyphs:
            self.glyphs.update(glyphs)
        self.use_emoji = use_emoji
        self.pill_duration = pill_duration
        self.lives = lives

    @property
    def cell_width(self):
        """Terminal columns per maze cell (emoji are double width)."""
        return 2 if self.use_emoji else 1


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_config(data):
    """Build a Config from a decoded JSON object.

    Raises ConfigError on anything malformed; nothing is applied partially.
    """
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")

    glyphs = {}
    for name in DEFAULT_GLYPHS:
        if name not in data:
            continue
        value = data[name]
        if not isinstance(value, str) or not value:
            raise ConfigError(f"'{name}' must be a non-empty string")
        glyphs[name] = value

    use_emoji = data.get("use_emoji", False)
    if not isinstance(use_emoji, bool):
        raise ConfigError("'use_emoji' must be true or false")

    pill_duration = data.get("pill_duration", DEFAULT_PILL_DURATION)
    if not _is_number(pill_duration) or pill_duration <= 0:
        raise ConfigError("'pill_duration' must be a positive number of seconds")

    lives = data.get("lives", STARTING_LIVES)
    if not isinstance(lives, int) or isinstance(lives, bool) or lives <= 0:
        raise ConfigError("'lives' must be a positive integer")

    return Config(glyphs, use_emoji, float(pill_duration), lives)


def load_config(path):
    """Load the JSON config file at path."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"config {path} is not valid JSON: {e}") from e
    return parse_config(data)


# ---------------------------------------------------------------------------
# Maze
# ---------------------------------------------------------------------------

class Maze:
    """The maze grid. Dots and pills are cleared to EMPTY as they're eaten.

    The grid never changes size; every row has the same number of cells.
    """

    def __init__(self, lines):
        if not lines:
            raise MazeError("maze is empty")
        width = len(lines[0])
        if width == 0:
            raise MazeError("row 1 is empty")

        self.player_start = None
        self.ghost_starts = []
        for row, line in enumerate(lines):
            if len(line) != width:
                raise MazeError(
                    f"row {row + 1} has {len(line)} cells, expected {width}")
            for col, char in enumerate(line):
                if char not in MAZE_ALPHABET:
                    raise MazeError(
                        f"row {row + 1}: unknown cell {char!r} at column {col + 1}")
                if char == PLAYER_START:
                    if self.player_start is not None:
                        raise MazeError(f"row {row + 1}: more than one player start")
                    self.player_start = (row, col)
                elif char == GHOST_START:
                    self.ghost_starts.append((row, col))

        if self.player_start is None:
            raise MazeError(f"maze has no player start {PLAYER_START!r}")

        self._cells = [list(line) for line in lines]

    def dimensions(self):
        return len(self._cells), len(self._cells[0])

    def cell(self, row, col):
        return self._cells[row][col]

    def is_wall(self, row, col):
        return self._cells[row][col] == WALL

    def consume(self, row, col):
        """Eat the pickup at (row, col), if any.

        Returns DOT or POWER_PILL and clears the cell, or None when there was
        nothing to eat. Eating the same cell twice only pays out once.
        """
        kind = self._cells[row][col]
        if kind in (DOT, POWER_PILL):
            self._cells[row][col] = EMPTY
            return kind
        return None

    def count_dots(self):
        return sum(row.count(DOT) for row in self._cells)

    def lines(self):
        return ["".join(row) for row in self._cells]


def load_maze(path):
    """Read a maze file, one row per line. Trailing blank lines are ignored."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except (OSError, ValueError) as e:
        raise MazeError(f"cannot read maze {path}: {e}") from e
    while lines and not lines[-1]:
        lines.pop()
    return Maze(lines)


# ---------------------------------------------------------------------------
# Sprites
# ---------------------------------------------------------------------------

class Sprite:
    """A position in the maze plus the cell it started on."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.start_row = row
        self.start_col = col

    @property
    def position(self):
        return (self.row, self.col)

    def respawn(self):
        self.row, self.col = self.start_row, self.start_col


class Player(Sprite):
    """Pac-Man. mode is MODE_EMPOWERED while a power pill is active."""

    def __init__(self, row, col):
        super().__init__(row, col)
        self.mode = MODE_NORMAL


class Ghost(Sprite):
    """A wandering ghost. Blue (MODE_EMPOWERED) ghosts can be eaten."""

    def __init__(self, row, col):
        super().__init__(row, col)
        self.mode = MODE_NORMAL


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

def make_move(row, col, direction, maze):
    """Return the (row, col) reached by one step in direction.

    Stepping off an edge wraps around to the opposite edge. Stepping into a
    wall, or an unknown direction, leaves the position where it was.
    """
    delta = DELTAS.get(direction)
    if delta is None:
        return row, col

    rows, cols = maze.dimensions()
    new_row = (row + delta[0]) % rows
    new_col = (col + delta[1]) % cols
    if maze.is_wall(new_row, new_col):
        return row, col
    return new_row, new_col


def draw_direction(rng=random):
    """Pick one of the four directions uniformly at random."""
    return rng.choice(DIRECTIONS)


def move_ghosts(ghosts, maze, rng=random):
    """Step every ghost once in its own random direction."""
    for ghost in ghosts:
        ghost.row, ghost.col = make_move(ghost.row, ghost.col,
                                         draw_direction(rng), maze)


# ---------------------------------------------------------------------------
# Power pill timer
# ---------------------------------------------------------------------------

class PillTimer:
    """Restartable countdown that keeps the ghosts blue while it runs.

    start() switches the player and every ghost to MODE_EMPOWERED and arms a
    single deadline `duration` seconds away. Calling it again before the
    deadline cancels the old one and arms a fresh full duration; durations
    never stack. When the deadline passes the player and whichever ghosts
    are still in game.ghosts go back to MODE_NORMAL.

    Every mode change happens under game.lock. Each arming gets a new
    generation number and a timer callback from an older generation does
    nothing, so a deadline that already fired but lost the race for the lock
    to a later start() can't end the new window early.
    """

    def __init__(self, game, duration, clock=time.monotonic):
        self.game = game
        self.duration = duration
        self.clock = clock
        self.deadline = None
        self._timer = None
        self._generation = 0

    @property
    def active(self):
        return self._timer is not None

    def start(self):
        left = None
        with self.game.lock:
            if self._timer is not None:
                self._timer.cancel()
                left = max(0, self.deadline - self.clock())
            self._generation += 1
            self.game.set_mode(MODE_EMPOWERED)
            self.deadline = self.clock() + self.duration
            self._timer = threading.Timer(self.duration, self._expire,
                                          args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()
        if left is not None:
            logger.debug("Pill timer restarted with %d seconds left", left)

    def _expire(self, generation):
        with self.game.lock:
            if generation != self._generation:
                return
            self._timer = None
            self.deadline = None
            self.game.set_mode(MODE_NORMAL)
        logger.info("Power pill wore off")

    def cancel(self):
        """Drop any pending deadline without touching the modes."""
        with self.game.lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self.deadline = None
            self._generation += 1


# ---------------------------------------------------------------------------
# Keyboard input
# ---------------------------------------------------------------------------

def decode_input(data):
    """Decode one raw read into a direction, QUIT, or None."""
    if len(data) == 1 and data[0] == ESC:
        return QUIT
    if len(data) >= 3 and data[0] == ESC and data[1] == ord("["):
        return ARROW_KEYS.get(data[2])
    return None


class InputChannel:
    """Background reader that hands decoded key presses to the game loop.

    The reader thread blocks on read() for as long as the game runs; the
    game loop only ever calls poll(), which never blocks. The mailbox holds a
    single value: a key press the loop hasn't picked up yet is replaced by
    the newer one. After QUIT or INPUT_ERROR the reader stops, so neither is
    ever overwritten.
    """

    def __init__(self, read):
        self._read = read
        self._mailbox = queue.Queue(maxsize=1)
        self._thread = threading.Thread(target=self._run, name="pacgo-input",
                                        daemon=True)

    @classmethod
    def from_fd(cls, fd):
        return cls(lambda: os.read(fd, READ_SIZE))

    def start(self):
        self._thread.start()
        return self

    def join(self, timeout=None):
        self._thread.join(timeout)

    def poll(self):
        """Return the pending key press, or None if there isn't one."""
        try:
            return self._mailbox.get_nowait()
        except queue.Empty:
            return None

    def _post(self, value):
        while True:
            try:
                self._mailbox.put_nowait(value)
                return
            except queue.Full:
                try:
                    self._mailbox.get_nowait()
                except queue.Empty:
                    pass

    def _run(self):
        while True:
            try:
                data = self._read()
            except OSError as e:
                logger.error("Error reading input: %s", e)
                self._post(INPUT_ERROR)
                return
            if not data:
                logger.error("Error reading input: stream closed")
                self._post(INPUT_ERROR)
                return

            key = decode_input(data)
            if key is None:
                logger.debug("Ignoring input %r", data)
                continue
            self._post(key)
            if key == QUIT:
                return


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

class GameState:
    """Score, dots left, lives, and why the game ended (None while running)."""

    def __init__(self, remaining_dots, lives):
        self.score = 0
        self.remaining_dots = remaining_dots
        self.lives = lives
        self.end_reason = None


class Game:
    """One run of the game: maze, sprites, state and the pill timer.

    Only the game loop thread touches the maze and state. The player's and
    ghosts' modes are also written by the pill timer thread, so reading or
    writing them (and removing ghosts) happens under self.lock.
    """

    def __init__(self, maze, config, rng=None, clock=time.monotonic):
        self.maze = maze
        self.config = config
        self.rng = rng or random.Random()
        self.clock = clock
        self.player = Player(*maze.player_start)
        self.ghosts = [Ghost(row, col) for row, col in maze.ghost_starts]
        self.state = GameState(maze.count_dots(), config.lives)
        self.lock = threading.Lock()
        self.pill_timer = None
        self.death_at = None

    def set_mode(self, mode):
        """Set the player's and every ghost's mode. Caller holds self.lock."""
        self.player.mode = mode
        for ghost in self.ghosts:
            ghost.mode = mode

    def apply_input(self, key):
        if key is None:
            return
        if key == QUIT:
            self.state.end_reason = END_QUIT
        elif key == INPUT_ERROR:
            self.state.end_reason = END_INPUT_ERROR
        else:
            self.player.row, self.player.col = make_move(
                self.player.row, self.player.col, key, self.maze)

    def resolve_collisions(self):
        """Settle the first ghost found on the player's cell, if any.

        A normal player loses a life and, if any are left, goes back to the
        start. An empowered player eats the ghost. Either way only one ghost
        is dealt with per tick; others on the same cell wait for the next.
        Returns COLLISION_DEATH, COLLISION_GHOST_EATEN or None.
        """
        outcome = None
        with self.lock:
            for i, ghost in enumerate(self.ghosts):
                if ghost.position != self.player.position:
                    continue
                where = self.player.position
                if self.player.mode == MODE_NORMAL:
                    self.state.lives -= 1
                    self.death_at = where
                    left = self.state.lives
                    if left > 0:
                        self.player.respawn()
                        self.player.mode = MODE_NORMAL
                    outcome = COLLISION_DEATH
                else:
                    del self.ghosts[i]
                    left = len(self.ghosts)
                    outcome = COLLISION_GHOST_EATEN
                break

        if outcome == COLLISION_DEATH:
            logger.info("Caught by a ghost at %s, %d lives left", where, left)
        elif outcome == COLLISION_GHOST_EATEN:
            logger.info("Ate a ghost at %s, %d ghosts left", where, left)
        return outcome

    def eat_pickup(self):
        """Eat whatever is on the player's cell and score it."""
        kind = self.maze.consume(self.player.row, self.player.col)
        if kind == DOT:
            self.state.score += DOT_POINTS
            self.state.remaining_dots -= 1
        elif kind == POWER_PILL:
            self.state.score += PILL_POINTS
            self.eat_pill()
        return kind

    def eat_pill(self):
        if self.pill_timer is None:
            self.pill_timer = PillTimer(self, self.config.pill_duration,
                                        self.clock)
        self.pill_timer.start()
        logger.info("Power pill at %s, ghosts blue for %.1f seconds",
                    self.player.position, self.config.pill_duration)

    def check_end(self):
        """Set and return the end reason, or None if the game goes on."""
        if self.state.end_reason is None:
            if self.state.remaining_dots == 0:
                self.state.end_reason = END_WIN
            elif self.state.lives <= 0:
                self.state.end_reason = END_OUT_OF_LIVES
        return self.state.end_reason

    def step(self, key=None):
        """Run one tick: input, ghosts, collisions, pickups, end check.

        Draws nothing and never sleeps. Returns the tick's collision outcome.
        """
        self.death_at = None
        self.apply_input(key)
        if self.state.end_reason is not None:
            return None
        move_ghosts(self.ghosts, self.maze, self.rng)
        outcome = self.resolve_collisions()
        self.eat_pickup()
        self.check_end()
        return outcome

    def shutdown(self):
        if self.pill_timer is not None:
            self.pill_timer.cancel()


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------

def safe_addstr(stdscr, y, x, text, attr=0):
    """Write text to screen, silently ignoring out-of-bounds errors."""
    try:
        max_y, max_x = stdscr.getmaxyx()
        if 0 <= y < max_y and 0 <= x < max_x:
            available = max_x - x - 1
            if available > 0:
                stdscr.addstr(y, x, text[:available], attr)
    except curses.error:
        pass


def init_colors():
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_WALL, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(COLOR_DOT, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_PILL, curses.COLOR_MAGENTA, -1)
    curses.init_pair(COLOR_PLAYER, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_GHOST, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_GHOST_BLUE, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_DEATH, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_HUD, curses.COLOR_WHITE, -1)


class CursesScreen:
    """Render sink over a curses window: clear, move the cursor, write."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.row = 0
        self.col = 0

    def clear(self):
        self.stdscr.erase()
        self.row = self.col = 0

    def move_cursor(self, row, col):
        self.row, self.col = row, col

    def write(self, text, kind=None):
        attr = 0
        if kind in KIND_COLORS:
            attr = curses.color_pair(KIND_COLORS[kind])
            if kind in ("player", "player_eat", "death"):
                attr |= curses.A_BOLD
        safe_addstr(self.stdscr, self.row, self.col, text, attr)
        self.col += len(text)

    def refresh(self):
        self.stdscr.refresh()


def lives_text(lives, config):
    lives = max(0, lives)
    if config.use_emoji:
        return config.glyphs["player"] * lives
    return str(lives)


def draw_frame(screen, game):
    """Draw the maze, the sprites and the score line onto a render sink."""
    config = game.config
    glyphs = config.glyphs
    width = config.cell_width

    # The pill timer flips modes from its own thread
    with game.lock:
        player = (game.player.row, game.player.col, game.player.mode)
        ghosts = [(g.row, g.col, g.mode) for g in game.ghosts]

    screen.clear()
    lines = game.maze.lines()
    for row, line in enumerate(lines):
        for col, cell in enumerate(line):
            kind = CELL_KINDS.get(cell, "space")
            screen.move_cursor(row, col * width)
            screen.write(glyphs[kind], kind)

    row, col, mode = player
    kind = "player_eat" if mode == MODE_EMPOWERED else "player"
    screen.move_cursor(row, col * width)
    screen.write(glyphs[kind], kind)

    for row, col, mode in ghosts:
        kind = "ghost_blue" if mode == MODE_EMPOWERED else "ghost"
        screen.move_cursor(row, col * width)
        screen.write(glyphs[kind], kind)

    if game.death_at is not None:
        row, col = game.death_at
        screen.move_cursor(row, col * width)
        screen.write(glyphs["death"], "death")

    screen.move_cursor(len(lines) + 1, 0)
    screen.write(f"Score: {game.state.score}    "
                 f"Lives: {lives_text(game.state.lives, config)}", "hud")
    screen.refresh()


# ---------------------------------------------------------------------------
# Game loop
# ---------------------------------------------------------------------------

def run_game(game, channel, screen, tick_delay=TICK_DELAY,
             death_pause=DEATH_PAUSE, sleep=time.sleep):
    """Tick the game until it ends and return the end reason."""
    rows, cols = game.maze.dimensions()
    logger.info("Game started: %dx%d maze, %d ghosts, %d dots, %d lives",
                rows, cols, len(game.ghosts), game.state.remaining_dots,
                game.state.lives)
    try:
        while True:
            tick_start = time.monotonic()

            outcome = game.step(channel.poll())
            draw_frame(screen, game)

            if game.state.end_reason is not None:
                break
            if outcome == COLLISION_DEATH:
                sleep(death_pause)

            elapsed = time.monotonic() - tick_start
            sleep(max(0, tick_delay - elapsed))
    finally:
        game.shutdown()

    reason = game.state.end_reason
    logger.info("Game over (%s): score %d, lives %d",
                reason, game.state.score, game.state.lives)
    return reason


def main(stdscr, game, input_fd):
    """Main game loop -- called by curses.wrapper()."""
    curses.curs_set(0)
    # Arrow keys must reach the input thread as plain ESC [ A..D
    stdscr.keypad(False)
    init_colors()

    channel = InputChannel.from_fd(input_fd).start()
    return run_game(game, channel, CursesScreen(stdscr))


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="pacgo",
        description="Terminal maze chase: eat the dots, dodge the ghosts.")
    parser.add_argument("--maze-file",
                        help="path to a custom maze file "
                             "(default: the built-in maze)")
    parser.add_argument("--config-file",
                        help="path to a custom configuration file "
                             "(default: ASCII glyphs)")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE,
                        help="where to write the game log")
    parser.add_argument("--debug", action="store_true",
                        help="log debug detail")
    return parser.parse_args(argv)


def load_game_files(maze_file=None, config_file=None):
    """Load the maze and config, using the built-in ones for missing paths."""
    maze = load_maze(maze_file) if maze_file else Maze(DEFAULT_MAZE)
    config = load_config(config_file) if config_file else Config()
    return maze, config


def setup_logging(log_file, debug=False):
    """Send log records to a file; the terminal belongs to curses."""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(threadName)s] %(message)s")


def cli(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_file, args.debug)

    try:
        maze, config = load_game_files(args.maze_file, args.config_file)
    except PacGoError as e:
        logger.error("Failed to start: %s", e)
        print(f"pacgo: {e}", file=sys.stderr)
        return 1

    game = Game(maze, config)
    reason = curses.wrapper(main, game, sys.stdin.fileno())

    print(END_MESSAGES.get(reason, reason))
    print(f"Score: {game.state.score}  Lives: {max(0, game.state.lives)}")
    return 0


if __name__ == "__main__":
    sys.exit(cli())
