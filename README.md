# lldgames

A console tic-tac-toe game for two people, built from small, replaceable parts: a board,
players with move strategies, and game states. The package also has a few helpers for
chess colours and piece types.

## Installation

```
pip install .
```

## Playing

```
lldgames-tictactoe
```

This starts a game on a 3 by 3 board. Player X moves first. On each turn, type a row and
a column, for example `1 2`. You can put them on one line or on separate lines. Numbering
starts at 0.

- If a move is off the board, or the square is already taken, the game prints
  `Invalid move. Try again.` and asks again.
- If what you type is not a whole number, the game prints
  `Invalid input. Please enter row and column as numbers.`, discards the rest of that
  line, and asks again.

The board is printed before every move. When the game ends it is printed once more,
followed by the result: `Player X wins!`, `Player O wins!` or `It's a draw!`. If input
ends before a move has been entered, the game stops with `EOFError`.

## Using the library

- `lldgames.symbol`
  - `Symbol`, with the members `X`, `O` and `EMPTY`.
  - `symbol_to_string` returns `"X"`, `"O"` or `"EMPTY"`.
  - `symbol_to_char` returns `"X"`, `"O"` or `"."`.
- `lldgames.position`: `Position(row, col)`, a frozen dataclass that supports equality
  and can be hashed.
- `lldgames.player`: `Player(symbol, strategy)`, a frozen dataclass.
- `lldgames.strategies`
  - `PlayerStrategy`, the abstract interface with `make_move(board)`, which returns a
    `Position`.
  - `HumanPlayerStrategy(player_name, stdin=None, stdout=None)`, which reads
    whitespace-separated numbers from `stdin` and writes prompts to `stdout`. Both default
    to the standard streams.
- `lldgames.board`: `Board(rows, columns)`. Its methods are:
  - `is_valid_move(pos)` tells whether `pos` is on the board and its square is empty.
  - `make_move(pos, symbol)` places a symbol. It raises `IndexError` if `pos` is off the
    board.
  - `symbol_at(row, col)` returns the symbol on a square. It raises `IndexError` if the
    square is off the board.
  - `is_full()` tells whether no square is left empty.
  - `check_game_state(context, current_player)` looks for a complete row, column or
    diagonal, and ends the game as a win for `current_player` if it finds one. Otherwise,
    if the board is full, it ends the game as a draw.
  - `render()` returns the board as text.
  - `print_board(out=None)` writes that text to `out`, or to standard output if no
    stream is given.
- `lldgames.states`
  - The abstract `GameState` and its subclasses `InProgressState`, `XWonState`,
    `OWonState` and `DrawState`. `handle(player)` prints the state's announcement, if it
    has one, and returns it. `is_game_over()` tells whether the game has ended.
  - `GameContext` holds `current_state` and `game_over`. `next(player, is_win)` ends the
    game. `set_state(state)` replaces the state without changing `game_over`.
- `lldgames.tictactoe`
  - `BoardGame`, the abstract base class with `play()`.
  - `TicTacToeGame(x_strategy, o_strategy, rows, columns, out=None)`, which runs the
    game loop.
  - `main()`, which is the `lldgames-tictactoe` command.
- `lldgames.chess_enums`
  - `Color` (`WHITE`, `BLACK`), with the method `opposite()`.
  - `PieceType` (`PAWN`, `ROOK`, `KNIGHT`, `BISHOP`, `QUEEN`, `KING`), with the methods
    `symbol()` and `value_points()`. The king's value is 0.
  - The functions `color_to_string`, `opposite`, `piece_type_to_string`, `piece_symbol`
    and `piece_value`.

### Writing your own player

To make your own kind of player, subclass `PlayerStrategy` and implement
`make_move(board)` so that it returns a valid `Position`. Pass one strategy for X and one
for O to `TicTacToeGame`, along with the board's rows and columns, and then call `play()`.

## What this package does not do

- There is no computer opponent. The only strategy provided is `HumanPlayerStrategy`.
- The command always plays on a 3 by 3 board. Other sizes are available only through
  `TicTacToeGame`. On any board size, a player wins only by filling a whole row, column or
  main diagonal.
- The prompt always shows the range `[0-2]`, whatever the size of the board.
- There is no chess game, board or move validation. `lldgames.chess_enums` only names
  colours and piece types and gives their symbols and values.

## Running the tests

```
pip install .[test]
pytest
```