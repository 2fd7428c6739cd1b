# jumprun

A small side-scrolling jump-and-run game built on pygame. An animated
character walks along the bottom of an 800×400 field. Three blue blocks
scroll toward it from the right. Press **Space** to jump over them. When a
block touches the character, the death animation plays.

## Installation

```
pip install .
```

This installs `pygame`, the only runtime dependency.

## Playing

```
jumprun [SPRITES_DIR]
```

`SPRITES_DIR` defaults to `sprites` in the current directory. It must hold
these sprite sheets. Each sheet is a single row of frames of equal width:

| File       | Frames | Loops |
|------------|--------|-------|
| `Idle.png` | 5      | yes   |
| `Walk.png` | 8      | yes   |
| `Run.png`  | 8      | yes   |
| `Jump.png` | 7      | yes   |
| `Dead.png` | 8      | no    |

A missing file raises `FileNotFoundError`. If the sheets do not all have the
same frame size, `ValueError` is raised.

The loop runs one step every 16 ms, about 60 steps per second. Each animation
frame stays on screen for 75 ms. Each step moves the blocks 5 pixels to the
left. A block that goes past x = -30 jumps back to x = 800. A jump starts
with an upward speed of 15 pixels per step. Gravity adds 1 to that speed on
each step. The jump ends when the character's feet reach the bottom edge.
Close the window to quit.

## What the game does not do

There is no score, no restart and no game-over screen. After a collision the
death animation plays and stops on its last frame. The blocks keep scrolling,
and jumping still works. When a jump lands, the character goes back to the
walking animation.

## Using the pieces

The modules can also be used on their own:

- `jumprun.sprite.Sprite(sheet, total_frames, loop=True)` cuts a surface into
  frames. `Sprite.from_file` loads the sheet from disk. `first_frame()` rewinds
  the animation. `next_frame()` moves it forward: a looping sprite wraps
  around, a non-looping one stops on its last frame. `frame_size()` returns
  `(width, height)`.
- `jumprun.framemanager.Action` lists the actions `IDLE`, `WALKING`,
  `RUNNING`, `JUMPING` and `DEAD`. `load_sprites(directory)` builds the
  action-to-sprite table from the files above.
  `FrameManager(target, sprites)` sets `target.image` to the current frame.
  `set_action(action)` switches to another animation; passing the current
  action does not restart it. `tick(elapsed_ms)` returns how many frames it
  advanced.
- `jumprun.obstacle.Obstacle(x, y)` is a 30×30 block that moves left.
- `jumprun.player.Player(sprites, x, y)` is the character. It offers
  `jump()`, `advance(step)` and `handle_collision(item, colliding_objects)`.
  Its collision mask comes from the opaque pixels of its current frame.
- `jumprun.gamescene.GameScene(width, height)` holds the moving items.
  Each `advance()` runs the items and then checks for collisions using their
  masks. For each colliding item it calls every callback registered with
  `connect_collision`, as `callback(item, colliding_items)`.
- `jumprun.game.Game(sprites)` puts everything together. `handle_key(key)`
  and `step()` let you drive a game without opening a window.
  `draw(surface)` renders the game to any surface. `run()` opens the window
  and plays.

## Tests

```
pip install .[test]
pytest
```