# sdgengine

The core of a small entity-component engine for 2D games. The package has no
dependencies outside the standard library.

## Modules

- `sdgengine.component`: `Component` is the base class for all behaviour. It
  has the hooks `init`, `update`, `post_update`, `draw` and `close`.
  `do_init` runs `init` only once. `force_init` runs it every time it is
  called. `get_component`, `get_typeof` and `remove_component` reach the
  sibling components in the same list. The shared game services (sprite
  batch, time, content, input, graphics and scene manager) are set on the
  module-level `services` object. A component raises `RuntimeError` when it
  uses a service that was never set.
- `sdgengine.component_list`: `ComponentList` holds at most one component of
  each type.
  - `add(cls, *args, **kwargs)` creates and attaches a component. It raises
    `ValueError` if a component of that type is already there. The component
    is initialized at once if the list's entity is already initialized.
  - `init_all` initializes every component that has not been initialized.
  - `get` looks up an exact type. `get_typeof` also accepts subtypes. `has`
    tests whether a type is present.
  - `remove` marks a component. The component is closed and dropped at the
    start of the next `update`.
  - `update`, `post_update` and `draw` call the matching hook on each
    updatable or drawable component.
  - `close` closes all components and drops them.
- `sdgengine.transform`: `Vector2` is an immutable vector with `+`, `-`,
  scalar `*`, `length()` and `normalized()`. `Transform` holds a local
  `position` and a `scale`.
  - `attach(child)` makes one transform the parent of another. The child's
    `world_position` is then offset by its parent. The world position is
    cached until `post_update`.
  - `detach_from_parent` keeps the current world position as the new local
    position.
  - `set_position_local` and `set_position_final` move the transform.
- `sdgengine.body`:
  - `Rect` is an axis-aligned rectangle with `left`, `right`, `top`,
    `bottom` and `intersects`.
  - `Body` needs a `Transform` on the same entity. On every update it moves
    that transform by `velocity`. It reports a hit box as `position` and as
    integer `bounds`.
  - When `use_sprite_mask` is set and a `sprite_renderer` is assigned, the
    box takes its size and offset from the sprite's mask.
- `sdgengine.collision`:
  - `Collider` checks its entity's `Body` against other colliders.
  - `CollisionManager.process_collisions(camera_bounds)` first applies the
    pending `register` and `unregister` calls. It then sorts colliders into
    grid cells of `hash_size`, halved when there are more than 256
    colliders. Cells more than half a camera width or height outside the
    camera are skipped.
  - For each overlapping pair, the first collider's `callback(this_entity,
    other_entity)` is called. This happens at most once per other collider
    per frame.
- `sdgengine.events`:
  - `Delegate` calls plain callables and bound methods. A listener removed
    while the delegate is calling its listeners is still called in that
    round and dropped afterwards.
  - `ListenerDelegate` calls `EventListener` objects that subscribe with
    `+=` and `-=`. A listener removed during a call is dropped at the start
    of the next call.
- `sdgengine.pool`: `Pool` hands out reusable `Poolable` objects from a free
  list.
  - When no object is free, `check_out` grows the pool to twice its size
    plus one.
  - `give_back` returns an object. It raises `ValueError` for an object that
    belongs to another pool or is not checked out.
  - `return_all` returns every object that is checked out.
- `sdgengine.gameinfo`: `GameInfo` tracks `lives` (3 at the start), `score`
  and `level`. It has `lose_life`, `has_lives`, `increase_level`,
  `reset_level` and `reset`.

## Installation

```
pip install .
```

## Examples

```python
from sdgengine.component_list import ComponentList
from sdgengine.transform import Transform, Vector2
from sdgengine.body import Body

components = ComponentList(None)
tf = components.add(Transform, 0.0, 0.0, 1.0, 1.0)
body = components.add(Body)
components.init_all()

body.velocity = Vector2(1.0, 2.0)
components.update()
print(tf.position)  # Vector2(x=1.0, y=2.0)
```

Collisions. The collider is given its manager directly, so it needs no scene:

```python
from sdgengine.body import Body, Rect
from sdgengine.collision import Collider, CollisionManager
from sdgengine.component_list import ComponentList
from sdgengine.transform import Transform

manager = CollisionManager((64, 64))
hits = []
for x in (10.0, 15.0):
    components = ComponentList(None)
    components.add(Transform, x, 10.0, 1.0, 1.0)
    components.add(Body)
    collider = components.add(Collider, manager)
    collider.callback = lambda this, other: hits.append((this, other))
    components.init_all()

manager.process_collisions(Rect(0, 0, 480, 480))
print(len(hits))  # 2: one call from each collider
```

Events:

```python
from sdgengine.events import Delegate

on_hit = Delegate()
on_hit.add_listener(print)
on_hit("asteroid", 3)
on_hit.remove_listener(print)
```

Pools:

```python
from sdgengine.pool import Pool, Poolable

class Bullet(Poolable):
    pass

pool = Pool(Bullet, 4)
bullet = pool.check_out()
pool.give_back(bullet)
```

## What it does not do

The package provides only the component, physics, collision, event and
pooling core. It has none of the following:

- a game loop, window, renderer or sprite batch
- sprites, a content loader, input handling, audio or scenes

Components that draw, or that use the sprite batch, time, input or scene,
expect these objects to be supplied through `sdgengine.component.services`.

## Tests

```
pip install .[test]
pytest
```