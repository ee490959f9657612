# coinquest

This package holds the scene model for an endless-runner coin game. It covers:

- entities, components and transforms;
- meshes and a Wavefront OBJ reader;
- materials and their pipeline state;
- named asset registries.

Scenes are described as JSON-like dictionaries and deserialized into a `World`. Matrices are `numpy` arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a scene

```python
from coinquest.world import World

world = World()
world.deserialize([
    {
        "name": "player",
        "position": [0, 0, 0],
        "rotation": [0, 90, 0],
        "components": [
            {"type": "Player", "lives": 3},
            {"type": "Collision", "detectionRadius": 0.5},
        ],
        "children": [
            {"name": "camera", "position": [0, 2, 5],
             "components": [{"type": "Camera", "fovY": 60}]},
        ],
    },
])
```

Each entity description may hold these keys:

- `name` is the entity's name.
- `position` and `scale` are 3-vectors.
- `rotation` is given in degrees as pitch, yaw and roll. It is stored in radians.
- `components` is a list of objects. Each one is picked by its `"type"` and then reads its own keys.
- `children` is a list of entity descriptions. Each child's `parent` is the entity it belongs to.

The `"type"` values understood by `coinquest.entity.deserialize_component` are:

| type | class |
| --- | --- |
| `Camera` | `components.camera.CameraComponent` |
| `Light` | `components.light.LightComponent` |
| `LightSpectrum` | `components.light.LightSpectrumComponent` |
| `Movement` | `components.movement.MovementComponent` |
| `Free Camera Controller` | `components.movement.FreeCameraControllerComponent` |
| `Player Movement Controller` | `components.movement.PlayerMovementControllerComponent` |
| `Mesh Renderer` | `components.mesh_renderer.MeshRendererComponent` |
| `Player` | `components.gameplay.PlayerComponent` |
| `Coin` | `components.gameplay.CoinComponent` |
| `Collision` | `components.gameplay.CollisionComponent` |
| `PostProcess` | `components.gameplay.PostProcessComponent` |
| `ObstacleTag`, `powerupTag`, `HeartTag`, `BlurTag`, `WarnTag` | tag classes in `components.tags` |

How other types are handled:

- Any other type is ignored.
- `GeneratedComponent` and `ObstacleComponent` are not reached through `"type"`. Attach them with `entity.add_component(...)`.
- A light with an unknown `typeLight` raises `ValueError`.

## Working with entities

```python
from coinquest.components.camera import CameraComponent

camera = next(e for e in world.entities if e.name == "camera")
matrix = camera.local_to_world_matrix()     # parent chain applied
offset = camera.world_translation()         # sum of positions up the chain

cam = camera.get_component(CameraComponent)
view = cam.view_matrix()
projection = cam.projection_matrix((1280, 720))
```

Finding components:

- `get_component` returns the first component that is an instance of the given class, or `None`.
- `get_component_at(index, cls)` does the same for one position in the list.

Removing components:

- `delete_component(cls)` removes the first component of that class.
- `delete_component_at(index)` removes the component at a position.
- `remove_component(component)` removes that exact component.

`projection_matrix` uses the whole-number quotient of width by height as its aspect ratio, so `(1280, 720)` gives an aspect of 1.

Entities are removed in two steps:

1. `world.mark_for_removal(entity)` marks the entity and all of its descendants.
2. `world.delete_marked_entities()` drops everything that was marked.

`world.clear()` removes every entity.

## Assets

`coinquest.assets.registry(kind)` returns the shared `AssetRegistry` for a kind. It is created on first use. A registry offers:

- `get(name)`, which returns `None` when the name is missing;
- `register(name, asset)`;
- `clear()`;
- `in`, `len` and iteration over names.

The kinds in use are the string constants below:

- `coinquest.material`: `SHADERS`, `TEXTURES`, `SAMPLERS`;
- `coinquest.loaders`: `MESHES`, `MATERIALS`.

`coinquest.loaders.deserialize_all_assets` reads two sections.

- `"meshes"` is a map of name to `.obj` path. Each file is read with `coinquest.mesh.load_obj`.
- `"materials"` is a map of name to description.

`clear_all_assets()` empties all five registries.

```python
from coinquest.assets import registry
from coinquest.loaders import deserialize_all_assets
from coinquest.material import SHADERS

registry(SHADERS).register("basic", object())   # any object standing for a shader
deserialize_all_assets({
    "materials": {
        "red": {"type": "tinted", "shader": "basic", "tint": [1, 0, 0, 1]},
    },
})
```

A material description must have a `"shader"` key. Its `"type"` picks the material class:

| type | class |
| --- | --- |
| `tinted` | `TintedMaterial` |
| `textured` | `TexturedMaterial` |
| `lit` | `LitMaterial` |
| anything else | plain `Material` |

Material keys:

- Shader, texture and sampler names are looked up in their registries. A name that is missing gives `None`.
- An optional `"pipelineState"` object is read by `coinquest.pipeline_state.PipelineState.deserialize`. It sets:
  - face culling;
  - depth testing;
  - blending;
  - the color and depth masks.
- GL enum names such as `"GL_BACK"` or `"GL_SRC_ALPHA"` are accepted. Unknown names keep the current value.

`coinquest.mesh.sphere((columns, rows))` builds a unit UV sphere. `load_obj` does the following:

- It triangulates polygon faces as fans.
- It merges identical vertices.
- It reads the optional per-vertex colors.

## Other helpers

- `coinquest.linalg` has 4x4 matrix builders for column vectors: `translate`, `scale`, `yaw_pitch_roll`, `look_at`, `perspective` and `ortho`.
- `coinquest.components.light.hue_shift(color, hue)` rotates an RGB color around the gray axis.
- `LightSpectrumComponent.get_color(time)` applies `hue_shift` to the light's color.

## What this package does not do

This package is a data model only. It does not:

- open a window;
- draw anything;
- compile shaders or read texture images;
- run a game loop, play sounds or handle input.

There are no systems that move entities, detect collisions or generate levels. Components such as `MovementComponent` and `CollisionComponent` only hold the values those systems would use.

Shaders, textures and samplers are never loaded by `deserialize_all_assets`. Put whatever objects stand for them into their registries yourself.