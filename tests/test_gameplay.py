import pytest

from coinquest.components.gameplay import (
    CoinComponent,
    CollisionComponent,
    GeneratedComponent,
    ObstacleComponent,
    PlayerComponent,
    PostProcessComponent,
)


def test_ids():
    components = [
        (CoinComponent(), "Coin"),
        (CollisionComponent(), "Collision"),
        (PlayerComponent(), "Player"),
        (PostProcessComponent(), "PostProcess"),
        (GeneratedComponent(), "GeneratedTag"),
        (ObstacleComponent(), "Obstacle"),
    ]
    for component, expected in components:
        component.deserialize({})
        assert component.ID == expected


def test_coin_default_and_read():
    coin = CoinComponent()
    coin.deserialize({})
    assert coin.score == 1
    coin.deserialize({"score": 5})
    assert coin.score == 5


def test_coin_rejects_string_score():
    with pytest.raises(TypeError):
        CoinComponent().deserialize({"score": "many"})


def test_collision_reads_all_fields():
    collision = CollisionComponent()
    collision.deserialize({"detectionRadius": 2.5, "soundName": 3, "soundPath": "sounds/coin.wav"})
    assert collision.detection_radius == 2.5
    assert collision.sound_name == 3
    assert collision.sound_path == "sounds/coin.wav"


def test_collision_keeps_values_when_absent():
    collision = CollisionComponent()
    collision.deserialize({})
    assert collision.detection_radius == 1.0
    assert collision.sound_path == ""


def test_collision_rejects_non_string_path():
    with pytest.raises(TypeError):
        CollisionComponent().deserialize({"soundPath": 7})


def test_player_defaults_and_partial_read():
    player = PlayerComponent()
    player.deserialize({"score": 10})
    assert player.score == 10
    assert player.lives == 3


def test_player_ignores_non_mapping():
    player = PlayerComponent()
    player.deserialize(None)
    assert (player.score, player.lives) == (0, 3)


def test_post_process_reads_values():
    post = PostProcessComponent()
    post.deserialize({"isEnabled": True, "postProcessIndex": 2})
    assert post.is_enabled is True
    assert post.post_process_index == 2


def test_post_process_rejects_non_boolean_flag():
    with pytest.raises(TypeError):
        PostProcessComponent().deserialize({"isEnabled": "yes"})


def test_generated_offset():
    generated = GeneratedComponent()
    generated.deserialize({})
    assert generated.destruction_offset == -10.0
    generated.deserialize({"destructionOffset": -20})
    assert generated.destruction_offset == -20.0


def test_obstacle_deserialize_reads_nothing():
    obstacle = ObstacleComponent()
    assert obstacle.deserialize({"anything": 1}) is None
    assert obstacle.owner is None