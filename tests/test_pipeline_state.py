import pytest

from coinquest.pipeline_state import (
    BlendEquation,
    BlendFactor,
    CompareFunction,
    CullFace,
    FrontFace,
    PipelineState,
)


def test_defaults():
    state = PipelineState()
    assert state.face_culling.enabled is False
    assert state.face_culling.culled_face is CullFace.GL_BACK
    assert state.face_culling.front_face is FrontFace.GL_CCW
    assert state.depth_testing.function is CompareFunction.GL_LEQUAL
    assert state.blending.equation is BlendEquation.GL_FUNC_ADD
    assert state.blending.source_factor is BlendFactor.GL_SRC_ALPHA
    assert state.blending.destination_factor is BlendFactor.GL_ONE_MINUS_SRC_ALPHA
    assert state.color_mask == (True, True, True, True)
    assert state.depth_mask is True


def test_deserialized_values_carry_gl_constants():
    state = PipelineState()
    state.deserialize(
        {
            "faceCulling": {"culledFace": "GL_BACK"},
            "depthTesting": {"function": "GL_LEQUAL"},
            "blending": {"destinationFactor": "GL_ONE_MINUS_SRC_ALPHA"},
        }
    )
    assert state.face_culling.culled_face == 0x0405
    assert state.depth_testing.function == 0x0203
    assert state.blending.destination_factor == 0x0303


def test_reads_face_culling():
    state = PipelineState()
    state.deserialize(
        {"faceCulling": {"enabled": True, "culledFace": "GL_FRONT", "frontFace": "GL_CW"}}
    )
    assert state.face_culling.enabled is True
    assert state.face_culling.culled_face is CullFace.GL_FRONT
    assert state.face_culling.front_face is FrontFace.GL_CW


def test_reads_depth_testing():
    state = PipelineState()
    state.deserialize({"depthTesting": {"enabled": True, "function": "GL_LESS"}})
    assert state.depth_testing.enabled is True
    assert state.depth_testing.function is CompareFunction.GL_LESS


def test_reads_blending():
    state = PipelineState()
    state.deserialize(
        {
            "blending": {
                "enabled": True,
                "equation": "GL_FUNC_SUBTRACT",
                "sourceFactor": "GL_ONE",
                "destinationFactor": "GL_ZERO",
                "constantColor": [0.25, 0.5, 0.75, 1.0],
            }
        }
    )
    blend = state.blending
    assert blend.enabled is True
    assert blend.equation is BlendEquation.GL_FUNC_SUBTRACT
    assert blend.source_factor is BlendFactor.GL_ONE
    assert blend.destination_factor is BlendFactor.GL_ZERO
    assert blend.constant_color == (0.25, 0.5, 0.75, 1.0)


def test_unknown_enum_name_keeps_current_value():
    state = PipelineState()
    state.deserialize({"depthTesting": {"function": "NOT_A_FUNCTION"}})
    assert state.depth_testing.function is CompareFunction.GL_LEQUAL


def test_missing_keys_keep_current_values():
    state = PipelineState()
    state.deserialize({"faceCulling": {"enabled": True}})
    state.deserialize({"faceCulling": {"culledFace": "GL_FRONT_AND_BACK"}})
    assert state.face_culling.enabled is True
    assert state.face_culling.culled_face is CullFace.GL_FRONT_AND_BACK


def test_masks():
    state = PipelineState()
    state.deserialize({"colorMask": [True, False, True, False], "depthMask": False})
    assert state.color_mask == (True, False, True, False)
    assert state.depth_mask is False


def test_non_mapping_is_ignored():
    state = PipelineState()
    state.deserialize([1, 2, 3])
    assert state == PipelineState()


def test_non_object_section_is_ignored():
    state = PipelineState()
    state.deserialize({"blending": "yes"})
    assert state.blending.enabled is False


def test_bad_enabled_type_raises():
    with pytest.raises(TypeError):
        PipelineState().deserialize({"faceCulling": {"enabled": "yes"}})


def test_bad_color_mask_length_raises():
    with pytest.raises(ValueError):
        PipelineState().deserialize({"colorMask": [True, False]})


def test_bad_constant_color_length_raises():
    with pytest.raises(ValueError):
        PipelineState().deserialize({"blending": {"constantColor": [1.0, 1.0]}})


def test_instances_do_not_share_sections():
    first, second = PipelineState(), PipelineState()
    first.deserialize({"faceCulling": {"enabled": True}})
    assert second.face_culling.enabled is False