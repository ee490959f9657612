from coinquest.assets import AssetRegistry, registry


def test_get_missing_returns_none():
    assert AssetRegistry().get("white") is None


def test_register_and_get():
    reg = AssetRegistry()
    reg.register("white", "textures/white.png")
    assert reg.get("white") == "textures/white.png"
    assert "white" in reg
    assert len(reg) == 1


def test_register_replaces_existing():
    reg = AssetRegistry()
    reg.register("polka", 1)
    reg.register("polka", 2)
    assert reg.get("polka") == 2
    assert list(reg) == ["polka"]


def test_clear_removes_everything():
    reg = AssetRegistry()
    reg.register("a", 1)
    reg.register("b", 2)
    reg.clear()
    assert len(reg) == 0
    assert reg.get("a") is None


def test_registry_is_shared_per_kind():
    class KindA:
        pass

    class KindB:
        pass

    registry(KindA).register("x", 10)
    assert registry(KindA) is registry(KindA)
    assert registry(KindA).get("x") == 10
    assert registry(KindB).get("x") is None
    registry(KindA).clear()
    assert registry(KindA).get("x") is None