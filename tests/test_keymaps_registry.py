import pytest

from awildtxt.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
)
from awildtxt.keymaps.defaults import DEFAULT_BINDINGS, load_default_keymaps


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    token: str = "g",
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(token),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.g")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.g"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(make_binding(binding_id="normal.g.duplicate"))


def test_same_token_in_other_mode_is_not_a_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.g"))
    registry.register_binding(make_binding(binding_id="insert.g", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_replace_binding_drops_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_action(make_action("core.other"))
    registry.register_binding(make_binding(binding_id="normal.g"))

    registry.register_binding(
        make_binding(binding_id="normal.g2", action_id="core.other"), replace=True
    )

    match = registry.resolve("normal", "g")
    assert match is not None
    assert match.binding.id == "normal.g2"
    assert match.action.id == "core.other"
    assert registry.stats().binding_count == 1


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.g"))


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.g"))

    removed = registry.unregister_binding("normal.g")

    assert removed is not None
    assert registry.resolve("normal", "g") is None
    assert registry.unregister_binding("normal.g") is None


def test_keystroke_tokens_normalize_modifiers() -> None:
    assert KeyStroke("o", ("CTRL",)).token == "ctrl+o"
    assert KeyStroke.parse("ctrl+o") == KeyStroke("o", ("ctrl",))
    assert KeyStroke.parse("x").token == "x"
    with pytest.raises(ValueError):
        KeyStroke("")


def test_load_default_keymaps() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    stats = registry.stats()
    assert stats.binding_count == len(DEFAULT_BINDINGS)
    assert stats.modes == ("insert", "normal", "prompt")
    match = registry.resolve("normal", "ctrl+o")
    assert match is not None
    assert match.action.id == "core.open_prompt"


def test_load_default_keymaps_with_exclusions_and_extras() -> None:
    registry = KeymapRegistry()
    extra = Binding(
        id="normal.a",
        mode="normal",
        stroke=KeyStroke("a"),
        action_id="core.enter_insert",
    )

    load_default_keymaps(
        registry, exclude_bindings=["normal.x"], extra_bindings=[extra]
    )

    assert registry.resolve("normal", "x") is None
    match = registry.resolve("normal", "a")
    assert match is not None
    assert match.binding is extra
