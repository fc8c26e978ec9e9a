from types import SimpleNamespace

from dnd_switch.adapters import gio_settings
from dnd_switch.adapters.gio_settings import GioPreferenceStore, GioSchemaRegistry


class _FakeSettings:
    def __init__(self, values):
        self.values = dict(values)
        self.handlers = {}
        self._next_id = 1

    def get_boolean(self, key):
        return self.values[key]

    def set_boolean(self, key, value):
        self.values[key] = value
        for signal, handler in list(self.handlers.values()):
            if signal == f"changed::{key}":
                handler(self, key)

    def connect(self, signal, handler):
        handler_id = self._next_id
        self._next_id += 1
        self.handlers[handler_id] = (signal, handler)
        return handler_id

    def disconnect(self, handler_id):
        del self.handlers[handler_id]


def test_store_delegates_to_gio_settings():
    settings = _FakeSettings({"show-banners": True})
    store = GioPreferenceStore(settings)

    store.set_bool("show-banners", False)

    assert settings.values["show-banners"] is False
    assert store.get_bool("show-banners") is False


def test_store_change_callback_takes_no_arguments_and_disconnects():
    settings = _FakeSettings({"show-icon": True})
    store = GioPreferenceStore(settings)
    calls = []

    subscription = store.on_change("show-icon", lambda: calls.append("changed"))
    store.set_bool("show-icon", True)
    subscription.cancel()
    store.set_bool("show-icon", False)

    assert calls == ["changed"]
    assert settings.handlers == {}


def _fake_gio(default_schemas, directory_schemas, created):
    class _Source:
        def __init__(self, schemas):
            self.schemas = schemas

        def lookup(self, schema_id, recursive):
            return self.schemas.get(schema_id)

    default_source = _Source(default_schemas)

    def new_from_directory(directory, parent, trusted):
        assert parent is default_source
        return _Source(directory_schemas.get(directory, {}))

    def new_full(schema, backend, path):
        created.append(schema)
        return _FakeSettings({})

    return SimpleNamespace(
        SettingsSchemaSource=SimpleNamespace(
            get_default=lambda: default_source,
            new_from_directory=new_from_directory,
        ),
        Settings=SimpleNamespace(new_full=new_full),
    )


def test_registry_opens_schema_from_directory(monkeypatch, tmp_path):
    created = []
    fake = _fake_gio({}, {str(tmp_path): {"org.example.ext": "local-schema"}}, created)
    monkeypatch.setattr(gio_settings, "_gio", lambda: fake)

    store = GioSchemaRegistry().open_from_directory(tmp_path, "org.example.ext")

    assert isinstance(store, GioPreferenceStore)
    assert created == ["local-schema"]


def test_registry_returns_none_for_unknown_schemas(monkeypatch, tmp_path):
    created = []
    fake = _fake_gio({"org.gnome.desktop.notifications": "notif"}, {}, created)
    monkeypatch.setattr(gio_settings, "_gio", lambda: fake)
    registry = GioSchemaRegistry()

    assert registry.open_from_directory(tmp_path, "org.example.ext") is None
    assert registry.open_installed("org.example.ext") is None
    assert isinstance(registry.open_installed("org.gnome.desktop.notifications"), GioPreferenceStore)
    assert created == ["notif"]
