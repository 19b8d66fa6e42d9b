"""
In-memory stand-ins for the editor used by texture_binder_utils.

FakeEditor implements the same methods as texture_binder_editor.UnrealEditor
and records every change it is asked to make.
"""

import contextlib

import pytest

from texture_binder_utils import SelectedTexture


MASTER_PATH = "/SetTexturesToMaterial/M_Master"


class FakeTexture:
    def __init__(self, name, srgb=True):
        self.name = name
        self.srgb = srgb


class FakeMaterial:
    def __init__(self, name, defaults=None):
        self.name = name
        self.defaults = defaults or {}


class FakeMaterialInstance:
    def __init__(self, name, parent=None, parameter_names=None):
        self.name = name
        self.parent = parent
        self.parameter_names = list(parameter_names or [])
        self.values = {}


class FakeAssetData:
    def __init__(self, asset, package_path, asset_name, redirector=False):
        self.asset = asset
        self.package_path = package_path
        self.asset_name = asset_name
        self.package_name = f"{package_path}/{asset_name}"
        self.asset_class = type(asset)
        self.redirector = redirector
        self.loaded = False

    def is_redirector(self):
        return self.redirector

    def get_class(self):
        return self.asset_class

    def get_asset(self):
        self.loaded = True
        return self.asset


class FakeSlowTask:
    def __init__(self, cancel_after=None):
        self.cancel_after = cancel_after
        self.frames = []

    def should_cancel(self):
        return self.cancel_after is not None and len(self.frames) >= self.cancel_after

    def enter_progress_frame(self, work, description):
        self.frames.append(description)


class FakeEditor:
    texture_class = FakeTexture

    def __init__(self):
        self.assets = {}
        self.selection = []
        self.instance_parameter_names = ["Albedo", "Normal", "Roughness"]
        self.fail_create = False
        self.rename_result = True
        self.cancel_after = None

        self.infos = []
        self.warnings = []
        self.errors = []
        self.created = []
        self.saved = []
        self.renamed = []
        self.parent_changes = []
        self.srgb_changes = []
        self.parameter_changes = []
        self.transactions = []
        self.slow_task = None

    @property
    def modified(self):
        return bool(
            self.created or self.saved or self.renamed or self.parent_changes
            or self.srgb_changes or self.parameter_changes
        )

    # Logging

    def log(self, message):
        self.infos.append(message)

    def log_warning(self, message):
        self.warnings.append(message)

    def log_error(self, message):
        self.errors.append(message)

    # Assets

    def get_selected_asset_data(self):
        return self.selection

    def is_texture_asset_data(self, asset_data):
        return issubclass(asset_data.get_class(), self.texture_class)

    def get_name(self, asset):
        return asset.name

    def load_asset(self, asset_path):
        return self.assets.get(asset_path)

    def save_asset(self, asset):
        self.saved.append(asset)
        return True

    def rename_asset(self, source_path, destination_path):
        self.renamed.append((source_path, destination_path))
        if self.rename_result:
            self.assets[destination_path] = self.assets.pop(source_path, None)
        return self.rename_result

    def create_material_instance(self, name, folder, parent):
        if self.fail_create:
            return None
        instance = FakeMaterialInstance(name, parent, self.instance_parameter_names)
        self.assets[f"{folder}/{name}"] = instance
        self.created.append((name, folder, parent))
        return instance

    # Materials

    def is_material_instance(self, asset):
        return isinstance(asset, FakeMaterialInstance)

    def get_parent(self, material_instance):
        return material_instance.parent

    def set_parent(self, material_instance, parent):
        material_instance.parent = parent
        self.parent_changes.append((material_instance, parent))

    def get_texture_parameter_names(self, material):
        return material.parameter_names

    def get_default_texture(self, material, parameter_name):
        return material.defaults.get(parameter_name)

    def set_texture_parameter(self, material_instance, parameter_name, texture):
        material_instance.values[parameter_name] = texture
        self.parameter_changes.append((material_instance, parameter_name, texture))
        return True

    # Textures

    def get_srgb(self, texture):
        return texture.srgb

    def set_srgb(self, texture, srgb):
        texture.srgb = srgb
        self.srgb_changes.append((texture, srgb))

    # Progress / undo

    @contextlib.contextmanager
    def progress(self, total, label):
        self.slow_task = FakeSlowTask(self.cancel_after)
        yield self.slow_task

    @contextlib.contextmanager
    def transaction(self, label):
        self.transactions.append(label)
        yield


def add_texture(editor, package_path, asset_name, srgb=True):
    """Create a texture asset in the fake editor and return it as a selection."""
    texture = FakeTexture(asset_name, srgb)
    package_name = f"{package_path}/{asset_name}"
    editor.assets[package_name] = texture
    return SelectedTexture(texture, package_name, package_path, asset_name)


@pytest.fixture
def master():
    return FakeMaterial("M_Master", defaults={
        "Albedo": FakeTexture("T_DefaultAlbedo", srgb=True),
        "Normal": FakeTexture("T_DefaultNormal", srgb=False),
    })


@pytest.fixture
def editor(master):
    fake = FakeEditor()
    fake.assets[MASTER_PATH] = master
    return fake
