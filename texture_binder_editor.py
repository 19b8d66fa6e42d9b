"""
Texture Binder - Unreal Editor access

Thin wrapper over the editor scripting libraries used by texture_binder_utils.
Every call returns what the underlying `unreal` API returns (None/False on
failure) and logs to the Output Log.
"""

import contextlib

import unreal


class UnrealEditor:
    """Editor asset, material and UI operations used by the texture binder."""

    texture_class = unreal.Texture2D

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def log(self, message: str):
        unreal.log(message)

    def log_warning(self, message: str):
        unreal.log_warning(message)

    def log_error(self, message: str):
        unreal.log_error(message)

    # -------------------------------------------------------------------------
    # Assets
    # -------------------------------------------------------------------------

    def get_selected_asset_data(self) -> list:
        return unreal.EditorUtilityLibrary.get_selected_asset_data()

    def is_texture_asset_data(self, asset_data) -> bool:
        """Check the registry class of an entry, without loading the asset."""
        asset_class = asset_data.get_class()
        if not asset_class:
            return False
        return unreal.MathLibrary.class_is_child_of(asset_class, self.texture_class.static_class())

    def get_name(self, asset) -> str:
        return asset.get_name()

    def load_asset(self, asset_path: str):
        """Load an asset, returning None if it does not exist."""
        if not unreal.EditorAssetLibrary.does_asset_exist(asset_path):
            return None
        return unreal.EditorAssetLibrary.load_asset(asset_path)

    def save_asset(self, asset) -> bool:
        return unreal.EditorAssetLibrary.save_loaded_asset(asset)

    def rename_asset(self, source_path: str, destination_path: str) -> bool:
        """Rename/move an asset, creating the destination folder if needed."""
        destination_folder = destination_path.rsplit("/", 1)[0]
        if not unreal.EditorAssetLibrary.does_directory_exist(destination_folder):
            unreal.EditorAssetLibrary.make_directory(destination_folder)
        return unreal.EditorAssetLibrary.rename_asset(source_path, destination_path)

    def create_material_instance(self, name: str, folder: str, parent):
        asset_tools = unreal.AssetToolsHelpers.get_asset_tools()

        mi_factory = unreal.MaterialInstanceConstantFactoryNew()
        mi_factory.set_editor_property("initial_parent", parent)

        return asset_tools.create_asset(
            name,
            folder,
            unreal.MaterialInstanceConstant,
            mi_factory
        )

    # -------------------------------------------------------------------------
    # Materials
    # -------------------------------------------------------------------------

    def is_material_instance(self, asset) -> bool:
        return isinstance(asset, unreal.MaterialInstanceConstant)

    def get_parent(self, material_instance):
        return material_instance.get_editor_property("parent")

    def set_parent(self, material_instance, parent):
        unreal.MaterialEditingLibrary.set_material_instance_parent(material_instance, parent)

    def get_texture_parameter_names(self, material) -> list:
        return unreal.MaterialEditingLibrary.get_texture_parameter_names(material)

    def get_default_texture(self, material, parameter_name: str):
        """Get the texture a material (or material instance) uses for a parameter."""
        if isinstance(material, unreal.Material):
            return unreal.MaterialEditingLibrary.get_material_default_texture_parameter_value(
                material, parameter_name
            )
        return unreal.MaterialEditingLibrary.get_material_instance_texture_parameter_value(
            material, parameter_name
        )

    def set_texture_parameter(self, material_instance, parameter_name: str, texture) -> bool:
        return unreal.MaterialEditingLibrary.set_material_instance_texture_parameter_value(
            material_instance,
            parameter_name,
            texture
        )

    # -------------------------------------------------------------------------
    # Textures
    # -------------------------------------------------------------------------

    def get_srgb(self, texture) -> bool:
        return texture.get_editor_property("srgb")

    def set_srgb(self, texture, srgb: bool):
        texture.set_editor_property("srgb", srgb)

    # -------------------------------------------------------------------------
    # Progress / undo
    # -------------------------------------------------------------------------

    @contextlib.contextmanager
    def progress(self, total: int, label: str):
        with unreal.ScopedSlowTask(total, label) as slow_task:
            slow_task.make_dialog(True)
            yield slow_task

    @contextlib.contextmanager
    def transaction(self, label: str):
        with unreal.ScopedEditorTransaction(label) as transaction:
            yield transaction
