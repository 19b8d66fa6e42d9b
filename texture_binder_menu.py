"""
Texture Binder - Content Browser menu

Adds "Set Texture(s) to Material Instance(s)" to the Content Browser asset
context menu. The entry is only shown when the selection contains textures.

Registered at editor startup by init_unreal.py:
    import texture_binder_menu
    texture_binder_menu.register_menu()
"""

import unreal

import texture_binder_utils as tbu
from texture_binder_editor import UnrealEditor


MENU_OWNER = "TextureBinder"
MENU_NAME = "ContentBrowser.AssetContextMenu"
MENU_INSERT_AFTER = "CommonAssetActions"

SECTION_NAME = "TextureBinderTools"
SECTION_LABEL = "Texture Tools"

ENTRY_NAME = "SetTexturesToMaterialInstances"
ENTRY_LABEL = "Set Texture(s) to Material Instance(s)"
ENTRY_TOOLTIP = "Set each texture to a material instance corresponding to the texture's name and parameter"

# Registered entry, kept alive for as long as it is in the menu
_menu_entry = None


@unreal.uclass()
class SetTexturesToMaterialEntry(unreal.ToolMenuEntryScript):

    @unreal.ufunction(override=True)
    def is_visible(self, context):
        editor = UnrealEditor()
        return tbu.contains_texture_assets(editor, editor.get_selected_asset_data())

    @unreal.ufunction(override=True)
    def execute(self, context):
        tbu.run_on_selection(UnrealEditor())


def register_menu():
    """Add the texture binder entry to the Content Browser asset context menu."""
    global _menu_entry

    # Re-registering (e.g. after reloading this module) replaces the old entry
    unregister_menu()

    tool_menus = unreal.ToolMenus.get()
    menu = tool_menus.extend_menu(MENU_NAME)
    if not menu:
        unreal.log_warning(f"Menu not found: {MENU_NAME}")
        return

    menu.add_section(
        SECTION_NAME,
        unreal.Text(SECTION_LABEL),
        MENU_INSERT_AFTER,
        unreal.ToolMenuInsertType.AFTER
    )

    entry = SetTexturesToMaterialEntry()
    entry.init_entry(
        MENU_OWNER,
        MENU_NAME,
        SECTION_NAME,
        ENTRY_NAME,
        unreal.Text(ENTRY_LABEL),
        unreal.Text(ENTRY_TOOLTIP)
    )
    entry.register_menu_entry()
    _menu_entry = entry

    tool_menus.refresh_all_widgets()
    unreal.log(f"Registered '{ENTRY_LABEL}' in {MENU_NAME}")


def unregister_menu():
    """Remove every menu entry owned by the texture binder."""
    global _menu_entry

    unreal.ToolMenus.get().unregister_owner_by_name(MENU_OWNER)
    _menu_entry = None
