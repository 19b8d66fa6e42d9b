"""
Texture Binder Utilities for Unreal Engine 5

Binds selected textures to material instances using the texture's name:

    T_<MaterialName>_<ParameterSuffix>  ->  MI_<MaterialName>.<ParameterSuffix>

For each texture the material instance is loaded (or created from the master
material), the texture is assigned to the texture parameter whose name equals
the suffix, and the texture is moved into the '_Textures' folder next to the
material instance.

All editor access goes through an editor object (see texture_binder_editor.py),
so this module does not import `unreal` itself.

Usage:
    import texture_binder_editor as tbe
    import texture_binder_utils as tbu
    tbu.run_on_selection(tbe.UnrealEditor())
"""

from typing import Optional, List, NamedTuple

from texture_binder_naming import TextureNameError, plan_texture


# Parent of every material instance created or updated by the binder
MASTER_MATERIAL_PATH = "/SetTexturesToMaterial/M_Master"

TRANSACTION_LABEL = "Set Textures To Material Instance"
PROGRESS_LABEL = "Setting textures to material instances..."

STATUS_BOUND = "bound"
STATUS_UNBOUND = "unbound"
STATUS_SKIPPED = "skipped"


class SelectedTexture(NamedTuple):
    asset: object
    package_name: str
    package_path: str
    asset_name: str


def is_texture_asset_data(editor, asset_data) -> bool:
    """Check an entry's registry class without loading the asset."""
    return not asset_data.is_redirector() and editor.is_texture_asset_data(asset_data)


def contains_texture_assets(editor, asset_data_list) -> bool:
    """Check if any content browser entry is a texture, loading nothing."""
    return any(is_texture_asset_data(editor, asset_data) for asset_data in asset_data_list)


def filter_texture_assets(editor, asset_data_list) -> List[SelectedTexture]:
    """Keep the content browser entries that are textures.

    Only entries whose registry class is a texture are loaded.

    Args:
        editor: Editor adapter
        asset_data_list: unreal.AssetData entries from the content browser

    Returns:
        List of SelectedTexture, redirectors and non-texture assets removed
    """
    textures = []
    for asset_data in asset_data_list:
        if not is_texture_asset_data(editor, asset_data):
            continue

        asset = asset_data.get_asset()
        if not isinstance(asset, editor.texture_class):
            continue

        textures.append(SelectedTexture(
            asset=asset,
            package_name=str(asset_data.package_name),
            package_path=str(asset_data.package_path),
            asset_name=str(asset_data.asset_name),
        ))

    return textures


def find_texture_parameter(parameter_names: List[str], suffix: str) -> Optional[str]:
    """Find the texture parameter whose name is exactly `suffix`."""
    for name in parameter_names:
        if name == suffix:
            return name
    return None


def new_report() -> dict:
    return {
        'error': None,
        'processed': 0,
        'bound': 0,
        'unbound': 0,
        'skipped': 0,
        'renamed': 0,
        'created': 0,
        'textures': [],
    }


def get_or_create_material_instance(editor, plan, master_material) -> tuple:
    """Load the material instance for a plan, creating it if missing.

    New instances are parented to `master_material` and saved right away.

    Returns:
        Tuple of (material_instance or None, created: bool)
    """
    material_instance = editor.load_asset(plan.material_instance_path)
    if material_instance:
        if not editor.is_material_instance(material_instance):
            editor.log_error(
                f"  {plan.material_instance_path} exists but is not a material instance"
            )
            return None, False
        return material_instance, False

    material_instance = editor.create_material_instance(
        plan.material_instance_name,
        plan.material_folder,
        master_material
    )
    if not material_instance:
        return None, False

    editor.log(f"  Created material instance: {plan.material_instance_path}")
    editor.save_asset(material_instance)
    return material_instance, True


def bind_texture_to_material_instance(editor, texture, material_instance, master_material, suffix: str) -> Optional[str]:
    """Assign a texture to the parameter of `material_instance` named `suffix`.

    The texture's sRGB flag is copied from the master material's default
    texture for the same parameter.

    Returns:
        The parameter name, or None if the instance has no such parameter
    """
    parameter_names = [str(name) for name in editor.get_texture_parameter_names(material_instance)]
    parameter_name = find_texture_parameter(parameter_names, suffix)

    if parameter_name is None:
        editor.log_error(
            f"  Could not find texture suffix '{suffix}' in {', '.join(parameter_names)}"
        )
        return None

    default_texture = editor.get_default_texture(master_material, parameter_name)
    if default_texture:
        srgb = editor.get_srgb(default_texture)
        editor.log(f"  Setting {editor.get_name(texture)} sRGB to {srgb}")
        editor.set_srgb(texture, srgb)
    else:
        editor.log_warning(
            f"  Master material has no default texture for '{parameter_name}', sRGB left unchanged"
        )

    if not editor.set_texture_parameter(material_instance, parameter_name, texture):
        editor.log_error(f"  Failed to set texture parameter '{parameter_name}'")
        return None

    return parameter_name


def set_texture_to_material_instance(editor, selected: SelectedTexture, master_material) -> dict:
    """Run the full pipeline for one texture.

    Returns:
        Dict with keys: texture, status, material_instance, parameter,
        renamed_to, created, message
    """
    result = {
        'texture': selected.package_name,
        'status': STATUS_SKIPPED,
        'material_instance': None,
        'parameter': None,
        'renamed_to': None,
        'created': False,
        'message': '',
    }

    editor.log(f"\n[{selected.asset_name}]")

    try:
        plan = plan_texture(selected.package_name, selected.package_path, selected.asset_name)
    except TextureNameError as e:
        editor.log_error(f"  SKIPPED: {e}")
        result['message'] = str(e)
        return result

    material_instance, created = get_or_create_material_instance(editor, plan, master_material)
    if not material_instance:
        message = f"Can't find or create material instance: {plan.material_instance_path}"
        editor.log_error(f"  SKIPPED: {message}")
        result['message'] = message
        return result

    result['material_instance'] = plan.material_instance_path
    result['created'] = created

    if editor.get_parent(material_instance) != master_material:
        editor.log(f"  Setting parent of {plan.material_instance_name} to master material")
        editor.set_parent(material_instance, master_material)

    parameter_name = bind_texture_to_material_instance(
        editor,
        selected.asset,
        material_instance,
        master_material,
        plan.parameter_suffix
    )
    if parameter_name:
        editor.log(f"  Assigned {plan.texture_name} -> {plan.material_instance_name}.{parameter_name}")
        result['status'] = STATUS_BOUND
        result['parameter'] = parameter_name
    else:
        result['status'] = STATUS_UNBOUND
        result['message'] = f"No texture parameter named '{plan.parameter_suffix}'"

    # The texture is moved to its conventional place even when left unbound
    if plan.needs_rename:
        if editor.rename_asset(plan.source_path, plan.destination_path):
            editor.log(f"  Moved {plan.source_path} -> {plan.destination_path}")
            result['renamed_to'] = plan.destination_path
        else:
            editor.log_error(f"  Failed to move {plan.source_path} -> {plan.destination_path}")

    return result


def _process_textures(editor, textures: List[SelectedTexture], master_material, report: dict):
    with editor.progress(len(textures), PROGRESS_LABEL) as slow_task:
        for selected in textures:
            if slow_task.should_cancel():
                editor.log_warning("Operation cancelled by user")
                break

            slow_task.enter_progress_frame(1, f"Processing: {selected.asset_name}")

            result = set_texture_to_material_instance(editor, selected, master_material)
            report['textures'].append(result)
            report['processed'] += 1
            report[result['status']] += 1
            if result['created']:
                report['created'] += 1
            if result['renamed_to']:
                report['renamed'] += 1


def set_textures_to_material_instances(
    editor,
    textures: List[SelectedTexture],
    master_material_path: str = MASTER_MATERIAL_PATH,
    use_transaction: bool = False
) -> dict:
    """Bind each texture to its material instance.

    The master material is loaded before anything else; if it is missing no
    asset is touched.

    Args:
        editor: Editor adapter (texture_binder_editor.UnrealEditor in the editor)
        textures: Textures to process, see filter_texture_assets()
        master_material_path: Parent material for the material instances
        use_transaction: Wrap the batch in an undoable editor transaction

    Returns:
        Report dict with counts and a per-texture 'textures' list
    """
    report = new_report()

    master_material = editor.load_asset(master_material_path)
    if not master_material:
        report['error'] = f"Can't find master material: {master_material_path}"
        editor.log_error(report['error'])
        return report

    if use_transaction:
        with editor.transaction(TRANSACTION_LABEL):
            _process_textures(editor, textures, master_material, report)
    else:
        _process_textures(editor, textures, master_material, report)

    editor.log(
        f"\nCompleted! Bound {report['bound']}/{report['processed']} textures "
        f"({report['unbound']} unbound, {report['skipped']} skipped, "
        f"{report['created']} material instances created, {report['renamed']} moved)"
    )
    return report


def run_on_selection(
    editor,
    master_material_path: str = MASTER_MATERIAL_PATH,
    use_transaction: bool = False
) -> dict:
    """Run the binder on the textures selected in the Content Browser."""
    textures = filter_texture_assets(editor, editor.get_selected_asset_data())
    if not textures:
        editor.log_warning("No textures selected in Content Browser")
        return new_report()

    editor.log(f"Setting {len(textures)} texture(s) to material instances")
    return set_textures_to_material_instances(editor, textures, master_material_path, use_transaction)


__all__ = [
    'MASTER_MATERIAL_PATH',
    'SelectedTexture',
    'is_texture_asset_data',
    'contains_texture_assets',
    'filter_texture_assets',
    'find_texture_parameter',
    'new_report',
    'get_or_create_material_instance',
    'bind_texture_to_material_instance',
    'set_texture_to_material_instance',
    'set_textures_to_material_instances',
    'run_on_selection',
]
