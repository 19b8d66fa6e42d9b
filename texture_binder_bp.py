"""
Texture Binder - Blueprint Integration

Exposes the texture binder to Blueprints through a Blueprint Function Library
("Texture Binder" category) and to the "Execute Python Command" node through
short module-level functions.

Usage from Blueprint (Execute Python Command node):

    # Selected textures, default master material (/SetTexturesToMaterial/M_Master):
    import texture_binder_bp as tbbp; tbbp.st()

    # Custom master material, undoable:
    import texture_binder_bp as tbbp; tbbp.st("/Game/Materials/M_Master", use_transaction=True)

Output:
    Results are logged to the Output Log. The Blueprint node returns the
    report as a JSON string:
    {
        "error": str or null,
        "processed": int, "bound": int, "unbound": int,
        "skipped": int, "renamed": int, "created": int,
        "textures": [
            {"texture": str, "status": "bound" | "unbound" | "skipped",
             "material_instance": str or null, "parameter": str or null,
             "renamed_to": str or null, "created": bool, "message": str}
        ]
    }
"""

import unreal
import json

import texture_binder_utils as tbu
from texture_binder_editor import UnrealEditor


def set_selected_textures(
    master_material_path: str = tbu.MASTER_MATERIAL_PATH,
    use_transaction: bool = False
) -> dict:
    """Bind the selected Content Browser textures to their material instances.

    Args:
        master_material_path: Parent material for the material instances
        use_transaction: Wrap the changes in an undoable transaction

    Returns:
        Report dict, see module docstring
    """
    return tbu.run_on_selection(UnrealEditor(), master_material_path or tbu.MASTER_MATERIAL_PATH, use_transaction)


@unreal.uclass()
class BPTextureBinder(unreal.BlueprintFunctionLibrary):

    @unreal.ufunction(static=True, params=[str, bool], ret=str, meta=dict(Category="Texture Binder"))
    def set_selected_textures_to_material_instances(master_material_path, use_transaction):
        """Bind selected textures to material instances named after them.

        Pass an empty master_material_path to use /SetTexturesToMaterial/M_Master.
        Returns the report as a JSON string.
        """
        report = set_selected_textures(master_material_path, use_transaction)
        return json.dumps(report)


# Shorthand alias for Blueprint
st = set_selected_textures
