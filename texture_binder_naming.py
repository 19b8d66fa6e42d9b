"""
Texture Binder - Naming Convention

Naming and folder-placement rules used by the texture binder. This module has
no dependency on the `unreal` module, so the rules can be checked outside the
editor.

Convention:
    <MaterialFolder>/_Textures/T_<MaterialBaseName>_<ParameterSuffix>
    <MaterialFolder>/MI_<MaterialBaseName>

Example:
    /Game/Props/Wood_Albedo
        -> texture moved to  /Game/Props/_Textures/T_Wood_Albedo
        -> material instance /Game/Props/MI_Wood
        -> bound to texture parameter "Albedo"
"""

from typing import List, NamedTuple


TEXTURE_FOLDER_NAME = "_Textures"
TEXTURE_PREFIX = "T_"
MATERIAL_INSTANCE_PREFIX = "MI_"
NAME_DELIMITER = "_"


class TextureNameError(ValueError):
    """Raised when a texture name does not follow T_<Material>_<Suffix>."""


class TexturePlan(NamedTuple):
    source_path: str
    destination_path: str
    texture_name: str
    texture_folder: str
    material_folder: str
    material_base_name: str
    parameter_suffix: str
    material_instance_name: str
    material_instance_path: str

    @property
    def needs_rename(self) -> bool:
        return self.source_path != self.destination_path


def _strip_trailing_slash(path: str) -> str:
    stripped = path.rstrip("/")
    return stripped or "/"


def join_path(folder: str, name: str) -> str:
    """Join a content folder and an asset or folder name with a single '/'."""
    return f"{folder.rstrip('/')}/{name}"


def is_texture_folder(package_path: str) -> bool:
    """Check if a package path is a '_Textures' folder."""
    return _strip_trailing_slash(package_path).split("/")[-1] == TEXTURE_FOLDER_NAME


def get_texture_folder(package_path: str) -> str:
    """Get the '_Textures' folder a texture in `package_path` belongs to.

    Textures already inside a '_Textures' folder stay where they are, any other
    folder gets a '_Textures' subfolder.
    """
    if is_texture_folder(package_path):
        return _strip_trailing_slash(package_path)
    return join_path(package_path, TEXTURE_FOLDER_NAME)


def get_material_folder(texture_folder: str) -> str:
    """Get the folder holding the material instance for a texture folder."""
    texture_folder = _strip_trailing_slash(texture_folder)
    if not is_texture_folder(texture_folder):
        return texture_folder
    parent = texture_folder[:-len(TEXTURE_FOLDER_NAME)]
    return _strip_trailing_slash(parent)


def ensure_texture_prefix(name: str) -> str:
    if name.startswith(TEXTURE_PREFIX):
        return name
    return TEXTURE_PREFIX + name


def split_texture_name(name: str) -> List[str]:
    """Split a texture name into its '_' separated tokens.

    Empty tokens (from doubled or trailing underscores) are dropped.

    Raises:
        TextureNameError: if fewer than two tokens remain
    """
    tokens = [token for token in name.split(NAME_DELIMITER) if token]
    if len(tokens) < 2:
        raise TextureNameError(
            f"Texture name '{name}' does not match "
            f"{TEXTURE_PREFIX}<MaterialName>{NAME_DELIMITER}<ParameterSuffix>"
        )
    return tokens


def get_material_base_name(tokens: List[str]) -> str:
    return tokens[1]


def get_parameter_suffix(tokens: List[str]) -> str:
    return tokens[-1]


def get_material_instance_name(material_base_name: str) -> str:
    return MATERIAL_INSTANCE_PREFIX + material_base_name


def plan_texture(package_name: str, package_path: str, asset_name: str) -> TexturePlan:
    """Compute where a texture goes and which material instance it feeds.

    Args:
        package_name: Current package of the texture, e.g. "/Game/Props/Wood_Albedo"
        package_path: Folder of the texture, e.g. "/Game/Props"
        asset_name: Object name of the texture, e.g. "Wood_Albedo"

    Returns:
        TexturePlan with the destination path, material instance path and
        texture parameter suffix

    Raises:
        TextureNameError: if the name has no material/suffix tokens
    """
    texture_folder = get_texture_folder(package_path)
    material_folder = get_material_folder(texture_folder)

    # Prefix first, so "Wood_Albedo" parses as T / Wood / Albedo
    texture_name = ensure_texture_prefix(asset_name)
    tokens = split_texture_name(texture_name)

    material_base_name = get_material_base_name(tokens)
    material_instance_name = get_material_instance_name(material_base_name)

    return TexturePlan(
        source_path=package_name,
        destination_path=join_path(texture_folder, texture_name),
        texture_name=texture_name,
        texture_folder=texture_folder,
        material_folder=material_folder,
        material_base_name=material_base_name,
        parameter_suffix=get_parameter_suffix(tokens),
        material_instance_name=material_instance_name,
        material_instance_path=join_path(material_folder, material_instance_name),
    )


__all__ = [
    'TEXTURE_FOLDER_NAME',
    'TEXTURE_PREFIX',
    'MATERIAL_INSTANCE_PREFIX',
    'NAME_DELIMITER',
    'TextureNameError',
    'TexturePlan',
    'join_path',
    'is_texture_folder',
    'get_texture_folder',
    'get_material_folder',
    'ensure_texture_prefix',
    'split_texture_name',
    'get_material_base_name',
    'get_parameter_suffix',
    'get_material_instance_name',
    'plan_texture',
]
