"""Custom exceptions for the voxel asset pipeline."""

from typing import Optional


class VoxelForgeError(Exception):
    """Base exception for all voxel_forge errors."""

    pass


class InvalidModelError(VoxelForgeError, ValueError):
    """A box or model violates a geometric or structural invariant."""

    pass


class ColorParseError(VoxelForgeError, ValueError):
    """A color string could not be parsed."""

    def __init__(
        self,
        value: str,
        box_id: Optional[str] = None,
        field: Optional[str] = None
    ):
        self.value = value
        self.box_id = box_id
        self.field = field

        where = ""
        if box_id is not None:
            where = f" (box '{box_id}', field '{field}')"
        elif field is not None:
            where = f" (field '{field}')"
        super().__init__(f"Invalid color string {value!r}{where}")


class BakeOptionsError(VoxelForgeError, ValueError):
    """Bake options are out of range."""

    pass


class AssetImportError(VoxelForgeError, ValueError):
    """Exchanged asset JSON is malformed."""

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        field: Optional[str] = None
    ):
        self.index = index
        self.field = field

        location = []
        if index is not None:
            location.append(f"asset {index}")
        if field is not None:
            location.append(f"field '{field}'")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class UnknownArchetypeError(VoxelForgeError, KeyError):
    """No generator is registered under the requested key."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown archetype"
