"""Renderer-ready scene serialization.

Maps positioned parts to box meshes with PBR material settings and frames
them with a camera and a simple two-light setup. The serializer only
sees positioned parts; it knows nothing about the bill of parts or the
engineering spec.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..entities import PositionedPart
from ..value_objects import MaterialType, Position3D, Rotation3D

__all__ = [
    "Bounds",
    "Camera",
    "DirectionalLight",
    "Lighting",
    "MeshMaterial",
    "Scene",
    "SceneMesh",
    "SceneSerializer",
]

MATERIAL_ROUGHNESS: dict[MaterialType, float] = {
    MaterialType.WOOD: 0.8,
    MaterialType.METAL: 0.3,
    MaterialType.PLASTIC: 0.5,
    MaterialType.GLASS: 0.0,
}
MATERIAL_METALNESS: dict[MaterialType, float] = {
    MaterialType.WOOD: 0.0,
    MaterialType.METAL: 0.9,
    MaterialType.PLASTIC: 0.1,
    MaterialType.GLASS: 0.1,
}
GLASS_OPACITY = 0.3

CAMERA_DISTANCE_FACTOR = 2.0
CAMERA_FOV = 50
BACKGROUND_COLOR = "#f5f1e8"
LIGHT_COLOR = "#ffffff"


@dataclass(frozen=True)
class MeshMaterial:
    color: str
    roughness: float
    metalness: float
    opacity: float = 1.0
    transparent: bool = False

    @classmethod
    def for_material(cls, material: MaterialType, color: str) -> "MeshMaterial":
        is_glass = material == MaterialType.GLASS
        return cls(
            color=color,
            roughness=MATERIAL_ROUGHNESS.get(material, 0.5),
            metalness=MATERIAL_METALNESS.get(material, 0.0),
            opacity=GLASS_OPACITY if is_glass else 1.0,
            transparent=is_glass,
        )


@dataclass(frozen=True)
class SceneMesh:
    """One box mesh. Box width is X, height is Y and depth is Z."""

    id: str
    name: str
    width: float
    height: float
    depth: float
    position: Position3D
    rotation: Rotation3D
    material: MeshMaterial
    type: str = "box"
    cast_shadow: bool = True
    receive_shadow: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "position": self.position.as_dict(),
            "rotation": self.rotation.as_dict(),
            "dimensions": {"width": self.width, "height": self.height, "depth": self.depth},
            "material": {
                "color": self.material.color,
                "roughness": self.material.roughness,
                "metalness": self.material.metalness,
                "opacity": self.material.opacity,
                "transparent": self.material.transparent,
            },
            "castShadow": self.cast_shadow,
            "receiveShadow": self.receive_shadow,
        }


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned extents of the scene in cm."""

    width: float
    height: float
    depth: float

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height, self.depth)


@dataclass(frozen=True)
class Camera:
    position: Position3D
    look_at: Position3D
    fov: int = CAMERA_FOV


@dataclass(frozen=True)
class DirectionalLight:
    position: Position3D
    intensity: float
    color: str = LIGHT_COLOR


@dataclass(frozen=True)
class Lighting:
    ambient_color: str = LIGHT_COLOR
    ambient_intensity: float = 0.5
    directional: tuple[DirectionalLight, ...] = field(
        default_factory=lambda: (
            DirectionalLight(Position3D(500, 1000, 750), 0.8),
            DirectionalLight(Position3D(-500, 1000, -750), 0.4),
        )
    )


@dataclass(frozen=True)
class Scene:
    """Complete scene description for a renderer."""

    meshes: tuple[SceneMesh, ...]
    bounds: Bounds
    camera: Camera
    lighting: Lighting = field(default_factory=Lighting)
    background: str = BACKGROUND_COLOR

    def to_dict(self) -> dict[str, Any]:
        """Renderer-ready mapping with camelCase keys."""
        return {
            "parts": [mesh.to_dict() for mesh in self.meshes],
            "bounds": {
                "width": self.bounds.width,
                "height": self.bounds.height,
                "depth": self.bounds.depth,
            },
            "camera": {
                "position": self.camera.position.as_dict(),
                "lookAt": self.camera.look_at.as_dict(),
                "fov": self.camera.fov,
            },
            "lighting": {
                "ambient": {
                    "color": self.lighting.ambient_color,
                    "intensity": self.lighting.ambient_intensity,
                },
                "directional": [
                    {
                        "position": light.position.as_dict(),
                        "color": light.color,
                        "intensity": light.intensity,
                    }
                    for light in self.lighting.directional
                ],
            },
            "background": self.background,
        }


class SceneSerializer:
    """Builds a Scene from positioned parts."""

    def serialize(
        self,
        parts: list[PositionedPart],
        material: MaterialType,
        color: str,
    ) -> Scene:
        """Serialize positioned parts into a scene.

        Args:
            parts: Positioned part instances.
            material: Material used for the visual settings.
            color: Fallback color for parts without their own.

        Returns:
            Scene with meshes, bounds, camera and lighting.
        """
        meshes = tuple(
            SceneMesh(
                id=part.id,
                name=part.name,
                width=part.dimensions.length,
                height=part.dimensions.height,
                depth=part.dimensions.width,
                position=part.position,
                rotation=part.rotation,
                material=MeshMaterial.for_material(material, part.color or color),
            )
            for part in parts
        )
        bounds = self.compute_bounds(parts)
        distance = bounds.max_dimension * CAMERA_DISTANCE_FACTOR
        camera = Camera(
            position=Position3D(distance * 0.7, distance * 0.5, distance * 0.7),
            look_at=Position3D(0.0, bounds.height / 2, 0.0),
        )
        return Scene(meshes=meshes, bounds=bounds, camera=camera)

    @staticmethod
    def compute_bounds(parts: list[PositionedPart]) -> Bounds:
        """Bounding box of the positioned boxes.

        A quarter turn about Y swaps a box's X and Z extents.
        """
        if not parts:
            return Bounds(0.0, 0.0, 0.0)

        min_x = min_y = min_z = float("inf")
        max_x = max_y = max_z = float("-inf")
        for part in parts:
            dx, dz = part.dimensions.length, part.dimensions.width
            if part.rotation.is_quarter_turn_y:
                dx, dz = dz, dx
            dy = part.dimensions.height
            p = part.position
            min_x, max_x = min(min_x, p.x - dx / 2), max(max_x, p.x + dx / 2)
            min_y, max_y = min(min_y, p.y - dy / 2), max(max_y, p.y + dy / 2)
            min_z, max_z = min(min_z, p.z - dz / 2), max(max_z, p.z + dz / 2)

        return Bounds(width=max_x - min_x, height=max_y - min_y, depth=max_z - min_z)
