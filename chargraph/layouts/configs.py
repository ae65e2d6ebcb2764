from typing import Literal

from pydantic import BaseModel, Field, field_validator

from chargraph.exceptions import ConfigError

SUPPORTED_LAYOUT_PROVIDERS = ("networkx", "mock")

LayoutDirection = Literal["DOWN", "UP", "RIGHT", "LEFT"]


class LayeredLayoutOptions(BaseModel):
    direction: LayoutDirection = Field(
        description="Direction in which successive layers are stacked",
        default="DOWN",
    )
    spacing_between_layers: float = Field(
        description="Gap between two adjacent layers", default=100.0, ge=0
    )
    spacing_node_node: float = Field(
        description="Gap between two adjacent nodes of the same layer", default=80.0, ge=0
    )
    padding: float = Field(description="Offset of the whole drawing from the origin", default=12.0, ge=0)


class LayoutConfig(BaseModel):
    provider: str = Field(
        description="Provider of the layered layout (e.g., 'networkx')",
        default="networkx",
    )
    anchor_x: float = Field(description="X of the fallback layout anchor", default=400.0)
    anchor_y: float = Field(description="Y of the fallback layout anchor", default=300.0)
    radius: float = Field(description="Radius of the fallback circle", default=200.0, ge=0)
    center_node_size: float = Field(
        description="Box edge length of center nodes, must match the rendered size", default=96.0, gt=0
    )
    node_size: float = Field(
        description="Box edge length of peripheral nodes, must match the rendered size", default=80.0, gt=0
    )
    direction: LayoutDirection = Field(description="Layering direction", default="DOWN")
    spacing_between_layers: float = Field(description="Gap between layers", default=100.0, ge=0)
    spacing_node_node: float = Field(description="Gap between nodes of one layer", default=80.0, ge=0)
    padding: float = Field(description="Offset of the layered drawing from the origin", default=12.0, ge=0)
    enable_perf_logging: bool = Field(description="Performance logging, default to False", default=False)

    @field_validator("provider")
    def validate_provider(cls, v):
        if v not in SUPPORTED_LAYOUT_PROVIDERS:
            raise ConfigError(f"Unsupported layout provider: {v}")
        return v

    def layered_options(self) -> LayeredLayoutOptions:
        return LayeredLayoutOptions(
            direction=self.direction,
            spacing_between_layers=self.spacing_between_layers,
            spacing_node_node=self.spacing_node_node,
            padding=self.padding,
        )
