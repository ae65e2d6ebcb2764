import os

from pydantic import BaseModel, Field

from chargraph.layouts.configs import LayoutConfig

# Directory holding characters/<id>.json and characters/relations/<id>.json
data_dir = os.environ.get("CHARGRAPH_DATA_DIR") or os.path.join(os.getcwd(), "data")


class GraphConfig(BaseModel):
    data_dir: str = Field(
        description="Root of the character data files",
        default=data_dir,
    )
    placeholder_color: str = Field(
        description="Node color for characters without metadata",
        default="#6b7280",
    )
    layout: LayoutConfig = Field(
        description="Configuration for the layout engine",
        default_factory=LayoutConfig,
    )
    enable_perf_logging: bool = Field(
        description="Performance logging, default to False",
        default=False,
    )
