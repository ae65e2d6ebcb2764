import importlib
from typing import Optional

from chargraph.exceptions import ConfigError
from chargraph.layouts.configs import LayeredLayoutOptions


def load_class(class_type):
    module_path, class_name = class_type.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


class LayoutFactory:
    provider_to_class = {
        "networkx": "chargraph.layouts.networkx.NetworkxLayeredLayout",
        "mock": "chargraph.layouts.mock.MockLayeredLayout",
    }

    @classmethod
    def create(cls, provider_name: str, options: Optional[LayeredLayoutOptions] = None):
        class_type = cls.provider_to_class.get(provider_name)
        if class_type:
            layout_class = load_class(class_type)
            return layout_class(options)
        else:
            raise ConfigError(f"Unsupported layout provider: {provider_name}")
