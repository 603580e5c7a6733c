# created: 10/19/2026
# last updated: 10/19/2026
# proxy between the browser and gemini for plastic material recommendations

from material_proxy.app import create_app
from material_proxy.config import Settings, load_settings

__all__ = ["create_app", "Settings", "load_settings"]
