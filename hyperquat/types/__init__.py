# Main __init__.py for the types sub-package

from .quaternion import Quaternion

__all__ = ["Quaternion"]
