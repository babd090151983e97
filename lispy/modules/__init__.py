from lispy.modules.loader import load_file, load_source, load_prelude

__all__ = ["load_file", "load_source", "load_prelude"]
