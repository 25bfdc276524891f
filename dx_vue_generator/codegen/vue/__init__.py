"""
Vue wrapper emitter.

Renders component IR into TypeScript modules for Vue 2 and Vue 3.
"""

from .emitters import VueEmitter, common_reexports_file_name, COMMON_REEXPORTS_KEY

__all__ = ["VueEmitter", "common_reexports_file_name", "COMMON_REEXPORTS_KEY"]
