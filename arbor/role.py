# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Role`, the tag that tells a root application node apart from the
commands nested below it.
"""
from enum import Enum


class Role(Enum):
    ROOT = "root"
    CHILD = "child"
