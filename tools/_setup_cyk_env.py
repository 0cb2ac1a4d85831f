import os
import sys

_my_dir = os.path.dirname(os.path.abspath(__file__))
_root_dir = os.path.dirname(_my_dir)
if _root_dir not in sys.path:
  sys.path.insert(0, _root_dir)
