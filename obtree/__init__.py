__version__ = "0.1.0"

from .exception import OBTreeError, EmptyInputError
from .tree.bstree import BSTree
