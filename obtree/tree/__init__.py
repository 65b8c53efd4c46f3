from .bstree import BSTree
