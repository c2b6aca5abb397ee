"""An ordered symbol table backed by a binary search tree."""
from ordered_bst.bst import BST, BSTNode

__all__ = ['BST', 'BSTNode']
