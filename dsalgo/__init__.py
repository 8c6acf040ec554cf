"""Classic data structures and algorithms: sorting, heaps, AVL trees, bitmaps, top-k selection and consistent hashing."""

__version__ = "0.1.0"

__all__ = ["avl", "bitmap", "consistent_hash", "heap", "sorting", "top_k"]