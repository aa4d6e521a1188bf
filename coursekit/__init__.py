"""Teaching programs: AVL and Huffman trees, in-place list sorting, and introductory exercises."""

__version__ = "0.1.0"