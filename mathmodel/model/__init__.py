"""
Value model: number kinds, vectors and matrices.
"""
